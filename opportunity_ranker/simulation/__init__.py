"""
Demo data: the sample catalog, a mock student profile and randomly drawn
interaction logs. Used by the ``demo`` CLI command and by tests.
"""

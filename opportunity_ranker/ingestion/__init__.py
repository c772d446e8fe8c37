"""
Input loading: JSON exports of postings, profiles and interaction logs
-> validated, frozen domain models.
"""

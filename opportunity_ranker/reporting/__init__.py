"""
opportunity_ranker.reporting — Output of ranked recommendations.

Modules:
  formatters — ASCII terminal table for Typer CLI commands.
  export     — CSV/JSON flat-file export helpers.
"""

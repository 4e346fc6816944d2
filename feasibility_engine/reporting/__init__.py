"""
feasibility_engine.reporting — Formatting and export of engine output.

It does NOT compute scores — it renders a ``FeasibilityScore`` produced by
``feasibility_engine.scoring``.

Modules:
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — CSV/JSON flat-file export helpers.
"""

"""
Typer CLI: orchestrator, commands and formatters.
"""

"""Typer command modules registered on the shared SecScope app."""

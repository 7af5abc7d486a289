"""Typer command line for textscan."""

"""Typer commands exposed by the k3sargo CLI."""

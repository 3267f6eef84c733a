"""Command-line host for the todo view."""

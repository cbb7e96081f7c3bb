"""Command surface exposed to the UI shell."""

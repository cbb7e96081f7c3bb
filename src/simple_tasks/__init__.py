"""Task list store service for the desktop shell."""

"""Interactive prompt and HTTP surfaces for the auto-player."""

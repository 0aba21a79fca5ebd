"""Django apps of the cospace project."""

"""Core menu logic independent of the terminal."""

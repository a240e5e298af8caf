"""Command-line interface components for sshmenu."""

"""Models for the classpane TUI."""

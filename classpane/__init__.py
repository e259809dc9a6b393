"""classpane - element classes pane for a terminal elements inspector."""

__version__ = "0.1.0"

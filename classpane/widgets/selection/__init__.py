"""Selection widgets for the classpane TUI.

This module provides selection widgets for choosing options:
- ClassCheckboxList: One checkbox per class name of the selected element
"""

from classpane.widgets.selection.class_checkbox_list import ClassCheckboxList

__all__ = [
    "ClassCheckboxList",
]

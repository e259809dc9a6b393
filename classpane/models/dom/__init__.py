"""Document collaborators: node tree, attribute store and style sheet metadata."""

from classpane.models.dom.css_model import CSSModel, StyleSheetHeader, extract_class_names
from classpane.models.dom.dom_model import DOMModel, MutationListener
from classpane.models.dom.loader import (
    DocumentDefinition,
    DocumentLoadError,
    LoadedDocument,
    build_document,
    load_document,
    parse_document,
)
from classpane.models.dom.node import DOMNode

__all__ = [
    "CSSModel",
    "DOMModel",
    "DOMNode",
    "DocumentDefinition",
    "DocumentLoadError",
    "LoadedDocument",
    "MutationListener",
    "StyleSheetHeader",
    "build_document",
    "extract_class_names",
    "load_document",
    "parse_document",
]

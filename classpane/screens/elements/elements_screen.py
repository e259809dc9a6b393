"""Elements screen - document tree with the classes toolbar pane."""

from __future__ import annotations

import logging
from contextlib import suppress

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header, Tree
from textual.widgets.tree import TreeNode

from classpane.keyboard.navigation import ELEMENTS_SCREEN_BINDINGS
from classpane.models.dom.loader import LoadedDocument
from classpane.models.dom.node import DOMNode
from classpane.models.state.app_settings import PaneSettings
from classpane.screens.elements.components.classes_pane import ClassesPane
from classpane.screens.elements.presenter import ElementsPresenter, format_node_label
from classpane.widgets.feedback.toolbar_toggle import ToolbarToggle

logger = logging.getLogger(__name__)


class ElementsScreen(Screen[None]):
    """Shows the document tree; the highlighted node is the selection."""

    BINDINGS: list[Binding] = ELEMENTS_SCREEN_BINDINGS

    DEFAULT_CSS = """
    ElementsScreen #elements-body {
        height: 1fr;
    }

    ElementsScreen #dom-tree {
        width: 2fr;
        border-right: solid $primary-darken-2;
    }

    ElementsScreen #styles-sidebar {
        width: 1fr;
        min-width: 30;
    }

    ElementsScreen #styles-toolbar {
        height: 1;
        align-horizontal: right;
    }
    """

    def __init__(self, loaded: LoadedDocument, settings: PaneSettings) -> None:
        super().__init__()
        self.presenter = ElementsPresenter(loaded, settings)
        self._tree_nodes: dict[DOMNode, TreeNode[DOMNode]] = {}

    def compose(self) -> ComposeResult:
        document = self.presenter.document
        yield Header()
        with Horizontal(id="elements-body"):
            yield Tree(format_node_label(document), data=document, id="dom-tree")
            with Vertical(id="styles-sidebar"):
                with Horizontal(id="styles-toolbar"):
                    yield ToolbarToggle(id="classes-toggle")
                yield ClassesPane(
                    self.presenter.controller,
                    self.presenter.completion_provider,
                    placeholder=self.presenter.settings.placeholder,
                    id="classes-pane",
                )
        yield Footer()

    def on_mount(self) -> None:
        tree: Tree[DOMNode] = self.query_one("#dom-tree", Tree)
        self._tree_nodes[self.presenter.document] = tree.root
        self._populate(tree.root, self.presenter.document)
        tree.root.expand_all()

        show_on_start = self.presenter.settings.show_pane_on_start
        self.query_one(ClassesPane).display = show_on_start
        self.query_one(ToolbarToggle).toggled = show_on_start

        self.presenter.attach()
        self.presenter.controller.dom_model.add_mutation_listener(self._on_dom_mutated)
        tree.focus()

    def on_unmount(self) -> None:
        self.presenter.controller.dom_model.remove_mutation_listener(self._on_dom_mutated)
        self.presenter.detach()

    def _populate(self, tree_node: TreeNode[DOMNode], node: DOMNode) -> None:
        for child in node.children:
            label = format_node_label(child)
            if child.children:
                child_tree_node = tree_node.add(label, data=child, expand=True)
                self._populate(child_tree_node, child)
            else:
                child_tree_node = tree_node.add_leaf(label, data=child)
            self._tree_nodes[child] = child_tree_node

    def _on_dom_mutated(self, node: DOMNode) -> None:
        tree_node = self._tree_nodes.get(node)
        if tree_node is not None:
            tree_node.set_label(format_node_label(node))

    # =========================================================================
    # Selection
    # =========================================================================

    def on_tree_node_highlighted(self, event: Tree.NodeHighlighted[DOMNode]) -> None:
        self.presenter.controller.on_selected_node_changed(event.node.data)

    # =========================================================================
    # Classes pane visibility
    # =========================================================================

    def _set_classes_pane_visible(self, visible: bool) -> None:
        with suppress(NoMatches):
            pane = self.query_one(ClassesPane)
            pane.display = visible
            self.query_one(ToolbarToggle).toggled = visible
            self.presenter.settings.show_pane_on_start = visible
            if visible:
                pane.refresh_classes()
                pane.focus_input()
            else:
                self.query_one("#dom-tree", Tree).focus()

    def on_toolbar_toggle_toggled(self, event: ToolbarToggle.Toggled) -> None:
        self._set_classes_pane_visible(event.toggled)

    def action_toggle_classes(self) -> None:
        self._set_classes_pane_visible(not self.query_one(ClassesPane).display)

    def action_hide_classes(self) -> None:
        if not self.query_one(ClassesPane).display:
            raise SkipAction()
        self._set_classes_pane_visible(False)

    def action_focus_tree(self) -> None:
        self.query_one("#dom-tree", Tree).focus()

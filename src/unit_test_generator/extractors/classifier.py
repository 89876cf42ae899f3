"""
Classifier that walks a TypeScript/JavaScript Tree-sitter tree and records
the module's export surface.
"""

import logging
from typing import List, Optional

from tree_sitter import Node

from unit_test_generator.types import ExportNodeKind, ExportSurface

logger = logging.getLogger(__name__)

DECLARATION_TYPES = frozenset(
    {
        "class_declaration",
        "abstract_class_declaration",
        "function_declaration",
        "generator_function_declaration",
        # Bodiless: overloads and `declare function`.
        "function_signature",
    }
)

VARIABLE_STATEMENT_TYPES = frozenset(
    {
        "lexical_declaration",
        "variable_declaration",
    }
)


def is_export_assignment(node: Node) -> bool:
    """`export default ...` or `export = ...`.

    `export default class Foo {}` lands here too, so Foo is recorded as the
    default export rather than as an unimportable named export.
    """
    return node.type == "export_statement" and any(
        child.type in ("default", "=") for child in node.children
    )


def is_export_equals(node: Node) -> bool:
    return any(child.type == "=" for child in node.children)


def node_kind(node: Node) -> ExportNodeKind:
    if node.type in DECLARATION_TYPES:
        return ExportNodeKind.DECLARATION
    if node.type in VARIABLE_STATEMENT_TYPES:
        return ExportNodeKind.VARIABLE_STATEMENT
    if is_export_assignment(node):
        return ExportNodeKind.EXPORT_ASSIGNMENT
    if node.type == "export_specifier":
        return ExportNodeKind.EXPORT_SPECIFIER
    return ExportNodeKind.OTHER


def has_export_modifier(node: Node) -> bool:
    # Tree-sitter wraps exported declarations in an export_statement rather
    # than attaching a modifier. Default exports are handled as assignments.
    parent = node.parent
    if parent is not None and parent.type == "ambient_declaration":
        # export declare class Foo {}
        parent = parent.parent
    return (
        parent is not None
        and parent.type == "export_statement"
        and not is_export_assignment(parent)
    )


class ExportClassifier:
    """Collect the named and default exports of one module."""

    def classify(self, root: Node) -> ExportSurface:
        """Walk the tree rooted at `root` in pre-order.

        Matched declarations, variable statements and export assignments are
        not descended into; every other node has its children visited in
        source order. A fresh ExportSurface is built on every call.
        """
        surface = ExportSurface()
        stack = [root]
        while stack:
            node = stack.pop()
            kind = node_kind(node)

            if kind is ExportNodeKind.DECLARATION:
                self._visit_declaration(node, surface)
            elif kind is ExportNodeKind.VARIABLE_STATEMENT:
                self._visit_variable_statement(node, surface)
            elif kind is ExportNodeKind.EXPORT_ASSIGNMENT:
                surface.has_default_export = not is_export_equals(node)
            elif kind is ExportNodeKind.EXPORT_SPECIFIER:
                self._visit_export_specifier(node, surface)
            else:
                stack.extend(reversed(node.children))

        return surface

    def _visit_declaration(self, node: Node, surface: ExportSurface):
        if not has_export_modifier(node):
            return
        name = self._extract_name(node)
        if not name:
            logger.debug("Skipping anonymous exported %s", node.type)
            return
        surface.named_exports.append(name)

    def _visit_variable_statement(self, node: Node, surface: ExportSurface):
        if not has_export_modifier(node):
            return
        surface.named_exports.extend(self._extract_declarator_names(node))

    def _visit_export_specifier(self, node: Node, surface: ExportSurface):
        name = self._extract_exported_name(node)
        if name is None:
            return
        if name == "default":
            # export { foo as default }
            surface.has_default_export = True
        else:
            surface.named_exports.append(name)

    def _extract_name(self, node: Node) -> str:
        name_node = node.child_by_field_name("name")
        if name_node and name_node.type in ("identifier", "type_identifier"):
            return name_node.text.decode("utf-8")
        return ""

    def _extract_declarator_names(self, node: Node) -> List[str]:
        names = []
        for declarator in node.named_children:
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            # Destructuring patterns are not tracked.
            if name_node is not None and name_node.type == "identifier":
                names.append(name_node.text.decode("utf-8"))
        return names

    def _extract_exported_name(self, node: Node) -> Optional[str]:
        exported = node.child_by_field_name("alias") or node.child_by_field_name(
            "name"
        )
        if exported is None:
            return None
        if exported.type == "string":
            logger.debug(
                "Skipping string export name %s", exported.text.decode("utf-8")
            )
            return None
        return exported.text.decode("utf-8")

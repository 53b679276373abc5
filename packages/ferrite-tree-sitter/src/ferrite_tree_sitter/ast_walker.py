from typing import Callable, List, Optional

from tree_sitter import Node

from .node_types import COMMENT_TYPES


class ASTWalker:
    """Utilities for traversing and searching the tree-sitter Rust tree"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first traversal of the tree"""
        callback(node)
        for child in node.children:
            ASTWalker.walk(child, callback)

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def code_children(node: Node) -> List[Node]:
        """Named children, minus comments"""
        return [c for c in node.named_children if c.type not in COMMENT_TYPES]

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        results = []

        def check(n):
            if n.type == type_name:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        """Source text covered by `node`. Offsets are UTF-8 byte offsets."""
        if isinstance(source, str):
            source = source.encode("utf8")
        return source[node.start_byte : node.end_byte].decode("utf8", errors="replace")

"""
Derivation trees stored as a node arena.

Nodes are appended to a flat list and addressed by index. A parent node is
only created once all of its children are confirmed, so an internal node
always refers to finished subtrees. Searches that try alternatives take a
``mark()`` before an attempt and ``rollback()`` to it when the attempt is
abandoned, which drops every node the attempt appended.
"""

from typing import Any

from attrs import Factory, define, frozen

from grammartree.model.production import EPSILON, Production


@frozen
class TreeNode:
    """A grammar symbol, plus the production that expanded it if internal."""

    symbol: str
    production: Production | None = None
    children: tuple[int, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


@define
class DerivationTree:
    """
    Ordered tree recording one derivation.

    Two trees compare equal when they hold the same nodes in the same order
    with the same root, which for trees built by the same search means they
    are structurally identical.
    """

    nodes: list[TreeNode] = Factory(list)
    root: int | None = None

    def mark(self) -> int:
        """Return a checkpoint for a later ``rollback``."""
        return len(self.nodes)

    def rollback(self, mark: int) -> None:
        """Drop every node appended after ``mark``."""
        del self.nodes[mark:]

    def add_leaf(self, symbol: str) -> int:
        """Append a leaf holding a terminal or the empty marker."""
        self.nodes.append(TreeNode(symbol))
        return len(self.nodes) - 1

    def add_node(
        self, symbol: str, production: Production, children: tuple[int, ...]
    ) -> int:
        """
        Commit an internal node over already-built children.

        Params:
            symbol: Nonterminal expanded at this node
            production: Production used for the expansion
            children: Arena indices of the children, left to right

        Returns:
            Arena index of the new node

        Raises:
            ValueError: If a child index does not refer to an existing node
        """
        for child in children:
            if not 0 <= child < len(self.nodes):
                raise ValueError(f"Child index {child} is not in the tree")
        self.nodes.append(TreeNode(symbol, production, tuple(children)))
        return len(self.nodes) - 1

    def set_root(self, index: int) -> None:
        if not 0 <= index < len(self.nodes):
            raise ValueError(f"Root index {index} is not in the tree")
        self.root = index

    def node(self, index: int) -> TreeNode:
        return self.nodes[index]

    @property
    def root_node(self) -> TreeNode | None:
        return None if self.root is None else self.nodes[self.root]

    def leaves(self) -> list[str]:
        """
        Collect leaf symbols left to right, skipping empty markers.

        Returns:
            List of terminal symbols in derivation order
        """
        if self.root is None:
            return []

        leaves = []
        stack = [self.root]
        while stack:
            node = self.nodes[stack.pop()]
            if node.is_leaf:
                if node.symbol != EPSILON:
                    leaves.append(node.symbol)
            else:
                stack.extend(reversed(node.children))
        return leaves

    def generated_string(self) -> str:
        """Concatenate the leaves; an all-empty tree generates ``""``."""
        return "".join(self.leaves())

    def render(self) -> str:
        """
        Render the tree with box-drawing indentation.

        Returns:
            Multi-line string, one node per line, internal nodes annotated
            with the production that expanded them
        """
        if self.root is None:
            return ""
        lines: list[str] = []
        self._render_node(self.root, "", True, lines)
        return "\n".join(lines)

    def _render_node(self, index: int, prefix: str, is_tail: bool, lines: list[str]):
        node = self.nodes[index]
        label = node.symbol
        if node.production is not None:
            label += f" [{node.production}]"
        lines.append(f"{prefix}{'└── ' if is_tail else '├── '}{label}")

        child_prefix = prefix + ("    " if is_tail else "│   ")
        for position, child in enumerate(node.children):
            self._render_node(child, child_prefix, position == len(node.children) - 1, lines)

    def to_dict(self) -> dict[str, Any] | None:
        """Nested mapping view of the tree, or None for an empty tree."""
        if self.root is None:
            return None
        return self._node_dict(self.root)

    def _node_dict(self, index: int) -> dict[str, Any]:
        node = self.nodes[index]
        return {
            "symbol": node.symbol,
            "production": None if node.production is None else str(node.production),
            "children": [self._node_dict(child) for child in node.children],
        }

    def __str__(self) -> str:
        return self.render()

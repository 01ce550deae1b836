from __future__ import annotations

from .node import Node
from .render import render_document


class Document:
    def __init__(self) -> None:
        self.head_nodes: list[Node] = []
        self.body_nodes: list[Node] = []
        self.root_attributes: list[str] = []

    def add_head_node(self, node: Node) -> None:
        self.head_nodes.append(node)

    def add_body_node(self, node: Node) -> None:
        self.body_nodes.append(node)

    def clear(self) -> None:
        self.head_nodes.clear()
        self.body_nodes.clear()
        self.root_attributes.clear()

    def add_root_attr(self, name: str, value: str) -> None:
        self.root_attributes.append(f'{name}="{value}"')

    def render(self) -> str:
        return render_document(self)

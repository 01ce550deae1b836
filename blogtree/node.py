from __future__ import annotations

from typing import Optional

from .render import render_node


def attribute_map(*attributes: str) -> dict[str, str]:
    """Turn a flat name/value token list into an attribute mapping."""
    if len(attributes) % 2 != 0:
        raise ValueError(f"Wrong attribute count for node: {len(attributes)} tokens {attributes!r}")
    return {attributes[i]: attributes[i + 1] for i in range(0, len(attributes), 2)}


def new_node(tag_name: str, text: str = "", *attributes: str) -> Node:
    return Node(tag_name, text, attribute_map(*attributes))


class Node:
    def __init__(self, tag_name: str, text: str = "", attributes: Optional[dict[str, str]] = None):
        self._tag_name = tag_name
        self.text = text
        self.attributes: dict[str, str] = dict(attributes or {})
        self.children: list[Node] = []

    @property
    def tag_name(self) -> str:
        return self._tag_name

    def add_child(self, child: Node | str, text: str = "", *attributes: str) -> Node:
        if isinstance(child, Node):
            if text or attributes:
                raise ValueError("Text and attributes only apply when adding a child by tag name")
            node = child
        else:
            node = new_node(child, text, *attributes)
        self.children.append(node)
        return node

    def is_empty(self) -> bool:
        return not self.children and self.text == ""

    def render(self) -> str:
        return render_node(self)

    def __repr__(self) -> str:
        return f"Node({self._tag_name!r}, children={len(self.children)})"

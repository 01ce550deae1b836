from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .document import Document
    from .node import Node

DOCTYPE = "<!doctype html>"


def render_attributes(attributes: dict[str, str]) -> str:
    # Sorted by name so output is reproducible.
    return "".join(f' {name}="{attributes[name]}"' for name in sorted(attributes))


def render_node(node: Node) -> str:
    attrs = render_attributes(node.attributes)
    if node.is_empty():
        return f"<{node.tag_name}{attrs} />"
    children = render_nodes(node.children)
    return f"<{node.tag_name}{attrs}>{children}{node.text}</{node.tag_name}>"


def render_nodes(nodes: Iterable[Node]) -> str:
    return "".join(render_node(node) for node in nodes)


def render_root_tag(root_attributes: list[str]) -> str:
    if root_attributes:
        return f"<html {' '.join(root_attributes)}>"
    return "<html>"


def render_document(doc: Document) -> str:
    head = render_nodes(doc.head_nodes)
    body = render_nodes(doc.body_nodes)
    return (
        f"{DOCTYPE}{render_root_tag(doc.root_attributes)}"
        f"<head>{head}</head>"
        f"<body>{body}</body>"
        "</html>"
    )


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static(static_dir: Path, output_dir: Path) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    for item in static_dir.iterdir():
        dest = output_dir / item.name
        if item.is_dir():
            if dest.exists():
                shutil.rmtree(dest)
            shutil.copytree(item, dest)
        else:
            shutil.copy2(item, dest)

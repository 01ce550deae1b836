from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .components import NodeBatch, visit
from .document import Document
from .node import Node


@dataclass(frozen=True)
class Location:
    url: str
    domain: str
    title: str
    thumbnail_url: str
    fs_path: str
    fs_filename: str

    @property
    def path(self) -> str:
        return self.url

    @property
    def absolute_url(self) -> str:
        return self.domain.rstrip("/") + self.url


@dataclass(frozen=True)
class Element(Location):
    id: str = ""
    description: str = ""
    content: str = ""
    image_url: str = ""
    published_time: str = ""
    disqus_id: str = ""
    document: Document = field(default_factory=Document, repr=False, compare=False)

    def location(self) -> Location:
        return Location(
            self.url, self.domain, self.title, self.thumbnail_url, self.fs_path, self.fs_filename
        )

    def accept_visitor(self, component: object) -> NodeBatch:
        batch = visit(component, self)
        self.add_header_nodes(batch.head)
        self.add_body_nodes(batch.body)
        return batch

    def add_header_nodes(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self.document.add_head_node(node)

    def add_body_nodes(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self.document.add_body_node(node)

    def render(self) -> str:
        return self.document.render()


def new_location(
    url: str, domain: str, title: str, thumbnail_url: str = "", fs_path: str = "", fs_filename: str = ""
) -> Location:
    return Location(url, domain, title, thumbnail_url, fs_path, fs_filename)


def new_element(
    element_id: str,
    title: str,
    description: str,
    content: str,
    image_url: str,
    thumbnail_url: str,
    domain: str,
    path: str,
    filename: str,
    published_time: str,
    disqus_id: str,
) -> Element:
    return Element(
        url=path + filename,
        domain=domain,
        title=title,
        thumbnail_url=thumbnail_url,
        fs_path=path,
        fs_filename=filename,
        id=element_id,
        description=description,
        content=content,
        image_url=image_url,
        published_time=published_time,
        disqus_id=disqus_id,
    )


def locations_of(elements: Sequence[Element]) -> list[Location]:
    return [element.location() for element in elements]

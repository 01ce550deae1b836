from __future__ import annotations

from typing import Iterator, Sequence

from .elements import Element, new_element
from .node import new_node

BUNDLE_SIZE = 10
HOME_FILENAME = "index.html"


class ElementBundle:
    def __init__(self, size: int = BUNDLE_SIZE) -> None:
        self.size = size
        self.elements: list[Element] = []

    def add(self, element: Element) -> None:
        self.elements.append(element)

    def full(self) -> bool:
        return len(self.elements) >= self.size

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)


def generate_bundles(elements: Sequence[Element], size: int = BUNDLE_SIZE) -> list[ElementBundle]:
    bundles: list[ElementBundle] = []
    bundle = ElementBundle(size)
    for element in reversed(elements):
        bundle.add(element)
        if bundle.full():
            bundles.append(bundle)
            bundle = ElementBundle(size)
    if bundle.elements:
        bundles.append(bundle)
    for bundle in bundles:
        bundle.elements.reverse()
    bundles.reverse()
    return bundles


def bundle_filename(index: int, total: int) -> str:
    # The newest bundle is the home page and keeps the unnumbered name.
    if index == total - 1:
        return HOME_FILENAME
    return f"index{index + 1}.html"


def render_tiles(elements: Sequence[Element]) -> str:
    tiles = new_node("div", "", "class", "tiles")
    for element in reversed(elements):
        tile = tiles.add_child("a", "", "class", "tile", "href", element.url)
        tile.add_child("img", "", "src", element.thumbnail_url, "alt", element.title)
        tile.add_child("h2", element.title)
    return tiles.render()


def bundle_elements(
    bundles: Sequence[ElementBundle],
    domain: str,
    path: str,
    title: str,
    description: str = "",
    image_url: str = "",
) -> list[Element]:
    total = len(bundles)
    pages = []
    for index, bundle in enumerate(bundles):
        filename = bundle_filename(index, total)
        page_title = title if filename == HOME_FILENAME else f"{title} | Page {index + 1}"
        newest = bundle.elements[-1]
        pages.append(
            new_element(
                f"bundle-{index + 1}",
                page_title,
                description,
                render_tiles(bundle.elements),
                image_url,
                newest.thumbnail_url,
                domain,
                path,
                filename,
                newest.published_time,
                "",
            )
        )
    return pages

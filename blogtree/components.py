"""Page components.

Each component kind is a frozen dataclass holding only its configuration.
``visit(component, element)`` dispatches on the kind and returns the nodes
(and JS) the component contributes to that page; components never keep
anything between two visits, so one instance serves every page of a context.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import singledispatch
from typing import TYPE_CHECKING, ClassVar, Optional, Sequence

from .node import Node, new_node

if TYPE_CHECKING:
    from .elements import Element, Location

FIRST_LABEL = "&lt;&lt; first"
PREVIOUS_LABEL = "&lt; previous"
NEXT_LABEL = "next &gt;"
LAST_LABEL = "newest &gt;&gt;"
READ_NAVIGATION_MIN_LOCATIONS = 3
GALLERY_TILES = 5


@dataclass
class NodeBatch:
    """Everything one component contributes to one page."""

    head: list[Node] = field(default_factory=list)
    body: list[Node] = field(default_factory=list)
    js: str = ""


@dataclass(frozen=True)
class SiteMeta:
    site_name: str = ""
    twitter_handle: str = ""
    twitter_card_type: str = "summary"
    og_type: str = "article"
    fb_page_url: str = ""
    content_section: str = ""
    content_tags: str = ""
    home_url: str = "/"


@singledispatch
def visit(component: object, element: Element) -> NodeBatch:
    raise TypeError(f"Unknown page component: {component!r}")


def stylesheet(component: object) -> str:
    return getattr(component, "css", "")


def index_of(locations: Sequence[Location], element: Location) -> int:
    """Position of the page among ``locations`` by URL, -1 when it is not there."""
    for i, location in enumerate(locations):
        if location.url == element.url:
            return i
    return -1


def location_at(locations: Sequence[Location], index: int) -> Optional[Location]:
    if 0 <= index < len(locations):
        return locations[index]
    return None


def meta_node(*attributes: str) -> Node:
    return new_node("meta", "", *attributes)


# head components


@dataclass(frozen=True)
class Title:
    pass


@visit.register(Title)
def _visit_title(component: Title, element: Element) -> NodeBatch:
    return NodeBatch(head=[new_node("title", element.title)])


@dataclass(frozen=True)
class SchemaOrgMeta:
    site: SiteMeta


@visit.register(SchemaOrgMeta)
def _visit_schema_org(component: SchemaOrgMeta, element: Element) -> NodeBatch:
    return NodeBatch(
        head=[
            meta_node("itemprop", "name", "content", element.title),
            meta_node("itemprop", "description", "content", element.description),
            meta_node("itemprop", "image", "content", element.image_url),
        ]
    )


@dataclass(frozen=True)
class TwitterMeta:
    site: SiteMeta


@visit.register(TwitterMeta)
def _visit_twitter(component: TwitterMeta, element: Element) -> NodeBatch:
    site = component.site
    pairs = [
        ("twitter:card", site.twitter_card_type),
        ("twitter:site", site.twitter_handle),
        ("twitter:title", element.title),
        ("twitter:text:description", element.description),
        ("twitter:creator", site.twitter_handle),
        ("twitter:image:src", element.image_url),
    ]
    return NodeBatch(head=[meta_node("name", name, "content", value) for name, value in pairs])


@dataclass(frozen=True)
class OpenGraphMeta:
    site: SiteMeta


@visit.register(OpenGraphMeta)
def _visit_open_graph(component: OpenGraphMeta, element: Element) -> NodeBatch:
    site = component.site
    pairs = [
        ("og:title", element.title),
        ("og:url", element.absolute_url),
        ("og:image", element.image_url),
        ("og:description", element.description),
        ("og:site_name", site.site_name),
        ("og:type", site.og_type),
        ("article:published_time", element.published_time),
        ("article:modified_time", element.published_time),
        ("article:section", site.content_section),
        ("article:tag", site.content_tags),
        ("article:publisher", site.fb_page_url),
    ]
    return NodeBatch(head=[meta_node("property", name, "content", value) for name, value in pairs])


@dataclass(frozen=True)
class CssLink:
    url: str


@visit.register(CssLink)
def _visit_css_link(component: CssLink, element: Element) -> NodeBatch:
    link = new_node("link", "", "rel", "stylesheet", "type", "text/css", "href", component.url)
    return NodeBatch(head=[link])


# body components


@dataclass(frozen=True)
class MainHeader:
    site: SiteMeta

    css: ClassVar[str] = """
.mainheader {
	background: #f4f4f4;
	border-bottom: 1px solid #ddd;
	padding: 20px 0;
}
.mainheader .home {
	font-size: 28px;
	color: #222;
}
"""


@visit.register(MainHeader)
def _visit_main_header(component: MainHeader, element: Element) -> NodeBatch:
    header = new_node("header", "", "class", "mainheader")
    inner = header.add_child("div", "", "class", "wrapperInner")
    inner.add_child("a", component.site.site_name, "href", component.site.home_url, "class", "home")
    return NodeBatch(body=[header])


def navigation_node(locations: Sequence[Location], element: Element, css_class: str) -> Node:
    wrapper = new_node("div", "", "class", css_class)
    nav = wrapper.add_child("nav")
    for location in locations:
        if location.url == element.url:
            nav.add_child("span", location.title)
        else:
            nav.add_child("a", location.title, "href", location.url)
    return wrapper


@dataclass(frozen=True)
class MainNavigation:
    locations: tuple[Location, ...] = ()

    css: ClassVar[str] = """
.mainnavi nav {
	padding: 10px 0;
}
.mainnavi a, .mainnavi span {
	margin: 0 10px;
	text-transform: uppercase;
}
.mainnavi span {
	color: #000;
}
"""


@visit.register(MainNavigation)
def _visit_main_navigation(component: MainNavigation, element: Element) -> NodeBatch:
    return NodeBatch(body=[navigation_node(component.locations, element, "mainnavi")])


@dataclass(frozen=True)
class FooterNavigation:
    locations: tuple[Location, ...] = ()

    css: ClassVar[str] = """
.footernavi {
	border-top: 1px solid #ddd;
	margin-top: 40px;
	padding: 20px 0;
	font-size: 12px;
}
.footernavi a, .footernavi span {
	margin: 0 8px;
}
"""


@visit.register(FooterNavigation)
def _visit_footer_navigation(component: FooterNavigation, element: Element) -> NodeBatch:
    return NodeBatch(body=[navigation_node(component.locations, element, "footernavi")])


@dataclass(frozen=True)
class ReadNavigation:
    """First/previous/next/newest links through an ordered run of pages."""

    locations: tuple[Location, ...] = ()

    css: ClassVar[str] = """
.readnavi {
	margin: 30px 0;
}
.readnavi a, .readnavi span {
	margin: 0 12px;
}
.readnavi span {
	color: #ccc;
}
"""


@visit.register(ReadNavigation)
def _visit_read_navigation(component: ReadNavigation, element: Element) -> NodeBatch:
    locations = component.locations
    if len(locations) < READ_NAVIGATION_MIN_LOCATIONS:
        return NodeBatch()
    index = index_of(locations, element)
    last = len(locations) - 1
    # An unknown page (-1) is treated like the first one.
    entries = [
        ("first", FIRST_LABEL, locations[0] if index > 0 else None),
        ("prev", PREVIOUS_LABEL, location_at(locations, index - 1) if index > 0 else None),
        ("next", NEXT_LABEL, location_at(locations, index + 1) if index != last else None),
        ("last", LAST_LABEL, locations[last] if index != last else None),
    ]
    head = []
    nav = new_node("nav", "", "class", "readnavi")
    for rel, label, target in entries:
        if target is None:
            nav.add_child("span", label)
            continue
        head.append(new_node("link", "", "rel", rel, "href", target.url))
        nav.add_child("a", label, "href", target.url, "rel", rel)
    return NodeBatch(head=head, body=[nav])


@dataclass(frozen=True)
class Content:
    css: ClassVar[str] = """
.content {
	display: block;
	text-align: left;
	padding: 20px 0;
}
.content h1 {
	font-size: 24px;
	margin-bottom: 20px;
}
.content p {
	margin-bottom: 1em;
	line-height: 1.5em;
}
.tiles {
	display: flex;
	flex-wrap: wrap;
}
.tiles .tile {
	width: 190px;
	margin: 0 10px 20px 0;
}
.tiles .tile img {
	width: 190px;
	height: 190px;
}
.tiles .tile h2 {
	font-size: 14px;
}
"""


@visit.register(Content)
def _visit_content(component: Content, element: Element) -> NodeBatch:
    main = new_node("main", element.content, "class", "content")
    main.add_child("h1", element.title)
    return NodeBatch(body=[main])


@dataclass(frozen=True)
class Comments:
    """Disqus thread for the page, keyed by the page's thread id."""

    shortname: str

    css: ClassVar[str] = """
.comments {
	margin-top: 40px;
	text-align: left;
}
"""


def comments_js(shortname: str, title: str, url: str, identifier: str) -> str:
    return (
        "var disqus_config = function () {\n"
        f"  this.page.title = {json.dumps(title)};\n"
        f"  this.page.url = {json.dumps(url)};\n"
        f"  this.page.identifier = {json.dumps(identifier)};\n"
        "};\n"
        "(function () {\n"
        "  var d = document, s = d.createElement('script');\n"
        f"  s.src = 'https://{shortname}.disqus.com/embed.js';\n"
        "  s.setAttribute('data-timestamp', +new Date());\n"
        "  (d.head || d.body).appendChild(s);\n"
        "})();\n"
    )


@visit.register(Comments)
def _visit_comments(component: Comments, element: Element) -> NodeBatch:
    wrapper = new_node("div", "", "class", "comments")
    thread = wrapper.add_child("div", "", "id", "disqus_thread")
    thread.add_child("noscript", "Please enable JavaScript to view the comments.")
    js = comments_js(
        component.shortname,
        element.title,
        element.absolute_url,
        element.disqus_id or element.url,
    )
    return NodeBatch(body=[wrapper], js=js)


@dataclass(frozen=True)
class Copyright:
    holder: str
    year: str

    css: ClassVar[str] = """
.copyright {
	font-size: 11px;
	color: #888;
	padding: 10px 0;
}
"""


@visit.register(Copyright)
def _visit_copyright(component: Copyright, element: Element) -> NodeBatch:
    text = f"&copy; {component.year} {component.holder}".rstrip()
    return NodeBatch(body=[new_node("div", text, "class", "copyright")])


@dataclass(frozen=True)
class CookieBanner:
    notice: str
    button_label: str = "OK"

    css: ClassVar[str] = """
.cookiebanner {
	position: fixed;
	bottom: 0;
	left: 0;
	right: 0;
	background: #222;
	color: #fff;
	padding: 10px;
	font-size: 12px;
}
.cookiebanner.is-hidden {
	display: none;
}
"""

    js: ClassVar[str] = """
(function () {
  var banner = document.getElementById('cookie-banner');
  if (!banner) { return; }
  if (document.cookie.indexOf('cookies_accepted=1') !== -1) {
    banner.className += ' is-hidden';
    return;
  }
  document.getElementById('cookie-banner-ok').addEventListener('click', function () {
    document.cookie = 'cookies_accepted=1; max-age=31536000; path=/';
    banner.className += ' is-hidden';
  });
})();
"""


@visit.register(CookieBanner)
def _visit_cookie_banner(component: CookieBanner, element: Element) -> NodeBatch:
    banner = new_node("div", "", "id", "cookie-banner", "class", "cookiebanner")
    banner.add_child("p", component.notice)
    banner.add_child("button", component.button_label, "id", "cookie-banner-ok", "type", "button")
    return NodeBatch(body=[banner], js=CookieBanner.js)


@dataclass(frozen=True)
class Gallery:
    """Fixed grid of placeholder tiles."""

    css: ClassVar[str] = """
.gallery {
	display: flex;
	flex-wrap: wrap;
	justify-content: space-between;
}
.gallery .tile {
	width: 150px;
	margin-bottom: 10px;
}
"""


@visit.register(Gallery)
def _visit_gallery(component: Gallery, element: Element) -> NodeBatch:
    gallery = new_node("div", "", "class", "gallery")
    for number in range(1, GALLERY_TILES + 1):
        tile = gallery.add_child("a", "", "class", "tile", "href", "#")
        tile.add_child("img", "", "src", f"/img/placeholder{number}.png", "alt", f"Placeholder {number}")
    return NodeBatch(body=[gallery])

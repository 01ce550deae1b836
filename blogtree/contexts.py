from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import csscompressor
import rjsmin

from .components import (
    Comments,
    Content,
    CookieBanner,
    Copyright,
    CssLink,
    FooterNavigation,
    Gallery,
    MainHeader,
    MainNavigation,
    OpenGraphMeta,
    ReadNavigation,
    SchemaOrgMeta,
    Title,
    TwitterMeta,
    stylesheet,
)
from .config import SiteConfig
from .content import highlight_css
from .elements import Element, locations_of
from .node import new_node

BASE_CSS = """
body, p, span {
	margin: 0;
	padding: 0;
	font-family: Arial, Helvetica, sans-serif;
}
a {
	color: grey;
	text-decoration: none;
}
a:hover {
	text-decoration: underline;
}
.wrapperOuter {
	text-align: center;
}
.wrapperInner {
	margin: 0 auto;
	width: 800px;
}
"""


@dataclass(frozen=True)
class RenderedPage:
    fs_path: str
    fs_filename: str
    html: str


def minify_css(text: str) -> str:
    return csscompressor.compress(text)


def minify_js(text: str) -> str:
    return rjsmin.jsmin(text).strip()


def component_css(components: Iterable[object]) -> list[str]:
    """CSS of each component kind, once per kind, in registration order."""
    seen: set[type] = set()
    parts = []
    for component in components:
        kind = type(component)
        if kind in seen:
            continue
        seen.add(kind)
        css = stylesheet(component)
        if css:
            parts.append(css)
    return parts


class Context:
    """A site section: an ordered list of components applied to each of its elements.

    Registration order is render order, both in the head and in the body.
    """

    def __init__(self, name: str, language: str = "") -> None:
        self.name = name
        self.language = language
        self.components: list[object] = []
        self.elements: list[Element] = []

    def add_component(self, component: object) -> None:
        self.components.append(component)

    def add_element(self, element: Element) -> None:
        self.elements.append(element)

    def add_elements(self, elements: Iterable[Element]) -> None:
        for element in elements:
            self.add_element(element)

    def visit_element(self, element: Element) -> None:
        element.document.clear()
        if self.language:
            element.document.add_root_attr("lang", self.language)
        scripts = []
        for component in self.components:
            batch = element.accept_visitor(component)
            if batch.js:
                scripts.append(batch.js)
        js = minify_js("\n".join(scripts))
        if js:
            element.add_body_nodes([new_node("script", js)])

    def render(self) -> list[RenderedPage]:
        pages = []
        for element in self.elements:
            self.visit_element(element)
            pages.append(RenderedPage(element.fs_path, element.fs_filename, element.render()))
        return pages

    def get_css(self) -> str:
        return minify_css(BASE_CSS + "".join(component_css(self.components)))


def collect_css(contexts: Sequence[Context]) -> str:
    components = [component for context in contexts for component in context.components]
    return minify_css(BASE_CSS + "".join(component_css(components)) + highlight_css())


def add_head_components(context: Context, site: SiteConfig) -> None:
    meta = site.site_meta()
    context.add_component(SchemaOrgMeta(meta))
    context.add_component(TwitterMeta(meta))
    context.add_component(OpenGraphMeta(meta))
    context.add_component(CssLink(site.css_url))
    context.add_component(Title())
    context.add_component(MainHeader(meta))
    context.add_component(MainNavigation(tuple(site.main_navigation)))


def add_footer_components(context: Context, site: SiteConfig) -> None:
    context.add_component(Copyright(site.copyright_holder, site.copyright_year))
    context.add_component(FooterNavigation(tuple(site.footer_navigation)))
    if site.cookie_notice:
        context.add_component(CookieBanner(site.cookie_notice))


def new_blog_context(site: SiteConfig, posts: Sequence[Element]) -> Context:
    context = Context("blog", site.language)
    add_head_components(context, site)
    if site.show_gallery:
        context.add_component(Gallery())
    context.add_component(Content())
    context.add_component(ReadNavigation(tuple(locations_of(posts))))
    if site.disqus_shortname:
        context.add_component(Comments(site.disqus_shortname))
    add_footer_components(context, site)
    context.add_elements(posts)
    return context


def new_pages_context(site: SiteConfig, pages: Sequence[Element]) -> Context:
    context = Context("pages", site.language)
    add_head_components(context, site)
    context.add_component(Content())
    add_footer_components(context, site)
    context.add_elements(pages)
    return context


def new_navigation_context(site: SiteConfig, bundle_pages: Sequence[Element]) -> Context:
    context = Context("navigation", site.language)
    add_head_components(context, site)
    context.add_component(Content())
    context.add_component(ReadNavigation(tuple(locations_of(bundle_pages))))
    add_footer_components(context, site)
    context.add_elements(bundle_pages)
    return context

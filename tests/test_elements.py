import dataclasses

import pytest

from blogtree.components import Content, Title
from blogtree.elements import Location, locations_of, new_element, new_location
from blogtree.node import new_node


def make_element(path="/blog/a/", title="T"):
    return new_element(
        "1",
        title,
        "D",
        "<p>C</p>",
        "img.png",
        "thumb.png",
        "https://drewing.de",
        path,
        "index.html",
        "2018-01-01 10:00:00",
        "42",
    )


def test_url_is_path_plus_filename():
    element = make_element()
    assert element.url == "/blog/a/index.html"
    assert element.path == element.url
    assert element.fs_path == "/blog/a/"
    assert element.fs_filename == "index.html"
    assert element.absolute_url == "https://drewing.de/blog/a/index.html"
    assert element.disqus_id == "42"
    assert element.id == "1"


def test_element_is_immutable():
    element = make_element()
    with pytest.raises(dataclasses.FrozenInstanceError):
        element.title = "other"


def test_accept_visitor_adds_nodes_to_document():
    element = make_element()
    element.accept_visitor(Title())
    element.accept_visitor(Content())
    assert element.render() == (
        "<!doctype html><html><head><title>T</title></head>"
        '<body><main class="content"><h1>T</h1><p>C</p></main></body></html>'
    )


def test_add_nodes_keep_order():
    element = make_element()
    element.add_header_nodes([new_node("meta", "", "a", "1"), new_node("meta", "", "b", "2")])
    element.add_body_nodes([new_node("p", "1")])
    element.add_body_nodes([new_node("p", "2")])
    assert element.render() == (
        '<!doctype html><html><head><meta a="1" /><meta b="2" /></head>'
        "<body><p>1</p><p>2</p></body></html>"
    )


def test_each_element_owns_its_document():
    first = make_element("/a/")
    second = make_element("/b/")
    first.accept_visitor(Title())
    assert second.document.head_nodes == []
    assert first.document is not second.document


def test_unknown_component_is_rejected():
    with pytest.raises(TypeError):
        make_element().accept_visitor(object())


def test_location_view():
    element = make_element()
    location = element.location()
    assert location == Location(
        "/blog/a/index.html", "https://drewing.de", "T", "thumb.png", "/blog/a/", "index.html"
    )
    assert locations_of([element]) == [location]


def test_new_location_defaults():
    location = new_location("/about/", "https://drewing.de", "About")
    assert location.thumbnail_url == ""
    assert location.fs_path == ""
    assert location.absolute_url == "https://drewing.de/about/"

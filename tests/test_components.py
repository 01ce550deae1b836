import dataclasses

import pytest

from blogtree.components import (
    Comments,
    Content,
    CookieBanner,
    Copyright,
    CssLink,
    FooterNavigation,
    Gallery,
    MainHeader,
    MainNavigation,
    NodeBatch,
    OpenGraphMeta,
    ReadNavigation,
    SchemaOrgMeta,
    SiteMeta,
    Title,
    TwitterMeta,
    index_of,
    location_at,
    stylesheet,
    visit,
)
from blogtree.elements import new_element, new_location

DOMAIN = "https://drewing.de"
SITE = SiteMeta(
    site_name="Drewing",
    twitter_handle="@ingmardrewing",
    twitter_card_type="summary_large_image",
    og_type="article",
    fb_page_url="https://facebook.com/drewing",
    content_section="Blog",
    content_tags="comics",
    home_url="/",
)


def page(path="/blog/a/", title="Title", description="Desc", disqus_id="99"):
    return new_element(
        "1",
        title,
        description,
        "<p>Body</p>",
        "https://img/x.png",
        "thumb.png",
        DOMAIN,
        path,
        "index.html",
        "2018-02-03 10:00:00",
        disqus_id,
    )


def rendered(nodes):
    return [node.render() for node in nodes]


def reader_locations(count):
    return tuple(new_location(f"/p{i}/index.html", DOMAIN, f"P{i}") for i in range(count))


def test_title():
    batch = visit(Title(), page())
    assert rendered(batch.head) == ["<title>Title</title>"]
    assert batch.body == []
    assert batch.js == ""


def test_schema_org_meta():
    batch = visit(SchemaOrgMeta(SITE), page())
    assert rendered(batch.head) == [
        '<meta content="Title" itemprop="name" />',
        '<meta content="Desc" itemprop="description" />',
        '<meta content="https://img/x.png" itemprop="image" />',
    ]


def test_missing_values_render_as_empty_content():
    batch = visit(SchemaOrgMeta(SITE), page(description=""))
    assert rendered(batch.head)[1] == '<meta content="" itemprop="description" />'
    batch = visit(TwitterMeta(SiteMeta()), page())
    assert '<meta content="" name="twitter:site" />' in rendered(batch.head)


def test_twitter_meta_order_and_values():
    batch = visit(TwitterMeta(SITE), page())
    assert [node.attributes["name"] for node in batch.head] == [
        "twitter:card",
        "twitter:site",
        "twitter:title",
        "twitter:text:description",
        "twitter:creator",
        "twitter:image:src",
    ]
    assert rendered(batch.head)[0] == '<meta content="summary_large_image" name="twitter:card" />'
    assert batch.head[1].attributes["content"] == "@ingmardrewing"


def test_open_graph_meta():
    batch = visit(OpenGraphMeta(SITE), page())
    values = {node.attributes["property"]: node.attributes["content"] for node in batch.head}
    assert [node.attributes["property"] for node in batch.head][:3] == ["og:title", "og:url", "og:image"]
    assert values["og:url"] == "https://drewing.de/blog/a/index.html"
    assert values["og:site_name"] == "Drewing"
    assert values["article:published_time"] == "2018-02-03 10:00:00"
    assert values["article:publisher"] == "https://facebook.com/drewing"
    assert len(batch.head) == 11


def test_css_link():
    batch = visit(CssLink("/styles.css"), page())
    assert rendered(batch.head) == ['<link href="/styles.css" rel="stylesheet" type="text/css" />']


def test_main_header():
    batch = visit(MainHeader(SITE), page())
    assert rendered(batch.body) == [
        '<header class="mainheader"><div class="wrapperInner">'
        '<a class="home" href="/">Drewing</a></div></header>'
    ]


def test_main_navigation_marks_current_page():
    locations = (
        new_location("/blog/a/index.html", DOMAIN, "A"),
        new_location("/about/index.html", DOMAIN, "About"),
    )
    batch = visit(MainNavigation(locations), page())
    assert rendered(batch.body) == [
        '<div class="mainnavi"><nav><span>A</span><a href="/about/index.html">About</a></nav></div>'
    ]


def test_footer_navigation():
    locations = (new_location("/imprint/index.html", DOMAIN, "Imprint"),)
    batch = visit(FooterNavigation(locations), page())
    assert rendered(batch.body) == [
        '<div class="footernavi"><nav><a href="/imprint/index.html">Imprint</a></nav></div>'
    ]
    empty = visit(FooterNavigation(), page())
    assert rendered(empty.body) == ['<div class="footernavi"><nav /></div>']


def test_read_navigation_needs_three_locations():
    assert visit(ReadNavigation(reader_locations(2)), page("/p0/")) == NodeBatch()
    assert visit(ReadNavigation(), page("/p0/")) == NodeBatch()
    assert visit(ReadNavigation(reader_locations(3)), page("/p0/")).body != []


def test_read_navigation_on_first_page():
    batch = visit(ReadNavigation(reader_locations(3)), page("/p0/"))
    assert rendered(batch.head) == [
        '<link href="/p1/index.html" rel="next" />',
        '<link href="/p2/index.html" rel="last" />',
    ]
    assert rendered(batch.body) == [
        '<nav class="readnavi"><span>&lt;&lt; first</span><span>&lt; previous</span>'
        '<a href="/p1/index.html" rel="next">next &gt;</a>'
        '<a href="/p2/index.html" rel="last">newest &gt;&gt;</a></nav>'
    ]


def test_read_navigation_in_the_middle():
    batch = visit(ReadNavigation(reader_locations(4)), page("/p1/"))
    assert rendered(batch.head) == [
        '<link href="/p0/index.html" rel="first" />',
        '<link href="/p0/index.html" rel="prev" />',
        '<link href="/p2/index.html" rel="next" />',
        '<link href="/p3/index.html" rel="last" />',
    ]
    assert "<span>" not in batch.body[0].render()


def test_read_navigation_on_last_page():
    batch = visit(ReadNavigation(reader_locations(3)), page("/p2/"))
    assert rendered(batch.body) == [
        '<nav class="readnavi"><a href="/p0/index.html" rel="first">&lt;&lt; first</a>'
        '<a href="/p1/index.html" rel="prev">&lt; previous</a>'
        "<span>next &gt;</span><span>newest &gt;&gt;</span></nav>"
    ]
    assert len(batch.head) == 2


def test_read_navigation_for_unknown_page():
    batch = visit(ReadNavigation(reader_locations(3)), page("/elsewhere/"))
    assert rendered(batch.body) == [
        '<nav class="readnavi"><span>&lt;&lt; first</span><span>&lt; previous</span>'
        '<a href="/p0/index.html" rel="next">next &gt;</a>'
        '<a href="/p2/index.html" rel="last">newest &gt;&gt;</a></nav>'
    ]


def test_index_of_and_location_at():
    locations = reader_locations(3)
    assert index_of(locations, page("/p1/")) == 1
    assert index_of(locations, page("/nowhere/")) == -1
    assert location_at(locations, -1) is None
    assert location_at(locations, 3) is None
    assert location_at(locations, 2) == locations[2]


def test_content():
    batch = visit(Content(), page())
    assert rendered(batch.body) == ['<main class="content"><h1>Title</h1><p>Body</p></main>']


def test_comments_widget():
    batch = visit(Comments("myblog"), page(title='Say "hi"'))
    assert rendered(batch.body) == [
        '<div class="comments"><div id="disqus_thread">'
        "<noscript>Please enable JavaScript to view the comments.</noscript></div></div>"
    ]
    assert 'this.page.title = "Say \\"hi\\"";' in batch.js
    assert 'this.page.url = "https://drewing.de/blog/a/index.html";' in batch.js
    assert 'this.page.identifier = "99";' in batch.js
    assert "https://myblog.disqus.com/embed.js" in batch.js


def test_comments_identifier_falls_back_to_url():
    batch = visit(Comments("myblog"), page(disqus_id=""))
    assert 'this.page.identifier = "/blog/a/index.html";' in batch.js


def test_components_keep_no_state_between_pages():
    component = Comments("myblog")
    first = visit(component, page("/a/", title="A"))
    second = visit(component, page("/b/", title="B"))
    assert '"A"' in first.js and '"A"' not in second.js
    assert component == Comments("myblog")
    with pytest.raises(dataclasses.FrozenInstanceError):
        component.shortname = "other"


def test_copyright():
    batch = visit(Copyright("Ingmar Drewing", "2018"), page())
    assert rendered(batch.body) == ['<div class="copyright">&copy; 2018 Ingmar Drewing</div>']


def test_cookie_banner():
    batch = visit(CookieBanner("We use cookies."), page())
    assert rendered(batch.body) == [
        '<div class="cookiebanner" id="cookie-banner"><p>We use cookies.</p>'
        '<button id="cookie-banner-ok" type="button">OK</button></div>'
    ]
    assert "cookies_accepted=1" in batch.js


def test_gallery_has_five_placeholder_tiles():
    batch = visit(Gallery(), page())
    gallery = batch.body[0]
    assert len(gallery.children) == 5
    assert gallery.children[0].render() == (
        '<a class="tile" href="#"><img alt="Placeholder 1" src="/img/placeholder1.png" /></a>'
    )
    assert visit(Gallery(), page("/other/")).body[0].render() == gallery.render()


def test_stylesheets():
    assert stylesheet(Title()) == ""
    assert stylesheet(CssLink("/x.css")) == ""
    assert ".mainheader" in stylesheet(MainHeader(SITE))
    assert ".readnavi" in stylesheet(ReadNavigation())
    assert ".tiles" in stylesheet(Content())


def test_unknown_component():
    with pytest.raises(TypeError):
        visit("title", page())

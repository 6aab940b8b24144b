from site_export.crawler.link_extractor import extract_links, get_href


def test_same_origin_path():
    assert list(extract_links('<a href="/foo">Foo</a>')) == ["/foo"]


def test_absolute_url_with_host_is_skipped():
    assert list(extract_links('<a href="https://other.example/foo">X</a>')) == []
    assert list(extract_links('<a href="//cdn.example/foo">X</a>')) == []


def test_query_and_fragment_are_dropped():
    html = "<a href='/bar?x=1'>B</a><a href=/baz#top>Z</a>"
    assert list(extract_links(html)) == ["/bar", "/baz"]


def test_anchor_without_href_yields_nothing():
    html = '<a name="top">T</a><a class="x">Y</a><a href="">E</a><a href="#section">S</a>'
    assert list(extract_links(html)) == []


def test_non_http_schemes_are_skipped():
    html = (
        '<a href="mailto:me@example.com">M</a>'
        '<a href="javascript:void(0)">J</a>'
        '<a href="tel:+100">T</a>'
        '<a href="/ok">OK</a>'
    )
    assert list(extract_links(html)) == ["/ok"]


def test_malformed_href_is_skipped():
    html = '<a href="http://[bad">X</a><a href="/after">A</a>'
    assert list(extract_links(html)) == ["/after"]


def test_relative_links_resolve_against_route():
    html = '<a href="post-1">P</a><a href="../about">A</a><a href="./">I</a>'
    assert list(extract_links(html, "/blog/")) == ["/blog/post-1", "/about", "/blog/"]


def test_href_priority_and_case():
    assert get_href('class="a" href="/dq"') == "/dq"
    assert get_href("href='/sq' data-x=1") == "/sq"
    assert get_href("HREF = /unquoted target=_blank") == "/unquoted"
    assert get_href('title="no link"') is None
    html = '<A HREF="/upper">U</A>\n<a\n  class="multi"\n  href="/multiline"\n>M</a>'
    assert list(extract_links(html)) == ["/upper", "/multiline"]


def test_entities_in_href_are_decoded():
    html = '<a href="/a&amp;b">AB</a><a href="/caf&#233;/">C</a><a href="/q?x=1&amp;y=2">Q</a>'
    assert list(extract_links(html)) == ["/a&b", "/café/", "/q"]
    assert get_href('href="/x&amp;y"') == "/x&y"


def test_iteration_is_lazy_and_restartable():
    links = extract_links('<a href="/one">1</a><a href="/two">2</a>')
    it = iter(links)
    assert next(it) == "/one"
    assert list(links) == ["/one", "/two"]
    assert list(links) == ["/one", "/two"]

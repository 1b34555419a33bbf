"""Tests for the document parser wrapper."""

from __future__ import annotations

import re

from core.document import parse_document


_PAGE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <title> Example   Page </title>
  <meta name="description" content="An example">
  <link rel="alternate stylesheet" href="/alt.css">
</head>
<body>
  <nav>Home About Contact</nav>
  <main>
    <h1>Welcome</h1>
    <p>Visible <b>content</b> here.</p>
    <!-- a comment that should not count -->
  </main>
  <aside>Sidebar text</aside>
  <footer>Footer text</footer>
  <script>var hidden = "script text";</script>
  <style>.x { color: red; }</style>
</body>
</html>
"""


class TestParseDocument:
    def test_malformed_markup_does_not_raise(self) -> None:
        doc = parse_document("<html><body><p>unclosed <div><span>text")
        assert doc.count("p") == 1
        assert "text" in doc.content_text()

    def test_empty_markup_is_queryable(self) -> None:
        doc = parse_document("")
        assert doc.select_all("a") == []
        assert doc.select_first("title") is None
        assert doc.content_text() == ""
        assert doc.doctype() == ""

    def test_none_markup_is_queryable(self) -> None:
        doc = parse_document(None)
        assert doc.count("img") == 0


class TestQueries:
    def test_select_by_exact_attribute(self) -> None:
        doc = parse_document(_PAGE)
        meta = doc.select_first("meta", {"name": "description"})
        assert doc.attr(meta, "content") == "An example"

    def test_select_by_regex_attribute(self) -> None:
        doc = parse_document(_PAGE)
        links = doc.select_all("link", {"rel": re.compile(r"\bstylesheet\b")})
        assert len(links) == 1
        assert doc.attr(links[0], "rel") == "alternate stylesheet"

    def test_attr_default_when_missing(self) -> None:
        doc = parse_document(_PAGE)
        h1 = doc.select_first("h1")
        assert doc.attr(h1, "id") is None
        assert doc.attr(h1, "id", "") == ""
        assert doc.attr(None, "id", "x") == "x"

    def test_text_is_whitespace_normalized(self) -> None:
        doc = parse_document(_PAGE)
        assert doc.text(doc.select_first("title")) == "Example Page"

    def test_root_attr_and_doctype(self) -> None:
        doc = parse_document(_PAGE)
        assert doc.root_attr("lang") == "en"
        assert doc.doctype() == "html"


class TestContentText:
    def test_strips_noise_elements(self) -> None:
        text = parse_document(_PAGE).content_text()
        assert "Visible content here." in text
        assert "Welcome" in text
        for noise in ("Home About", "Sidebar", "Footer", "script text", "color"):
            assert noise not in text

    def test_skips_comments(self) -> None:
        assert "comment" not in parse_document(_PAGE).content_text()

    def test_does_not_mutate_tree(self) -> None:
        doc = parse_document(_PAGE)
        doc.content_text()
        assert doc.count("nav") == 1
        assert doc.count("script") == 1

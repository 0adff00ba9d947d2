import logging

import pytest

from converter import markdown
from converter.markdown import (Blank, Converted, Failed, Heading, ListItem, Text, classify,
                                convert, linkify, render)
from project.vars import FALLBACK


DATA = [
    ("", ""),
    ("\n\n   \n\t\n", ""),
    ("Hello\n\n\n", "<p>Hello</p>"),
    ("Line one\n  Line two  \nLine three", "<p>Line one Line two Line three</p>"),
    ("## header [a](b)", "<h2>header [a](b)</h2>"),
    ("This is a [link](http://example.com)",
     '<p>This is a <a href="http://example.com">link</a></p>'),
    ("[Link without URL]", "<p>[Link without URL]</p>"),
    ("# Heading 1\n\nThis is some text.\n\n## Heading 2\n\nMore text.",
     "<h1>Heading 1</h1><p>This is some text.</p><h2>Heading 2</h2><p>More text.</p>"),
    ("* item", "<ul><li>item</li></ul>"),
    ("1. first\n2. second", "<ol><li>first</li></ol><ol><li>second</li></ol>"),
    ("Intro\n* item\nOutro", "<p>Intro</p><ul><li>item</li></ul><p>Outro</p>"),
    ("* [a](b)", "<ul><li>[a](b)</li></ul>"),
    ("####### seven", "<p>####### seven</p>"),
    ("#nospace", "<p>#nospace</p>"),
    ("*emphasis*", "<p>*emphasis*</p>"),
    ("1.item", "<p>1.item</p>"),
    ("   # Indented", "<h1>Indented</h1>"),
    ("# Title\r\nBody\r\nMore", "<h1>Title</h1><p>Body More</p>"),
    ("[a](1) and [b](2)", '<p><a href="1">a</a> and <a href="2">b</a></p>'),
    ("[a] [b](c)", '<p>[a] <a href="c">b</a></p>'),
    ("[a]() and [x](y", "<p>[a]() and [x](y</p>"),
    ("Text\n### Three", "<p>Text</p><h3>Three</h3>"),
    ("###### six", "<h6>six</h6>"),
    ("#\xa0Title", "<p>#\xa0Title</p>"),
    ("*\u3000item", "<p>*\u3000item</p>"),
    ("# a\u2028b", "<p># a\u2028b</p>"),
    ("\xa0text\xa0", "<p>\xa0text\xa0</p>"),
    ("\x0b\ttext\x1f", "<p>text</p>"),
]
IDS = [
    "Empty", "Blanks", "TrailingBlanks", "Joined", "HeadingLink", "Link",
    "MalformedLink", "Interleaved", "Unordered", "Ordered", "ItemBreaksParagraph",
    "ItemLink", "SevenHashes", "NoSpace", "Emphasis", "NoSpaceOrdered",
    "Indented", "CRLF", "TwoLinks", "LooseBracket", "Unbalanced", "HeadingCloses",
    "SixHashes", "NbspHeading", "IdeographicItem", "LineSeparator", "NbspKept",
    "ControlTrimmed"
]


@pytest.mark.parametrize("text,html", DATA, ids=IDS)
def test_convert(text, html):
    assert convert(text) == html


CLASSES = [
    ("", Blank()),
    ("### Title", Heading(3, "Title")),
    ("#\tTab", Heading(1, "Tab")),
    ("###### Six", Heading(6, "Six")),
    ("* item", ListItem(False, "item")),
    ("12.  item", ListItem(True, "item")),
    ("plain [a](b)", Text("plain [a](b)")),
    ("#\xa0Title", Text("#\xa0Title")),
]


@pytest.mark.parametrize("line,token", CLASSES)
def test_classify(line, token):
    result = classify(line)
    assert type(result) is type(token)
    assert result == token


def test_linkify():
    assert linkify("[x](y)") == '<a href="y">x</a>'
    assert linkify("no links here") == "no links here"


def test_blank_lines_between_blocks():
    tight = "# One\n\nText\n\n* item"
    loose = "# One\n\n\n\nText\n\n\n   \n* item\n\n"
    assert convert(tight) == convert(loose)


def test_deterministic():
    text = "# Title\nSome [link](http://a.b)\nmore\n\n1. one"
    assert convert(text) == convert(text)
    assert render(text) == Converted(convert(text))


def test_failed_result():
    result = render(None)
    assert isinstance(result, Failed)
    assert isinstance(result.error, TypeError)
    assert convert(None) == FALLBACK


def test_fault_discards_partial_output(monkeypatch, caplog):
    def broken(text):
        raise RuntimeError("boom")

    monkeypatch.setattr(markdown, "linkify", broken)
    with caplog.at_level(logging.ERROR, logger="converter.markdown"):
        assert convert("# Kept?\n\nsome text") == FALLBACK
    assert "Error converting Markdown to HTML" in caplog.text

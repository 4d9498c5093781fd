"""Integration tests for the segment -> classify -> consolidate -> render pipeline.

Each test runs the pipeline against the canonical document below and asserts
stable expected values. Read this file top-to-bottom as a reference for what
each stage produces.

Canonical document (capsule.gmi)
--------------------------------
    # My Capsule

    Welcome to my gemlog.
    => gemini://example.org/one.gmi First post
    => gemini://example.org/two.gmi
    => https://example.com Elsewhere

    ## Code
    ```
    def hello():
        return "=> not a link"
    ```
    ### Fin
    => mailto:me@example.org

Line layout after classify (14 raw lines, 2 fences dropped):
    Heading h1, Blank, Paragraph, Link x3, Blank, Heading h2,
    Preformatted (2 lines), Heading h3, Link

Block layout after consolidate:
    Heading h1, Paragraph, Links (3), Heading h2, Preformatted,
    Heading h3, Links (1)
"""

from markdown_it import MarkdownIt

from gemtext2md.core.blocks import consolidate
from gemtext2md.core.classify import decode_lines
from gemtext2md.core.models import Heading, Links, Paragraph, Preformatted
from gemtext2md.core.pipeline import convert
from gemtext2md.core.segment import segment_verbatim


CAPSULE = """\
# My Capsule

Welcome to my gemlog.
=> gemini://example.org/one.gmi First post
=> gemini://example.org/two.gmi
=> https://example.com Elsewhere

## Code
```
def hello():
    return "=> not a link"
```
### Fin
=> mailto:me@example.org
"""

EXPECTED = """\
# My Capsule

Welcome to my gemlog.

* [First post](gemini://example.org/one.gmi)
* [gemini://example.org/two.gmi](gemini://example.org/two.gmi)
* [Elsewhere](https://example.com)

## Code

```
def hello():
    return "=> not a link"
```

### Fin

* [mailto:me@example.org](mailto:me@example.org)

"""


def _blocks():
    return consolidate(decode_lines(segment_verbatim(CAPSULE.splitlines())))


def test_segment_drops_fences():
    segmented = segment_verbatim(CAPSULE.splitlines())
    assert len(segmented) == 12
    assert sum(1 for s in segmented if s.verbatim) == 2


def test_block_layout():
    """Blocks appear in document order with the link run merged."""
    kinds = [type(b) for b in _blocks()]
    assert kinds == [Heading, Paragraph, Links, Heading, Preformatted, Heading, Links]


def test_link_run_contents():
    links = _blocks()[2].links
    assert [(l.url, l.label) for l in links] == [
        ("gemini://example.org/one.gmi", "First post"),
        ("gemini://example.org/two.gmi", None),
        ("https://example.com", "Elsewhere"),
    ]


def test_rendered_document():
    assert convert(CAPSULE) == EXPECTED


def test_rendered_document_is_commonmark():
    """The output parses as CommonMark into the intended block structure."""
    tokens = MarkdownIt("commonmark").parse(convert(CAPSULE))
    blocks = [t.type for t in tokens if t.level == 0 and not t.type.endswith("_close")]
    assert blocks == [
        "heading_open", "paragraph_open", "bullet_list_open",
        "heading_open", "fence", "heading_open", "bullet_list_open",
    ]
    fence = next(t for t in tokens if t.type == "fence")
    assert fence.content == 'def hello():\n    return "=> not a link"\n'
    headings = [t.tag for t in tokens if t.type == "heading_open"]
    assert headings == ["h1", "h2", "h3"]


def test_rendered_links_are_commonmark_links():
    """Each list item holds one link whose href is the gemtext URL."""
    tokens = MarkdownIt("commonmark").parse(convert(CAPSULE))
    hrefs = [
        child.attrGet("href")
        for t in tokens if t.type == "inline"
        for child in t.children if child.type == "link_open"
    ]
    assert hrefs == [
        "gemini://example.org/one.gmi",
        "gemini://example.org/two.gmi",
        "https://example.com",
        "mailto:me@example.org",
    ]


def test_pipeline_is_idempotent():
    assert convert(CAPSULE) == convert(CAPSULE)

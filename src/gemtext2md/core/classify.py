"""Line classification: links, headings, blanks, paragraphs, and verbatim runs"""

from typing import Iterable, Union

from gemtext2md.core.errors import Malformed, MalformedKind
from gemtext2md.core.models import (
    BlankLine,
    HeadingLevel,
    HeadingLine,
    Line,
    LinkLine,
    ParagraphLine,
    PreformattedLine,
    SegmentedLine,
)


LINK_MARKER = "=>"

# Longest marker first so "##" is never read as a level-1 heading.
HEADING_MARKERS: list[tuple[str, HeadingLevel]] = [
    ("###", HeadingLevel.h3),
    ("##",  HeadingLevel.h2),
    ("#",   HeadingLevel.h1),
]


def _trim(text: str) -> str:
    """No-op: leading and trailing whitespace is kept."""
    return text


def _link(text: str, lineno: int) -> Union[LinkLine, Malformed]:
    """Parse '=> URL [LABEL...]'; the label is everything after the first space."""
    if not text.startswith(LINK_MARKER + " "):
        return Malformed(MalformedKind.link, text, lineno)
    url, sep, label = text[len(LINK_MARKER) + 1:].partition(" ")
    if not url:
        return Malformed(MalformedKind.link, text, lineno)
    return LinkLine(url=url, label=label if sep else None)


def _heading(text: str, lineno: int) -> Union[HeadingLine, Malformed]:
    """Parse a '#'-prefixed line; a marker needs one space and non-empty text after it."""
    for marker, level in HEADING_MARKERS:
        if text.startswith(marker):
            prefix = marker + " "
            if text.startswith(prefix) and len(text) > len(prefix):
                return HeadingLine(level=level, text=_trim(text)[len(prefix):])
            return Malformed(MalformedKind.heading, text, lineno)
    return Malformed(MalformedKind.heading, text, lineno)


def classify_line(text: str, lineno: int = 0) -> Union[Line, Malformed]:
    """Classify a single non-verbatim line; returns Malformed instead of raising."""
    if text.startswith(LINK_MARKER):
        return _link(text, lineno)
    if text.startswith("#"):
        return _heading(text, lineno)
    if not text:
        return BlankLine()
    return ParagraphLine(text=_trim(text))


def decode_lines(segmented: Iterable[SegmentedLine]) -> Union[list[Line], Malformed]:
    """Classify segmented lines, collapsing each verbatim run into one PreformattedLine.

    Stops at the first malformed line and returns its Malformed result; lines
    after it are never classified.
    """
    decoded: list[Line] = []
    verbatim_run: list[str] = []

    for verbatim, text, lineno in segmented:
        if verbatim:
            verbatim_run.append(text)
            continue
        if verbatim_run:
            decoded.append(PreformattedLine(lines=tuple(verbatim_run)))
            verbatim_run = []
        line = classify_line(text, lineno)
        if isinstance(line, Malformed):
            return line
        decoded.append(line)

    # input ended inside an unterminated fence
    if verbatim_run:
        decoded.append(PreformattedLine(lines=tuple(verbatim_run)))
    return decoded

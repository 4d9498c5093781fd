"""Line-to-Block consolidation: drop blanks, merge consecutive links"""

from typing import Iterable

from gemtext2md.core.models import (
    Block,
    BlankLine,
    Heading,
    HeadingLine,
    Line,
    Link,
    LinkLine,
    Links,
    Paragraph,
    ParagraphLine,
    Preformatted,
    PreformattedLine,
)


def _to_block(line: Line) -> Block | None:
    """Map a non-link line to its block; blank lines produce nothing."""
    if isinstance(line, ParagraphLine):
        return Paragraph(text=line.text)
    if isinstance(line, HeadingLine):
        return Heading(level=line.level, text=line.text)
    if isinstance(line, PreformattedLine):
        return Preformatted(lines=line.lines)
    if isinstance(line, BlankLine):
        return None
    raise TypeError(f"unexpected line: {line!r}")


def consolidate(lines: Iterable[Line]) -> list[Block]:
    """Turn classified lines into blocks; each maximal run of links becomes one Links block."""
    blocks: list[Block] = []
    pending: list[Link] = []

    for line in lines:
        if isinstance(line, LinkLine):
            pending.append(Link(url=line.url, label=line.label))
            continue
        if pending:
            blocks.append(Links(links=tuple(pending)))
            pending = []
        if (block := _to_block(line)) is not None:
            blocks.append(block)

    if pending:
        blocks.append(Links(links=tuple(pending)))
    return blocks

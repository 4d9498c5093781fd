"""Block-to-Markdown rendering"""

from typing import Iterable

from gemtext2md.core.models import Block, Heading, Link, Links, Paragraph, Preformatted
from gemtext2md.core.segment import FENCE


def render_link(link: Link) -> str:
    """One bullet item; the URL doubles as display text when there is no label."""
    return f"* [{link.label or link.url}]({link.url})\n"


def render_block(block: Block) -> str:
    """Render a single block, including its trailing blank line."""
    if isinstance(block, Paragraph):
        return f"{block.text}\n\n"
    if isinstance(block, Heading):
        return f"{block.level.marker} {block.text}\n\n"
    if isinstance(block, Preformatted):
        body = "\n".join(block.lines)
        return f"{FENCE}\n{body}\n{FENCE}\n\n"
    if isinstance(block, Links):
        return "".join(render_link(link) for link in block.links) + "\n"
    raise TypeError(f"unexpected block: {block!r}")


def render_blocks(blocks: Iterable[Block]) -> str:
    return "".join(render_block(b) for b in blocks)

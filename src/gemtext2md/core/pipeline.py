"""Pipeline driver: read lines, segment, classify, consolidate, render"""

import io
import logging
from typing import Iterable, TextIO

from gemtext2md.core.blocks import consolidate
from gemtext2md.core.classify import decode_lines
from gemtext2md.core.errors import Malformed
from gemtext2md.core.render import render_blocks
from gemtext2md.core.segment import segment_verbatim


logger = logging.getLogger(__name__)


def read_all_lines(stream: TextIO) -> list[str]:
    """Read a text stream to EOF, returning lines without their trailing newline."""
    return [line[:-1] if line.endswith("\n") else line for line in stream]


def convert_lines(lines: Iterable[str]) -> str:
    """Convert gemtext lines to a Markdown document.

    Raises MalformedLink or MalformedHeading (both ConversionError) on the first
    bad line; nothing is rendered in that case.
    """
    segmented = segment_verbatim(lines)
    logger.debug("segmented %d lines (%d verbatim)",
                 len(segmented), sum(1 for s in segmented if s.verbatim))

    decoded = decode_lines(segmented)
    if isinstance(decoded, Malformed):
        logger.debug("aborting at line %d: malformed %s", decoded.lineno, decoded.kind.value)
        raise decoded.to_error()

    blocks = consolidate(decoded)
    logger.debug("consolidated %d lines into %d blocks", len(decoded), len(blocks))
    return render_blocks(blocks)


def convert(text: str) -> str:
    """Convert a whole gemtext string."""
    return convert_lines(read_all_lines(io.StringIO(text)))

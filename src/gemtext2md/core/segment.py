"""Verbatim region detection via fence-line toggling"""

from typing import Iterable

from gemtext2md.core.models import SegmentedLine


FENCE = "```"


def is_fence(text: str) -> bool:
    """True when the first three characters are the fence token."""
    return text[:3] == FENCE


def segment_verbatim(lines: Iterable[str]) -> list[SegmentedLine]:
    """Tag each non-fence line with whether it sits inside a preformatted region.

    Fence lines toggle the state and are dropped. An unterminated region is
    not an error here; its lines are simply all tagged verbatim.
    """
    segmented: list[SegmentedLine] = []
    verbatim = False

    for lineno, text in enumerate(lines, start=1):
        if is_fence(text):
            verbatim = not verbatim
            continue
        segmented.append(SegmentedLine(verbatim, text, lineno))

    return segmented

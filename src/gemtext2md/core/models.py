"""Intermediate data models for the segment, classify, and consolidate pipeline"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class HeadingLevel(int, Enum):
    """The three heading depths gemtext supports"""
    h1 = 1
    h2 = 2
    h3 = 3

    @property
    def marker(self) -> str:
        return "#" * self.value


class SegmentedLine(NamedTuple):
    """A raw line tagged with the verbatim state in effect while reading it."""
    verbatim: bool
    text: str
    lineno: int = 0     # 1-based source line number; fences are counted


# --- lines: one per input line, or one per contiguous verbatim run ---

@dataclass(frozen=True)
class BlankLine:
    pass


@dataclass(frozen=True)
class ParagraphLine:
    text: str


@dataclass(frozen=True)
class LinkLine:
    url: str
    label: Optional[str] = None     # None when the line carries only a URL


@dataclass(frozen=True)
class HeadingLine:
    level: HeadingLevel
    text: str


@dataclass(frozen=True)
class PreformattedLine:
    lines: tuple[str, ...]


Line = Union[BlankLine, ParagraphLine, LinkLine, HeadingLine, PreformattedLine]


# --- blocks: renderable output units ---

class _Block(BaseModel):
    model_config = ConfigDict(frozen=True)


class Paragraph(_Block):
    text: str


class Heading(_Block):
    level: HeadingLevel
    text: str


class Preformatted(_Block):
    lines: tuple[str, ...]


class Link(_Block):
    url: str = Field(min_length=1)
    label: Optional[str] = None


class Links(_Block):
    """A run of consecutive link lines, rendered as one bullet list."""
    links: tuple[Link, ...] = Field(min_length=1)


Block = Union[Paragraph, Heading, Preformatted, Links]

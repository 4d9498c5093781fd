"""Classification failures: the result variant and the exceptions raised from it"""

from dataclasses import dataclass
from enum import Enum


class ConversionError(ValueError):
    """A line that cannot be converted; aborts the whole document."""
    kind = "line"

    def __init__(self, line: str, lineno: int = 0):
        self.line = line
        self.lineno = lineno
        where = f" on line {lineno}" if lineno else ""
        super().__init__(f"malformed {self.kind}{where}: {line!r}")


class MalformedLink(ConversionError):
    kind = "link"


class MalformedHeading(ConversionError):
    kind = "heading"


class MalformedKind(str, Enum):
    link = "link"
    heading = "heading"


_ERRORS: dict[MalformedKind, type[ConversionError]] = {
    MalformedKind.link:    MalformedLink,
    MalformedKind.heading: MalformedHeading,
}


@dataclass(frozen=True)
class Malformed:
    """Classification result for a line that breaks link or heading syntax."""
    kind: MalformedKind
    text: str
    lineno: int = 0

    def to_error(self) -> ConversionError:
        return _ERRORS[self.kind](self.text, self.lineno)

# topmark:header:start
#
#   project      : FlagFile
#   file         : scanner.py
#   file_relpath : src/flagfile/core/scanner.py
#   license      : MIT
#   copyright    : (c) 2026 The FlagFile Authors
#
# topmark:header:end

"""Line scanner for flag files.

Turns each physical input line into a classified, cleaned
[`ScannedLine`][flagfile.core.scanner.ScannedLine]:

1. Everything from the first ``#`` or ``;`` onwards is dropped. There is no quoting,
   so a comment character inside a header or a value always truncates it.
2. Surrounding whitespace is trimmed.
3. An empty result is ``BLANK``.
4. ``[name]`` (at least two characters) is a ``SECTION`` header; ``name`` is kept
   verbatim and may be empty.
5. Text without ``=`` is ``MALFORMED``.
6. Otherwise the text is split at the first ``=`` into a trimmed key and value.

Scanning is lazy: [`iter_lines`][flagfile.core.scanner.iter_lines] reads one line at a
time and never buffers the whole input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import IO, TYPE_CHECKING, AnyStr, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

COMMENT_CHARS: Final[str] = "#;"
SECTION_START: Final[str] = "["
SECTION_END: Final[str] = "]"
ASSIGNMENT_CHAR: Final[str] = "="


class LineKind(Enum):
    """Classification of a scanned line."""

    BLANK = "blank"
    SECTION = "section"
    ASSIGNMENT = "assignment"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class ScannedLine:
    """A single classified input line.

    Attributes:
        lineno (int): 1-based physical line number.
        raw (str): The physical line without its line terminator.
        kind (LineKind): Classification of the line.
        content (str): Comment-stripped, trimmed text.
        key (str): Trimmed key (``ASSIGNMENT`` only, else ``""``).
        value (str): Trimmed value (``ASSIGNMENT`` only, else ``""``).
        section (str): Header name (``SECTION`` only, else ``""``).
    """

    lineno: int
    raw: str
    kind: LineKind
    content: str = ""
    key: str = ""
    value: str = ""
    section: str = ""


def strip_comment(text: str) -> str:
    """Return ``text`` truncated at the first comment character."""
    for i, ch in enumerate(text):
        if ch in COMMENT_CHARS:
            return text[:i]
    return text


def is_section_header(content: str) -> bool:
    """Return True if the trimmed ``content`` has the form ``[name]``."""
    return (
        len(content) >= 2 and content.startswith(SECTION_START) and content.endswith(SECTION_END)
    )


def scan_line(raw: str, lineno: int) -> ScannedLine:
    """Classify one physical line.

    Args:
        raw (str): The line text; a trailing line terminator is ignored.
        lineno (int): 1-based line number recorded on the result.

    Returns:
        ScannedLine: The classified line.
    """
    raw = raw.rstrip("\r\n")
    content: str = strip_comment(raw).strip()

    if not content:
        return ScannedLine(lineno=lineno, raw=raw, kind=LineKind.BLANK)

    if is_section_header(content):
        return ScannedLine(
            lineno=lineno,
            raw=raw,
            kind=LineKind.SECTION,
            content=content,
            section=content[1:-1],
        )

    key, sep, value = content.partition(ASSIGNMENT_CHAR)
    if not sep:
        return ScannedLine(lineno=lineno, raw=raw, kind=LineKind.MALFORMED, content=content)

    return ScannedLine(
        lineno=lineno,
        raw=raw,
        kind=LineKind.ASSIGNMENT,
        content=content,
        key=key.strip(),
        value=value.strip(),
    )


def _decode(line: AnyStr, encoding: str) -> str:
    if isinstance(line, bytes):
        return line.decode(encoding)
    return line


def iter_lines(stream: IO[AnyStr], *, encoding: str = "utf-8") -> Iterator[ScannedLine]:
    """Yield classified lines from a text or binary stream.

    Binary streams are decoded line by line with ``encoding``. Exceptions raised by
    the stream while reading (``OSError``, ``UnicodeDecodeError``) propagate to the
    caller unchanged.

    Args:
        stream (IO[AnyStr]): Readable stream; it is not closed.
        encoding (str): Encoding used for binary streams.

    Yields:
        ScannedLine: One entry per physical line, blank lines included.
    """
    for lineno, line in enumerate(stream, start=1):
        yield scan_line(_decode(line, encoding), lineno)

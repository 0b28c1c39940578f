"""Line-oriented reading helpers for the CSV parsers.

Read failures (I/O or decoding errors) surface as :class:`ParseError` so the
caller sees one error type per malformed source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from regionstats.errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO


def stream_name(stream: TextIO) -> str:
    """Return a label for log messages (file name when available)."""
    return str(getattr(stream, "name", "<stream>"))


def read_header(stream: TextIO) -> str:
    """Read and return the header line without its line terminator.

    An empty stream yields an empty header.

    Raises
    ------
    ParseError
        If the stream errors before yielding a line.
    """
    try:
        header = stream.readline()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        msg = f"Error parsing {stream_name(stream)}: could not read header line ({e})"
        raise ParseError(msg) from e

    return header.rstrip("\r\n")


def iter_data_lines(stream: TextIO, first_line_number: int = 2) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for each non-blank line after the header.

    Raises
    ------
    ParseError
        If reading the stream fails part-way through.
    """
    line_number = first_line_number
    try:
        for line in stream:
            if line.strip():
                yield line_number, line.rstrip("\r\n")
            line_number += 1
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Error parsing {stream_name(stream)} at line {line_number}: {e}"
        raise ParseError(msg) from e

"""Runner id and source-location parsing.

Pure string functions; nothing here touches the filesystem. Paths may come
from a Windows runner, so both ``/`` and ``\\`` count as separators.
"""

from __future__ import annotations

import os
import re

from pytestmap.core.errors import ErrorCode
from pytestmap.discovery.models import ParseFailure, SourceLocation

ID_DELIMITER = "::"
_RELATIVE_MARKERS = ("./", ".\\")
_SEPARATORS = re.compile(r"[\\/]")


def strip_relative_marker(path: str) -> str:
    """Remove leading ``./`` or ``.\\`` markers."""
    while path.startswith(_RELATIVE_MARKERS):
        path = path[2:]
    return path


def file_name(path: str) -> str:
    return _SEPARATORS.split(path)[-1]


def file_stem(path: str) -> str:
    """File name without its final extension (``a/b/mod.py`` -> ``mod``)."""
    return os.path.splitext(file_name(path))[0]


def parse_source(source: str) -> SourceLocation | ParseFailure:
    """Parse ``"<path>:<line>"``, splitting on the last colon.

    Returns a ParseFailure instead of raising; malformed sources are routine
    in discovery output and must not abort a batch.
    """
    path, sep, line = strip_relative_marker(source).rpartition(":")
    if not sep or not path or not line:
        return _malformed(source, "expected '<path>:<line>'")
    if not (line.isascii() and line.isdigit()):
        return _malformed(source, f"line number is not a non-negative integer: {line!r}")
    return SourceLocation(path=path, line=int(line))


def _malformed(source: str, reason: str) -> ParseFailure:
    return ParseFailure(
        code=ErrorCode.DISCOVERY_MALFORMED_SOURCE,
        runner_id="",
        source=source,
        reason=reason,
    )


def parse_runner_id(runner_id: str) -> list[str]:
    return runner_id.split(ID_DELIMITER)


def fully_qualified_name_from_id(runner_id: str) -> str:
    """Build the stable test key from a runner id.

    Functions defined outside a class get the file stem as their class
    segment, so every two-segment id becomes ``file::stem::test``:

        >>> fully_qualified_name_from_id("a/b.py::test_x")
        'a/b.py::b::test_x'
        >>> fully_qualified_name_from_id("a/b.py::TestC::test_x")
        'a/b.py::TestC::test_x'
    """
    stripped = strip_relative_marker(runner_id)
    parts = parse_runner_id(stripped)
    if len(parts) == 2:
        return ID_DELIMITER.join([parts[0], file_stem(parts[0]), parts[1]])
    return stripped

"""Discovery report reader.

Parses the JSON written by the pytest discovery adapter into
DiscoveryBatch values. The report is a list with one object per
discovery root:

    [
      {
        "rootid": ".",
        "root": "/home/me/project",
        "parents": [{"id": "./test_a.py", "kind": "file", "name": "test_a.py",
                     "parentid": "."}],
        "tests": [{"id": "./test_a.py::test_x", "name": "test_x",
                   "source": "./test_a.py:3", "markers": [],
                   "parentid": "./test_a.py"}]
      }
    ]

A single top-level object is accepted as a one-batch report.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pytestmap.core.errors import DiscoveryError
from pytestmap.discovery.models import DiscoveryBatch, RawParent, RawTest

__all__ = [
    "load_discovery_report",
    "parse_discovery_report",
]


def load_discovery_report(path: Path) -> list[DiscoveryBatch]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DiscoveryError.report_parse_error(str(path), str(e)) from e
    return parse_discovery_report(content, source=str(path))


def parse_discovery_report(content: str, *, source: str = "<string>") -> list[DiscoveryBatch]:
    """Parse a discovery report.

    Raises DiscoveryError on malformed JSON or when ``parents``, ``tests`` or
    ``markers`` is present but not a list.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise DiscoveryError.report_parse_error(source, str(e)) from e

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise DiscoveryError.report_parse_error(
            source, f"expected a list of results, got {type(data).__name__}"
        )

    batches: list[DiscoveryBatch] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise DiscoveryError.report_parse_error(source, f"result {index} is not an object")
        batches.append(_parse_batch(entry, source, f"result {index}"))
    return batches


def _parse_batch(entry: dict[str, Any], source: str, where: str) -> DiscoveryBatch:
    parents = _list_field(entry, "parents", source, where)
    tests = _list_field(entry, "tests", source, where)
    return DiscoveryBatch(
        root=_text(entry.get("root")),
        rootid=_text(entry.get("rootid")) or ".",
        parents=tuple(_parse_parent(p) for p in parents if isinstance(p, dict)),
        tests=tuple(
            _parse_test(t, source, f"{where} test {i}")
            for i, t in enumerate(tests)
            if isinstance(t, dict)
        ),
    )


def _parse_parent(item: dict[str, Any]) -> RawParent:
    return RawParent(
        id=_text(item.get("id")),
        parentid=_optional_text(item.get("parentid")),
        kind=_text(item.get("kind")),
        name=_text(item.get("name")),
    )


def _parse_test(item: dict[str, Any], source: str, where: str) -> RawTest:
    return RawTest(
        id=_text(item.get("id")),
        parentid=_optional_text(item.get("parentid")),
        name=_text(item.get("name")),
        source=_text(item.get("source")),
        markers=tuple(str(m) for m in _list_field(item, "markers", source, where)),
    )


def _list_field(item: dict[str, Any], key: str, source: str, where: str) -> list[Any]:
    """The list under ``key``; missing or null reads as empty."""
    value = item.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise DiscoveryError.report_parse_error(
            source, f"{where}: {key!r} must be a list, got {type(value).__name__}"
        )
    return value


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> str | None:
    return None if value is None else str(value)

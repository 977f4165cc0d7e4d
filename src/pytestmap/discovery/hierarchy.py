"""Parent hierarchy resolution for one discovery batch."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pytestmap.discovery.identifiers import file_stem
from pytestmap.discovery.models import DiscoveryBatch, RawParent, RawTest

ParentMap = Mapping[str, RawParent]

_FUNCTION_KIND = "function"


def build_parent_map(batch: DiscoveryBatch) -> dict[str, RawParent]:
    """Index a batch's parents by id. Later duplicates win."""
    return {parent.id: parent for parent in batch.parents}


def iter_ancestors(parent_id: str | None, parent_map: ParentMap) -> Iterator[RawParent]:
    """Yield ancestors innermost-first until a lookup misses.

    A missing id (root reached or dangling reference) simply ends the walk.
    """
    while parent_id is not None and (parent := parent_map.get(parent_id)) is not None:
        yield parent
        parent_id = parent.parentid


def xml_class_name(test: RawTest, parent_map: ParentMap) -> str:
    """Create the classname the JUnit report will use for this test.

    Container ancestors contribute their name without extension, outermost
    first. Function-kind parents (e.g. the function behind a parametrized
    test) are skipped. A test outside any recorded container yields ``""``.
    """
    names = [
        file_stem(parent.name)
        for parent in iter_ancestors(test.parentid, parent_map)
        if parent.kind.lower() != _FUNCTION_KIND
    ]
    names.reverse()
    return ".".join(names)

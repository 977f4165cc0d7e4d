"""Turn raw discovery batches into normalized test cases.

Each test is handled independently: a malformed entry becomes a
ParseFailure and the pass moves on to the next test and the next batch.
"""

from __future__ import annotations

import ntpath
import os
import re
from collections.abc import Iterable

import structlog

from pytestmap.config.models import DiscoveryConfig
from pytestmap.core.errors import ErrorCode
from pytestmap.discovery.hierarchy import ParentMap, build_parent_map, xml_class_name
from pytestmap.discovery.identifiers import (
    file_name,
    fully_qualified_name_from_id,
    parse_source,
)
from pytestmap.discovery.models import (
    DiscoveryBatch,
    DiscoveryResult,
    NormalizedTestCase,
    ParseFailure,
    RawTest,
)
from pytestmap.discovery.sink import TestCaseSink

log = structlog.get_logger()

_WINDOWS_ABSOLUTE = re.compile(r"^(?:[A-Za-z]:[\\/]|\\\\)")


def is_absolute_path(path: str) -> bool:
    """True for POSIX absolute paths, drive-rooted and UNC Windows paths."""
    return os.path.isabs(path) or bool(_WINDOWS_ABSOLUTE.match(path))


def _path_module(path: str):
    """ntpath for drive-rooted or UNC paths, the host module otherwise."""
    return ntpath if _WINDOWS_ABSOLUTE.match(path) else os.path


def resolve_source_path(root: str, path: str) -> str:
    """Absolute, case-folded source path.

    Folding assumes a case-insensitive filesystem; two files differing only
    in case collide on a case-sensitive one. Downstream matching relies on
    the folded form, so it is kept.
    """
    full_path = path if is_absolute_path(path) else _path_module(root).join(root, path)
    return full_path.lower()


def execution_path(absolute_file_path: str, runner_id: str) -> str:
    """Path that re-invokes exactly this test.

    When the file name occurs in the runner id, whatever follows its last
    occurrence (``::TestC::test_x``) is appended to the absolute path. If it
    does not occur, the id is taken relative to the file's directory.
    """
    name = file_name(absolute_file_path)
    index = runner_id.rfind(name)
    if index != -1:
        return absolute_file_path + runner_id[index + len(name) :]
    paths = _path_module(absolute_file_path)
    return paths.join(paths.dirname(absolute_file_path), runner_id.lstrip("."))


def normalize_test(
    test: RawTest,
    root: str,
    parent_map: ParentMap,
    *,
    executor_uri: str,
    is_workspace: bool,
) -> NormalizedTestCase | ParseFailure:
    """Normalize one raw test, or describe why it cannot be."""
    if not test.name.strip() or not test.id.strip():
        blank = "name" if not test.name.strip() else "id"
        return ParseFailure(
            code=ErrorCode.DISCOVERY_EMPTY_REQUIRED_FIELD,
            runner_id=test.id,
            source=test.source,
            reason=f"test {blank} is blank",
            batch_root=root,
        )

    location = parse_source(test.source)
    if isinstance(location, ParseFailure):
        return ParseFailure(
            code=location.code,
            runner_id=test.id,
            source=test.source,
            reason=location.reason,
            batch_root=root,
        )

    source_path = resolve_source_path(root, location.path)
    return NormalizedTestCase(
        fully_qualified_name=fully_qualified_name_from_id(test.id),
        display_name=test.name,
        source_path=source_path,
        line_number=location.line,
        runner_id=test.id,
        xml_class_name=xml_class_name(test, parent_map),
        execution_path=execution_path(source_path, test.id),
        executor_uri=executor_uri,
        is_workspace=is_workspace,
    )


def normalize_discovery(
    batches: Iterable[DiscoveryBatch],
    sink: TestCaseSink | None = None,
    *,
    settings: DiscoveryConfig | None = None,
) -> DiscoveryResult | None:
    """Normalize every test of every batch, in order.

    Each test case is pushed to ``sink`` as soon as it is built. Returns
    ``None`` when there were no batches at all, so callers can tell
    "discovery never ran" from "discovery ran and found nothing".
    """
    batches = list(batches)
    if not batches:
        log.info("discovery.no_input")
        return None

    settings = settings or DiscoveryConfig()
    executor_uri = settings.resolved_executor_uri

    test_cases: list[NormalizedTestCase] = []
    failures: list[ParseFailure] = []

    for batch in batches:
        # Parent ids are only meaningful within their own batch
        parent_map = build_parent_map(batch)
        for test in batch.tests:
            outcome = normalize_test(
                test,
                batch.root,
                parent_map,
                executor_uri=executor_uri,
                is_workspace=settings.is_workspace,
            )
            if isinstance(outcome, ParseFailure):
                failures.append(outcome)
                log.warning("discovery.test_parse_failed", **outcome.to_dict())
                continue

            log.info(
                "discovery.test_found",
                name=outcome.display_name,
                source=outcome.source_path,
                line=outcome.line_number,
            )
            if sink is not None:
                sink.send_test_case(outcome)
            test_cases.append(outcome)

    log.info(
        "discovery.normalized",
        batches=len(batches),
        tests=len(test_cases),
        failures=len(failures),
    )
    return DiscoveryResult(
        test_cases=tuple(test_cases),
        failures=tuple(failures),
        batch_count=len(batches),
    )

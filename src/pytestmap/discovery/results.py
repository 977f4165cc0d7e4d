"""Correlate JUnit XML results with discovered test cases.

pytest's JUnit report names a test by ``classname`` (dotted container
chain) and ``name``; discovery records carry the same pair as
``xml_class_name`` and ``display_name``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable

import structlog

from pytestmap.core.errors import DiscoveryError
from pytestmap.discovery.models import (
    CorrelationReport,
    JunitTestCase,
    MatchedResult,
    NormalizedTestCase,
)

log = structlog.get_logger()

ResultKey = tuple[str, str]


def parse_junit_testcases(content: str, *, source: str = "<string>") -> list[JunitTestCase]:
    """Parse every ``<testcase>`` of a JUnit XML report."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DiscoveryError.junit_parse_error(source, str(e)) from e

    suites = list(root) if root.tag == "testsuites" else [root]
    cases: list[JunitTestCase] = []

    for suite in suites:
        for testcase in suite.iter("testcase"):
            failure = testcase.find("failure")
            error = testcase.find("error")
            skipped = testcase.find("skipped")

            if failure is not None:
                status = "failed"
                message = failure.get("message")
            elif error is not None:
                status = "error"
                message = error.get("message")
            elif skipped is not None:
                status = "skipped"
                message = skipped.get("message")
            else:
                status = "passed"
                message = None

            cases.append(
                JunitTestCase(
                    name=testcase.get("name", ""),
                    classname=testcase.get("classname", ""),
                    status=status,
                    duration_seconds=float(testcase.get("time") or 0),
                    message=message,
                )
            )

    return cases


def result_key(test_case: NormalizedTestCase) -> ResultKey:
    return (test_case.xml_class_name, test_case.display_name)


def match_results(
    test_cases: Iterable[NormalizedTestCase],
    junit_cases: Iterable[JunitTestCase],
) -> CorrelationReport:
    """Pair each JUnit testcase with the discovered test it reports on.

    Discovered tests sharing a key are paired with that key's results in
    order; once they are used up, further results for the key pair with the
    last of them. Discovered tests with no result are returned as ``not_run``.
    """
    index: dict[ResultKey, list[NormalizedTestCase]] = {}
    for test_case in test_cases:
        index.setdefault(result_key(test_case), []).append(test_case)

    matches: list[MatchedResult] = []
    consumed: dict[ResultKey, int] = {}
    for result in junit_cases:
        key = (result.classname, result.name)
        candidates = index.get(key)
        test_case = None
        if candidates:
            position = consumed.get(key, 0)
            test_case = candidates[min(position, len(candidates) - 1)]
            consumed[key] = position + 1
        else:
            log.debug("results.unmatched", classname=result.classname, name=result.name)
        matches.append(MatchedResult(result=result, test_case=test_case))

    not_run = tuple(
        tc for key, candidates in index.items() for tc in candidates[consumed.get(key, 0) :]
    )
    return CorrelationReport(matches=tuple(matches), not_run=not_run)

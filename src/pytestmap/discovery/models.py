"""Discovery subsystem models.

Raw shapes mirror the pytest discovery report; normalized shapes are what
the test explorer consumes. Every model is frozen: records are handed to a
sink and then owned by the caller.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from pytestmap.core.errors import ErrorCode

# =============================================================================
# Raw discovery report
# =============================================================================


@dataclass(frozen=True, slots=True)
class RawParent:
    """A container node (folder, file, module, class, function) in the report."""

    id: str
    parentid: str | None
    kind: str  # Free-form: "folder", "file", "module", "class", "function", ...
    name: str


@dataclass(frozen=True, slots=True)
class RawTest:
    """A single discovered test as reported by the runner."""

    id: str  # "<file-path>::<segment>[::<segment>...]"
    parentid: str | None
    name: str
    source: str  # "<path>:<line>"
    markers: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DiscoveryBatch:
    """Output of one discovery invocation (one project root)."""

    root: str
    tests: tuple[RawTest, ...] = ()
    parents: tuple[RawParent, ...] = ()
    rootid: str = "."


# =============================================================================
# Normalized output
# =============================================================================


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A parsed ``path:line`` source reference."""

    path: str
    line: int


@dataclass(frozen=True, slots=True)
class NormalizedTestCase:
    """A test case ready for the explorer and for result matching."""

    fully_qualified_name: str
    display_name: str
    source_path: str  # Absolute, case-folded
    line_number: int
    runner_id: str  # As reported by the runner, used to re-invoke the test
    xml_class_name: str  # Matches the JUnit report's classname attribute
    execution_path: str
    executor_uri: str
    is_workspace: bool

    @property
    def code_file_path(self) -> str:
        return self.source_path

    def to_dict(self) -> dict[str, Any]:
        return {
            "fully_qualified_name": self.fully_qualified_name,
            "display_name": self.display_name,
            "source_path": self.source_path,
            "line_number": self.line_number,
            "runner_id": self.runner_id,
            "xml_class_name": self.xml_class_name,
            "execution_path": self.execution_path,
            "executor_uri": self.executor_uri,
            "is_workspace": self.is_workspace,
        }


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """A discovered test that could not be normalized."""

    code: ErrorCode
    runner_id: str
    source: str
    reason: str
    batch_root: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.code.name,
            "runner_id": self.runner_id,
            "source": self.source,
            "reason": self.reason,
            "batch_root": self.batch_root,
        }


@dataclass(frozen=True, slots=True)
class DiscoveryResult:
    """Everything produced by one normalization pass.

    An empty ``test_cases`` means discovery ran and found nothing usable;
    "no discovery ran" is signalled by the normalizer returning ``None``.
    """

    test_cases: tuple[NormalizedTestCase, ...] = ()
    failures: tuple[ParseFailure, ...] = ()
    batch_count: int = 0

    def __len__(self) -> int:
        return len(self.test_cases)

    def __iter__(self) -> Iterator[NormalizedTestCase]:
        return iter(self.test_cases)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)


# =============================================================================
# Result correlation
# =============================================================================


@dataclass(frozen=True, slots=True)
class JunitTestCase:
    """A single ``<testcase>`` element from a JUnit XML report."""

    name: str
    classname: str
    status: str  # "passed", "failed", "skipped", "error"
    duration_seconds: float = 0.0
    message: str | None = None


@dataclass(frozen=True, slots=True)
class MatchedResult:
    """A JUnit testcase paired with the discovered test it belongs to."""

    result: JunitTestCase
    test_case: NormalizedTestCase | None = None

    @property
    def matched(self) -> bool:
        return self.test_case is not None


@dataclass(frozen=True, slots=True)
class CorrelationReport:
    """Outcome of matching a JUnit report against discovered tests."""

    matches: tuple[MatchedResult, ...] = ()
    not_run: tuple[NormalizedTestCase, ...] = ()

    @property
    def unmatched(self) -> tuple[MatchedResult, ...]:
        return tuple(m for m in self.matches if not m.matched)

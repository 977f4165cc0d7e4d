"""Push-style receivers for normalized test cases."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from pytestmap.discovery.models import NormalizedTestCase


@runtime_checkable
class TestCaseSink(Protocol):
    """Receives each test case as soon as it is normalized."""

    def send_test_case(self, test_case: NormalizedTestCase) -> None: ...


class ListSink:
    """Collects test cases in emission order."""

    def __init__(self) -> None:
        self.test_cases: list[NormalizedTestCase] = []

    def send_test_case(self, test_case: NormalizedTestCase) -> None:
        self.test_cases.append(test_case)

    def __len__(self) -> int:
        return len(self.test_cases)


class CallbackSink:
    """Forwards each test case to a callable."""

    def __init__(self, callback: Callable[[NormalizedTestCase], None]) -> None:
        self._callback = callback

    def send_test_case(self, test_case: NormalizedTestCase) -> None:
        self._callback(test_case)

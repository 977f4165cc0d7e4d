"""Shared fixtures for discovery tests."""

from __future__ import annotations

from typing import Any

import pytest

from pytestmap.discovery.models import DiscoveryBatch, RawParent, RawTest

PROJECT_ROOT = "/home/dev/Proj"


@pytest.fixture
def sample_report() -> list[dict[str, Any]]:
    """A discovery report with a class, a bare function and a parametrized test."""
    return [
        {
            "rootid": ".",
            "root": PROJECT_ROOT,
            "parents": [
                {"id": "./tests", "kind": "folder", "name": "tests", "parentid": "."},
                {
                    "id": "./tests/test_math.py",
                    "kind": "file",
                    "name": "test_math.py",
                    "parentid": "./tests",
                },
                {
                    "id": "./tests/test_math.py::TestAdd",
                    "kind": "suite",
                    "name": "TestAdd",
                    "parentid": "./tests/test_math.py",
                },
                {
                    "id": "./tests/test_math.py::test_param",
                    "kind": "function",
                    "name": "test_param",
                    "parentid": "./tests/test_math.py",
                },
            ],
            "tests": [
                {
                    "id": "./tests/test_math.py::TestAdd::test_small",
                    "name": "test_small",
                    "source": "./tests/test_math.py:5",
                    "markers": [],
                    "parentid": "./tests/test_math.py::TestAdd",
                },
                {
                    "id": "./tests/test_math.py::test_top",
                    "name": "test_top",
                    "source": "./tests/test_math.py:12",
                    "markers": ["slow"],
                    "parentid": "./tests/test_math.py",
                },
                {
                    "id": "./tests/test_math.py::test_param[1]",
                    "name": "test_param[1]",
                    "source": "./tests/test_math.py:20",
                    "markers": [],
                    "parentid": "./tests/test_math.py::test_param",
                },
            ],
        }
    ]


@pytest.fixture
def sample_batch() -> DiscoveryBatch:
    """The sample report's batch built directly from models."""
    return DiscoveryBatch(
        root=PROJECT_ROOT,
        parents=(
            RawParent(id="./tests", parentid=".", kind="folder", name="tests"),
            RawParent(
                id="./tests/test_math.py",
                parentid="./tests",
                kind="file",
                name="test_math.py",
            ),
            RawParent(
                id="./tests/test_math.py::TestAdd",
                parentid="./tests/test_math.py",
                kind="suite",
                name="TestAdd",
            ),
            RawParent(
                id="./tests/test_math.py::test_param",
                parentid="./tests/test_math.py",
                kind="function",
                name="test_param",
            ),
        ),
        tests=(
            RawTest(
                id="./tests/test_math.py::TestAdd::test_small",
                parentid="./tests/test_math.py::TestAdd",
                name="test_small",
                source="./tests/test_math.py:5",
            ),
            RawTest(
                id="./tests/test_math.py::test_top",
                parentid="./tests/test_math.py",
                name="test_top",
                source="./tests/test_math.py:12",
                markers=("slow",),
            ),
            RawTest(
                id="./tests/test_math.py::test_param[1]",
                parentid="./tests/test_math.py::test_param",
                name="test_param[1]",
                source="./tests/test_math.py:20",
            ),
        ),
    )

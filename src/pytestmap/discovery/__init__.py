"""Discovery module - pytest discovery output to test explorer records."""

from pytestmap.discovery.models import (
    DiscoveryBatch,
    DiscoveryResult,
    NormalizedTestCase,
    ParseFailure,
    RawParent,
    RawTest,
)
from pytestmap.discovery.normalizer import normalize_discovery
from pytestmap.discovery.reader import load_discovery_report, parse_discovery_report
from pytestmap.discovery.sink import CallbackSink, ListSink, TestCaseSink

__all__ = [
    "normalize_discovery",
    "load_discovery_report",
    "parse_discovery_report",
    "DiscoveryBatch",
    "DiscoveryResult",
    "NormalizedTestCase",
    "ParseFailure",
    "RawParent",
    "RawTest",
    "TestCaseSink",
    "ListSink",
    "CallbackSink",
]

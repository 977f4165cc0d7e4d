"""Configuration constants.

Values that are identifiers shared with the consuming test explorer and
should NOT be user-configurable.
"""

PROJECT_EXECUTOR_URI = "executor://PythonTestExecutor/v1"
"""Executor identity attached to test cases discovered inside a project."""

WORKSPACE_EXECUTOR_URI = "executor://PythonWorkspaceTestExecutor/v1"
"""Executor identity attached to test cases discovered in an open folder."""

CONFIG_DIR_NAME = ".pytestmap"
"""Per-repository configuration directory."""

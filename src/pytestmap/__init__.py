"""pytestmap - pytest discovery output to uniquely identified test cases."""

__version__ = "0.1.0"

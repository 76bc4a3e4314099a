"""
Pytest configuration and shared fixtures for jsonrpc-envelope tests.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jsonrpc_envelope.telemetry.logging import reset_loggers  # noqa: E402


# =============================================================================
# Message Fixtures
# =============================================================================


@pytest.fixture
def request_text() -> str:
    """A request with integer id."""
    return '{"jsonrpc":"2.0","method":"update","id":123}'


@pytest.fixture
def success_text() -> str:
    """A success reply with string id."""
    return '{"jsonrpc":"2.0","result":"OK","id":"123"}'


@pytest.fixture
def request_batch_text() -> str:
    """Mixed request batch with two invalid members."""
    return """[
        {"jsonrpc": "2.0", "method": "sum", "params": [1,2,4], "id": "1"},
        {"jsonrpc": "2.0", "method": "notify_hello", "params": [7]},
        {"jsonrpc": "2.0", "method": "subtract", "params": [42,23], "id": "2"},
        {"foo": "boo"},
        {"jsonrpc": "2.0", "method": "foo.get", "params": {"name": "myself"}, "id": "5"},
        {"jsonrpc": "1.0", "method": "get_data", "id": "9"}
    ]"""


@pytest.fixture
def reply_batch_text() -> str:
    """Batch of replies."""
    return """[
        {"jsonrpc": "2.0", "result": 7, "id": "1"},
        {"jsonrpc": "2.0", "result": 19, "id": "2"},
        {"jsonrpc": "2.0", "error": {"code": -32600, "message": "Invalid Request"}, "id": null},
        {"jsonrpc": "2.0", "error": {"code": -32601, "message": "Method not found"}, "id": 5},
        {"jsonrpc": "2.0", "result": ["hello", 5], "id": "9"}
    ]"""


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a YAML config file and return its path."""

    def _write(data: dict[str, Any], name: str = "jsonrpc-envelope.yaml") -> Path:
        path = tmp_path / name
        with path.open("w") as f:
            yaml.safe_dump(data, f)
        return path

    return _write


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def clean_loggers():
    """Reset logger state before and after a test."""
    reset_loggers()
    yield
    reset_loggers()


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "fuzz: Fuzz tests")

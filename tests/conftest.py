import os
from pathlib import Path

import pytest
from loguru import logger


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: mark slow tests (use --run-slow)"
    )


def pytest_collection_modifyitems(config, items):
    # Slow tests - CLI flag or env var
    run_slow = (
        config.getoption("--run-slow")
        or os.getenv("CHECKSUMS_RUN_SLOW_TESTS") == "1"
    )
    if not run_slow:
        skip_slow = pytest.mark.skip(
            reason="slow tests skipped (use --run-slow or CHECKSUMS_RUN_SLOW_TESTS=1)"
        )
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure tests run without CHECKSUMS_* variables and with plain output."""
    for k in [k for k in os.environ if k.startswith("CHECKSUMS_")]:
        monkeypatch.delenv(k, raising=False)
    monkeypatch.setenv("CHECKSUMS_NO_RICH", "1")
    yield


@pytest.fixture
def reset_logger():
    """Drop sinks added by setup_logging so later tests start clean."""
    yield
    logger.remove()


@pytest.fixture
def make_tree(tmp_path):
    """Create files from a ``{relative path: content}`` mapping.

    Returns the root directory.
    """

    def _make(files: dict[str, bytes | str], root_name: str = "tree") -> Path:
        root = tmp_path / root_name
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                content = content.encode("utf-8")
            path.write_bytes(content)
        return root

    return _make

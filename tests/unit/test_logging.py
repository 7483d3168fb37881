from __future__ import annotations

import logging

import pytest

from credential_guard.infrastructure.logging import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("DEBUG", logging.DEBUG),
        (" warning ", logging.WARNING),
        ("error", logging.ERROR),
        ("", logging.INFO),
        ("   ", logging.INFO),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_log_level(level: str, expected: int) -> None:
    assert resolve_log_level(level) == expected


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        assert configure_logging(level="warning") == logging.WARNING
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)

from __future__ import annotations

import pytest

from credential_guard.domain.auth.password_policy import is_password_strong


@pytest.mark.parametrize(
    "password",
    ["Abcdef1!", "Zz9 zzzz", "ÄbcdefG1#", "P@ssw0rd-long-enough"],
)
def test_strong_passwords(password: str) -> None:
    assert is_password_strong(password) is True


@pytest.mark.parametrize(
    "password",
    [
        None,
        "",
        "abc",
        "Ab1!",
        "Abcde1!",
        "ABCDEFGH",
        "abcdefgh",
        "Abcdefgh",
        "Abcdefg1",
        "abcdefg1!",
        "ABCDEFG1!",
        "Abcdefg!!",
    ],
)
def test_weak_passwords(password: str | None) -> None:
    assert is_password_strong(password) is False


def test_classification_is_deterministic() -> None:
    assert [is_password_strong("Abcdef1!") for _ in range(5)] == [True] * 5

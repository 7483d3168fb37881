"""Password strength policy and generator alphabet."""

from __future__ import annotations

import string

MIN_PASSWORD_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*()"
PASSWORD_ALPHABET = (
    string.ascii_uppercase + string.ascii_lowercase + string.digits + SPECIAL_CHARACTERS
)


def is_password_strong(password: str | None) -> bool:
    """Classify one password as strong.

    A strong password has at least ``MIN_PASSWORD_LENGTH`` characters and
    contains an uppercase letter, a lowercase letter, a decimal digit and one
    character that is neither a letter nor a digit.
    """

    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        return False

    has_upper = False
    has_lower = False
    has_digit = False
    has_special = False
    for char in password:
        if char.isupper():
            has_upper = True
        if char.islower():
            has_lower = True
        if char.isdecimal():
            has_digit = True
        if not (char.isalpha() or char.isdecimal()):
            has_special = True

    return has_upper and has_lower and has_digit and has_special

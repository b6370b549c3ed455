from __future__ import annotations

import re
from typing import Any

NAME_MIN_LENGTH = 4
NAME_PATTERN = r"^[a-z0-9]+$"
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
PASSWORD_MIN_LENGTH = 6

MSG_NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters"
MSG_NAME_CHARSET = "Name must contain only lowercase letters and numbers"
MSG_EMAIL_INVALID = "Invalid email"
MSG_PASSWORD_TOO_SHORT = f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
MSG_PASSWORDS_DIFFER = "Passwords do not match"

_name_re = re.compile(NAME_PATTERN)
_email_re = re.compile(EMAIL_PATTERN)


def check_name(name: Any) -> str | None:
    if not isinstance(name, str) or len(name) < NAME_MIN_LENGTH:
        return MSG_NAME_TOO_SHORT
    if not _name_re.fullmatch(name):
        return MSG_NAME_CHARSET
    return None


def check_email(email: Any) -> str | None:
    if not isinstance(email, str) or not _email_re.fullmatch(email):
        return MSG_EMAIL_INVALID
    return None


def check_password(password: Any) -> str | None:
    if not isinstance(password, str) or len(password) < PASSWORD_MIN_LENGTH:
        return MSG_PASSWORD_TOO_SHORT
    return None

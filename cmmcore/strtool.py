"""Small string helpers."""

from __future__ import annotations

import random
import string

_ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits


def trim_right_space(s: str) -> str:
    """Strip trailing carriage returns, newlines, tabs and spaces."""
    return s.rstrip("\r\n\t ")


def random_string(length: int) -> str:
    """Random string of ASCII letters and digits."""
    return "".join(random.choices(_ALPHANUMERIC, k=max(length, 0)))


def compare_strings(str1: str, str2: str) -> bool:
    """Case-sensitive equality."""
    return str1 == str2


def _fold_forms(ch: str) -> set[str]:
    forms = {ch}
    for mapped in (ch.lower(), ch.upper()):
        if len(mapped) == 1:
            forms.add(mapped)
            lower = mapped.lower()
            if len(lower) == 1:
                forms.add(lower)
    return forms


def compare_strings_ignore_case(str1: str, str2: str) -> bool:
    """Equality under simple per-character case folding."""
    if len(str1) != len(str2):
        return False
    return all(
        a == b or _fold_forms(a) & _fold_forms(b) for a, b in zip(str1, str2)
    )
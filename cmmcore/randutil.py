"""Random numbers, strings, bytes and identifiers."""

from __future__ import annotations

import random
import secrets
import uuid

from cmmcore.mathutil import round_to_float

NUMERAL = "0123456789"
LOWER_LETTERS = "abcdefghijklmnopqrstuvwxyz"
UPPER_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LETTERS = LOWER_LETTERS + UPPER_LETTERS
SYMBOL_CHARS = "!@#$%^&*()_+-=[]{}|;':\",./<>?"


def rand_int(min_value: int, max_value: int) -> int:
    """Random integer in [min, max); bounds may be given in either order."""
    if min_value == max_value:
        return min_value
    if max_value < min_value:
        min_value, max_value = max_value, min_value
    return random.randrange(min_value, max_value)


def rand_float(min_value: float, max_value: float, precision: int) -> float:
    """Random float in [min, max) rounded to the given precision."""
    if min_value == max_value:
        return min_value
    if max_value < min_value:
        min_value, max_value = max_value, min_value
    n = random.random() * (max_value - min_value) + min_value
    return round_to_float(n, precision)


def rand_bytes(length: int) -> bytes:
    """Cryptographically random bytes; empty for a length below one."""
    if length < 1:
        return b""
    return secrets.token_bytes(length)


def _random(chars: str, length: int) -> str:
    if length < 0:
        raise ValueError("length must not be negative")
    if not chars:
        return ""
    return "".join(random.choices(chars, k=length))


def rand_string(length: int) -> str:
    return _random(LETTERS, length)


def rand_upper(length: int) -> str:
    return _random(UPPER_LETTERS, length)


def rand_lower(length: int) -> str:
    return _random(LOWER_LETTERS, length)


def rand_numeral(length: int) -> str:
    return _random(NUMERAL, length)


def rand_numeral_or_letter(length: int) -> str:
    return _random(NUMERAL + LETTERS, length)


def rand_symbol_char(length: int) -> str:
    return _random(SYMBOL_CHARS, length)


def uuid_v4() -> str:
    """Random version 4 UUID in its canonical text form."""
    return str(uuid.uuid4())


def rand_unique_int_slice(n: int, min_value: int, max_value: int) -> list[int]:
    """Up to n distinct random integers from [min, max)."""
    if min_value > max_value:
        return []
    n = min(n, max_value - min_value)
    return random.sample(range(min_value, max_value), n)


def rand_floats(n: int, min_value: float, max_value: float, precision: int) -> list[float]:
    """n distinct random floats from [min, max) at the given precision."""
    seen: set[float] = set()
    result: list[float] = []
    while len(result) < n:
        r = rand_float(min_value, max_value, precision)
        if r in seen:
            continue
        seen.add(r)
        result.append(r)
    return result
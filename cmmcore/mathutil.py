"""Numeric helpers: rounding, aggregates, ranges and small number theory."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _round_half_away(v: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    if not math.isfinite(v):
        return v
    t = float(math.trunc(v))
    if abs(v - t) >= 0.5:
        t += math.copysign(1.0, v)
    return t


def _scale(x: float, n: int) -> tuple[float, float]:
    tmp = math.pow(10.0, n)
    if _is_int(x):
        return float(x * int(tmp)), tmp
    return float(x * tmp), tmp


def _format_fixed(value: float, n: int) -> str:
    if n >= 0:
        return f"{value:.{n}f}"
    return format(Decimal(repr(value)), "f")


def _rem(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _quot(a: int, b: int) -> int:
    """Integer quotient truncated toward zero."""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def exponent(x: int, n: int) -> int:
    """Compute x to the power n by repeated squaring."""
    if n == 0:
        return 1
    half = -((-n) // 2) if n < 0 else n // 2
    t = exponent(x, half)
    if n > 0 and n % 2 == 1:
        return t * t * x
    return t * t


def fibonacci(first: int, second: int, n: int) -> int:
    """Return the n-th number of the sequence seeded with first and second."""
    if n <= 0:
        return 0
    while n > 3:
        first, second = second, first + second
        n -= 1
    if n < 3:
        return 1
    return first + second


def factorial(x: int) -> int:
    """Compute x!."""
    if x < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    while x > 1:
        result *= x
        x -= 1
    return result


def percent(val: float, total: float, n: int) -> float:
    """Percentage of val in total, rounded to n decimals."""
    if total == 0:
        return 0.0
    return round_to_float(val / total * 100, n)


def round_to_string(x: float, n: int) -> str:
    """Round to n decimals and format with exactly n decimals."""
    scaled, tmp = _scale(x, n)
    return _format_fixed(_round_half_away(scaled) / tmp, n)


def round_to_float(x: float, n: int) -> float:
    """Round to n decimals, halves away from zero."""
    scaled, tmp = _scale(x, n)
    return _round_half_away(scaled) / tmp


def trunc_round(x: float, n: int) -> float:
    """Cut off everything after n decimals."""
    float_str = f"{float(x):.{max(n + 1, 0)}f}"
    whole, sep, frac = float_str.partition(".")
    if not sep or n >= len(frac):
        new_float = float_str
    else:
        new_float = f"{whole}.{frac[:n]}"
    result = float(new_float)
    return int(result) if _is_int(x) else result


def floor_to_float(x: float, n: int) -> float:
    """Round down to n decimals."""
    scaled, tmp = _scale(x, n)
    return math.floor(scaled) / tmp


def floor_to_string(x: float, n: int) -> str:
    """Round down to n decimals and format with n decimals."""
    scaled, tmp = _scale(x, n)
    return _format_fixed(math.floor(scaled) / tmp, n)


def ceil_to_float(x: float, n: int) -> float:
    """Round up to n decimals."""
    scaled, tmp = _scale(x, n)
    return math.ceil(scaled) / tmp


def ceil_to_string(x: float, n: int) -> str:
    """Round up to n decimals and format with n decimals."""
    scaled, tmp = _scale(x, n)
    return _format_fixed(math.ceil(scaled) / tmp, n)


def max_value(*args: float) -> float:
    """Return the largest of the numbers."""
    if not args:
        raise ValueError("max_value requires at least one number")
    result = args[0]
    for v in args:
        if result < v:
            result = v
    return result


def max_by(items: Sequence[T], comparator: Callable[[T, T], bool]) -> T | None:
    """Return the item the comparator ranks highest, None when empty."""
    if not items:
        return None
    result = items[0]
    for v in items[1:]:
        if comparator(v, result):
            result = v
    return result


def min_value(*args: float) -> float:
    """Return the smallest of the numbers."""
    if not args:
        raise ValueError("min_value requires at least one number")
    result = args[0]
    for v in args:
        if result > v:
            result = v
    return result


def min_by(items: Sequence[T], comparator: Callable[[T, T], bool]) -> T | None:
    """Return the item the comparator ranks lowest, None when empty."""
    if not items:
        return None
    result = items[0]
    for v in items[1:]:
        if comparator(v, result):
            result = v
    return result


def sum_numbers(*args: float) -> float:
    """Return the sum of the numbers."""
    return sum(args)


def average(*args: float) -> float:
    """Return the mean; integer input gives a truncated integer mean."""
    if not args:
        raise ZeroDivisionError("average of no numbers")
    total = sum(args)
    if all(_is_int(v) for v in args):
        return _quot(total, len(args))
    return total / len(args)


def range_count(start: float, count: int) -> list[float]:
    """Return abs(count) consecutive numbers beginning at start."""
    return [start + i for i in range(abs(count))]


def range_with_step(start: float, end: float, step: float) -> list[float]:
    """Return numbers from start up to but excluding end, step apart."""
    if start >= end or step == 0:
        return []
    if step < 0:
        raise ValueError("step must be positive when start < end")
    result = []
    i = start
    while i < end:
        result.append(i)
        i += step
    return result


def angle_to_radian(angle: float) -> float:
    return angle * (math.pi / 180)


def radian_to_angle(radian: float) -> float:
    return radian * (180 / math.pi)


def point_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt(math.pow(x1 - x2, 2) + math.pow(y1 - y2, 2))


def is_prime(n: int) -> bool:
    """Tell whether n is a prime number."""
    if n < 2:
        return False
    return all(n % i != 0 for i in range(2, math.isqrt(n) + 1))


def _gcd(a: int, b: int) -> int:
    while b != 0:
        a, b = b, _rem(a, b)
    return a


def gcd(*args: int) -> int:
    """Greatest common divisor of the integers."""
    if not args:
        raise ValueError("gcd requires at least one integer")
    result = args[0]
    for v in args:
        result = _gcd(v, result)
        if result == 1:
            return 1
    return result


def lcm(*args: int) -> int:
    """Least common multiple of the integers, all of them non-zero."""
    if not args:
        raise ValueError("lcm requires at least one integer")
    result = args[0]
    for v in args:
        if v == 0 or result == 0:
            raise ValueError("lcm function: provide non zero integers only.")
        result = _quot(v * result, _gcd(v, result))
    return result


def cos(radian: float, precision: int = 3) -> float:
    """Approximate cosine, truncated to the given number of decimals."""
    radian *= 1.0 / (2.0 * math.pi)
    radian -= 0.25 + math.floor(radian + 0.25)
    radian *= 16.0 * (abs(radian) - 0.5)
    radian += 0.225 * radian * (abs(radian) - 1.0)
    return trunc_round(radian, precision)


def sin(radian: float, precision: int = 3) -> float:
    """Approximate sine, truncated to the given number of decimals."""
    return cos(math.pi / 2 - radian, precision)


def log(n: float, base: float) -> float:
    """Logarithm of n in the given base."""
    return math.log(n) / math.log(base)


def abs_value(x: float) -> float:
    return -x if x < 0 else x


def div(x: float, y: float) -> float:
    """Divide as floats; division by zero gives infinity or NaN."""
    x, y = float(x), float(y)
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y
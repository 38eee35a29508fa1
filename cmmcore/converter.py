"""Conversions between strings, numbers, bytes and tagged dataclasses."""

from __future__ import annotations

import inspect
import json
import math
import re
import struct
import types
from dataclasses import fields, is_dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Union, get_args, get_origin

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_DEC_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(inf|infinity)|nan", re.IGNORECASE)

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1

_TIME_LAYOUT = "%Y/%m/%d %H:%M:%S"

_BUILTIN_HINTS: dict[str, Any] = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "bytes": bytes,
    "list": list,
    "dict": dict,
    "tuple": tuple,
    "set": set,
    "Any": Any,
    "None": type(None),
    "List": list,
    "Dict": dict,
}


def _bits(bit_size: int) -> int:
    if bit_size == 0:
        return 64
    if not 0 < bit_size <= 64:
        raise ValueError(f"invalid bit size {bit_size}")
    return bit_size


def parse_int(text: str, bit_size: int = 0) -> int:
    """Parse a signed base-10 integer that fits in bit_size bits (0 means 64)."""
    bits = _bits(bit_size)
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"parsing {text!r}: invalid syntax")
    value = int(text)
    if not -(1 << (bits - 1)) <= value <= (1 << (bits - 1)) - 1:
        raise ValueError(f"parsing {text!r}: value out of range")
    return value


def parse_uint(text: str, bit_size: int = 0) -> int:
    """Parse an unsigned base-10 integer that fits in bit_size bits (0 means 64)."""
    bits = _bits(bit_size)
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"parsing {text!r}: invalid syntax")
    value = int(text)
    if value > (1 << bits) - 1:
        raise ValueError(f"parsing {text!r}: value out of range")
    return value


def parse_bool(text: str) -> bool:
    """Parse 1, t, T, TRUE, true, True, 0, f, F, FALSE, false or False."""
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"parsing {text!r}: invalid syntax")


def _to_float32(value: float) -> float:
    try:
        return struct.unpack(">f", struct.pack(">f", value))[0]
    except OverflowError:
        raise ValueError("value out of range") from None


def parse_float(text: str, bit_size: int = 64) -> float:
    """Parse a decimal or hexadecimal float; bit_size 32 rounds to single precision."""
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return float(text)
    if _DEC_FLOAT_RE.fullmatch(text):
        value = float(text)
    elif _HEX_FLOAT_RE.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError:
            raise ValueError(f"parsing {text!r}: value out of range") from None
    else:
        raise ValueError(f"parsing {text!r}: invalid syntax")
    if math.isinf(value):
        raise ValueError(f"parsing {text!r}: value out of range")
    if bit_size == 32:
        try:
            return _to_float32(value)
        except ValueError:
            raise ValueError(f"parsing {text!r}: value out of range") from None
    return value


def format_int(num: int) -> str:
    """Base-10 text of an integer."""
    return str(int(num))


def format_bool(value: bool) -> str:
    """Return "true" or "false"."""
    return "true" if value else "false"


def format_float(num: float, bit_size: int = 64) -> str:
    """Shortest exponent form, such as 1.5E+00, that reads back as the same value."""
    single = bit_size == 32
    x = _to_float32(float(num)) if single else float(num)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    text = repr(x)
    for precision in range(17):
        candidate = f"{x:.{precision}e}"
        back = float(candidate)
        if single:
            back = _to_float32(back)
        if back == x:
            text = candidate
            break
    mantissa, _, exp = text.partition("e")
    if "." in mantissa:
        mantissa = mantissa.rstrip("0").rstrip(".")
    return f"{mantissa}E{exp}"


def string_to_chars(s: str) -> list[str]:
    """Split a string into characters; an empty string gives [""]."""
    if not s:
        return [""]
    return list(s)


def _json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def any_to_bytes(value: Any) -> bytes:
    """Binary form of a value: 8 big-endian bytes for numbers, text for the rest."""
    if isinstance(value, bool):
        return format_bool(value).encode()
    if isinstance(value, int):
        if _INT64_MIN <= value <= _INT64_MAX:
            return struct.pack(">q", value)
        if 0 <= value <= _UINT64_MAX:
            return struct.pack(">Q", value)
        raise OverflowError("integer does not fit in 64 bits")
    if isinstance(value, float):
        return struct.pack(">d", value)
    if isinstance(value, str):
        return value.encode()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return _json(value).encode()


def _json_fields(obj: Any) -> dict[str, Any]:
    return {f.metadata["json"]: f for f in fields(obj) if f.metadata.get("json")}


def _lookup_name(name: str, owner: type) -> Any:
    if name in _BUILTIN_HINTS:
        return _BUILTIN_HINTS[name]
    module = inspect.getmodule(owner)
    namespace = vars(module) if module is not None else {}
    found = namespace.get(name)
    if isinstance(found, type):
        return found
    return None


def _resolve(hint: Any, owner: type) -> Any:
    """Turn a field annotation, possibly written as text, into a type or None if unknown."""
    if not isinstance(hint, str):
        return hint
    text = hint.strip()
    if text.startswith("Optional[") and text.endswith("]"):
        inner = _resolve(text[len("Optional["):-1], owner)
        return None if inner is None else Optional[inner]
    parts = [part.strip() for part in text.split("|")]
    if len(parts) > 1:
        resolved = [_resolve(part, owner) for part in parts]
        if any(r is None for r in resolved):
            return None
        return Union[tuple(resolved)]
    base = text.split("[", 1)[0].strip()
    return _lookup_name(base, owner)


def _type_hints(cls: type) -> dict[str, Any]:
    return {f.name: _resolve(f.type, cls) for f in fields(cls)}


def _is_union(hint: Any) -> bool:
    origin = get_origin(hint)
    return origin is Union or origin is getattr(types, "UnionType", None)


def _unwrap(hint: Any) -> Any:
    if _is_union(hint):
        args = [a for a in get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _matches(value: Any, hint: Any) -> bool:
    if hint is None or hint is Any:
        return True
    if _is_union(hint):
        return any(_matches(value, arg) for arg in get_args(hint))
    if hint is type(None):
        return value is None
    target = get_origin(hint) or hint
    if not isinstance(target, type):
        return True
    if isinstance(value, bool) and target is not bool and issubclass(target, int):
        return False
    return isinstance(value, target)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_instance(obj: Any) -> bool:
    return is_dataclass(obj) and not isinstance(obj, type)


def _assign(obj: Any, name: str, key: str, value: Any) -> None:
    try:
        setattr(obj, name, value)
    except AttributeError as exc:
        raise ValueError(f"cannot set {key} field value") from exc


def map_to_object(mapping: Mapping[str, Any], obj: Any) -> None:
    """Set dataclass fields of obj from a mapping keyed by their "json" metadata."""
    if not _is_instance(obj):
        raise TypeError("target must be a dataclass instance")
    by_tag = _json_fields(obj)
    hints = _type_hints(type(obj))
    for key, value in mapping.items():
        f = by_tag.get(key)
        if f is None:
            raise ValueError(f"struct field json tag don't match map key : {key} in obj")
        hint = hints.get(f.name)
        if hint is None:
            current_value = getattr(obj, f.name, None)
            if current_value is not None:
                hint = type(current_value)
        if _matches(value, hint):
            _assign(obj, f.name, key, value)
            continue
        target = _unwrap(hint)
        if target in (int, float) and _is_number(value):
            _assign(obj, f.name, key, target(value))
            continue
        if isinstance(value, dict) and isinstance(target, type) and is_dataclass(target):
            current = getattr(obj, f.name, None)
            if not isinstance(current, target):
                current = target()
                _assign(obj, f.name, key, current)
            map_to_object(value, current)
            continue
        raise TypeError("map value type don't match struct field type")


def _format_fixed(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def as_string(value: Any) -> str:
    """Text form of a value; unknown types become JSON, or "" if that fails."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_fixed(value)
    if isinstance(value, datetime):
        return value.strftime(_TIME_LAYOUT)
    try:
        return _json(value)
    except (TypeError, ValueError):
        return ""


def map_structs(source: Any, destination: Any) -> None:
    """Copy fields of one dataclass into another where their "json" metadata match."""
    if not _is_instance(source) or not _is_instance(destination):
        raise TypeError("source must be a struct, destination must be a pointer to a struct")
    dest_by_tag = _json_fields(destination)
    hints = _type_hints(type(destination))
    for f in fields(source):
        tag = f.metadata.get("json")
        if not tag:
            continue
        df = dest_by_tag.get(tag)
        if df is None:
            continue
        value = getattr(source, f.name)
        if value is None:
            continue
        if _is_instance(value):
            current = getattr(destination, df.name, None)
            target = _unwrap(hints.get(df.name))
            if target is None and _is_instance(current):
                target = type(current)
            if isinstance(target, type) and is_dataclass(target):
                nested = current if isinstance(current, target) else target()
                map_structs(value, nested)
                setattr(destination, df.name, nested)
                continue
        setattr(destination, df.name, value)
"""Helpers for a JSON web service: errors, responses, config, encryption, time and utilities."""

__version__ = "0.1.0"

__all__ = [
    "apperrors",
    "apiwrapper",
    "config",
    "converter",
    "encoder",
    "loglevel",
    "mathutil",
    "randutil",
    "slicetool_ops",
    "slicetool_query",
    "strtool",
    "timeutils",
]
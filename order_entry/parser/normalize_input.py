# -*- coding: utf-8 -*-
"""Input normalization shared by the platform parsers.

All helpers are pure string functions; they never drop content except
whitespace-only lines.
"""

from __future__ import annotations

import re


FULLWIDTH_COMMA = "，"
FULLWIDTH_SEMICOLON = "；"

_SEMICOLON_RUN = re.compile(rf"{FULLWIDTH_SEMICOLON}\s*")
_NEWLINE_RUN = re.compile(r"\n+")


def normalize_commas(text: str) -> str:
    return (text or "").replace(FULLWIDTH_COMMA, ",")


def expand_semicolon_records(text: str) -> str:
    """Rewrite the single-line ``姓名；电话；地址；`` dialect into one field per line.

    Text without a full-width semicolon is returned unchanged.
    """
    s = text or ""
    if FULLWIDTH_SEMICOLON not in s:
        return s
    s = _SEMICOLON_RUN.sub("\n", s)
    s = _NEWLINE_RUN.sub("\n", s)
    return s.strip()


def non_blank_lines(text: str) -> list[str]:
    """Split on newlines and drop whitespace-only lines. Lines are not trimmed."""
    lines = (text or "").replace("\r\n", "\n").split("\n")
    return [line for line in lines if line.strip()]


def last4(value: str) -> str:
    return value[-4:] if len(value) >= 4 else value

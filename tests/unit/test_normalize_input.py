# -*- coding: utf-8 -*-

from order_entry.parser.normalize_input import (
    expand_semicolon_records,
    last4,
    non_blank_lines,
    normalize_commas,
)


def test_normalize_commas() -> None:
    assert normalize_commas("张三，138，地址") == "张三,138,地址"
    assert normalize_commas("") == ""


def test_expand_semicolon_records_rewrites_dialect() -> None:
    assert expand_semicolon_records("王凯；195；山东；") == "王凯\n195\n山东"


def test_expand_semicolon_records_collapses_blank_lines() -> None:
    assert expand_semicolon_records("王凯；\n\n195；  \n山东；") == "王凯\n195\n山东"


def test_expand_semicolon_records_leaves_plain_text() -> None:
    text = "  王凯\n195\n山东  "
    assert expand_semicolon_records(text) == text


def test_non_blank_lines_drops_whitespace_lines() -> None:
    assert non_blank_lines("a\n\n  \nb\r\nc") == ["a", "b", "c"]
    assert non_blank_lines("") == []


def test_last4() -> None:
    assert last4("13800001234") == "1234"
    assert last4("12") == "12"

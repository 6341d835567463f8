# -*- coding: utf-8 -*-
"""
Unit tests for the Douyin (comma-separated) parser.
"""

import pytest

from order_entry.parser.douyin import DouyinParser, split_fields, split_phone


@pytest.fixture
def parser():
    return DouyinParser()


class TestDouyinParse:
    """Tests for DouyinParser.parse."""

    def test_virtual_number_suffix(self, parser):
        """高先生，15782103569-9142，新疆喀什"""
        records = parser.parse("高先生，15782103569-9142，新疆喀什")
        assert len(records) == 1
        r = records[0]
        assert r.name == "高先生"
        assert r.phone == "15782103569"
        assert r.short_label == "高先生-9142"
        assert r.address == "新疆喀什"

    def test_plain_mobile_uses_last_four(self, parser):
        records = parser.parse("张三，13800001234，浙江省 杭州市 西湖区 XX路100号")
        assert records[0].phone == "13800001234"
        assert records[0].short_label == "张三-1234"
        assert records[0].address == "浙江省 杭州市 西湖区 XX路100号"

    def test_address_commas_rejoined(self, parser):
        records = parser.parse("张三，13800001234, 浙江省，杭州市 ,西湖区")
        assert records[0].address == "浙江省,杭州市,西湖区"

    def test_name_and_phone_only(self, parser):
        records = parser.parse("张三,13800001234")
        assert records[0].address == ""
        assert records[0].short_label == "张三-1234"

    @pytest.mark.parametrize("line", ["只有姓名", "张三，，，", "，13800001234，", "   ,  "])
    def test_underflow_lines_skipped(self, parser, line):
        assert parser.parse(line) == []

    def test_skipped_lines_do_not_affect_others(self, parser):
        text = "高先生，15782103569-9142，新疆喀什\n坏行\n\n张三，13800001234，杭州"
        records = parser.parse(text)
        assert [r.short_label for r in records] == ["高先生-9142", "张三-1234"]

    def test_only_first_dash_segment_kept(self, parser):
        records = parser.parse("李四,0416-3860170-5404,辽宁省")
        assert records[0].phone == "0416"
        assert records[0].short_label == "李四-3860170"


class TestHelpers:
    def test_split_fields_normalizes_fullwidth_comma(self):
        assert split_fields(" 高先生 ，15782103569-9142,， 新疆 ") == ["高先生", "15782103569-9142", "新疆"]

    @pytest.mark.parametrize(
        "phone_part, expected",
        [
            ("15782103569-9142", ("15782103569", "-9142")),
            ("13800001234", ("13800001234", "-1234")),
            ("123", ("123", "-123")),
            ("", ("", "")),
        ],
    )
    def test_split_phone(self, phone_part, expected):
        assert split_phone(phone_part) == expected


def test_is_well_formed_is_permissive(parser):
    assert parser.is_well_formed("随便什么内容") is True
    assert parser.is_well_formed("") is False
    assert parser.is_well_formed("  \n") is False

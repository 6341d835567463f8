# -*- coding: utf-8 -*-
"""
抖音 Parser（每行一条，逗号分隔）

格式：姓名，电话[-后四位]，地址
少于 2 个栏位的行直接略过，不报错。
"""

import logging

from order_entry.parser.normalize_input import last4, non_blank_lines, normalize_commas
from order_entry.parser.types import Platform, Record

logger = logging.getLogger(__name__)


def split_fields(line: str) -> list[str]:
    """全形逗号转半形后切割，去除空白与空栏位"""
    parts = [p.strip() for p in normalize_commas(line).split(",")]
    return [p for p in parts if p]


def split_phone(phone_part: str) -> tuple[str, str]:
    """
    拆出电话与标签后缀。

    Returns:
        (phone, suffix):
        - 15782103569-9142 -> ("15782103569", "-9142")
        - 13800001234      -> ("13800001234", "-1234")
    """
    if not phone_part:
        return "", ""
    segments = phone_part.split("-")
    if len(segments) >= 2:
        return segments[0], "-" + segments[1]
    return phone_part, "-" + last4(phone_part)


class DouyinParser:
    """抖音地址解析"""

    platform = Platform.DOUYIN

    def parse(self, text: str) -> list[Record]:
        records: list[Record] = []
        for line in non_blank_lines(text):
            parts = split_fields(line)
            if len(parts) < 2:
                logger.debug(f"Skipping douyin line with {len(parts)} field(s): {line!r}")
                continue

            name = parts[0]
            phone, suffix = split_phone(parts[1])
            records.append(
                Record(
                    short_label=name + suffix,
                    name=name,
                    phone=phone,
                    address=",".join(parts[2:]),
                )
            )
        return records

    def is_well_formed(self, text: str) -> bool:
        return bool(text and text.strip())

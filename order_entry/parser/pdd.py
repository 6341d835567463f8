# -*- coding: utf-8 -*-
"""
拼多多 Parser（固定步长：每 3 行一条）

支持格式：
- 3 行格式：姓名 / 电话 / 地址，多条连续输入
- 分号格式：姓名；电话；地址；（先展开为 3 行格式）
"""

import logging
import re

from order_entry.parser.errors import FormatError
from order_entry.parser.normalize_input import expand_semicolon_records, last4, non_blank_lines
from order_entry.parser.types import Platform, Record

logger = logging.getLogger(__name__)

LINES_PER_RECORD = 3

# 地址末尾的 "；" 或 "[1234]；"
_TRAILING_TAG = re.compile(r"(?:\[[0-9]+\])?；\s*$")


def clean_address(address: str) -> str:
    """清理地址末尾的分号与数字标签"""
    return _TRAILING_TAG.sub("", address).strip()


def generate_short_label(name: str, phone: str) -> str:
    """
    生成短地址标识。

    姓名已带 [] 标签时直接使用，否则为「姓名-电话后四位」。
    """
    if "[" in name and "]" in name:
        return name
    return f"{name}-{last4(phone)}"


class PddParser:
    """拼多多地址解析"""

    platform = Platform.PDD

    def _lines(self, text: str) -> list[str]:
        return non_blank_lines(expand_semicolon_records(text))

    def parse(self, text: str) -> list[Record]:
        """
        解析拼多多地址。

        Raises:
            FormatError: 非空行数不是 3 的倍数
        """
        lines = self._lines(text)
        if len(lines) % LINES_PER_RECORD != 0:
            logger.warning(f"PDD input has {len(lines)} non-blank lines, expected a multiple of 3")
            raise FormatError.line_count(len(lines))

        records: list[Record] = []
        for i in range(0, len(lines), LINES_PER_RECORD):
            name_line = lines[i].strip()
            phone_line = lines[i + 1].strip()
            address_line = clean_address(lines[i + 2].strip())

            records.append(
                Record(
                    short_label=generate_short_label(name_line, phone_line),
                    name=name_line,
                    phone=phone_line,
                    address=address_line,
                )
            )
        return records

    def is_well_formed(self, text: str) -> bool:
        if not text or not text.strip():
            return False
        count = len(self._lines(text))
        return count > 0 and count % LINES_PER_RECORD == 0

# -*- coding: utf-8 -*-
"""
淘宝 Parser（每行一条，倒序解析）

淘宝导出格式最不固定：多数为「地址, 姓名, 电话」，但也会出现
- 无逗号的整串：上海市松江区岳阳街道张珂悦15162592550
- 固话与带后缀手机被拆成两栏：地址, 姓名, 0416-3860170, 17896112393-5404

因此从行尾依正则形状判断电话片段，而不依赖固定栏位。
任何非空行都会产出一条 Record（姓名/电话可能为空字串）。
"""

import logging
from dataclasses import dataclass

from order_entry.parser.normalize_input import last4, non_blank_lines, normalize_commas
from order_entry.parser.phone_patterns import (
    LANDLINE_AT_END,
    NAME_AT_END,
    PHONE_AT_END,
    find_landline_and_mobile,
    is_mobile_with_suffix,
    is_phone_like,
    merge_landline_extension,
)
from order_entry.parser.types import Platform, Record

logger = logging.getLogger(__name__)

# 从行尾最多收集的电话片段数
MAX_PHONE_TOKENS = 2


@dataclass
class LineParts:
    """单行拆解结果（尚未产生标签）"""

    phone: str = ""
    name: str = ""
    address: str = ""


def _token_at(tokens: list[str], index: int) -> str:
    # 负索引视为不存在，不回绕到列表尾端
    return tokens[index] if 0 <= index < len(tokens) else ""


def extract_from_run_on(line: str) -> LineParts:
    """
    解析无逗号的单栏位行：地址 姓名 电话。

    行尾无电话时整行视为地址。
    """
    phone_match = PHONE_AT_END.search(line)
    if not phone_match:
        logger.debug(f"No trailing phone in run-on line, keeping it as address: {line!r}")
        return LineParts(address=line.strip())

    phone = phone_match.group(1)
    before_phone = line[: phone_match.start()].strip()

    # 固话 + 手机-后缀 紧邻时合并为 固话-后缀
    landline_match = LANDLINE_AT_END.search(before_phone)
    if landline_match and is_mobile_with_suffix(phone):
        phone = merge_landline_extension(landline_match.group(1), phone)
        before_phone = before_phone[: landline_match.start()].strip()

    name_match = NAME_AT_END.search(before_phone)
    if not name_match:
        logger.debug(f"No trailing name before phone, keeping remainder as address: {before_phone!r}")
        return LineParts(phone=phone, address=before_phone)

    return LineParts(
        phone=phone,
        name=name_match.group(1),
        address=before_phone[: name_match.start()].strip(),
    )


def extract_from_fields(fields: list[str]) -> LineParts:
    """从行尾倒序收集电话片段，再依序取姓名与地址"""
    index = len(fields) - 1
    phone_tokens: list[str] = []
    while index >= 0 and len(phone_tokens) < MAX_PHONE_TOKENS and is_phone_like(fields[index]):
        phone_tokens.insert(0, fields[index])
        index -= 1

    if not phone_tokens:
        return _fallback_positional(fields)

    if len(phone_tokens) >= 2:
        landline, mobile = find_landline_and_mobile(phone_tokens)
        if landline and mobile:
            phone = merge_landline_extension(landline, mobile)
        else:
            phone = phone_tokens[-1]
    else:
        phone = phone_tokens[0]

    name = _token_at(fields, index)
    index -= 1
    address = ",".join(fields[: max(0, index + 1)]).strip()
    return LineParts(phone=phone, name=name, address=address)


def _fallback_positional(fields: list[str]) -> LineParts:
    # 行尾没有电话形状的栏位：假设为 地址..., 姓名, 电话
    count = len(fields)
    logger.debug(f"No phone-like trailing field among {count} field(s), using positional fallback")
    if count >= 3:
        return LineParts(
            phone=fields[-1],
            name=fields[-2],
            address=",".join(fields[:-2]).strip(),
        )
    return LineParts(
        name=_token_at(fields, count - 1),
        address=",".join(fields[: max(0, count - 1)]).strip(),
    )


def extract_parts(line: str) -> LineParts:
    fields = [p.strip() for p in normalize_commas(line).split(",")]
    fields = [p for p in fields if p]
    if len(fields) == 1:
        return extract_from_run_on(fields[0])
    return extract_from_fields(fields)


def phone_suffix(phone: str) -> str:
    """
    依 "-" 分段数决定标签后缀：
    - 0416-3860170-5404 -> -5404（最后一段）
    - 17896112393-5404  -> -5404（第二段）
    - 15162592550       -> -2550（末 4 位）
    """
    if not phone:
        return ""
    segments = phone.split("-")
    if len(segments) >= 3:
        return "-" + segments[-1]
    if len(segments) == 2:
        return "-" + segments[1]
    return "-" + last4(phone)


class TaobaoParser:
    """淘宝地址解析"""

    platform = Platform.TAOBAO

    def parse(self, text: str) -> list[Record]:
        records: list[Record] = []
        for line in non_blank_lines(text):
            parts = extract_parts(line)
            records.append(
                Record(
                    short_label=parts.name + phone_suffix(parts.phone),
                    name=parts.name,
                    phone=parts.phone,
                    address=parts.address,
                )
            )
        return records

    def is_well_formed(self, text: str) -> bool:
        return bool(text and text.strip())

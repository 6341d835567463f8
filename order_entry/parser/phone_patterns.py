# -*- coding: utf-8 -*-
"""
Phone Token Classification

电话片段的正则分类，供淘宝倒序解析使用：
- 固话：0416-3860170
- 手机：17896112393
- 带后缀手机（虚拟号）：17896112393-5404
"""

import re
from typing import Optional

from order_entry.parser.normalize_input import last4

_LANDLINE = re.compile(r"[0-9]{3,4}-[0-9]{6,8}")
_MOBILE = re.compile(r"1[0-9]{10}")
_MOBILE_WITH_SUFFIX = re.compile(r"1[0-9]{10}-[0-9]{3,4}")
_EXTENSION_AT_END = re.compile(r"-([0-9]{3,4})$")

# 行尾电话：固话(可带分机) 或 手机(可带后缀)
PHONE_AT_END = re.compile(r"([0-9]{3,4}-[0-9]{6,8}(?:-[0-9]{3,4})?|1[0-9]{10}(?:-[0-9]{3,4})?)\s*$")
# 行尾固话（组合情形：固话 手机-后缀）
LANDLINE_AT_END = re.compile(r"([0-9]{3,4}-[0-9]{6,8})\s*$")
# 行尾姓名：2-8 位中文，含 · / •
NAME_AT_END = re.compile(r"([\u4e00-\u9fa5·•]{2,8})\s*$")


def is_landline(value: str) -> bool:
    return _LANDLINE.fullmatch(value) is not None


def is_mobile(value: str) -> bool:
    return _MOBILE.fullmatch(value) is not None


def is_mobile_with_suffix(value: str) -> bool:
    return _MOBILE_WITH_SUFFIX.fullmatch(value) is not None


def is_phone_like(value: str) -> bool:
    """固话、带后缀手机、手机三者之一"""
    return is_landline(value) or is_mobile_with_suffix(value) or is_mobile(value)


def extract_mobile_extension(mobile: str) -> str:
    """取手机号的 -3~4 位后缀；没有后缀时退回末 4 位"""
    match = _EXTENSION_AT_END.search(mobile)
    return match.group(1) if match else last4(mobile)


def merge_landline_extension(landline: str, mobile_with_suffix: str) -> str:
    """0416-3860170 + 17896112393-5404 -> 0416-3860170-5404"""
    return f"{landline}-{extract_mobile_extension(mobile_with_suffix)}"


def find_landline_and_mobile(tokens: list[str]) -> tuple[Optional[str], Optional[str]]:
    """回传 tokens 中第一个固话与第一个带后缀手机（找不到为 None）"""
    landline = next((t for t in tokens if is_landline(t)), None)
    mobile = next((t for t in tokens if is_mobile_with_suffix(t)), None)
    return landline, mobile

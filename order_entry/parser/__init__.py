# -*- coding: utf-8 -*-
"""
Address Parser Module

将电商平台导出的地址文字解析为 Record（短地址标识、姓名、电话、地址）。

主要入口：
- parse(platform: str, text: str) -> list[Record]

Usage:
    from order_entry.parser import parse
    records = parse("dy", "高先生，15782103569-9142，新疆喀什")
"""

from order_entry.parser.errors import (
    FormatError,
    ParserError,
    ParserErrorCode,
    UnsupportedPlatformError,
)
from order_entry.parser.registry import ParserRegistry, PlatformKey, default_registry
from order_entry.parser.types import Platform, Record


def parse(platform: PlatformKey, text: str) -> list[Record]:
    """
    解析地址文字。

    Args:
        platform: 平台代码（pdd / dy / tb）或 Platform
        text: 使用者贴上的原始文字

    Returns:
        list[Record]: 依输入顺序排列的解析结果（可能为空）

    Raises:
        UnsupportedPlatformError: 未知平台
        FormatError: 拼多多行数不是 3 的倍数
    """
    return default_registry.parse(platform, text)


def is_well_formed(platform: PlatformKey, text: str) -> bool:
    return default_registry.is_well_formed(platform, text)


def supported_platforms() -> list[str]:
    return default_registry.supported_platforms()


# Export
__all__ = [
    "parse",
    "is_well_formed",
    "supported_platforms",
    "ParserRegistry",
    "Platform",
    "Record",
    "ParserError",
    "ParserErrorCode",
    "FormatError",
    "UnsupportedPlatformError",
]

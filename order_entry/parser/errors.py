# -*- coding: utf-8 -*-
"""
Parser Error Types

定义地址解析错误类型与讯息模板。
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class ParserErrorCode(Enum):
    """Parser 错误代码"""

    LINE_COUNT_MISMATCH = "line_count_mismatch"     # 行数不是 3 的倍数（拼多多）
    UNSUPPORTED_PLATFORM = "unsupported_platform"   # 未知平台
    EMPTY_INPUT = "empty_input"                     # 空输入
    PARSE_FAILED = "parse_failed"                   # 解析失败（通用）


# 错误讯息模板
ERROR_MESSAGES = {
    ParserErrorCode.LINE_COUNT_MISMATCH: "输入的总行数应为3的倍数（姓名、电话、地址）。当前行数：{count}。请检查后重试。",
    ParserErrorCode.UNSUPPORTED_PLATFORM: "不支持的平台: {platform}",
    ParserErrorCode.EMPTY_INPUT: "请输入地址",
    ParserErrorCode.PARSE_FAILED: "无法提取信息，请检查输入格式",
}


@dataclass
class ParserError(Exception):
    """Parser 解析错误"""

    code: ParserErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: ParserErrorCode, **kwargs) -> "ParserError":
        """从错误代码建立错误物件"""
        template = ERROR_MESSAGES.get(code, "解析错误")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)


class FormatError(ParserError):
    """输入违反平台的结构前提（目前只有拼多多的 3 行规则）"""

    @classmethod
    def line_count(cls, count: int) -> "FormatError":
        return cls.from_code(ParserErrorCode.LINE_COUNT_MISMATCH, count=count)


class UnsupportedPlatformError(ParserError):
    """Registry 收到未知的平台代码"""

    @classmethod
    def for_platform(cls, platform: object) -> "UnsupportedPlatformError":
        return cls.from_code(ParserErrorCode.UNSUPPORTED_PLATFORM, platform=platform)

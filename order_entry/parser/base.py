# -*- coding: utf-8 -*-
"""
RecordParser interface

每个平台实作 parse / is_well_formed，Registry 依平台代码分派。
"""

from typing import Protocol

from order_entry.parser.types import Platform, Record


class RecordParser(Protocol):
    """平台解析器介面（无状态，可跨执行绪共用）"""

    platform: Platform

    def parse(self, text: str) -> list[Record]:
        ...

    def is_well_formed(self, text: str) -> bool:
        ...

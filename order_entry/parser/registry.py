# -*- coding: utf-8 -*-
"""
Parser Registry

平台代码 -> 解析器实例的对照表。解析器皆无状态，模组载入时建立一次即可跨呼叫共用。
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Union

from order_entry.parser.base import RecordParser
from order_entry.parser.douyin import DouyinParser
from order_entry.parser.errors import UnsupportedPlatformError
from order_entry.parser.pdd import PddParser
from order_entry.parser.taobao import TaobaoParser
from order_entry.parser.types import Platform, Record

logger = logging.getLogger(__name__)

PlatformKey = Union[str, Platform]


class ParserRegistry:
    """依平台代码分派解析器"""

    def __init__(self, parsers: Optional[Mapping[Platform, RecordParser]] = None):
        if parsers is None:
            parsers = {
                Platform.PDD: PddParser(),
                Platform.DOUYIN: DouyinParser(),
                Platform.TAOBAO: TaobaoParser(),
            }
        self._parsers = MappingProxyType(dict(parsers))

    def resolve(self, platform: PlatformKey) -> RecordParser:
        """
        取得平台解析器。

        Raises:
            UnsupportedPlatformError: 平台代码不在支援列表
        """
        try:
            key = Platform.from_string(platform)
        except ValueError:
            raise UnsupportedPlatformError.for_platform(platform)
        parser = self._parsers.get(key)
        if parser is None:
            raise UnsupportedPlatformError.for_platform(platform)
        return parser

    def parse(self, platform: PlatformKey, text: str) -> list[Record]:
        """解析并回传 Record 列表；FormatError 原样向上传递"""
        parser = self.resolve(platform)
        records = parser.parse(text)
        logger.info(f"Parsed {len(records)} record(s) for platform {parser.platform.value}")
        return records

    def is_well_formed(self, platform: PlatformKey, text: str) -> bool:
        try:
            parser = self.resolve(platform)
        except UnsupportedPlatformError:
            return False
        return parser.is_well_formed(text)

    def supported_platforms(self) -> list[str]:
        return [p.value for p in self._parsers]


default_registry = ParserRegistry()

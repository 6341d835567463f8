# -*- coding: utf-8 -*-
"""
Platform Enum and Record type

定义平台代码与解析结果，Parser、订单组装与导出共用。
"""

from dataclasses import dataclass
from enum import Enum


class Platform(Enum):
    """电商平台代码"""

    PDD = "pdd"       # 拼多多：每 3 行一条
    DOUYIN = "dy"     # 抖音：每行一条，姓名，电话，地址
    TAOBAO = "tb"     # 淘宝：每行一条，地址, 姓名, 电话（倒序）

    @classmethod
    def from_string(cls, value: "str | Platform") -> "Platform":
        """从字串转换为 Platform"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown platform: {value}")


@dataclass(frozen=True)
class Record:
    """单条地址解析结果"""

    short_label: str    # 短地址标识，例如 "张三-1234" 或 "王凯[9989]"
    name: str           # 原始姓名
    phone: str          # 电话（可含分机/虚拟号后缀）
    address: str        # 详细地址

    def to_dict(self) -> dict:
        """转换为字典格式"""
        return {
            "short_label": self.short_label,
            "name": self.name,
            "phone": self.phone,
            "address": self.address,
        }

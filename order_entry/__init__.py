# -*- coding: utf-8 -*-
"""智能地址订单管理 - 地址解析、订单组装与导出"""

__version__ = "1.0.0"

# -*- coding: utf-8 -*-
"""
Text / CSV Export

产生可复制的文字结果与 CSV 内容（字串），不负责写档或下载。
"""

import csv
import io
import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence

from order_entry import config
from order_entry.orders import FinalOrder
from order_entry.parser.types import Platform, Record
from order_entry.shared.product_catalog import Catalog, load_catalog

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"
NO_ORDER_INFO = "无订单信息"
SYSTEM_NAME = "智能地址订单管理系统"


def labels_text(records: Iterable[Record]) -> str:
    """短地址标识，每行一条"""
    return "\n".join(r.short_label for r in records)


def final_text(orders: Iterable[FinalOrder]) -> str:
    """最终订单结果，每行一条"""
    return "\n".join(o.full_result for o in orders)


def _writer(buffer: io.StringIO, quoting: int):
    return csv.writer(buffer, quoting=quoting, lineterminator="\n")


def _with_bom(content: str, include_bom: Optional[bool]) -> str:
    if include_bom is None:
        include_bom = config.CSV_INCLUDE_BOM
    return (UTF8_BOM + content) if include_bom else content


def orders_to_csv(orders: Sequence[FinalOrder], *, include_bom: Optional[bool] = None) -> str:
    """
    简易表格：序号,订单信息

    所有栏位加引号；预设加上 UTF-8 BOM 方便 Excel 开启。
    """
    buffer = io.StringIO()
    writer = _writer(buffer, csv.QUOTE_ALL)
    writer.writerow(["序号", "订单信息"])
    for index, order in enumerate(orders, start=1):
        writer.writerow([index, order.full_result])
    return _with_bom(buffer.getvalue(), include_bom)


def _platform_key(platform) -> str:
    return Platform.from_string(platform).value


def orders_to_detailed_csv(
    orders: Sequence[FinalOrder],
    platform,
    *,
    exported_at: Optional[datetime] = None,
    catalog: Optional[Catalog] = None,
    include_bom: Optional[bool] = None,
) -> str:
    """
    详细表格：标题区块 + 序号,平台,地址信息,订单详情,处理时间 + 页尾。

    Raises:
        ValueError: 未知平台
    """
    catalog = catalog or load_catalog()
    platform_name = catalog.platform_name(_platform_key(platform))
    exported_at = exported_at or datetime.now()
    display_time = exported_at.strftime("%Y/%m/%d %H:%M:%S")

    buffer = io.StringIO()
    writer = _writer(buffer, csv.QUOTE_NONNUMERIC)
    writer.writerow([f"{platform_name} - 订单信息表"])
    writer.writerow([f"导出时间：{display_time}"])
    writer.writerow([f"总计订单数：{len(orders)}"])
    writer.writerow([])

    writer.writerow(["序号", "平台", "地址信息", "订单详情", "处理时间"])
    for index, order in enumerate(orders, start=1):
        writer.writerow([
            index,
            platform_name,
            order.record.short_label,
            order.order_info or NO_ORDER_INFO,
            display_time,
        ])

    writer.writerow([])
    writer.writerow([f"系统信息：{SYSTEM_NAME}"])
    writer.writerow([f"文件生成时间戳：{exported_at:%Y-%m-%d_%H-%M-%S}"])

    logger.debug(f"Rendered detailed CSV with {len(orders)} row(s) for {platform_name}")
    return _with_bom(buffer.getvalue(), include_bom)


def export_filename(
    platform,
    extension: str,
    *,
    now: Optional[datetime] = None,
    catalog: Optional[Catalog] = None,
) -> str:
    """例如：拼多多订单数据_2026-10-18T22-35-00.csv"""
    catalog = catalog or load_catalog()
    now = now or datetime.now()
    timestamp = now.strftime("%Y-%m-%dT%H-%M-%S")
    name = catalog.platform_name(_platform_key(platform))
    return f"{name}订单数据_{timestamp}.{extension.lstrip('.')}"

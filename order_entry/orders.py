# -*- coding: utf-8 -*-
"""
Order Composition

将每条 Record 的产品勾选（选项 ID -> 数量）组合为订单资讯字串：
    张三-1234 5支装【白色*2+彩色*1】+礼品袋【礼品袋*1】
Record 的四个基本栏位不会被修改。
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from order_entry.parser.types import Record
from order_entry.shared.product_catalog import Catalog, ProductOption, load_catalog

logger = logging.getLogger(__name__)

ProductSelection = Mapping[str, int]


@dataclass(frozen=True)
class FinalOrder:
    """最终订单（Record + 订单资讯）"""

    record: Record
    order_info: str
    full_result: str

    def to_dict(self) -> dict:
        return {
            **self.record.to_dict(),
            "order_info": self.order_info,
            "full_result": self.full_result,
        }


def format_order_info(selection: Optional[ProductSelection], catalog: Optional[Catalog] = None) -> str:
    """
    组合单条订单资讯。

    Args:
        selection: 选项 ID -> 数量；数量 <= 0 的选项忽略
        catalog: 产品目录（预设载入 catalog.yaml）

    Returns:
        str: 例如 "5支装【白色*2+3色*1】+礼品袋【礼品袋*1】"；无勾选时为空字串

    Raises:
        ValueError: 选项 ID 不在产品目录中
    """
    if not selection:
        return ""
    catalog = catalog or load_catalog()

    for option_id in selection:
        if catalog.option(option_id) is None:
            raise ValueError(f"Unknown product option: {option_id}")

    # 依目录顺序收集，再依颜色排序（sorted 为稳定排序）
    chosen: dict[str, list[tuple[ProductOption, int]]] = {}
    for option in catalog.options:
        quantity = int(selection.get(option.id, 0) or 0)
        if quantity > 0:
            chosen.setdefault(option.group, []).append((option, quantity))

    order_parts: list[str] = []
    for group in catalog.groups:
        items = chosen.get(group.name)
        if not items:
            continue
        items = sorted(items, key=lambda pair: group.color_rank(pair[0].color))
        labels = "+".join(f"{group.label_for(option)}*{quantity}" for option, quantity in items)
        order_parts.append(f"{group.name}【{labels}】")

    return "+".join(order_parts)


def compose_full_result(record: Record, order_info: str) -> str:
    return f"{record.short_label} {order_info}" if order_info else record.short_label


def build_final_orders(
    records: Sequence[Record],
    selections: Optional[Sequence[Optional[ProductSelection]]] = None,
    catalog: Optional[Catalog] = None,
) -> list[FinalOrder]:
    """
    依位置配对 Record 与产品勾选。

    Raises:
        ValueError: 勾选数量多于 Record，或选项 ID 不存在
    """
    selections = list(selections or [])
    if len(selections) > len(records):
        raise ValueError(f"Got {len(selections)} selections for {len(records)} records")
    catalog = catalog or load_catalog()

    orders: list[FinalOrder] = []
    for index, record in enumerate(records):
        selection = selections[index] if index < len(selections) else None
        order_info = format_order_info(selection, catalog)
        orders.append(
            FinalOrder(
                record=record,
                order_info=order_info,
                full_result=compose_full_result(record, order_info),
            )
        )

    with_orders = sum(1 for o in orders if o.order_info)
    logger.info(f"Built {len(orders)} final order(s), {with_orders} with product info")
    return orders

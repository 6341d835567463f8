# -*- coding: utf-8 -*-

import pytest

from order_entry.orders import build_final_orders, compose_full_result, format_order_info
from order_entry.parser.types import Record
from order_entry.shared.product_catalog import Catalog, ProductGroup, ProductOption


def _record(label: str = "张三-1234") -> Record:
    return Record(short_label=label, name="张三", phone="13800001234", address="杭州")


def test_format_order_info_groups_and_sorts() -> None:
    selection = {"p5-5color": 1, "p5-white": 2, "gift-bag": 1, "p72-3color": 3}
    assert format_order_info(selection) == "5支装【白色*2+彩色*1】+72支装【3色*3】+礼品袋【礼品袋*1】"


def test_format_order_info_ignores_non_positive_quantities() -> None:
    assert format_order_info({"p5-white": 0, "p72-white": -1, "gift-bag": 2}) == "礼品袋【礼品袋*2】"


def test_format_order_info_empty() -> None:
    assert format_order_info(None) == ""
    assert format_order_info({}) == ""
    assert format_order_info({"p5-white": 0}) == ""


def test_format_order_info_unknown_option() -> None:
    with pytest.raises(ValueError, match="Unknown product option"):
        format_order_info({"p999": 1})


def test_unlisted_color_sorts_last() -> None:
    catalog = Catalog(
        options=(
            ProductOption(id="gold", name="金", group="笔", color="金色"),
            ProductOption(id="white", name="白", group="笔", color="白色"),
        ),
        groups=(ProductGroup(name="笔", color_order=("白色",)),),
        platforms=(),
    )
    assert format_order_info({"gold": 1, "white": 1}, catalog) == "笔【白色*1+金色*1】"


def test_compose_full_result() -> None:
    assert compose_full_result(_record(), "礼品袋【礼品袋*1】") == "张三-1234 礼品袋【礼品袋*1】"
    assert compose_full_result(_record(), "") == "张三-1234"


def test_build_final_orders_pairs_by_position() -> None:
    records = [_record("甲-0001"), _record("乙-0002"), _record("丙-0003")]
    orders = build_final_orders(records, [{"p5-white": 1}, None])

    assert [o.full_result for o in orders] == ["甲-0001 5支装【白色*1】", "乙-0002", "丙-0003"]
    assert orders[1].order_info == ""
    assert orders[0].record is records[0]


def test_build_final_orders_without_selections() -> None:
    orders = build_final_orders([_record()])
    assert orders[0].full_result == "张三-1234"


def test_build_final_orders_rejects_extra_selections() -> None:
    with pytest.raises(ValueError):
        build_final_orders([_record()], [{}, {}])


def test_final_order_to_dict() -> None:
    order = build_final_orders([_record()], [{"gift-bag": 1}])[0]
    assert order.to_dict() == {
        "short_label": "张三-1234",
        "name": "张三",
        "phone": "13800001234",
        "address": "杭州",
        "order_info": "礼品袋【礼品袋*1】",
        "full_result": "张三-1234 礼品袋【礼品袋*1】",
    }

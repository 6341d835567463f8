# -*- coding: utf-8 -*-
"""Order-entry command line.

Reads pasted platform export text from --text or stdin, parses it into
records and prints JSON (or plain labels / final text / CSV) to stdout.

Examples:
    order-entry parse --platform dy --text "高先生，15782103569-9142，新疆喀什"
    pbpaste | order-entry parse --platform tb --format labels
    order-entry parse --platform pdd --orders-json '[{"p5-white": 2}]' --format csv
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional

from order_entry import config
from order_entry.exporter import (
    export_filename,
    final_text,
    labels_text,
    orders_to_csv,
    orders_to_detailed_csv,
)
from order_entry.orders import build_final_orders
from order_entry.parser import ParserError, is_well_formed, parse, supported_platforms
from order_entry.parser.errors import ERROR_MESSAGES, ParserErrorCode
from order_entry.shared.product_catalog import load_catalog

logger = logging.getLogger(__name__)

_OUTPUT_FORMATS = ("json", "labels", "final", "csv", "detailed-csv")


def _print_json(payload: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))
    sys.stdout.write("\n")


def _print_error(message: str, reason: str) -> int:
    _print_json({"status": "error", "error": {"message": message, "reason": reason}})
    return 1


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _load_selections(raw: Optional[str]) -> Optional[list[Optional[dict[str, int]]]]:
    if not raw:
        return None
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("orders_json must be a JSON list (one mapping per record)")
    return data


def cmd_parse(args: argparse.Namespace) -> int:
    text = _read_text(args)
    if not text.strip():
        return _print_error(ERROR_MESSAGES[ParserErrorCode.EMPTY_INPUT], ParserErrorCode.EMPTY_INPUT.value)

    try:
        records = parse(args.platform, text)
    except ParserError as e:
        logger.warning(f"Parser error: {e.message}")
        return _print_error(e.message, e.code.value)

    if not records:
        return _print_error(ERROR_MESSAGES[ParserErrorCode.PARSE_FAILED], ParserErrorCode.PARSE_FAILED.value)

    try:
        selections = _load_selections(args.orders_json)
        orders = build_final_orders(records, selections, load_catalog())
    except (ValueError, TypeError, AttributeError) as e:
        # json.JSONDecodeError is a ValueError; non-mapping entries raise TypeError or AttributeError
        return _print_error(f"invalid orders_json: {e}", "bad_orders")

    if args.format == "labels":
        sys.stdout.write(labels_text(records) + "\n")
    elif args.format == "final":
        sys.stdout.write(final_text(orders) + "\n")
    elif args.format == "csv":
        sys.stdout.write(orders_to_csv(orders, include_bom=False))
    elif args.format == "detailed-csv":
        sys.stdout.write(orders_to_detailed_csv(orders, args.platform, include_bom=False))
    else:
        _print_json(
            {
                "status": "ok",
                "platform": args.platform,
                "count": len(records),
                "records": [o.to_dict() for o in orders],
                "csv_filename": export_filename(args.platform, "csv"),
            }
        )
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    text = _read_text(args)
    _print_json({"status": "ok", "platform": args.platform, "well_formed": is_well_formed(args.platform, text)})
    return 0


def cmd_platforms(args: argparse.Namespace) -> int:
    catalog = load_catalog()
    _print_json(
        {
            "status": "ok",
            "platforms": [
                {
                    "key": info.key,
                    "name": info.name,
                    "input_format": info.input_format,
                    "example": info.example,
                }
                for info in (catalog.platform(key) for key in supported_platforms())
            ],
        }
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="order-entry", description="Parse e-commerce address exports into order records")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("parse", help="Parse pasted address text")
    p.add_argument("--platform", choices=supported_platforms(), default=config.DEFAULT_PLATFORM)
    p.add_argument("--text", help="Input text (defaults to stdin)")
    p.add_argument("--format", choices=_OUTPUT_FORMATS, default="json")
    p.add_argument("--orders-json", help='Per-record product selections, e.g. [{"p5-white": 2}, {}]')
    p.set_defaults(func=cmd_parse)

    v = sub.add_parser("validate", help="Check whether text matches the platform's input format")
    v.add_argument("--platform", choices=supported_platforms(), default=config.DEFAULT_PLATFORM)
    v.add_argument("--text", help="Input text (defaults to stdin)")
    v.set_defaults(func=cmd_validate)

    pl = sub.add_parser("platforms", help="List supported platforms")
    pl.set_defaults(func=cmd_platforms)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL)
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())

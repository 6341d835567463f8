# -*- coding: utf-8 -*-
"""Product catalogue loader.

Loads product options, product groups and platform display names from YAML
(order_entry/data/catalog.yaml). ORDER_ENTRY_CATALOG_PATH overrides the
packaged file.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from order_entry import config


@dataclass(frozen=True)
class ProductOption:
    id: str
    name: str
    group: str
    color: str = ""


@dataclass(frozen=True)
class ProductGroup:
    name: str
    label_field: str = "color"
    color_order: tuple[str, ...] = ()

    def label_for(self, option: ProductOption) -> str:
        return option.name if self.label_field == "name" else option.color

    def color_rank(self, color: str) -> int:
        # 不在排序表内的颜色排在最后
        try:
            return self.color_order.index(color)
        except ValueError:
            return len(self.color_order)


@dataclass(frozen=True)
class PlatformInfo:
    key: str
    name: str
    input_format: str = ""
    example: str = ""


@dataclass(frozen=True)
class Catalog:
    options: tuple[ProductOption, ...]
    groups: tuple[ProductGroup, ...]
    platforms: tuple[PlatformInfo, ...]

    def option(self, option_id: str) -> Optional[ProductOption]:
        return next((o for o in self.options if o.id == option_id), None)

    def platform(self, key: str) -> PlatformInfo:
        # 目录未列出的平台退回以代码为名称
        info = next((p for p in self.platforms if p.key == key), None)
        return info or PlatformInfo(key=key, name=key)

    def platform_name(self, key: str) -> str:
        return self.platform(key).name


def _default_path() -> Path:
    # order_entry/shared/product_catalog.py -> order_entry/data/catalog.yaml
    return Path(__file__).resolve().parents[1] / "data" / "catalog.yaml"


def _parse_catalog(data: Any) -> Catalog:
    if not isinstance(data, dict):
        raise ValueError("catalog.yaml must be a mapping")

    options = tuple(
        ProductOption(
            id=str(item["id"]),
            name=str(item["name"]),
            group=str(item["group"]),
            color=str(item.get("color") or ""),
        )
        for item in data.get("options") or []
    )
    groups = tuple(
        ProductGroup(
            name=str(item["name"]),
            label_field=str(item.get("label_field") or "color"),
            color_order=tuple(str(c) for c in item.get("color_order") or []),
        )
        for item in data.get("groups") or []
    )

    known_groups = {g.name for g in groups}
    for option in options:
        if option.group not in known_groups:
            raise ValueError(f"Product option {option.id} refers to unknown group: {option.group}")

    platforms = tuple(
        PlatformInfo(
            key=str(key),
            name=str(info.get("name") or key),
            input_format=str(info.get("input_format") or ""),
            example=str(info.get("example") or ""),
        )
        for key, info in (data.get("platforms") or {}).items()
    )
    return Catalog(options=options, groups=groups, platforms=platforms)


@lru_cache(maxsize=4)
def _load_cached(path: str) -> Catalog:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    return _parse_catalog(data)


def load_catalog(path: Optional[str | Path] = None) -> Catalog:
    """Load the catalogue from ``path``, ORDER_ENTRY_CATALOG_PATH, or the packaged YAML."""
    resolved = Path(path or config.CATALOG_PATH or _default_path())
    return _load_cached(str(resolved.resolve()))

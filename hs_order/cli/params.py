"""
CLI Parameter Parsing.

Typer callbacks that validate and normalize command-line values before
any network call is made, plus the enums behind --mode and --auto.
"""

from enum import Enum

import typer

from hs_order.core.constants import (
    AUTO_OFF,
    AUTO_ON,
    MODE_BATTLEGROUNDS,
    MODE_CASUAL,
    MODE_NAMES,
    MODE_STANDARD,
    MODE_TWIST,
    MODE_WILD,
)
from hs_order.core.exceptions import ValidationError
from hs_order.stats.heroes import validate_hero_item

PWD_LENGTH = 4
TABLE_SIZE_ALL = "all"


class BattleMode(str, Enum):
    """Battle mode; the value is the code sent to the API."""

    CASUAL = MODE_CASUAL
    STANDARD = MODE_STANDARD
    WILD = MODE_WILD
    TWIST = MODE_TWIST
    BATTLEGROUNDS = MODE_BATTLEGROUNDS

    @property
    def label(self) -> str:
        return MODE_NAMES[self.value]


class AutoClaim(str, Enum):
    """Auto-claim switch; the value is the flag sent to the API."""

    ON = AUTO_ON
    OFF = AUTO_OFF

    @property
    def label(self) -> str:
        return "开启" if self is AutoClaim.ON else "关闭"


MODE_ALIASES: dict[str, BattleMode] = {
    "casual": BattleMode.CASUAL, "1": BattleMode.CASUAL, "c": BattleMode.CASUAL, "休闲": BattleMode.CASUAL,
    "standard": BattleMode.STANDARD, "2": BattleMode.STANDARD, "s": BattleMode.STANDARD, "标准": BattleMode.STANDARD,
    "wild": BattleMode.WILD, "3": BattleMode.WILD, "w": BattleMode.WILD, "狂野": BattleMode.WILD,
    "twist": BattleMode.TWIST, "4": BattleMode.TWIST, "t": BattleMode.TWIST, "幻变": BattleMode.TWIST,
    "battlegrounds": BattleMode.BATTLEGROUNDS, "5": BattleMode.BATTLEGROUNDS, "b": BattleMode.BATTLEGROUNDS,
    "酒馆": BattleMode.BATTLEGROUNDS, "战棋": BattleMode.BATTLEGROUNDS, "酒馆战棋": BattleMode.BATTLEGROUNDS,
}

AUTO_ALIASES: dict[str, AutoClaim] = {
    "on": AutoClaim.ON, "1": AutoClaim.ON, "true": AutoClaim.ON,
    "off": AutoClaim.OFF, "0": AutoClaim.OFF, "false": AutoClaim.OFF,
}


def parse_order_id(value: str) -> str:
    if not value or not (value.isascii() and value.isdigit()):
        raise typer.BadParameter("订单号必须为纯数字")
    return value


def parse_table_size(value: str | None) -> int | str | None:
    """Return the row limit, TABLE_SIZE_ALL for "all", or None when not given."""
    if value is None:
        return None
    if value.lower() == TABLE_SIZE_ALL:
        return TABLE_SIZE_ALL
    if value.isascii() and value.isdigit():
        return int(value)
    raise typer.BadParameter("游戏数据统计表格显示的最大记录条数必须为整数或ALL")


def table_row_limit(table_size: int | str | None, default: int) -> int | None:
    """Turn a parsed --table-size into a row limit; None shows every row."""
    if table_size is None:
        return default
    if table_size == TABLE_SIZE_ALL:
        return None
    return table_size


def parse_pwd(value: str | None) -> str | None:
    if value is None:
        return None
    if len(value) != PWD_LENGTH:
        raise typer.BadParameter(f"战网密码前{PWD_LENGTH}位必须为{PWD_LENGTH}个字符")
    return value


def parse_mode(value: str | None) -> BattleMode | None:
    if value is None:
        return None
    mode = MODE_ALIASES.get(value.lower())
    if mode is None:
        raise typer.BadParameter(f"未知对战模式: {value}")
    return mode


def parse_auto(value: str | None) -> AutoClaim | None:
    if value is None:
        return None
    auto = AUTO_ALIASES.get(value.lower())
    if auto is None:
        raise typer.BadParameter(f"未知自动领取选项: {value}")
    return auto


def parse_hero_items(values: list[str] | None) -> list[str]:
    """
    Split comma-separated hero items and validate each one.

    Returns an empty list when the option was not given; Typer turns that
    into None for an option whose default is None.
    """
    if not values:
        return []

    items = [item for value in values for item in value.split(",")]
    try:
        return [validate_hero_item(item) for item in items]
    except ValidationError as e:
        raise typer.BadParameter(e.message) from e

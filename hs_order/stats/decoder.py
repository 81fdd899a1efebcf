"""
Stats Decoder.

Turns the two JSON documents embedded in an order record into typed data:

- ``config``: an object, decoded into OrderConfig
- ``dldata``: a positional array of at least 13 elements

dldata layout:
    [0:10]  basic info (kept verbatim, not interpreted)
    [3]     date of the latest session, YYYYMMDD
    [4]     wins in that session
    [5]     losses in that session
    [10]    gold rows       [timestamp, gold_delta, pack_delta]
    [11]    experience rows [timestamp, exp_delta, level, total_exp, level_exp]
    [12]    battle rows     [?, result_code, exp_delta, timestamp]

Rows that are not arrays or are shorter than their kind's arity are dropped.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from pydantic import ValidationError as PydanticValidationError

from hs_order.api.schemas import OrderConfig
from hs_order.core.constants import (
    BASIC_INFO_SIZE,
    BATTLE_LOSS,
    BATTLE_RECORDS_INDEX,
    BATTLE_ROW_MIN,
    BATTLE_UNKNOWN,
    BATTLE_WIN,
    DATE_INDEX,
    EXP_RECORDS_INDEX,
    EXP_ROW_MIN,
    GOLD_RECORDS_INDEX,
    GOLD_ROW_MIN,
    LOSSES_INDEX,
    MIN_DLDATA_LENGTH,
    RESULT_LOSS,
    RESULT_UNKNOWN,
    RESULT_WIN,
    WINS_INDEX,
)
from hs_order.core.exceptions import ConfigDecodeError, StatsDecodeError
from hs_order.core.utils import format_signed, format_timestamp, shanghai_today

T = TypeVar("T")


@dataclass(frozen=True)
class GoldRecord:
    time: str
    gold_change: str
    pack_change: str


@dataclass(frozen=True)
class ExpRecord:
    time: str
    exp_change: str
    level: str
    total_exp: str
    current_level_exp: str


@dataclass(frozen=True)
class BattleRecord:
    time: str
    result: str
    exp: str


@dataclass(frozen=True)
class DlData:
    """Decoded game statistics of one order."""

    basic_info: list[Any] = field(default_factory=list)
    gold_records: list[GoldRecord] = field(default_factory=list)
    exp_records: list[ExpRecord] = field(default_factory=list)
    battle_records: list[BattleRecord] = field(default_factory=list)
    today_battles: int = 0


def _as_int(value: Any) -> int | None:
    """Return a JSON integer as int; booleans, floats and others are None."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _signed(value: Any) -> str:
    number = _as_int(value)
    return format_signed(number) if number is not None else "0"


def _plain(value: Any) -> str:
    number = _as_int(value)
    return str(number) if number is not None else "0"


def _time(value: Any) -> str:
    return format_timestamp(_as_int(value) or 0)


def parse_order_config(config_str: str) -> OrderConfig:
    """Decode an order's ``config`` JSON string."""
    try:
        return OrderConfig.model_validate_json(config_str)
    except PydanticValidationError as e:
        raise ConfigDecodeError() from e


def decode_gold_row(row: Any) -> GoldRecord | None:
    if not isinstance(row, list) or len(row) < GOLD_ROW_MIN:
        return None
    return GoldRecord(
        time=_time(row[0]),
        gold_change=_signed(row[1]),
        pack_change=_signed(row[2]),
    )


def decode_exp_row(row: Any) -> ExpRecord | None:
    if not isinstance(row, list) or len(row) < EXP_ROW_MIN:
        return None
    return ExpRecord(
        time=_time(row[0]),
        exp_change=_signed(row[1]),
        level=_plain(row[2]),
        total_exp=_plain(row[3]),
        current_level_exp=_plain(row[4]),
    )


def battle_result_text(result_code: int) -> str:
    """Map a battle result code to its display text."""
    if result_code == BATTLE_WIN:
        return RESULT_WIN
    if result_code == BATTLE_LOSS:
        return RESULT_LOSS
    if result_code == BATTLE_UNKNOWN:
        return RESULT_UNKNOWN
    return f"{RESULT_UNKNOWN} {result_code}"


def decode_battle_row(row: Any) -> BattleRecord | None:
    # the start time is the fourth element, not the first
    if not isinstance(row, list) or len(row) < BATTLE_ROW_MIN:
        return None
    return BattleRecord(
        time=_time(row[3]),
        result=battle_result_text(_as_int(row[1]) or 0),
        exp=_signed(row[2]),
    )


def _decode_rows(value: Any, decode_row: Callable[[Any], T | None]) -> list[T]:
    if not isinstance(value, list):
        return []
    records = []
    for row in value:
        record = decode_row(row)
        if record is not None:
            records.append(record)
    return records


def _date_string(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    number = _as_int(value)
    return str(number) if number is not None else None


def calculate_today_battles(arr: list[Any], today: str | None = None) -> int:
    """
    Count wins plus losses when the array's date is today (Asia/Shanghai).

    Args:
        arr: The dldata array
        today: ``YYYYMMDD`` to compare against; defaults to the current day

    Returns:
        wins + losses, or 0 when the date is another day
    """
    today = today if today is not None else shanghai_today()
    if _date_string(arr[DATE_INDEX]) != today:
        return 0

    wins = max(_as_int(arr[WINS_INDEX]) or 0, 0)
    losses = max(_as_int(arr[LOSSES_INDEX]) or 0, 0)
    return wins + losses


def decode_dldata(dldata_str: str, today: str | None = None) -> DlData:
    """
    Decode an order's ``dldata`` JSON string.

    Args:
        dldata_str: JSON array text
        today: ``YYYYMMDD`` used for today_battles; defaults to the current day

    Raises:
        StatsDecodeError: Not a JSON array, or fewer than 13 elements
    """
    try:
        arr = json.loads(dldata_str)
    except (TypeError, ValueError) as e:
        raise StatsDecodeError() from e

    if not isinstance(arr, list):
        raise StatsDecodeError()
    if len(arr) < MIN_DLDATA_LENGTH:
        raise StatsDecodeError(f"dldata数据不完整: {len(arr)}/{MIN_DLDATA_LENGTH}")

    return DlData(
        basic_info=arr[:BASIC_INFO_SIZE],
        gold_records=_decode_rows(arr[GOLD_RECORDS_INDEX], decode_gold_row),
        exp_records=_decode_rows(arr[EXP_RECORDS_INDEX], decode_exp_row),
        battle_records=_decode_rows(arr[BATTLE_RECORDS_INDEX], decode_battle_row),
        today_battles=calculate_today_battles(arr, today),
    )

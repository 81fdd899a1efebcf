"""
Aggregate statistics over decoded records.

The totals re-parse the already signed display strings with
parse_unsigned_int, so a negative delta counts as 0 in the total while
still showing as negative in its own row.
"""

from collections.abc import Sequence

from hs_order.core.constants import RESULT_LOSS, RESULT_WIN
from hs_order.core.utils import parse_unsigned_int
from hs_order.stats.decoder import BattleRecord, ExpRecord, GoldRecord


def calculate_gold_totals(gold_records: Sequence[GoldRecord]) -> tuple[int, int]:
    """Return (total gold, total packs)."""
    total_gold = 0
    total_packs = 0
    for record in gold_records:
        total_gold += parse_unsigned_int(record.gold_change)
        total_packs += parse_unsigned_int(record.pack_change)
    return total_gold, total_packs


def calculate_exp_total(exp_records: Sequence[ExpRecord]) -> int:
    return sum(parse_unsigned_int(record.exp_change) for record in exp_records)


def calculate_battle_stats(battle_records: Sequence[BattleRecord]) -> tuple[int, int, int]:
    """Return (wins, losses, total battle experience)."""
    wins = 0
    losses = 0
    total_exp = 0
    for record in battle_records:
        if RESULT_WIN in record.result:
            wins += 1
        elif RESULT_LOSS in record.result:
            losses += 1
        total_exp += parse_unsigned_int(record.exp)
    return wins, losses, total_exp


def win_rate(wins: int, losses: int) -> int:
    """Win percentage truncated to an integer; 0 when there were no battles."""
    total = wins + losses
    if total == 0:
        return 0
    return int(wins / total * 100)

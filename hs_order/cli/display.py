"""
Order Display.

Renders an order and its decoded statistics with Rich. Every function
takes the Console to print to, so tests can capture output.
"""

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hs_order.api.schemas import OrderConfig, OrderRecord
from hs_order.core.constants import (
    AUTO_OFF,
    AUTO_ON,
    HERO_NAMES,
    MODE_CASUAL,
    MODE_NAMES,
    STATUS_BANNED,
    STATUS_FINISHED,
    STATUS_RUNNING,
)
from hs_order.core.exceptions import error_chain
from hs_order.core.utils import format_signed
from hs_order.stats.decoder import BattleRecord, DlData, ExpRecord, GoldRecord
from hs_order.stats.heroes import decode_hero_mask
from hs_order.stats.summary import (
    calculate_battle_stats,
    calculate_exp_total,
    calculate_gold_totals,
    win_rate,
)

GOLD_COLUMNS = (("时间", "time"), ("金币变化", "gold_change"), ("卡包变化", "pack_change"))
EXP_COLUMNS = (
    ("时间", "time"),
    ("经验变化", "exp_change"),
    ("等级", "level"),
    ("总经验", "total_exp"),
    ("当前等级经验", "current_level_exp"),
)
BATTLE_COLUMNS = (("时间", "time"), ("结果", "result"), ("经验", "exp"))


def print_header(console: Console) -> None:
    console.print("[bold bright_cyan]=== 炉石传说代练订单助手 ===[/bold bright_cyan]")
    console.print()


def print_line(console: Console) -> None:
    console.print("━" * 50)


def print_error(console: Console, context: str, error: BaseException) -> None:
    """Print a labeled error followed by its whole cause chain on one line."""
    chain = " ".join(escape(message) for message in error_chain(error))
    console.print(f"[bright_red]{escape(context)}[/bright_red] {chain}")


def order_status_text(finish: str, banned: str) -> str:
    if banned == STATUS_BANNED:
        return "[bright_red]已终止[/bright_red]"
    if finish == STATUS_FINISHED and banned == STATUS_RUNNING:
        return "[bright_green]已完成[/bright_green]"
    if finish == STATUS_RUNNING and banned == STATUS_RUNNING:
        return "[bright_blue]进行中[/bright_blue]"
    return "[bright_magenta]未知状态[/bright_magenta]"


def battle_mode_text(battlemode: str | None) -> str:
    code = battlemode if battlemode is not None else MODE_CASUAL
    name = MODE_NAMES.get(code)
    if name is None:
        return f"[bright_magenta]未知模式({escape(code)})[/bright_magenta]"
    return f"[bright_yellow]{name}[/bright_yellow]"


def battle_heroes_text(battleheroes: str | None) -> str:
    # an order without the field uses every hero
    if battleheroes is None:
        return "[bright_blue]全部[/bright_blue]"

    heroes = decode_hero_mask(battleheroes)
    if not heroes:
        return "[bright_yellow]无[/bright_yellow]"
    if len(heroes) == len(HERO_NAMES):
        return "[bright_blue]全部[/bright_blue]"
    return f"[bright_white]{', '.join(heroes)}[/bright_white]"


def auto_claim_text(auto: str | None) -> str:
    if auto is None or auto == AUTO_OFF:
        return "[bright_yellow]关闭[/bright_yellow]"
    if auto == AUTO_ON:
        return "[bright_green]开启[/bright_green]"
    return "[bright_magenta]未知[/bright_magenta]"


def reward_level(num3: str) -> int:
    try:
        return int(num3) + 1
    except ValueError:
        return 1


def display_order_info(console: Console, order: OrderRecord, config: OrderConfig, dldata: DlData) -> None:
    console.print("[bold bright_blue]订单基本信息[/bold bright_blue]")
    print_line(console)

    console.print(f"订单编号: [bright_cyan]{escape(order.oid)}[/bright_cyan]")
    console.print(f"截止时间: [bright_white]{escape(order.edate)}[/bright_white]")
    console.print(f"订单状态: {order_status_text(order.finish, order.banned)}")
    console.print(f"对战模式: {battle_mode_text(config.battlemode)}")
    console.print(f"对战英雄: {battle_heroes_text(config.battleheroes)}")
    console.print(f"自动领取: {auto_claim_text(config.auto)}")
    console.print(f"金币数量: [bright_yellow]{escape(order.num1)}[/bright_yellow] 枚")
    console.print(f"卡包数量: [bright_blue]{escape(order.num2)}[/bright_blue] 包")
    console.print(f"奖励等级: [bright_magenta]{reward_level(order.num3)}[/bright_magenta] 级")
    console.print(f"今日对战: [bright_cyan]{dldata.today_battles}[/bright_cyan] 场")

    if order.remark:
        console.print(f"备注信息: [bright_white]{escape(order.remark)}[/bright_white]")

    console.print()


def display_records_table(
    console: Console,
    records: Sequence[Any],
    columns: Sequence[tuple[str, str]],
    record_type: str,
    table_size: int | None,
) -> None:
    """Print the first ``table_size`` records; None prints all, 0 prints none."""
    if not records or table_size == 0:
        return

    shown = records[:table_size]
    console.print(f"最近 [bright_white]{len(shown)}[/bright_white] 条{record_type}:")

    table = Table(show_header=True)
    for header, _ in columns:
        table.add_column(header)
    for record in shown:
        table.add_row(*(escape(getattr(record, attr)) for _, attr in columns))

    console.print(table)
    console.print()


def display_gold_statistics(console: Console, gold_records: Sequence[GoldRecord], table_size: int | None) -> None:
    console.print("[bold bright_yellow]金币统计[/bold bright_yellow]")
    print_line(console)

    if not gold_records:
        console.print("暂无金币记录")
        console.print()
        return

    total_gold, total_packs = calculate_gold_totals(gold_records)
    console.print(f"总金币变化: [bright_green]{format_signed(total_gold)}[/bright_green] 枚")
    console.print(f"总卡包变化: [bright_blue]{format_signed(total_packs)}[/bright_blue] 个")
    console.print()

    display_records_table(console, gold_records, GOLD_COLUMNS, "金币记录", table_size)


def display_exp_statistics(console: Console, exp_records: Sequence[ExpRecord], table_size: int | None) -> None:
    console.print("[bold bright_magenta]经验统计[/bold bright_magenta]")
    print_line(console)

    if not exp_records:
        console.print("暂无经验记录")
        console.print()
        return

    total_exp = calculate_exp_total(exp_records)
    console.print(f"总经验变化: [bright_magenta]{format_signed(total_exp)}[/bright_magenta] 点")
    console.print()

    display_records_table(console, exp_records, EXP_COLUMNS, "经验记录", table_size)


def display_battle_statistics(console: Console, battle_records: Sequence[BattleRecord], table_size: int | None) -> None:
    console.print("[bold bright_red]对战统计[/bold bright_red]")
    print_line(console)

    if not battle_records:
        console.print("暂无对战记录")
        console.print()
        return

    wins, losses, total_exp = calculate_battle_stats(battle_records)
    console.print(f"胜利场次: [bright_green]{wins}[/bright_green] 场")
    console.print(f"失败场次: [bright_red]{losses}[/bright_red] 场")
    console.print(f"胜率: [bright_cyan]{win_rate(wins, losses)}[/bright_cyan] %")
    console.print(f"对战经验: [bright_magenta]{format_signed(total_exp)}[/bright_magenta] 点")
    console.print()

    display_records_table(console, battle_records, BATTLE_COLUMNS, "对战记录", table_size)


def display_game_data(console: Console, dldata: DlData, table_size: int | None) -> None:
    display_gold_statistics(console, dldata.gold_records, table_size)
    display_exp_statistics(console, dldata.exp_records, table_size)
    display_battle_statistics(console, dldata.battle_records, table_size)

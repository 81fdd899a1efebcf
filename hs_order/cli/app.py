"""
Order CLI.

Command-line client for the Hearthstone boosting order API.
Built with Typer for argument handling and Rich for formatted output.

Usage:
    python cli.py 1234567890123456789 --query                 # Show order data
    python cli.py 1234567890123456789 -q -t all               # Show every record
    python cli.py 1234567890123456789 -m 标准 -p abcd          # Set battle mode
    python cli.py 1234567890123456789 -H 法师,牧师 -p abcd      # Set heroes
    python cli.py 1234567890123456789 -a on -p abcd -s        # Skip the fetch

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --help            Show help message
"""

from typing import Any, Callable, List, NoReturn, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from hs_order.api.client import close_api_client
from hs_order.api.operations import OrderService
from hs_order.cli.display import display_game_data, display_order_info, print_error, print_header
from hs_order.cli.params import (
    AutoClaim,
    BattleMode,
    parse_auto,
    parse_hero_items,
    parse_mode,
    parse_order_id,
    parse_pwd,
    parse_table_size,
    table_row_limit,
)
from hs_order.core.config import get_app_config, validate_project_root
from hs_order.core.exceptions import ApplicationError
from hs_order.core.logging import get_logger, log_with_source, setup_logging
from hs_order.stats.decoder import decode_dldata, parse_order_config
from hs_order.stats.heroes import describe_hero_mask, encode_hero_selection

logger = get_logger(__name__)

T = TypeVar("T")

USAGE_ERROR_EXIT_CODE = 2

app = typer.Typer(
    name="hs-order-cli",
    help="炉石传说代练订单助手: 查询订单数据, 设置对战模式/对战英雄/自动领取奖励.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _usage_error(message: str) -> NoReturn:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(USAGE_ERROR_EXIT_CODE)


def _step(label: str, fn: Callable[..., T], *args: Any) -> T:
    """Run one step of an operation, labeling any failure with ``label``."""
    try:
        return fn(*args)
    except ApplicationError as e:
        raise ApplicationError(label) from e


def process_order(service: OrderService, order_id: str, table_size: Optional[int]) -> None:
    """Fetch, decode and display one order."""
    console.print(f"正在查询订单: [bright_cyan]{order_id}[/bright_cyan]\n")

    order = _step("获取订单数据接口失败", service.fetch_order, order_id)
    config = _step("解析订单配置信息失败", parse_order_config, order.config)
    dldata = _step("解析游戏统计数据失败", decode_dldata, order.dldata)

    display_order_info(console, order, config, dldata)
    display_game_data(console, dldata, table_size)


def set_battle_mode(service: OrderService, oid: str, mode: BattleMode, pwd: str) -> None:
    _step("设置对战模式接口失败", service.set_battle_mode, oid, pwd, mode.value)
    console.print(f"[bright_green]已设置对战模式为[/bright_green] [bright_yellow]{mode.label}[/bright_yellow]")


def set_battle_heroes(service: OrderService, oid: str, heroes: List[str], pwd: str) -> None:
    mask = encode_hero_selection(heroes)
    _step("设置对战英雄接口失败", service.set_battle_heroes, oid, pwd, str(mask))
    console.print(
        f"[bright_green]已设置对战英雄为[/bright_green] [bright_yellow]{describe_hero_mask(mask)}[/bright_yellow]"
    )


def set_auto_claim(service: OrderService, oid: str, auto: AutoClaim, pwd: str) -> None:
    _step("设置自动领取接口失败", service.set_auto_claim, oid, pwd, auto.value)
    console.print(f"[bright_green]已设置自动领取奖励为[/bright_green] [bright_yellow]{auto.label}[/bright_yellow]")


@app.command()
def main(
    order_id: str = typer.Argument(..., metavar="ORDER_ID", help="订单号", callback=parse_order_id),
    query: bool = typer.Option(False, "--query", "-q", help="查询订单数据, 不能与订单操作选项同时传入"),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        metavar="MODE",
        help="设置对战模式: casual=1|c|休闲, standard=2|s|标准, wild=3|w|狂野, "
        "twist=4|t|幻变, battlegrounds=5|b|酒馆|战棋|酒馆战棋",
        callback=parse_mode,
    ),
    hero: Optional[List[str]] = typer.Option(
        None,
        "--hero",
        "-H",
        metavar="HERO",
        help="设置对战英雄: 英雄名称列表(英文逗号分隔), 掩码数值(1-2047)或 全部/ALL",
        callback=parse_hero_items,
    ),
    auto: Optional[str] = typer.Option(
        None,
        "--auto",
        "-a",
        metavar="ON/OFF",
        help="设置是否自动领取奖励: on=1|true, off=0|false",
        callback=parse_auto,
    ),
    table_size: Optional[str] = typer.Option(
        None,
        "--table-size",
        "-t",
        metavar="NUM",
        help="游戏数据统计表格显示的最大记录条数, ALL 显示所有记录, 0 不显示表格 (默认值见 application.yaml)",
        callback=parse_table_size,
    ),
    pwd: Optional[str] = typer.Option(None, "--pwd", "-p", help="战网密码前4位", callback=parse_pwd),
    skip_query: bool = typer.Option(
        False,
        "--skip-query",
        "-s",
        help="跳过查询订单数据, 直接将传入的订单号作为订单编号 (仅对订单操作有效)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output (INFO level logging)"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug mode (DEBUG level logging)"),
) -> None:
    """
    炉石传说代练订单助手.

    支持订单数据查询和订单相关操作: 设置对战模式, 设置对战英雄, 设置是否自动领取奖励.
    """
    has_settings = mode is not None or hero is not None or auto is not None

    if not query and not has_settings:
        _usage_error("必须传入 --query, --mode, --hero 或 --auto 中的至少一个")
    if query and has_settings:
        _usage_error("--query 不能与 --mode/--hero/--auto 同时传入")
    if has_settings and pwd is None:
        _usage_error("--mode/--hero/--auto 需要同时传入 --pwd")

    validate_project_root()
    if debug:
        setup_logging(level="DEBUG")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()

    print_header(console)
    try:
        service = OrderService()
        if query:
            rows = table_row_limit(table_size, get_app_config().application.display.default_table_size)
            _run_query(service, order_id, rows)
        else:
            _run_settings(service, order_id, skip_query, mode, hero, auto, pwd)
    finally:
        close_api_client()


def _run_query(service: OrderService, order_id: str, table_size: Optional[int]) -> None:
    log_with_source(logger, "cli", "info", "Query order", order_id=order_id)
    try:
        process_order(service, order_id, table_size)
    except ApplicationError as e:
        print_error(console, "查询失败", e)
        return
    console.print("[bright_green]查询完成！[/bright_green]")


def _run_settings(
    service: OrderService,
    order_id: str,
    skip_query: bool,
    mode: Optional[BattleMode],
    hero: Optional[List[str]],
    auto: Optional[AutoClaim],
    pwd: str,
) -> None:
    try:
        oid = _step("查询订单数据失败", service.resolve_oid, order_id, skip_query)
    except ApplicationError as e:
        print_error(console, "查询订单编号失败", e)
        return

    console.print(f"订单编号 [bright_cyan]{escape(oid)}[/bright_cyan]")
    log_with_source(logger, "cli", "info", "Update order", oid=oid, skip_query=skip_query)

    # each setter reports its own failure and the rest still run
    if mode is not None:
        try:
            set_battle_mode(service, oid, mode, pwd)
        except ApplicationError as e:
            print_error(console, "设置对战模式失败", e)

    if hero is not None:
        try:
            set_battle_heroes(service, oid, hero, pwd)
        except ApplicationError as e:
            print_error(console, "设置对战英雄失败", e)

    if auto is not None:
        try:
            set_auto_claim(service, oid, auto, pwd)
        except ApplicationError as e:
            print_error(console, "设置自动领取奖励失败", e)

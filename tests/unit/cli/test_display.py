"""Unit tests for the Rich order display."""

import io
import json

import pytest
from rich.console import Console

from hs_order.api.schemas import OrderConfig, OrderRecord
from hs_order.cli.display import (
    GOLD_COLUMNS,
    auto_claim_text,
    battle_heroes_text,
    battle_mode_text,
    display_battle_statistics,
    display_game_data,
    display_order_info,
    display_records_table,
    order_status_text,
    print_error,
    reward_level,
)
from hs_order.core.exceptions import ApplicationError, NetworkError
from hs_order.stats.decoder import DlData, GoldRecord, decode_dldata


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


def output(console: Console) -> str:
    return console.file.getvalue()


class TestStatusTexts:
    @pytest.mark.parametrize(
        ("finish", "banned", "text"),
        [("0", "1", "已终止"), ("1", "1", "已终止"), ("1", "0", "已完成"), ("0", "0", "进行中"), ("2", "0", "未知状态")],
    )
    def test_order_status(self, finish, banned, text):
        assert text in order_status_text(finish, banned)

    @pytest.mark.parametrize(
        ("code", "text"),
        [(None, "休闲模式"), ("2", "标准模式"), ("5", "酒馆战棋"), ("9", "未知模式(9)")],
    )
    def test_battle_mode(self, code, text):
        assert text in battle_mode_text(code)

    @pytest.mark.parametrize(
        ("mask", "text"),
        [(None, "全部"), ("2047", "全部"), ("0", "无"), ("junk", "无"), ("129", "战士, 法师")],
    )
    def test_battle_heroes(self, mask, text):
        assert text in battle_heroes_text(mask)

    @pytest.mark.parametrize(("auto", "text"), [(None, "关闭"), ("0", "关闭"), ("1", "开启"), ("x", "未知")])
    def test_auto_claim(self, auto, text):
        assert text in auto_claim_text(auto)

    @pytest.mark.parametrize(("num3", "level"), [("4", 5), ("0", 1), ("", 1), ("abc", 1)])
    def test_reward_level(self, num3, level):
        assert reward_level(num3) == level


class TestDisplayOrderInfo:
    def test_shows_order_fields(self, console, order_payload, sample_dldata, today):
        order = OrderRecord(**order_payload)
        config = OrderConfig.model_validate_json(order.config)
        dldata = decode_dldata(json.dumps(sample_dldata), today=today)

        display_order_info(console, order, config, dldata)

        text = output(console)
        assert "订单编号: HS20251112001" in text
        assert "订单状态: 进行中" in text
        assert "对战模式: 狂野模式" in text
        assert "对战英雄: 全部" in text
        assert "自动领取: 关闭" in text
        assert "奖励等级: 5 级" in text
        assert "今日对战: 30 场" in text
        assert "备注信息: 晚上十点后上号" in text

    def test_remark_omitted_when_empty(self, console, order_payload):
        order = OrderRecord(**{**order_payload, "remark": ""})

        display_order_info(console, order, OrderConfig(), DlData())

        assert "备注信息" not in output(console)

    def test_markup_in_values_is_escaped(self, console, order_payload):
        order = OrderRecord(**{**order_payload, "remark": "[red]x[/red]"})

        display_order_info(console, order, OrderConfig(), DlData())

        assert "[red]x[/red]" in output(console)


class TestDisplayRecordsTable:
    records = [GoldRecord(f"2025-10-0{i} 00:00:00", "+1", "0") for i in range(1, 6)]

    def test_limits_rows(self, console):
        display_records_table(console, self.records, GOLD_COLUMNS, "金币记录", 2)

        text = output(console)
        assert "最近 2 条金币记录" in text
        assert "2025-10-02" in text
        assert "2025-10-03" not in text

    def test_none_shows_all(self, console):
        display_records_table(console, self.records, GOLD_COLUMNS, "金币记录", None)
        assert "最近 5 条金币记录" in output(console)

    def test_zero_hides_table(self, console):
        display_records_table(console, self.records, GOLD_COLUMNS, "金币记录", 0)
        assert output(console) == ""

    def test_limit_larger_than_records(self, console):
        display_records_table(console, self.records, GOLD_COLUMNS, "金币记录", 50)
        assert "最近 5 条金币记录" in output(console)


class TestDisplayStatistics:
    def test_game_data_sections(self, console, sample_dldata, today):
        dldata = decode_dldata(json.dumps(sample_dldata), today=today)

        display_game_data(console, dldata, 10)

        text = output(console)
        assert "总金币变化: +200 枚" in text
        assert "总卡包变化: +5 个" in text
        assert "总经验变化: +378 点" in text
        assert "胜率: 50 %" in text
        assert "对战经验: +168 点" in text
        assert "最近 3 条对战记录" in text

    def test_empty_sections(self, console):
        display_game_data(console, DlData(), 10)

        text = output(console)
        assert "暂无金币记录" in text
        assert "暂无经验记录" in text
        assert "暂无对战记录" in text

    def test_battle_totals_shown_with_table_hidden(self, console, sample_dldata, today):
        dldata = decode_dldata(json.dumps(sample_dldata), today=today)

        display_battle_statistics(console, dldata.battle_records, 0)

        text = output(console)
        assert "胜利场次: 1 场" in text
        assert "对战统计" in text
        assert "最近" not in text


class TestPrintError:
    def test_prints_label_and_causes(self, console):
        try:
            try:
                raise NetworkError()
            except NetworkError as e:
                raise ApplicationError("获取订单数据接口失败") from e
        except ApplicationError as e:
            print_error(console, "查询失败", e)

        assert "查询失败 获取订单数据接口失败 网络请求失败" in output(console)

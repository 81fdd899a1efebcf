"""Unit tests for CLI parameter callbacks."""

import pytest
import typer

from hs_order.cli.params import (
    TABLE_SIZE_ALL,
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


class TestParseOrderId:
    def test_digits_accepted(self):
        assert parse_order_id("1234567890123456789") == "1234567890123456789"

    @pytest.mark.parametrize("value", ["", "12a4", "-123", "１２３"])
    def test_rejects_non_digits(self, value):
        with pytest.raises(typer.BadParameter, match="订单号必须为纯数字"):
            parse_order_id(value)


class TestParseTableSize:
    @pytest.mark.parametrize(
        ("value", "expected"), [("10", 10), ("0", 0), ("all", TABLE_SIZE_ALL), ("ALL", TABLE_SIZE_ALL)]
    )
    def test_valid(self, value, expected):
        assert parse_table_size(value) == expected

    def test_not_given_is_left_unresolved(self):
        assert parse_table_size(None) is None

    @pytest.mark.parametrize("value", ["-1", "ten", ""])
    def test_invalid(self, value):
        with pytest.raises(typer.BadParameter, match="整数或ALL"):
            parse_table_size(value)


class TestTableRowLimit:
    @pytest.mark.parametrize(("table_size", "expected"), [(None, 10), (TABLE_SIZE_ALL, None), (0, 0), (5, 5)])
    def test_limits(self, table_size, expected):
        assert table_row_limit(table_size, default=10) == expected


class TestParsePwd:
    def test_none_passes_through(self):
        assert parse_pwd(None) is None

    @pytest.mark.parametrize("value", ["abcd", "密码前四"])
    def test_four_characters(self, value):
        assert parse_pwd(value) == value

    @pytest.mark.parametrize("value", ["abc", "abcde", ""])
    def test_wrong_length(self, value):
        with pytest.raises(typer.BadParameter, match="必须为4个字符"):
            parse_pwd(value)


class TestParseMode:
    @pytest.mark.parametrize(
        ("value", "mode"),
        [
            ("casual", BattleMode.CASUAL),
            ("C", BattleMode.CASUAL),
            ("2", BattleMode.STANDARD),
            ("标准", BattleMode.STANDARD),
            ("Wild", BattleMode.WILD),
            ("t", BattleMode.TWIST),
            ("酒馆战棋", BattleMode.BATTLEGROUNDS),
            ("战棋", BattleMode.BATTLEGROUNDS),
        ],
    )
    def test_aliases(self, value, mode):
        assert parse_mode(value) is mode

    def test_none_passes_through(self):
        assert parse_mode(None) is None

    def test_unknown(self):
        with pytest.raises(typer.BadParameter, match="未知对战模式: ranked"):
            parse_mode("ranked")

    def test_codes_and_labels(self):
        assert BattleMode.WILD.value == "3"
        assert BattleMode.BATTLEGROUNDS.label == "酒馆战棋"


class TestParseAuto:
    @pytest.mark.parametrize(
        ("value", "auto"),
        [("on", AutoClaim.ON), ("1", AutoClaim.ON), ("TRUE", AutoClaim.ON), ("off", AutoClaim.OFF), ("0", AutoClaim.OFF)],
    )
    def test_aliases(self, value, auto):
        assert parse_auto(value) is auto

    def test_unknown(self):
        with pytest.raises(typer.BadParameter, match="未知自动领取选项: maybe"):
            parse_auto("maybe")

    def test_labels(self):
        assert AutoClaim.ON.label == "开启"
        assert AutoClaim.OFF.label == "关闭"


class TestParseHeroItems:
    def test_not_given(self):
        assert parse_hero_items(None) == []
        assert parse_hero_items([]) == []

    def test_splits_commas_across_repeats(self):
        assert parse_hero_items(["法师,牧师", "战士"]) == ["法师", "牧师", "战士"]

    def test_mask_and_all_kept(self):
        assert parse_hero_items(["2000"]) == ["2000"]
        assert parse_hero_items(["ALL"]) == ["ALL"]

    def test_unknown_hero(self):
        with pytest.raises(typer.BadParameter, match="未知英雄名称: 巫妖王"):
            parse_hero_items(["法师,巫妖王"])

    def test_mask_out_of_range(self):
        with pytest.raises(typer.BadParameter, match="英雄掩码超出范围"):
            parse_hero_items(["4096"])

    def test_empty_item_rejected(self):
        with pytest.raises(typer.BadParameter):
            parse_hero_items(["法师,"])

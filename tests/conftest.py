"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

import json
import time
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from hs_order.core.config_schema import ApplicationSchema

USER_AGENTS = [
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/142.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64; rv:132.0) Gecko/20100101 Firefox/132.0",
]


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture
def app_settings() -> ApplicationSchema:
    """Application settings pointing at a fake endpoint."""
    return ApplicationSchema(
        name="hs-order-cli",
        version="0.0.0-test",
        description="test",
        api={
            "url": "http://api.test/training/hs.php",
            "host": "api.test",
            "origin": "http://api.test",
            "accept": "*/*",
            "accept_encoding": "gzip, deflate",
            "accept_language": "en-US,en;q=0.9,zh-CN;q=0.8,zh;q=0.7",
            "content_type": "application/x-www-form-urlencoded; charset=UTF-8",
        },
        http={
            "connect_timeout": 3,
            "timeout": 5,
            "max_retries": 2,
            "retry_base_ms": 200,
            "user_agents": USER_AGENTS,
        },
        display={"default_table_size": 10},
    )


# =============================================================================
# Time Fixtures
# =============================================================================


def today_in_shanghai() -> str:
    return datetime.now(timezone(timedelta(hours=8))).strftime("%Y%m%d")


@pytest.fixture
def shanghai_local_time(monkeypatch):
    """
    Run the test with the process local time zone set to UTC+8.

    Uses a POSIX TZ string so no time zone database is required.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "CST-8")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


# =============================================================================
# Order Data Fixtures
# =============================================================================


def build_dldata(today: str, **overrides: Any) -> list[Any]:
    """
    Build the sample dldata array used across tests.

    Keyword overrides replace elements by index name, e.g. ``gold=[...]``.
    """
    arr: list[Any] = [None] * 13
    arr[0] = 8560
    arr[1] = 9
    arr[2] = 50
    arr[3] = today
    arr[4] = 3
    arr[5] = 27
    arr[6] = 0
    arr[7] = "CHN"
    arr[8] = "1762928742"
    arr[9] = 0
    arr[10] = overrides.get("gold", [
        [1759898700, 50, 0],
        [1759890783, 0, 2],
        [1759887285, 100, 2],
        [1759885254, 50, 1],
    ])
    arr[11] = overrides.get("exp", [
        [1762920243, 139, 43, 30693, 93],
        [1762918710, 127, 42, 30554, 1454],
        [1762917298, 112, 42, 30427, 1327],
    ])
    arr[12] = overrides.get("battle", [
        [1762928742, -1, 14, 1762927893],
        [0, 0, 0, 1762925746],
        [1762925584, 1, 154, 1762924010],
    ])
    return arr


@pytest.fixture
def sample_dldata() -> list[Any]:
    return build_dldata(today_in_shanghai())


@pytest.fixture
def order_payload(sample_dldata) -> dict[str, str]:
    """One order record as the API sends it."""
    return {
        "am": "",
        "oid": "HS20251112001",
        "edate": "2025-12-01 00:00:00",
        "config": json.dumps({"battlemode": "3", "region": "CN", "battleheroes": "2047"}),
        "details": "",
        "finish": "0",
        "banned": "0",
        "dltype": "1",
        "num1": "1200",
        "num2": "15",
        "num3": "4",
        "num7": "",
        "num8": "",
        "dldata": json.dumps(sample_dldata, ensure_ascii=False),
        "remark": "晚上十点后上号",
    }


@pytest.fixture
def dldata_builder() -> Any:
    """Provide build_dldata for tests that need custom record lists."""
    return build_dldata


@pytest.fixture
def today() -> str:
    """Today's date in Asia/Shanghai as YYYYMMDD."""
    return today_in_shanghai()

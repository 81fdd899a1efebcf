"""
API Schemas.

Pydantic models for the order API's response envelope and the records
it carries. Every call to the endpoint returns the same envelope; only
order fetches populate ``data``.
"""

from pydantic import BaseModel, ConfigDict


class OrderRecord(BaseModel):
    """
    One order as returned in ``data``.

    ``config`` and ``dldata`` are JSON documents embedded as strings;
    decode them with hs_order.stats.decoder.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    oid: str
    edate: str
    config: str
    finish: str
    banned: str
    num1: str
    num2: str
    num3: str
    dldata: str
    remark: str
    am: str = ""
    details: str = ""
    dltype: str = ""
    num7: str = ""
    num8: str = ""


class ApiEnvelope(BaseModel):
    """Top-level wrapper returned by every API call."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    code: int
    error: str
    count: int | None = None
    data: list[OrderRecord] | None = None


class OrderConfig(BaseModel):
    """
    Decoded ``config`` of an order.

    A missing field means the service default applies; it is not the same
    as the user clearing the setting.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    battlemode: str | None = None
    region: str | None = None
    pause: str | None = None
    battleheroes: str | None = None
    auto: str | None = None

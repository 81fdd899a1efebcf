"""
Order Service.

Business operations on top of the API client: fetching an order and the
three setters that change how the order is played. Each operation sends
its own fixed set of form keys and checks the envelope's code.
"""

from hs_order.api.client import OrderApiClient, get_api_client
from hs_order.api.schemas import ApiEnvelope, OrderRecord
from hs_order.core.constants import SUCCESS_CODE
from hs_order.core.exceptions import ApiCodeError, EmptyDataError
from hs_order.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def _ensure_success(envelope: ApiEnvelope) -> None:
    if envelope.code != SUCCESS_CODE:
        raise ApiCodeError(envelope.code, envelope.error)


class OrderService:
    """
    Service for order operations.

    Usage:
        service = OrderService()
        order = service.fetch_order("1234567890123456789")
        service.set_battle_mode(order.oid, "abcd", "2")
    """

    def __init__(self, client: OrderApiClient | None = None) -> None:
        self._client = client if client is not None else get_api_client()

    def _log_operation(self, message: str, **kwargs) -> None:
        log_with_source(logger, "api", "info", message, **kwargs)

    def fetch_order(self, order_id: str) -> OrderRecord:
        """
        Fetch one order by its public order id.

        Raises:
            ApiCodeError: The API reported a failure
            EmptyDataError: The API reported success but returned no order
        """
        self._log_operation("Fetching order", order_id=order_id)
        envelope = self._client.post_form([("key", order_id)])
        _ensure_success(envelope)

        if not envelope.data:
            raise EmptyDataError()
        return envelope.data[0]

    def resolve_oid(self, order_id: str, skip_query: bool = False) -> str:
        """Return the internal order number, fetching the order unless skipped."""
        if skip_query:
            return order_id
        return self.fetch_order(order_id).oid

    def _update(self, field: str, value: str, oid: str, bnetpwd: str) -> None:
        self._log_operation("Updating order", field=field, value=value, oid=oid)
        envelope = self._client.post_form([
            (field, value),
            ("oid", oid),
            ("bnetpwd", bnetpwd),
        ])
        _ensure_success(envelope)

    def set_battle_mode(self, oid: str, bnetpwd: str, battlemode: str) -> None:
        """Set the battle mode code (1-5)."""
        self._update("battlemode", battlemode, oid, bnetpwd)

    def set_battle_heroes(self, oid: str, bnetpwd: str, battleheroes: str) -> None:
        """Set the allowed heroes as a decimal bitmask string."""
        self._update("battleheroes", battleheroes, oid, bnetpwd)

    def set_auto_claim(self, oid: str, bnetpwd: str, auto: str) -> None:
        """Turn automatic reward claiming on ("1") or off ("0")."""
        self._update("auto", auto, oid, bnetpwd)

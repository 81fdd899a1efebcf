"""
HTTP Client for the order API.

Provides a blocking HTTP client that form-POSTs to the single API endpoint
and returns the parsed response envelope. Transient failures (transport
errors, non-2xx statuses) are retried with exponential backoff; malformed
bodies are not.

A single client instance is shared by the whole process so the keep-alive
connection and the User-Agent chosen at construction are reused.
"""

import random
import time
from collections.abc import Callable, Sequence

import httpx
from pydantic import ValidationError as PydanticValidationError

from hs_order.api.schemas import ApiEnvelope
from hs_order.core.config import get_app_config
from hs_order.core.config_schema import ApplicationSchema
from hs_order.core.exceptions import HttpStatusError, NetworkError, ResponseDecodeError
from hs_order.core.logging import get_logger, log_with_source
from hs_order.core.resilience import build_retrying

logger = get_logger(__name__)

FormPairs = Sequence[tuple[str, str]]


class OrderApiClient:
    """
    HTTP client for the order API.

    Features:
    - Fixed browser-like headers, User-Agent picked once per instance
    - Connect/request timeouts from application.yaml
    - Retries on transport errors and non-2xx statuses
    - Structured logging of requests/responses

    Usage:
        client = OrderApiClient()
        envelope = client.post_form([("key", "1234567890")])
    """

    def __init__(
        self,
        settings: ApplicationSchema | None = None,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            settings: Application settings. If None, reads config/settings/application.yaml.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
            sleep: Sleep function used between retries.
            rng: Random source for the User-Agent choice.
        """
        app = settings if settings is not None else get_app_config().application
        self.url = app.api.url
        self.max_retries = app.http.max_retries
        self.retry_base_ms = app.http.retry_base_ms
        # httpx limits each phase (read, write, pool) separately, so a slow
        # trickling response can run past `timeout` in total
        self.timeout = httpx.Timeout(app.http.timeout, connect=app.http.connect_timeout)
        self.user_agent = (rng or random).choice(app.http.user_agents)
        self.headers = {
            "Accept": app.api.accept,
            "Accept-Encoding": app.api.accept_encoding,
            "Accept-Language": app.api.accept_language,
            "Connection": "keep-alive",
            "Host": app.api.host,
            "Origin": app.api.origin,
            "Referer": app.api.url,
            "Content-Type": app.api.content_type,
            "X-Requested-With": "XMLHttpRequest",
            "User-Agent": self.user_agent,
        }
        self._transport = transport
        self._sleep = sleep
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers=self.headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def _send_once(self, form: FormPairs) -> httpx.Response:
        """One POST attempt; raises on transport failure or non-2xx status."""
        response = self._get_client().post(self.url, data=dict(form))
        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            status_code=response.status_code,
        )
        response.raise_for_status()
        return response

    def post_form(self, form: FormPairs) -> ApiEnvelope:
        """
        POST a form to the API endpoint and parse the envelope.

        Args:
            form: Key/value pairs, sent in order as the urlencoded body

        Returns:
            Parsed ApiEnvelope

        Raises:
            NetworkError: Transport failure on every attempt
            HttpStatusError: Non-2xx status on the last attempt
            ResponseDecodeError: 2xx body that is not a valid envelope
        """
        log_with_source(
            logger,
            "api",
            "debug",
            "API request",
            keys=[key for key, _ in form],
        )

        retrying = build_retrying(
            max_retries=self.max_retries,
            base_ms=self.retry_base_ms,
            retry_on=(httpx.TransportError, httpx.HTTPStatusError),
            sleep=self._sleep,
        )

        try:
            response = retrying(self._send_once, form)
        except httpx.HTTPStatusError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                status_code=e.response.status_code,
                error=str(e),
            )
            raise HttpStatusError(status_code=e.response.status_code) from e
        except httpx.TransportError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                error=str(e),
            )
            raise NetworkError() from e

        try:
            return ApiEnvelope.model_validate_json(response.content)
        except PydanticValidationError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API response is not a valid envelope",
                error_count=e.error_count(),
            )
            raise ResponseDecodeError() from e


# Module-level client instance
_client: OrderApiClient | None = None


def get_api_client() -> OrderApiClient:
    """Get or create the API client singleton."""
    global _client
    if _client is None:
        _client = OrderApiClient()
    return _client


def close_api_client() -> None:
    """Close the API client."""
    global _client
    if _client:
        _client.close()
        _client = None

"""Async client for the swap API.

Every call goes through `SwapSDK._request`, which attaches the auth token
(via an httpx request hook) and turns any failure into a `SwapAPIError`.
"""

import logging
from decimal import Decimal
from typing import Any, Optional, Union

import httpx

from swapsdk.config import ClientOptions, Settings, get_settings
from swapsdk.errors import SwapAPIError
from swapsdk.models import (
    APIErrorBody,
    AuthToken,
    CreateExchangeRequest,
    CreateExchangeResponse,
    Currency,
    ExchangeEstimate,
    ExchangeRange,
    Swap,
    SwapStatusResponse,
)

logger = logging.getLogger(__name__)

AUTH_HEADER = "x-auth-token"

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"
NETWORK_ERROR_MESSAGE = "Network error: No response received from server"
REQUEST_ERROR_PREFIX = "Request error: "


def _json_number(value: Union[int, float, Decimal]) -> Union[int, float]:
    """Decimal is not JSON serialisable; send it as a plain number."""
    if isinstance(value, Decimal):
        return float(value)
    return value


def _remote_error(response: httpx.Response) -> SwapAPIError:
    """Build the error for a response with a non-2xx status."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    body: APIErrorBody = payload if isinstance(payload, dict) else {}

    message = body.get("message") or body.get("error") or UNKNOWN_ERROR_MESSAGE
    return SwapAPIError(str(message), body.get("code"))


def _decode(response: httpx.Response) -> Any:
    """Return the body of a successful response as the backend sent it."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class SwapSDK:
    """Client for the swap API.

    Example:
        async with SwapSDK(base_url="https://api.example.com/api") as sdk:
            sdk.set_auth_token(token)
            estimate = await sdk.get_exchange_rate("zec", "sol", 1)

    All endpoint methods return the decoded response body unchanged and raise
    `SwapAPIError` on any failure. Nothing is retried.
    """

    def __init__(
        self,
        options: Optional[ClientOptions] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        headers: Optional[dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client. Performs no network I/O.

        Args:
            options: Connection options (defaults used when omitted)
            base_url: Overrides options.base_url
            timeout: Overrides options.timeout, in milliseconds
            headers: Overrides options.headers
            transport: Custom httpx transport
        """
        options = options or ClientOptions()
        overrides = {
            key: value
            for key, value in (("base_url", base_url), ("timeout", timeout), ("headers", headers))
            if value is not None
        }
        if overrides:
            options = ClientOptions(**{**options.model_dump(), **overrides})

        self.options = options
        self._auth_token: Optional[AuthToken] = None
        self._client = httpx.AsyncClient(
            base_url=options.base_url,
            timeout=options.timeout_seconds,
            headers=options.default_headers(),
            transport=transport,
            follow_redirects=True,
            event_hooks={"request": [self._attach_auth_token]},
        )

    @classmethod
    def from_env(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SwapSDK":
        """Create a client configured from SWAPSDK_* environment variables."""
        settings = settings or get_settings()
        sdk = cls(ClientOptions.from_settings(settings), transport=transport)
        if settings.auth_token:
            sdk.set_auth_token(settings.auth_token)
        return sdk

    async def __aenter__(self) -> "SwapSDK":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    # ======================
    # Authentication
    # ======================

    def set_auth_token(self, token: AuthToken) -> None:
        """Set the token sent with every later request (JWT or base64 Privy token)."""
        self._auth_token = token

    def clear_auth_token(self) -> None:
        self._auth_token = None

    def get_auth_token(self) -> Optional[AuthToken]:
        return self._auth_token

    async def _attach_auth_token(self, request: httpx.Request) -> None:
        # Read at send time: a request already sent keeps the token it went out with.
        if self._auth_token:
            request.headers[AUTH_HEADER] = self._auth_token

    # ======================
    # Transport
    # ======================

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """Send one request and return the decoded response body.

        Raises:
            SwapAPIError: On a non-2xx status, when no response arrives, or
                when the request cannot be built or sent
        """
        logger.debug(f"{method} {endpoint}")

        try:
            request = self._client.build_request(method, endpoint, params=params, json=json)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            logger.warning(f"Could not build {method} {endpoint}: {e}")
            raise SwapAPIError(f"{REQUEST_ERROR_PREFIX}{e}") from None

        try:
            response = await self._client.send(request)
        except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            logger.warning(f"Could not send {method} {endpoint}: {e}")
            raise SwapAPIError(f"{REQUEST_ERROR_PREFIX}{e}") from None
        except httpx.TransportError as e:
            logger.warning(f"No response for {method} {endpoint}: {e!r}")
            raise SwapAPIError(NETWORK_ERROR_MESSAGE) from None
        except httpx.RequestError as e:
            # Response arrived but its body could not be read (e.g. bad content encoding).
            logger.warning(f"Unreadable response for {method} {endpoint}: {e!r}")
            raise SwapAPIError(NETWORK_ERROR_MESSAGE) from None

        if not response.is_success:
            error = _remote_error(response)
            logger.warning(
                f"{method} {endpoint} failed with HTTP {response.status_code}: "
                f"{error.message} (code={error.code})"
            )
            raise error

        return _decode(response)

    async def _get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> Any:
        return await self._request("GET", endpoint, params=params)

    async def _post(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self._request("POST", endpoint, json=data)

    # ======================
    # Endpoints
    # ======================

    async def get_currencies(self) -> list[Currency]:
        """Get the currencies the exchange supports."""
        return await self._get("/swap/currencies")

    async def get_exchange_rate(
        self,
        from_currency: str,
        to_currency: str,
        amount: Union[int, float, Decimal],
    ) -> ExchangeEstimate:
        """Get an exchange rate estimate.

        Args:
            from_currency: Source currency symbol (e.g. "zec")
            to_currency: Target currency symbol (e.g. "sol")
            amount: Amount of the source currency

        Returns:
            Estimate with output amount, rate and fees
        """
        return await self._post(
            "/swap/estimate",
            {
                "fromCurrency": from_currency,
                "toCurrency": to_currency,
                "amount": _json_number(amount),
            },
        )

    async def get_exchange_range(self, from_currency: str, to_currency: str) -> ExchangeRange:
        """Get the minimum and maximum amounts allowed for a currency pair."""
        return await self._get(
            "/swap/range",
            {"fromCurrency": from_currency, "toCurrency": to_currency},
        )

    async def create_exchange(self, request: CreateExchangeRequest) -> CreateExchangeResponse:
        """Create a new exchange.

        The request is sent as-is; addresses and amounts are validated by the
        backend only. Unlike get_exchange_rate, a Decimal amount is not
        converted here and fails with a "Request error"; pass an int or float.

        Returns:
            The created swap and the deposit details to fund it
        """
        return await self._post("/swap/create", request)

    async def get_exchange_status(self, swap_id: str) -> SwapStatusResponse:
        return await self._get(f"/swap/status/{swap_id}")

    async def get_swap_history(self) -> list[Swap]:
        """Get the swaps of the user the auth token belongs to."""
        return await self._get("/swap/history")

    async def get_swap_details(self, swap_id: str) -> Swap:
        return await self._get(f"/swap/{swap_id}")

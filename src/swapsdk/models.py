"""Data shapes exchanged with the swap API.

Responses are returned exactly as the backend sends them, so these are
TypedDicts describing the decoded JSON rather than classes that copy it.
Field names keep the backend's casing (camelCase for swaps, snake_case for
estimates).
"""

from enum import Enum
from typing import NotRequired, Optional, TypedDict, Union

AuthToken = str
Number = Union[int, float]


class SwapStatus(str, Enum):
    """Lifecycle tag of a swap. Transitions are owned by the backend."""

    WAITING = "waiting"
    CONFIRMING = "confirming"
    EXCHANGING = "exchanging"
    SENDING = "sending"
    FINISHED = "finished"
    FAILED = "failed"
    REFUNDED = "refunded"
    EXPIRED = "expired"

    @property
    def is_terminal(self) -> bool:
        """Whether the backend will move this swap any further."""
        return self in _TERMINAL_STATUSES


_TERMINAL_STATUSES = frozenset(
    {SwapStatus.FINISHED, SwapStatus.FAILED, SwapStatus.REFUNDED, SwapStatus.EXPIRED}
)


class Currency(TypedDict):
    """Currency supported by the exchange."""

    symbol: str
    name: str
    image: str
    network: str
    hasExternalId: bool
    contractAddress: NotRequired[str]
    decimals: int
    isFiat: bool
    isActive: bool
    floatingPrecision: NotRequired[int]
    fixedPrecision: NotRequired[int]
    min: NotRequired[Number]
    max: NotRequired[Number]
    warning: NotRequired[str]


class ExchangeEstimate(TypedDict):
    """Non-binding quote for converting `amount` of one currency."""

    currency_from: str
    currency_to: str
    amount: Number
    amount_to: Number
    estimated_time: NotRequired[Number]
    rate: NotRequired[Number]
    fee: NotRequired[Number]
    total_fee: NotRequired[Number]
    network_fee: NotRequired[Number]
    warning: NotRequired[str]


class ExchangeRange(TypedDict):
    """Minimum and maximum amounts accepted for a currency pair."""

    min: Number
    max: Number
    min_fixed: NotRequired[Number]
    max_fixed: NotRequired[Number]
    min_float: NotRequired[Number]
    max_float: NotRequired[Number]
    warning: NotRequired[str]


class CreateExchangeRequest(TypedDict):
    """Body of a create-exchange call. Sent to the backend verbatim."""

    fromCurrency: str
    toCurrency: str
    amount: Number
    recipientAddress: str
    refundAddress: NotRequired[str]
    refundExtraId: NotRequired[str]


class Swap(TypedDict):
    """A swap order as stored by the backend."""

    id: str
    userId: str
    fromCurrency: str
    toCurrency: str
    fromAmount: Number
    toAmount: Number
    recipientAddress: str
    depositAddress: NotRequired[str]
    status: str  # one of SwapStatus values
    createdAt: str
    updatedAt: str


class ExchangeDetails(TypedDict):
    depositAddress: str
    amount: Number
    amountTo: Number


class CreateExchangeResponse(TypedDict):
    success: bool
    swap: Swap
    exchange: ExchangeDetails


class SwapStatusResponse(TypedDict):
    """Current state of a swap."""

    id: str
    status: str
    fromCurrency: str
    toCurrency: str
    fromAmount: Number
    toAmount: Number
    depositAddress: NotRequired[str]
    recipientAddress: str
    createdAt: str
    updatedAt: str


class APIErrorBody(TypedDict, total=False):
    """Body the backend sends with a non-2xx status."""

    error: str
    message: str
    code: Optional[str]

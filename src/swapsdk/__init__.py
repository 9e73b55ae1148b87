"""Async Python client for the ZOS cryptocurrency swap API."""

from swapsdk.client import SwapSDK
from swapsdk.config import ClientOptions, Settings, get_settings
from swapsdk.errors import SwapAPIError
from swapsdk.models import (
    APIErrorBody,
    AuthToken,
    CreateExchangeRequest,
    CreateExchangeResponse,
    Currency,
    ExchangeDetails,
    ExchangeEstimate,
    ExchangeRange,
    Swap,
    SwapStatus,
    SwapStatusResponse,
)

__version__ = "1.0.0"

__all__ = [
    "APIErrorBody",
    "AuthToken",
    "ClientOptions",
    "CreateExchangeRequest",
    "CreateExchangeResponse",
    "Currency",
    "ExchangeDetails",
    "ExchangeEstimate",
    "ExchangeRange",
    "Settings",
    "Swap",
    "SwapAPIError",
    "SwapSDK",
    "SwapStatus",
    "SwapStatusResponse",
    "get_settings",
]

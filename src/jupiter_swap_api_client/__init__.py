"""Async client for the Jupiter swap API."""

from jupiter_swap_api_client.client import JupiterSwapApiClient
from jupiter_swap_api_client.config import Settings, get_settings
from jupiter_swap_api_client.errors import ClientError, DeserializationError, RequestFailedError
from jupiter_swap_api_client.models import (
    InternalQuoteRequest,
    QuoteRequest,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapMode,
    SwapRequest,
    SwapResponse,
    TransactionConfig,
)

__all__ = [
    "JupiterSwapApiClient",
    "Settings",
    "get_settings",
    # Errors
    "ClientError",
    "RequestFailedError",
    "DeserializationError",
    # Contracts
    "QuoteRequest",
    "InternalQuoteRequest",
    "QuoteResponse",
    "SwapMode",
    "SwapRequest",
    "SwapResponse",
    "SwapInstructionsResponse",
    "TransactionConfig",
]

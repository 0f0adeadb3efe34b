"""Request and response contracts for the Jupiter swap API."""

from jupiter_swap_api_client.models.quote import (
    InternalQuoteRequest,
    PlatformFee,
    QuoteRequest,
    QuoteResponse,
    SwapMode,
)
from jupiter_swap_api_client.models.route_plan import (
    RoutePlanStep,
    RoutePlanWithMetadata,
    SwapInfo,
)
from jupiter_swap_api_client.models.swap import (
    DynamicSlippageReport,
    PrioritizationType,
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    SwapRequest,
    SwapResponse,
    UiSimulationError,
)
from jupiter_swap_api_client.models.transaction_config import (
    AutoMultiplier,
    DynamicSlippageSettings,
    JitoTipLamports,
    PriorityLevel,
    PriorityLevelConfig,
    PriorityLevelWithMaxLamports,
    TransactionConfig,
)

__all__ = [
    # Quote contracts
    "QuoteRequest",
    "InternalQuoteRequest",
    "QuoteResponse",
    "PlatformFee",
    "SwapMode",
    # Route plan
    "SwapInfo",
    "RoutePlanStep",
    "RoutePlanWithMetadata",
    # Swap contracts
    "SwapRequest",
    "SwapResponse",
    "SwapInstructionsResponse",
    "SwapInstructionsResponseInternal",
    "PrioritizationType",
    "DynamicSlippageReport",
    "UiSimulationError",
    # Transaction config
    "TransactionConfig",
    "DynamicSlippageSettings",
    "AutoMultiplier",
    "JitoTipLamports",
    "PriorityLevel",
    "PriorityLevelConfig",
    "PriorityLevelWithMaxLamports",
]

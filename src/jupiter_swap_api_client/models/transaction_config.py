"""Options controlling how the swap transaction is built.

These are flattened into the top level of the ``/swap`` and
``/swap-instructions`` request bodies.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import Field

from jupiter_swap_api_client.models.fields import PubkeyField, WireModel


class PriorityLevel(str, Enum):
    """Priority fee percentile the API should target."""

    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class AutoMultiplier(WireModel):
    """Multiply the automatically estimated priority fee."""

    auto_multiplier: int = Field(..., ge=1)


class JitoTipLamports(WireModel):
    """Pay a fixed Jito tip instead of a compute budget priority fee."""

    jito_tip_lamports: int = Field(..., ge=0)


class PriorityLevelConfig(WireModel):
    priority_level: PriorityLevel
    max_lamports: int = Field(..., ge=0)


class PriorityLevelWithMaxLamports(WireModel):
    """Target a priority level, capped at ``max_lamports``."""

    priority_level_with_max_lamports: PriorityLevelConfig


# Exact lamports, "auto", or one of the structured strategies
PrioritizationFeeLamports = Union[
    int,
    Literal["auto"],
    AutoMultiplier,
    JitoTipLamports,
    PriorityLevelWithMaxLamports,
]

ComputeUnitPriceMicroLamports = Union[int, Literal["auto"]]


class DynamicSlippageSettings(WireModel):
    """Bounds for server-side dynamic slippage estimation."""

    min_bps: Optional[int] = Field(None, ge=0, le=10000)
    max_bps: Optional[int] = Field(None, ge=0, le=10000)


class TransactionConfig(WireModel):
    """Swap transaction options."""

    wrap_and_unwrap_sol: bool = Field(default=True, description="Wrap/unwrap SOL around the swap")
    allow_optimized_wrapped_sol_token_account: bool = False
    fee_account: Optional[PubkeyField] = Field(None, description="Token account collecting the platform fee")
    destination_token_account: Optional[PubkeyField] = Field(
        None, description="Token account receiving the output instead of the user's ATA"
    )
    tracking_account: Optional[PubkeyField] = None
    compute_unit_price_micro_lamports: Optional[ComputeUnitPriceMicroLamports] = None
    prioritization_fee_lamports: Optional[PrioritizationFeeLamports] = None
    dynamic_compute_unit_limit: bool = Field(
        default=False, description="Simulate to size the compute unit limit"
    )
    as_legacy_transaction: bool = False
    use_shared_accounts: Optional[bool] = None
    use_token_ledger: bool = False
    skip_user_accounts_rpc_calls: bool = False
    program_authority_id: Optional[int] = Field(None, ge=0, le=255)
    dynamic_slippage: Optional[DynamicSlippageSettings] = None
    blockhash_slots_to_expiry: Optional[int] = Field(None, ge=0, le=255)
    correct_last_valid_block_height: bool = False

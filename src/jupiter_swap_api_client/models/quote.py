"""Quote request and response contracts.

``QuoteRequest`` is what callers build. ``InternalQuoteRequest`` is the
exact query-string layout the ``/quote`` endpoint expects; the client
converts one into the other before sending.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from jupiter_swap_api_client.models.fields import PubkeyField, U64String, WireModel
from jupiter_swap_api_client.models.route_plan import RoutePlanWithMetadata


class SwapMode(str, Enum):
    """Which side of the swap the amount refers to."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class _QuoteFields(WireModel):
    """Fields shared by the public and wire forms of a quote request."""

    input_mint: PubkeyField = Field(..., description="Mint to swap from")
    output_mint: PubkeyField = Field(..., description="Mint to swap to")
    amount: U64String = Field(..., description="Amount in base units of the input (or output for ExactOut)")
    swap_mode: Optional[SwapMode] = Field(None, description="ExactIn (default) or ExactOut")
    slippage_bps: int = Field(default=50, ge=0, le=10000, description="Slippage tolerance in bps")
    auto_slippage: Optional[bool] = None
    max_auto_slippage_bps: Optional[int] = Field(None, ge=0, le=10000)
    compute_auto_slippage: bool = False
    auto_slippage_collision_usd_value: Optional[int] = Field(None, ge=0)
    minimize_slippage: Optional[bool] = None
    platform_fee_bps: Optional[int] = Field(None, ge=0, le=255, description="Platform fee in bps")
    only_direct_routes: Optional[bool] = None
    as_legacy_transaction: Optional[bool] = None
    restrict_intermediate_tokens: Optional[bool] = None
    max_accounts: Optional[int] = Field(None, ge=0, description="Rough upper bound of accounts used")
    quote_type: Optional[str] = None
    prefer_liquid_dexes: Optional[bool] = None


class QuoteRequest(_QuoteFields):
    """Request for a swap quote."""

    dexes: Optional[list[str]] = Field(None, description="Only route through these DEX labels")
    excluded_dexes: Optional[list[str]] = Field(None, description="Never route through these DEX labels")
    quote_args: Optional[dict[str, str]] = Field(
        None,
        description="Extra query parameters passed through verbatim",
        exclude=True,
    )


class InternalQuoteRequest(_QuoteFields):
    """Wire form of a quote request, as sent in the query string."""

    dexes: Optional[str] = None
    excluded_dexes: Optional[str] = None

    @classmethod
    def from_quote_request(cls, request: QuoteRequest) -> "InternalQuoteRequest":
        """Convert a public request. ``quote_args`` is not carried over."""
        data = {name: getattr(request, name) for name in _QuoteFields.model_fields}
        return cls(
            **data,
            dexes=_join_labels(request.dexes),
            excluded_dexes=_join_labels(request.excluded_dexes),
        )

    def to_query_params(self) -> list[tuple[str, str]]:
        """Flatten into query pairs. Unset fields are skipped."""
        params = []
        for key, value in self.to_wire().items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            params.append((key, str(value)))
        return params


def _join_labels(labels: Optional[list[str]]) -> Optional[str]:
    if labels is None:
        return None
    return ",".join(labels)


class PlatformFee(WireModel):
    """Platform fee taken from the swap."""

    amount: U64String
    fee_bps: int = Field(..., ge=0, le=255)


class QuoteResponse(WireModel):
    """Quote returned by the ``/quote`` endpoint."""

    input_mint: PubkeyField
    in_amount: U64String
    output_mint: PubkeyField
    out_amount: U64String
    other_amount_threshold: U64String = Field(..., description="Min out (ExactIn) or max in (ExactOut)")
    swap_mode: SwapMode
    slippage_bps: int
    computed_auto_slippage: Optional[int] = None
    uses_quote_minimizing_slippage: Optional[bool] = None
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: Decimal
    route_plan: RoutePlanWithMetadata
    context_slot: int = 0
    time_taken: float = 0.0

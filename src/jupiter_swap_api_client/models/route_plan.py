"""Route plan contracts returned inside a quote."""

from typing import Optional

from pydantic import Field

from jupiter_swap_api_client.models.fields import PubkeyField, U64String, WireModel


class SwapInfo(WireModel):
    """A single AMM hop in a route."""

    amm_key: PubkeyField = Field(..., description="AMM account address")
    label: str = Field(default="", description="Human-readable DEX label (Raydium, Orca, ...)")
    input_mint: PubkeyField = Field(..., description="Mint swapped from")
    output_mint: PubkeyField = Field(..., description="Mint swapped to")
    in_amount: U64String = Field(..., description="Input amount in base units")
    out_amount: U64String = Field(..., description="Output amount in base units")
    fee_amount: Optional[U64String] = Field(None, description="Fee amount in base units")
    fee_mint: Optional[PubkeyField] = Field(None, description="Mint the fee is charged in")


class RoutePlanStep(WireModel):
    """A route leg and the share of the input it carries."""

    swap_info: SwapInfo
    percent: Optional[int] = Field(None, ge=0, le=100, description="Share of input in percent")
    bps: Optional[int] = Field(None, ge=0, le=10000, description="Share of input in basis points")


RoutePlanWithMetadata = list[RoutePlanStep]

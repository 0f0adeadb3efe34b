"""Swap and swap-instructions contracts.

``SwapInstructionsResponseInternal`` mirrors what the API returns;
``SwapInstructionsResponse`` is what callers get, with instructions
rebuilt as ``solders`` values ready to be put into a transaction.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from pydantic import Field, model_serializer
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from jupiter_swap_api_client.models.fields import (
    Base64Bytes,
    PubkeyField,
    U64String,
    WireModel,
)
from jupiter_swap_api_client.models.quote import QuoteResponse
from jupiter_swap_api_client.models.transaction_config import TransactionConfig


class SwapRequest(WireModel):
    """Body of a ``/swap`` or ``/swap-instructions`` request."""

    user_public_key: PubkeyField = Field(..., description="Wallet that signs the swap")
    quote_response: QuoteResponse = Field(..., description="Quote previously returned by /quote")
    config: TransactionConfig = Field(default_factory=TransactionConfig)

    @model_serializer(mode="wrap")
    def _flatten_config(self, handler) -> dict[str, Any]:
        data = handler(self)
        data.update(data.pop("config", None) or {})
        return data


class ComputeBudgetPrioritization(WireModel):
    micro_lamports: int
    estimated_micro_lamports: Optional[int] = None


class JitoPrioritization(WireModel):
    lamports: int


class PrioritizationType(WireModel):
    """How the priority fee was applied. Exactly one key is set."""

    compute_budget: Optional[ComputeBudgetPrioritization] = None
    jito: Optional[JitoPrioritization] = None


class DynamicSlippageReport(WireModel):
    """Outcome of server-side dynamic slippage estimation."""

    slippage_bps: Optional[int] = None
    other_amount: Optional[int] = None
    simulated_incurred_slippage_bps: Optional[int] = None
    amplification_ratio: Optional[Decimal] = None


class UiSimulationError(WireModel):
    """Simulation failure reported alongside an otherwise valid response."""

    error_code: str
    error: str


class SwapResponse(WireModel):
    """Serialized, unsigned swap transaction."""

    swap_transaction: Base64Bytes = Field(..., description="Serialized versioned transaction")
    last_valid_block_height: int
    prioritization_fee_lamports: int = 0
    compute_unit_limit: int = 0
    prioritization_type: Optional[PrioritizationType] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None


class AccountMetaInternal(WireModel):
    pubkey: PubkeyField
    is_signer: bool
    is_writable: bool


class InstructionInternal(WireModel):
    """Instruction as encoded by the API."""

    program_id: PubkeyField
    accounts: list[AccountMetaInternal]
    data: Base64Bytes

    def to_instruction(self) -> Instruction:
        accounts = [
            AccountMeta(pubkey=meta.pubkey, is_signer=meta.is_signer, is_writable=meta.is_writable)
            for meta in self.accounts
        ]
        return Instruction(self.program_id, self.data, accounts)


class SwapInstructionsResponseInternal(WireModel):
    """Wire form of the ``/swap-instructions`` response."""

    token_ledger_instruction: Optional[InstructionInternal] = None
    compute_budget_instructions: list[InstructionInternal] = Field(default_factory=list)
    setup_instructions: list[InstructionInternal] = Field(default_factory=list)
    swap_instruction: InstructionInternal
    cleanup_instruction: Optional[InstructionInternal] = None
    other_instructions: list[InstructionInternal] = Field(default_factory=list)
    address_lookup_table_addresses: list[PubkeyField] = Field(default_factory=list)
    prioritization_fee_lamports: int = 0
    compute_unit_limit: int = 0
    prioritization_type: Optional[PrioritizationType] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None


@dataclass
class SwapInstructionsResponse:
    """Instructions needed to assemble a swap transaction yourself."""

    swap_instruction: Instruction
    token_ledger_instruction: Optional[Instruction] = None
    compute_budget_instructions: list[Instruction] = field(default_factory=list)
    setup_instructions: list[Instruction] = field(default_factory=list)
    cleanup_instruction: Optional[Instruction] = None
    other_instructions: list[Instruction] = field(default_factory=list)
    address_lookup_table_addresses: list[Pubkey] = field(default_factory=list)
    prioritization_fee_lamports: int = 0
    compute_unit_limit: int = 0
    prioritization_type: Optional[PrioritizationType] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None

    @classmethod
    def from_internal(cls, internal: SwapInstructionsResponseInternal) -> "SwapInstructionsResponse":
        """Convert the wire form into the public form."""
        return cls(
            swap_instruction=internal.swap_instruction.to_instruction(),
            token_ledger_instruction=_optional_instruction(internal.token_ledger_instruction),
            compute_budget_instructions=[ix.to_instruction() for ix in internal.compute_budget_instructions],
            setup_instructions=[ix.to_instruction() for ix in internal.setup_instructions],
            cleanup_instruction=_optional_instruction(internal.cleanup_instruction),
            other_instructions=[ix.to_instruction() for ix in internal.other_instructions],
            address_lookup_table_addresses=list(internal.address_lookup_table_addresses),
            prioritization_fee_lamports=internal.prioritization_fee_lamports,
            compute_unit_limit=internal.compute_unit_limit,
            prioritization_type=internal.prioritization_type,
            dynamic_slippage_report=internal.dynamic_slippage_report,
            simulation_error=internal.simulation_error,
        )


def _optional_instruction(ix: Optional[InstructionInternal]) -> Optional[Instruction]:
    return ix.to_instruction() if ix is not None else None

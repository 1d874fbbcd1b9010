"""Contracts for ``POST /swap/v1/swap`` and ``POST /swap/v1/swap-instructions``.

Both endpoints take the same :class:`SwapRequest` body. ``/swap`` answers with
a serialized unsigned transaction, ``/swap-instructions`` with the individual
instructions so callers can compose their own transaction.

API docs: https://dev.jup.ag/docs/api/swap-api/swap
"""

from typing import Any, Optional, Union

from pydantic import Field

from jupswap.contracts.common import JupiterModel, PriorityLevel
from jupswap.contracts.quote_response import QuoteResponse


# ======================
# Prioritization fee
# ======================


class JitoTipLamports(JupiterModel):
    """Flat Jito tip, in lamports."""

    jito_tip_lamports: int = Field(..., ge=0)


class PriorityLevelWithMaxLamports(JupiterModel):
    max_lamports: int = Field(..., ge=0, description="Cap on the fee paid, in lamports")
    priority_level: PriorityLevel


class PriorityLevelFee(JupiterModel):
    """Fee estimated from network congestion, capped at ``max_lamports``."""

    priority_level_with_max_lamports: PriorityLevelWithMaxLamports


# Exactly one variant is ever sent
PrioritizationFeeLamports = Union[JitoTipLamports, PriorityLevelFee]


# ======================
# Request
# ======================


class SwapRequest(JupiterModel):
    """Body for the swap and swap-instructions endpoints.

    Build from a quote, then chain the ``with_*`` setters:

        request = SwapRequest(
            user_public_key=wallet, payer=wallet, quote_response=quote
        ).with_dynamic_compute_unit_limit(True)
    """

    user_public_key: str = Field(..., description="Wallet initiating the swap")
    payer: str = Field(..., description="Account paying for the transaction")
    wrap_and_unwrap_sol: Optional[bool] = Field(
        None, description="Wrap/unwrap native SOL (server default true)"
    )
    use_shared_accounts: Optional[bool] = Field(
        None, description="Use shared intermediate token accounts"
    )
    fee_account: Optional[str] = Field(
        None, description="Token account collecting the platform fee"
    )
    tracking_account: Optional[str] = Field(
        None, description="Any key used to find integrator swaps later"
    )
    prioritization_fee_lamports: Optional[PrioritizationFeeLamports] = None
    as_legacy_transaction: Optional[bool] = Field(
        None, description="Build a legacy transaction; must match the quote"
    )
    destination_token_account: Optional[str] = Field(
        None, description="Initialized token account receiving the output"
    )
    dynamic_compute_unit_limit: Optional[bool] = Field(
        None, description="Simulate to size the compute unit limit (one extra RPC call)"
    )
    skip_user_account_rpc_calls: Optional[bool] = Field(
        None, description="Skip account checks; all accounts must already exist"
    )
    dynamic_slippage: Optional[bool] = Field(
        None, description="Estimate slippage at swap time, overriding the quote's"
    )
    compute_unit_price_micro_lamports: Optional[int] = Field(None, ge=0)
    blockhash_slots_to_expiry: Optional[int] = Field(
        None, ge=0, description="Slots the transaction stays valid (~400ms each)"
    )
    quote_response: QuoteResponse

    # ======================
    # Fluent setters
    # ======================

    def with_wrap_and_unwrap_sol(self, wrap: bool) -> "SwapRequest":
        """Wrap native SOL before and unwrap after the swap.

        Ignored by the server when a destination token account is set.
        """
        return self._evolve(wrap_and_unwrap_sol=wrap)

    def with_use_shared_accounts(self, shared: bool) -> "SwapRequest":
        return self._evolve(use_shared_accounts=shared)

    def with_fee_account(self, account: str) -> "SwapRequest":
        """Collect the platform fee into ``account``.

        Its mint must be either the input or the output mint of the swap.
        """
        return self._evolve(fee_account=account)

    def with_tracking_account(self, account: str) -> "SwapRequest":
        return self._evolve(tracking_account=account)

    def with_jito_tip(self, lamports: int) -> "SwapRequest":
        """Pay a flat Jito tip. Replaces any previous prioritization fee."""
        return self._evolve(
            prioritization_fee_lamports=JitoTipLamports(jito_tip_lamports=lamports)
        )

    def with_priority_level(
        self, max_lamports: int, priority_level: PriorityLevel
    ) -> "SwapRequest":
        """Pay a congestion-based fee capped at ``max_lamports``.

        Replaces any previous prioritization fee.
        """
        fee = PriorityLevelFee(
            priority_level_with_max_lamports=PriorityLevelWithMaxLamports(
                max_lamports=max_lamports,
                priority_level=priority_level,
            )
        )
        return self._evolve(prioritization_fee_lamports=fee)

    def with_as_legacy_transaction(self, legacy: bool) -> "SwapRequest":
        return self._evolve(as_legacy_transaction=legacy)

    def with_destination_token_account(self, account: str) -> "SwapRequest":
        return self._evolve(destination_token_account=account)

    def with_dynamic_compute_unit_limit(self, enabled: bool) -> "SwapRequest":
        return self._evolve(dynamic_compute_unit_limit=enabled)

    def with_skip_user_account_rpc_calls(self, skip: bool) -> "SwapRequest":
        return self._evolve(skip_user_account_rpc_calls=skip)

    def with_dynamic_slippage(self, dynamic: bool) -> "SwapRequest":
        return self._evolve(dynamic_slippage=dynamic)

    def with_compute_unit_price_micro_lamports(self, price: int) -> "SwapRequest":
        """Use an exact compute unit price (fee = 1_400_000 * price)."""
        return self._evolve(compute_unit_price_micro_lamports=price)

    def with_blockhash_slots_to_expiry(self, slots: int) -> "SwapRequest":
        return self._evolve(blockhash_slots_to_expiry=slots)


# ======================
# Responses
# ======================


class SwapResponse(JupiterModel):
    """Unsigned transaction built by ``/swap``."""

    swap_transaction: str = Field(..., description="Base64 unsigned versioned transaction")
    last_valid_block_height: int
    prioritization_fee_lamports: int
    compute_unit_limit: Optional[int] = None
    prioritization_type: Optional[Any] = None
    dynamic_slippage_report: Optional[Any] = None
    simulation_error: Optional[Any] = None


class AccountMeta(JupiterModel):
    pubkey: str
    is_signer: bool
    is_writable: bool


class Instruction(JupiterModel):
    """A single program instruction; ``data`` is base64 and left opaque."""

    program_id: str
    accounts: list[AccountMeta]
    data: str


class SwapInstructions(JupiterModel):
    """Instructions returned by ``/swap-instructions``."""

    other_instructions: Optional[list[Instruction]] = None
    compute_budget_instructions: Optional[list[Instruction]] = None
    setup_instructions: list[Instruction]
    swap_instruction: Instruction
    cleanup_instruction: Optional[Instruction] = None
    address_lookup_table_addresses: list[str]

    def ordered_instructions(self) -> list[Instruction]:
        """All instructions in the order they go into a transaction."""
        ordered = []
        ordered.extend(self.compute_budget_instructions or [])
        ordered.extend(self.other_instructions or [])
        ordered.extend(self.setup_instructions)
        ordered.append(self.swap_instruction)
        if self.cleanup_instruction is not None:
            ordered.append(self.cleanup_instruction)
        return ordered

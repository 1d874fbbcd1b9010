"""Query parameters for the ``GET /swap/v1/quote`` endpoint.

Build with the required mints and amount, then chain the ``with_*`` setters:

    request = (
        QuoteRequest(input_mint=SOL_MINT, output_mint=JUP_MINT, amount=1_000_000_000)
        .with_slippage_bps(50)
        .with_dexes([Dex.WHIRLPOOL, Dex.METEORA_DLMM])
    )

API docs: https://dev.jup.ag/docs/api/swap-api/quote
"""

from typing import Iterable, Optional

from pydantic import Field, field_serializer

from jupswap.contracts.common import Dex, JupiterModel, SwapMode


class QuoteRequest(JupiterModel):
    """Request for a swap quote."""

    input_mint: str = Field(..., description="Mint address of the input token")
    output_mint: str = Field(..., description="Mint address of the output token")
    amount: int = Field(
        ..., ge=0, description="Raw amount (before decimals); input or output per swap_mode"
    )
    slippage_bps: Optional[int] = Field(
        None, ge=0, le=65535, description="Slippage tolerance in basis points"
    )
    swap_mode: Optional[SwapMode] = Field(None, description="ExactIn (default) or ExactOut")
    dexes: Optional[list[Dex]] = Field(None, description="Only route through these DEXes")
    exclude_dexes: Optional[list[Dex]] = Field(None, description="Never route through these DEXes")
    restrict_intermediate_tokens: Optional[bool] = Field(
        default=False, description="Restrict intermediate tokens to a stable set"
    )
    only_direct_routes: Optional[bool] = Field(None, description="Single-hop routes only")
    as_legacy_transaction: Optional[bool] = Field(
        None, description="Quote for a legacy (non-versioned) transaction"
    )
    platform_fee_bps: Optional[int] = Field(
        None, ge=0, description="Platform fee in basis points, paired with feeAccount on /swap"
    )
    max_accounts: Optional[int] = Field(
        None, ge=0, le=255, description="Upper bound on accounts used by the route"
    )
    dynamic_slippage: Optional[bool] = Field(
        None, description="Let Jupiter estimate slippage; overrides slippage_bps"
    )

    @field_serializer("dexes", "exclude_dexes")
    def serialize_dexes(self, value: Optional[list[Dex]]) -> Optional[str]:
        # The endpoint takes a single comma-separated string, order preserved
        if value is None:
            return None
        return ",".join(dex.value for dex in value)

    def to_query_params(self) -> dict[str, str]:
        """Flatten into camelCase query parameters, dropping unset options."""
        return {key: _query_value(value) for key, value in self.to_wire().items()}

    # ======================
    # Fluent setters
    # ======================

    def with_slippage_bps(self, slippage_bps: int) -> "QuoteRequest":
        """Set slippage tolerance in bps (100 = 1%). Ignored with dynamic slippage."""
        return self._evolve(slippage_bps=slippage_bps)

    def with_swap_mode(self, swap_mode: SwapMode) -> "QuoteRequest":
        return self._evolve(swap_mode=swap_mode)

    def with_dexes(self, dexes: Iterable[Dex]) -> "QuoteRequest":
        """Only route through ``dexes``.

        The API accepts either ``dexes`` or ``exclude_dexes``, not both; this
        is not checked here.
        """
        return self._evolve(dexes=list(dexes))

    def with_exclude_dexes(self, exclude_dexes: Iterable[Dex]) -> "QuoteRequest":
        """Avoid ``exclude_dexes`` when routing."""
        return self._evolve(exclude_dexes=list(exclude_dexes))

    def with_restrict_intermediate_tokens(self, restrict: bool) -> "QuoteRequest":
        return self._evolve(restrict_intermediate_tokens=restrict)

    def with_only_direct_routes(self, only_direct: bool) -> "QuoteRequest":
        """Allow single-hop routes only. May give worse pricing."""
        return self._evolve(only_direct_routes=only_direct)

    def with_as_legacy_transaction(self, legacy: bool) -> "QuoteRequest":
        return self._evolve(as_legacy_transaction=legacy)

    def with_platform_fee_bps(self, fee_bps: int) -> "QuoteRequest":
        return self._evolve(platform_fee_bps=fee_bps)

    def with_max_accounts(self, max_accounts: int) -> "QuoteRequest":
        """Cap the number of accounts the route may use (server default 64)."""
        return self._evolve(max_accounts=max_accounts)

    def with_dynamic_slippage(self, dynamic: bool) -> "QuoteRequest":
        return self._evolve(dynamic_slippage=dynamic)


def _query_value(value) -> str:
    """Render a JSON-mode value the way the quote endpoint expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)

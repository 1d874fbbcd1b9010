"""Response of the ``GET /swap/v1/quote`` endpoint."""

from typing import Any, Optional

from pydantic import Field

from jupswap.contracts.common import JupiterModel, SwapMode


class PlatformFee(JupiterModel):
    """Platform fee applied to the quote."""

    amount: str
    fee_bps: int


class SwapInfo(JupiterModel):
    """The market used by a single hop."""

    amm_key: str
    label: str
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    fee_amount: str
    fee_mint: str


class RoutePlanItem(JupiterModel):
    """One hop of the route and the share of the amount routed through it."""

    swap_info: SwapInfo
    percent: int


class MostReliableAmmsQuoteReport(JupiterModel):
    info: dict[str, str] = Field(default_factory=dict)


class QuoteResponse(JupiterModel):
    """Route and pricing computed by Jupiter.

    Amounts are raw integer strings as sent by the API. The report fields
    are kept as plain JSON since their shape changes between releases.
    """

    input_mint: str
    in_amount: str
    output_mint: str
    out_amount: str
    other_amount_threshold: str = Field(
        ..., description="Worst-case output after slippage; informational only"
    )
    swap_mode: SwapMode
    slippage_bps: int
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: str
    route_plan: list[RoutePlanItem]
    score_report: Optional[Any] = None
    context_slot: int
    time_taken: float
    swap_usd_value: Optional[str] = None
    simpler_route_used: Optional[bool] = None
    most_reliable_amms_quote_report: Optional[MostReliableAmmsQuoteReport] = None
    use_incurred_slippage_for_quoting: Optional[Any] = None

    @property
    def dex_path(self) -> list[str]:
        """Market labels of each hop, in route order."""
        return [step.swap_info.label for step in self.route_plan]

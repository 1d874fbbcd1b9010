"""Request and response contracts for the Jupiter Swap API.

These Pydantic models mirror the camelCase JSON exchanged with the
``/swap/v1`` endpoints.
"""

from jupswap.contracts.common import Dex, JupiterModel, PriorityLevel, SwapMode
from jupswap.contracts.quote_request import QuoteRequest
from jupswap.contracts.quote_response import (
    MostReliableAmmsQuoteReport,
    PlatformFee,
    QuoteResponse,
    RoutePlanItem,
    SwapInfo,
)
from jupswap.contracts.swap import (
    AccountMeta,
    Instruction,
    JitoTipLamports,
    PrioritizationFeeLamports,
    PriorityLevelFee,
    PriorityLevelWithMaxLamports,
    SwapInstructions,
    SwapRequest,
    SwapResponse,
)

__all__ = [
    # Shared
    "JupiterModel",
    "Dex",
    "PriorityLevel",
    "SwapMode",
    # Quote contracts
    "QuoteRequest",
    "QuoteResponse",
    "PlatformFee",
    "RoutePlanItem",
    "SwapInfo",
    "MostReliableAmmsQuoteReport",
    # Swap contracts
    "SwapRequest",
    "SwapResponse",
    "SwapInstructions",
    "Instruction",
    "AccountMeta",
    "PrioritizationFeeLamports",
    "JitoTipLamports",
    "PriorityLevelFee",
    "PriorityLevelWithMaxLamports",
]

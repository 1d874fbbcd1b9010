"""Typed async client for the Jupiter swap-aggregation API.

Build a request, send it through :class:`JupiterClient`, get a typed model
back or one of the :mod:`jupswap.errors` exceptions.
"""

__version__ = "0.1.0"

from jupswap.client import JupiterClient
from jupswap.contracts import (
    AccountMeta,
    Dex,
    Instruction,
    JitoTipLamports,
    PrioritizationFeeLamports,
    PriorityLevel,
    PriorityLevelFee,
    PriorityLevelWithMaxLamports,
    QuoteRequest,
    QuoteResponse,
    RoutePlanItem,
    SwapInfo,
    SwapInstructions,
    SwapMode,
    SwapRequest,
    SwapResponse,
)
from jupswap.errors import (
    JupiterApiError,
    JupiterClientError,
    JupiterDeserializationError,
    JupiterRequestError,
)

__all__ = [
    "JupiterClient",
    # Contracts
    "QuoteRequest",
    "QuoteResponse",
    "RoutePlanItem",
    "SwapInfo",
    "SwapRequest",
    "SwapResponse",
    "SwapInstructions",
    "Instruction",
    "AccountMeta",
    "PrioritizationFeeLamports",
    "JitoTipLamports",
    "PriorityLevelFee",
    "PriorityLevelWithMaxLamports",
    "Dex",
    "PriorityLevel",
    "SwapMode",
    # Errors
    "JupiterClientError",
    "JupiterRequestError",
    "JupiterApiError",
    "JupiterDeserializationError",
]

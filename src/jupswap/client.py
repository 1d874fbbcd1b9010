"""Async client for the Jupiter Swap API (Solana DEX aggregator).

Wraps the three ``/swap/v1`` endpoints:

- ``GET  /swap/v1/quote``              -> :class:`QuoteResponse`
- ``POST /swap/v1/swap``               -> :class:`SwapResponse`
- ``POST /swap/v1/swap-instructions``  -> :class:`SwapInstructions`

API docs: https://dev.jup.ag/docs/api/swap-api
"""

import logging
from typing import Optional, TypeVar

import httpx
from pydantic import ValidationError

from jupswap.config import get_settings
from jupswap.contracts import (
    JupiterModel,
    QuoteRequest,
    QuoteResponse,
    SwapInstructions,
    SwapRequest,
    SwapResponse,
)
from jupswap.errors import (
    JupiterApiError,
    JupiterDeserializationError,
    JupiterRequestError,
)

logger = logging.getLogger(__name__)

# Swap API v1 endpoints
QUOTE_PATH = "/swap/v1/quote"
SWAP_PATH = "/swap/v1/swap"
SWAP_INSTRUCTIONS_PATH = "/swap/v1/swap-instructions"

ModelT = TypeVar("ModelT", bound=JupiterModel)


class JupiterClient:
    """Typed client for the Jupiter Swap API.

    Each call is a single stateless HTTP round trip. The client holds no
    per-call state, so one instance can serve concurrent calls.

    Example:
        async with JupiterClient() as jupiter:
            quote = await jupiter.get_quote(
                QuoteRequest(input_mint=SOL_MINT, output_mint=JUP_MINT, amount=1_000_000_000)
            )
            swap = await jupiter.get_swap_transaction(
                SwapRequest(user_public_key=wallet, payer=wallet, quote_response=quote)
            )
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``https://lite-api.jup.ag`` (settings default)
            api_key: Optional API key sent as ``x-api-key``
            timeout: Request timeout in seconds (settings default)
            http_client: Caller-owned httpx client; not closed by :meth:`aclose`
            transport: Custom httpx transport for the internally created client
        """
        settings = get_settings()
        self.base_url = (base_url or settings.jupiter_api_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.jupiter_api_key
        self.timeout = timeout if timeout is not None else settings.jupiter_timeout

        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=self.timeout, transport=transport)
        self._client = http_client

    async def __aenter__(self) -> "JupiterClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    def _get_headers(self) -> dict:
        """Get API headers."""
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers

    async def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """Fetch a swap quote.

        Args:
            request: Mints, amount and routing options

        Returns:
            Route and pricing for the swap

        Raises:
            JupiterRequestError: The request could not be sent or read
            JupiterApiError: Non-2xx status
            JupiterDeserializationError: Body is not a valid quote
        """
        response = await self._send("GET", QUOTE_PATH, params=request.to_query_params())
        return self._parse(QuoteResponse, response)

    async def get_swap_transaction(self, request: SwapRequest) -> SwapResponse:
        """Build an unsigned swap transaction from a quote.

        The returned ``swap_transaction`` is base64 and still has to be
        signed and submitted by the caller.
        """
        response = await self._send("POST", SWAP_PATH, json=request.to_wire())
        return self._parse(SwapResponse, response)

    async def get_swap_instructions(self, request: SwapRequest) -> SwapInstructions:
        """Fetch the swap as individual instructions instead of a transaction."""
        response = await self._send("POST", SWAP_INSTRUCTIONS_PATH, json=request.to_wire())
        return self._parse(SwapInstructions, response)

    async def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Issue one request and reject non-success statuses."""
        url = f"{self.base_url}{path}"
        logger.debug(f"Jupiter {method} {url}")

        try:
            response = await self._client.request(
                method, url, headers=self._get_headers(), **kwargs
            )
        except httpx.RequestError as e:
            raise JupiterRequestError(
                f"Jupiter request failed: {method} {path}: {type(e).__name__}: {e}",
                cause=e,
            ) from e

        logger.debug(f"Jupiter {method} {path} -> {response.status_code}")

        if not response.is_success:
            raise JupiterApiError(response.status_code, response.text)

        return response

    @staticmethod
    def _parse(model: type[ModelT], response: httpx.Response) -> ModelT:
        """Validate the body against ``model``, keeping the raw text on failure."""
        text = response.text
        try:
            return model.model_validate_json(text)
        except ValidationError as e:
            raise JupiterDeserializationError(
                f"Failed to deserialize {model.__name__}: {e}. Response text: {text}",
                body=text,
            ) from e

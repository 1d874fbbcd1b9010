"""Well-known Solana token mints."""

from decimal import Decimal
from typing import Optional, Union

SOL_MINT = "So11111111111111111111111111111111111111112"  # Wrapped SOL
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT_MINT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"
JUP_MINT = "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN"

# Token mint addresses on Solana mainnet
SOLANA_TOKENS = {
    "SOL": SOL_MINT,
    "USDC": USDC_MINT,
    "USDT": USDT_MINT,
    "JUP": JUP_MINT,
    "RAY": "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R",
    "ORCA": "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE",
    "BONK": "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
    "WIF": "EKpQGSJtjMFqKZ9KQanSqYXRcF8fBopzLHYxdM65zcjm",
    "PYTH": "HZ1JovNiVvGrGNiiYvEozEVgZ58xaU3RKwX8eACQBCt3",
    "MNDE": "MNDEFzGvMt87ueuHvVU9VcTqsAP5b3fTGPsHuuPA5ey",
    "HNT": "hntyVP6YFm1Hg25TN9WGLqM12b8TQmcknKrdu1oxWux",
}

# Token decimals
TOKEN_DECIMALS = {
    "SOL": 9,
    "USDC": 6,
    "USDT": 6,
    "JUP": 6,
    "RAY": 6,
    "ORCA": 6,
    "BONK": 5,
    "WIF": 6,
    "PYTH": 6,
    "MNDE": 9,
    "HNT": 8,
}

# Mint address -> decimals, for callers that pass mints instead of symbols
MINT_DECIMALS = {mint: TOKEN_DECIMALS[symbol] for symbol, mint in SOLANA_TOKENS.items()}


def get_token_mint(symbol: str) -> Optional[str]:
    """Get token mint address by symbol."""
    return SOLANA_TOKENS.get(symbol.upper())


def get_decimals(token: str) -> Optional[int]:
    """Get decimals for a token symbol or a known mint address.

    Returns None for unknown tokens; guessing would scale amounts wrongly.
    """
    if token in MINT_DECIMALS:
        return MINT_DECIMALS[token]
    return TOKEN_DECIMALS.get(token.upper())


def to_raw_amount(amount: Union[Decimal, int, str], token: str) -> int:
    """Convert a human-readable amount into raw base units for ``token``.

    Raises:
        ValueError: Unknown token, or ``amount`` finer than one base unit
    """
    decimals = get_decimals(token)
    if decimals is None:
        raise ValueError(f"Unknown decimals for token {token}; pass a raw amount instead")

    raw = Decimal(str(amount)).scaleb(decimals)
    if raw != raw.to_integral_value():
        raise ValueError(f"{amount} {token} is not a whole number of base units (decimals={decimals})")
    return int(raw)

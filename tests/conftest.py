"""Pytest configuration and fixtures."""

import os

import httpx
import pytest
import pytest_asyncio

# Set test environment
os.environ["JUPITER_API_URL"] = "https://jupiter.test"
os.environ["JUPITER_TIMEOUT"] = "5"
os.environ.pop("JUPITER_API_KEY", None)

from jupswap.client import JupiterClient
from jupswap.config import get_settings
from jupswap.tokens import JUP_MINT, SOL_MINT, USDC_MINT

get_settings.cache_clear()

WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"


@pytest.fixture
def quote_payload() -> dict:
    """Minimal quote response: required fields only."""
    return {
        "inputMint": SOL_MINT,
        "inAmount": "1000000000",
        "outputMint": JUP_MINT,
        "outAmount": "331847216",
        "otherAmountThreshold": "330187980",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "priceImpactPct": "0.0001",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": "5BKxfWMbmYBAEWvyPZS9esPducUba9GqyMjtLCfbaqyF",
                    "label": "Meteora DLMM",
                    "inputMint": SOL_MINT,
                    "outputMint": USDC_MINT,
                    "inAmount": "1000000000",
                    "outAmount": "145230000",
                    "feeAmount": "24825",
                    "feeMint": SOL_MINT,
                },
                "percent": 100,
            },
            {
                "swapInfo": {
                    "ammKey": "C8Gr6AUuq9hEdSYJzoEpNcdjpojPZwqG5MtQbeouNNwg",
                    "label": "Whirlpool",
                    "inputMint": USDC_MINT,
                    "outputMint": JUP_MINT,
                    "inAmount": "145230000",
                    "outAmount": "331847216",
                    "feeAmount": "14523",
                    "feeMint": USDC_MINT,
                },
                "percent": 100,
            },
        ],
        "contextSlot": 341234567,
        "timeTaken": 0.0123,
    }


@pytest.fixture
def full_quote_payload(quote_payload) -> dict:
    """Quote response with every optional field populated."""
    return {
        **quote_payload,
        "platformFee": {"amount": "1659", "feeBps": 20},
        "scoreReport": {"score": 0.97, "components": [1, 2, {"nested": "value"}]},
        "swapUsdValue": "145.2300000000000000",
        "simplerRouteUsed": False,
        "mostReliableAmmsQuoteReport": {
            "info": {
                "5BKxfWMbmYBAEWvyPZS9esPducUba9GqyMjtLCfbaqyF": "331847216",
                "C8Gr6AUuq9hEdSYJzoEpNcdjpojPZwqG5MtQbeouNNwg": "331800000",
            }
        },
        "useIncurredSlippageForQuoting": {"enabled": True, "bps": 12},
    }


@pytest.fixture
def swap_response_payload() -> dict:
    return {
        "swapTransaction": "AQAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA==",
        "lastValidBlockHeight": 319876543,
        "prioritizationFeeLamports": 2500,
        "computeUnitLimit": 215000,
        "prioritizationType": {"computeBudget": {"microLamports": 11627, "estimatedMicroLamports": 11627}},
        "dynamicSlippageReport": None,
        "simulationError": None,
    }


def make_instruction(program_id: str, data: str = "AQ==") -> dict:
    return {
        "programId": program_id,
        "accounts": [
            {"pubkey": WALLET, "isSigner": True, "isWritable": True},
            {"pubkey": SOL_MINT, "isSigner": False, "isWritable": False},
        ],
        "data": data,
    }


@pytest.fixture
def swap_instructions_payload() -> dict:
    return {
        "otherInstructions": [],
        "computeBudgetInstructions": [
            make_instruction("ComputeBudget111111111111111111111111111111", "AsBcAQA="),
            make_instruction("ComputeBudget111111111111111111111111111111", "AwQXAAAAAAAA"),
        ],
        "setupInstructions": [
            make_instruction("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"),
        ],
        "swapInstruction": make_instruction("JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4", "5RfLl3rjrSoBAAAA"),
        "cleanupInstruction": make_instruction("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA", "CQ=="),
        "addressLookupTableAddresses": ["GxS6FiQ3mNnAar9HGQ6mxP7t6FcwmHkU7peSeQDUHmpN"],
    }


@pytest_asyncio.fixture
async def jupiter_factory():
    """Build JupiterClients backed by an httpx.MockTransport handler."""
    clients = []

    def factory(handler, **kwargs) -> JupiterClient:
        client = JupiterClient(transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        await client.aclose()

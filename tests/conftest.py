"""Pytest configuration and fixtures."""

import base64

import httpx
import pytest
import pytest_asyncio

from jupiter_swap_api_client import JupiterSwapApiClient

BASE_URL = "https://quote-api.jup.ag/v6"

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USER_PUBKEY = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
AMM_KEY = "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2"
JUPITER_PROGRAM = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
COMPUTE_BUDGET_PROGRAM = "ComputeBudget111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
LOOKUP_TABLE = "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"


@pytest_asyncio.fixture
async def make_client():
    """Factory for clients whose transport is served by a handler.

    Every transport created is closed after the test.
    """
    http_clients = []

    def factory(handler) -> JupiterSwapApiClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return JupiterSwapApiClient(BASE_URL, http_client=http_client)

    yield factory

    for http_client in http_clients:
        await http_client.aclose()


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.fixture
def quote_response_payload() -> dict:
    """A /quote response for 1 SOL -> USDC."""
    return {
        "inputMint": SOL_MINT,
        "inAmount": "1000000000",
        "outputMint": USDC_MINT,
        "outAmount": "145230000",
        "otherAmountThreshold": "144503850",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.0001",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": AMM_KEY,
                    "label": "Raydium",
                    "inputMint": SOL_MINT,
                    "outputMint": USDC_MINT,
                    "inAmount": "1000000000",
                    "outAmount": "145230000",
                    "feeAmount": "2500000",
                    "feeMint": SOL_MINT,
                },
                "percent": 100,
            }
        ],
        "contextSlot": 287654321,
        "timeTaken": 0.012,
    }


@pytest.fixture
def swap_instructions_payload() -> dict:
    """A /swap-instructions response in its wire form."""
    return {
        "tokenLedgerInstruction": None,
        "computeBudgetInstructions": [
            {
                "programId": COMPUTE_BUDGET_PROGRAM,
                "accounts": [],
                "data": b64(b"\x02\xc0\x5c\x15\x00"),
            }
        ],
        "setupInstructions": [
            {
                "programId": TOKEN_PROGRAM,
                "accounts": [
                    {"pubkey": USER_PUBKEY, "isSigner": True, "isWritable": True},
                ],
                "data": b64(b"\x01"),
            }
        ],
        "swapInstruction": {
            "programId": JUPITER_PROGRAM,
            "accounts": [
                {"pubkey": USER_PUBKEY, "isSigner": True, "isWritable": False},
                {"pubkey": AMM_KEY, "isSigner": False, "isWritable": True},
            ],
            "data": b64(b"\xe5\x17\xcb\x97\x7a\xe3\xad\x2a"),
        },
        "cleanupInstruction": None,
        "otherInstructions": [],
        "addressLookupTableAddresses": [LOOKUP_TABLE],
        "prioritizationFeeLamports": 5000,
        "computeUnitLimit": 1400000,
        "prioritizationType": {
            "computeBudget": {"microLamports": 3571, "estimatedMicroLamports": 3571}
        },
        "simulationError": None,
    }

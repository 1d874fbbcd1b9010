"""Shared base model and enums for the Jupiter Swap API contracts."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class JupiterModel(BaseModel):
    """Base for every request/response model.

    Attributes are snake_case in Python and camelCase on the wire. Unknown
    response keys are ignored so new server-side fields never break parsing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Dump to the camelCase JSON shape, omitting unset optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def _evolve(self, **changes):
        """Return a validated copy with ``changes`` applied.

        The receiver is untouched, and setters get the same field bounds as
        the constructor.
        """
        return type(self).model_validate({**dict(self), **changes})


class SwapMode(str, Enum):
    """Whether ``amount`` is the exact input or the exact output."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class PriorityLevel(str, Enum):
    """Congestion-based priority level for the prioritization fee."""

    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class Dex(str, Enum):
    """Market labels accepted by the ``dexes`` / ``excludeDexes`` filters.

    Full list: https://lite-api.jup.ag/swap/v1/program-id-to-label
    """

    ALDRIN = "Aldrin"
    ALDRIN_V2 = "Aldrin V2"
    BONKSWAP = "Bonkswap"
    CREMA = "Crema"
    CROPPER = "Cropper"
    DAOS_FUN = "Daos.fun"
    DEXLAB = "DexLab"
    FLUXBEAM = "FluxBeam"
    GOOSEFX_GAMMA = "GooseFX GAMMA"
    GUACSWAP = "Guacswap"
    HELIUM_NETWORK = "Helium Network"
    HUMIDIFI = "HumidiFi"
    INVARIANT = "Invariant"
    LIFINITY_V2 = "Lifinity V2"
    MERCURIAL = "Mercurial"
    METEORA = "Meteora"
    METEORA_DLMM = "Meteora DLMM"
    MOONSHOT = "Moonshot"
    OASIS = "Oasis"
    OBRIC_V2 = "Obric V2"
    OPENBOOK = "Openbook"
    OPENBOOK_V2 = "OpenBook V2"
    ORCA_V1 = "Orca V1"
    ORCA_V2 = "Orca V2"
    PENGUIN = "Penguin"
    PERPS = "Perps"
    PHOENIX = "Phoenix"
    PUMP_FUN = "Pump.fun"
    PUMP_FUN_AMM = "Pump.fun Amm"
    RAYDIUM = "Raydium"
    RAYDIUM_CLMM = "Raydium CLMM"
    RAYDIUM_CP = "Raydium CP"
    SABER = "Saber"
    SABER_DECIMALS = "Saber (Decimals)"
    SANCTUM = "Sanctum"
    SANCTUM_INFINITY = "Sanctum Infinity"
    SAROS = "Saros"
    SAROS_DLMM = "Saros DLMM"
    SOLFI = "SolFi"
    STABBLE_STABLE_SWAP = "Stabble Stable Swap"
    STABBLE_WEIGHTED_SWAP = "Stabble Weighted Swap"
    TOKEN_SWAP = "Token Swap"
    WHIRLPOOL = "Whirlpool"
    WOOFI = "Woofi"
    ZEROFI = "ZeroFi"

"""
Foundational enums for the quote fetch pipeline.

``Instrument`` is the closed set of tradable assets the service knows about.
Each member carries the symbol used to address the quote-chart API and the
display name rendered in results.
"""

from enum import Enum


class Instrument(str, Enum):
    """Supported instruments.

    The value is the canonical display name; ``symbol`` is the upstream
    identifier (already URL-encoded where the API needs it).
    """

    BITCOIN = "Bitcoin"
    ETHEREUM = "Ethereum"
    SOLANA = "Solana"
    SNP500 = "Snp500"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_alias(cls, alias: str | None) -> "Instrument | None":
        """Resolve a case-insensitive short name or alias.

        Returns ``None`` for anything unrecognized; callers decide whether
        that is a client error.
        """
        if alias is None:
            return None
        return _ALIASES.get(alias.strip().lower())


_SYMBOLS: dict[Instrument, str] = {
    Instrument.BITCOIN: "BTC-USD",
    Instrument.ETHEREUM: "ETH-USD",
    Instrument.SOLANA: "SOL-USD",
    Instrument.SNP500: "%5EGSPC",
}

_ALIASES: dict[str, Instrument] = {
    "bitcoin": Instrument.BITCOIN,
    "btc": Instrument.BITCOIN,
    "ethereum": Instrument.ETHEREUM,
    "eth": Instrument.ETHEREUM,
    "solana": Instrument.SOLANA,
    "sol": Instrument.SOLANA,
    "snp500": Instrument.SNP500,
    "snp": Instrument.SNP500,
}


class HttpMethod(str, Enum):
    """HTTP verbs the executor can be asked to perform."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

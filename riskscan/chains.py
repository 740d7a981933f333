from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class Chain:
    chain_id: str
    name: str
    explorer: str


CHAINS = MappingProxyType({
    "1": Chain("1", "Ethereum", "https://etherscan.io"),
    "8453": Chain("8453", "Base", "https://basescan.org"),
    "56": Chain("56", "BSC", "https://bscscan.com"),
    "137": Chain("137", "Polygon", "https://polygonscan.com"),
    "42161": Chain("42161", "Arbitrum", "https://arbiscan.io"),
})


def chain_name(chain_id: str) -> str:
    chain = CHAINS.get(chain_id)
    return chain.name if chain else f"chain {chain_id}"


def explorer_token_url(chain_id: str, address: str) -> str | None:
    chain = CHAINS.get(chain_id)
    if chain is None:
        return None
    return f"{chain.explorer}/token/{address}"

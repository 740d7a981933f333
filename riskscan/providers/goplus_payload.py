"""Offline security provider backed by a saved GoPlus token_security response."""

import json
from pathlib import Path

from loguru import logger

from riskscan.models.security import SecurityData


class GoPlusPayloadError(ValueError):
    pass


def parse_goplus_response(data: dict, chain_id: str, address: str) -> SecurityData | None:
    """Pick the entry for ``address`` out of a GoPlus response body.

    Raises GoPlusPayloadError when GoPlus reported an error (``code != 1``);
    returns None when the response has no entry for the address.
    """
    code = data.get("code")
    if code is not None and str(code).strip() != "1":
        raise GoPlusPayloadError(f"GoPlus API error: {data.get('message', 'unknown')}")

    result = data.get("result") or {}
    # GoPlus keys EVM results by lowercased address
    token_data = result.get(address.lower()) or result.get(address)
    if not token_data:
        return None

    return SecurityData.from_goplus(chain_id, address, token_data)


class GoPlusPayloadProvider:
    """Serves SecurityData from GoPlus JSON already on disk or in memory."""

    def __init__(self, payload: dict) -> None:
        self._payload = payload

    @classmethod
    def from_file(cls, path: str | Path) -> "GoPlusPayloadProvider":
        with open(path, encoding="utf-8") as f:
            return cls(json.load(f))

    async def get_token_security(self, chain_id: str, address: str) -> SecurityData | None:
        report = parse_goplus_response(self._payload, chain_id, address)
        if report is None:
            logger.debug(f"[GOPLUS] No entry for {address[:12]} in payload")
        return report

"""Token security snapshot as delivered by a GoPlus-style security provider.

Flags stay in the provider's "0"/"1" string encoding and numeric fields stay
decimal strings; analyzers parse them through ``riskscan.utils.numbers`` so a
malformed value scores as 0 instead of failing the scan.
"""

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from riskscan.utils.numbers import parse_float, parse_int

FLAG_FIELDS = (
    "is_open_source",
    "is_proxy",
    "is_mintable",
    "can_take_back_ownership",
    "owner_change_balance",
    "hidden_owner",
    "self_destruct",
    "external_call",
    "cannot_buy",
    "cannot_sell_all",
    "slippage_modifiable",
    "is_honeypot",
    "transfer_pausable",
    "is_blacklisted",
)

DECIMAL_FIELDS = ("total_supply", "buy_tax", "sell_tax", "lp_total_supply", "creator_percent")

# Accept both GoPlus snake_case and the camelCase names the models serialize to
CAMEL_ALIASES = AliasGenerator(
    validation_alias=lambda name: AliasChoices(name, to_camel(name)),
    serialization_alias=to_camel,
)


def _to_flag(val: object) -> str:
    """Normalize provider flag to "0"/"1". Missing or unknown = "0" (safe)."""
    if isinstance(val, bool):
        return "1" if val else "0"
    if val is None:
        return "0"
    return "1" if str(val).strip() == "1" else "0"


def _to_decimal_str(val: object) -> str:
    if val is None or isinstance(val, bool):
        return "0"
    text = str(val).strip()
    return text or "0"


class HolderInfo(BaseModel):
    """One entry of the provider's top-holder list."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=CAMEL_ALIASES,
    )

    address: str = ""
    balance: str = "0"
    percent: str = "0"
    is_contract: bool = Field(
        False,
        validation_alias=AliasChoices("is_contract", "isContract"),
        serialization_alias="isContract",
    )

    @field_validator("balance", "percent", mode="before")
    @classmethod
    def _decimal(cls, v: object) -> str:
        return _to_decimal_str(v)

    @field_validator("is_contract", mode="before")
    @classmethod
    def _contract_flag(cls, v: object) -> bool:
        return _to_flag(v) == "1"

    @field_validator("address", mode="before")
    @classmethod
    def _address(cls, v: object) -> str:
        return "" if v is None else str(v)

    @property
    def percent_value(self) -> float:
        return parse_float(self.percent)


class SecurityData(BaseModel):
    """Normalized token security attributes for one contract on one chain.

    Field names follow the GoPlus token_security payload (``selfdestruct`` is
    accepted for ``self_destruct``), so a raw result entry can be validated
    directly once ``contract_address`` and ``chain_id`` are supplied. The
    camelCase names emitted by serialization are accepted as well.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=CAMEL_ALIASES,
    )

    contract_address: str
    chain_id: str
    token_name: str = "Unknown"
    token_symbol: str = "Unknown"
    holder_count: int = 0
    total_supply: str = "0"

    # Contract security
    is_open_source: str = "0"
    is_proxy: str = "0"
    is_mintable: str = "0"
    can_take_back_ownership: str = "0"
    owner_change_balance: str = "0"
    hidden_owner: str = "0"
    self_destruct: str = Field(
        "0",
        validation_alias=AliasChoices("self_destruct", "selfdestruct", "selfDestruct"),
        serialization_alias="selfDestruct",
    )
    external_call: str = "0"

    # Trading
    buy_tax: str = "0"  # percentage as decimal string
    sell_tax: str = "0"
    cannot_buy: str = "0"
    cannot_sell_all: str = "0"
    slippage_modifiable: str = "0"
    is_honeypot: str = "0"
    transfer_pausable: str = "0"
    is_blacklisted: str = "0"

    # Liquidity
    lp_holder_count: int = 0
    lp_total_supply: str = "0"

    # Holders, in provider order (expected: descending by balance)
    holders: tuple[HolderInfo, ...] = ()
    creator_percent: str = "0"

    @field_validator(*FLAG_FIELDS, mode="before")
    @classmethod
    def _flag(cls, v: object) -> str:
        return _to_flag(v)

    @field_validator(*DECIMAL_FIELDS, mode="before")
    @classmethod
    def _decimal(cls, v: object) -> str:
        return _to_decimal_str(v)

    @field_validator("holder_count", "lp_holder_count", mode="before")
    @classmethod
    def _count(cls, v: object) -> int:
        return parse_int(v)

    @field_validator("contract_address", "chain_id", mode="before")
    @classmethod
    def _ident(cls, v: object) -> str:
        return "" if v is None else str(v)

    @field_validator("token_name", "token_symbol", mode="before")
    @classmethod
    def _label(cls, v: object) -> str:
        if v is None or str(v).strip() == "":
            return "Unknown"
        return str(v)

    @field_validator("holders", mode="before")
    @classmethod
    def _holders(cls, v: object) -> object:
        return () if v is None else v

    @classmethod
    def from_goplus(cls, chain_id: str, contract_address: str, payload: dict) -> "SecurityData":
        """Build from one entry of a GoPlus ``result`` mapping."""
        return cls.model_validate(
            {**payload, "contract_address": contract_address, "chain_id": chain_id}
        )

    def flag(self, name: str) -> bool:
        """True when the named "0"/"1" flag is set."""
        return getattr(self, name) == "1"

    @property
    def buy_tax_pct(self) -> float:
        return parse_float(self.buy_tax)

    @property
    def sell_tax_pct(self) -> float:
        return parse_float(self.sell_tax)

    @property
    def creator_pct(self) -> float:
        return parse_float(self.creator_percent)

    @property
    def lp_supply(self) -> float:
        return parse_float(self.lp_total_supply)

    @property
    def top10_percent(self) -> float:
        """Sum of the first 10 holders' percent, in the order supplied.

        The list is trusted to be sorted by balance; it is never re-sorted.
        """
        return sum(h.percent_value for h in self.holders[:10])

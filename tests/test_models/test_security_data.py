"""Tests for SecurityData normalization of GoPlus payloads."""

import pytest
from pydantic import ValidationError

from riskscan.analysis.risk_engine import calculate_risk_score
from riskscan.models.security import HolderInfo, SecurityData
from riskscan.utils.numbers import fmt_num, parse_float, parse_int, round_half_up

TOKEN = "0xabc0000000000000000000000000000000000001"


class TestNumbers:
    def test_parse_float(self) -> None:
        assert parse_float("12.5") == 12.5
        assert parse_float("0") == 0.0
        assert parse_float(None) == 0.0
        assert parse_float("") == 0.0
        assert parse_float("abc") == 0.0
        assert parse_float("-5") == 0.0
        assert parse_float("nan") == 0.0

    def test_parse_int(self) -> None:
        assert parse_int("50") == 50
        assert parse_int(50) == 50
        assert parse_int("12.9") == 12
        assert parse_int("garbage") == 0
        assert parse_int(None) == 0

    def test_parse_int_leading_digits(self) -> None:
        """Only the leading integer part counts, trailing junk is ignored."""
        assert parse_int("12abc") == 12
        assert parse_int("1e3") == 1
        assert parse_int("  42 ") == 42
        assert parse_int("-5") == 0
        assert parse_int(50.7) == 50

    def test_round_half_up(self) -> None:
        """Halves go up, unlike round()."""
        assert round_half_up(28.5) == 29
        assert round_half_up(10.5) == 11
        assert round_half_up(10.49) == 10

    def test_fmt_num(self) -> None:
        assert fmt_num(12.0) == "12"
        assert fmt_num(7.5) == "7.5"


class TestSecurityData:
    def test_defaults(self) -> None:
        """Missing fields default to safe/zero values."""
        data = SecurityData(contract_address=TOKEN, chain_id="1")
        assert data.token_name == "Unknown"
        assert data.token_symbol == "Unknown"
        assert data.holder_count == 0
        assert data.is_honeypot == "0"
        assert data.flag("is_mintable") is False
        assert data.holders == ()
        assert data.top10_percent == 0.0

    def test_goplus_payload(self) -> None:
        """Raw GoPlus entry with string counts and selfdestruct key."""
        payload = {
            "token_name": "Scam",
            "token_symbol": "SCM",
            "holder_count": "42",
            "lp_holder_count": "3",
            "is_mintable": "1",
            "selfdestruct": "1",
            "buy_tax": "0.1",
            "holders": [{"address": "0xA", "balance": "100", "percent": "40.5", "is_contract": 1}],
        }
        data = SecurityData.from_goplus("56", TOKEN, payload)

        assert data.chain_id == "56"
        assert data.holder_count == 42
        assert data.lp_holder_count == 3
        assert data.flag("is_mintable") is True
        assert data.flag("self_destruct") is True
        assert data.buy_tax_pct == 0.1
        assert data.holders[0].is_contract is True
        assert data.top10_percent == 40.5

    def test_empty_and_null_fields(self) -> None:
        """Empty strings and nulls are treated as missing."""
        data = SecurityData.from_goplus(
            "1",
            TOKEN,
            {"is_honeypot": "", "buy_tax": None, "token_name": "", "holders": None, "holder_count": ""},
        )
        assert data.is_honeypot == "0"
        assert data.buy_tax == "0"
        assert data.token_name == "Unknown"
        assert data.holders == ()
        assert data.holder_count == 0

    def test_malformed_numbers_parse_to_zero(self) -> None:
        data = SecurityData.from_goplus(
            "1", TOKEN, {"sell_tax": "n/a", "creator_percent": "??", "lp_total_supply": "x"}
        )
        assert data.sell_tax_pct == 0.0
        assert data.creator_pct == 0.0
        assert data.lp_supply == 0.0

    def test_unknown_flag_value_is_safe(self) -> None:
        data = SecurityData.from_goplus("1", TOKEN, {"is_proxy": "maybe", "is_mintable": True})
        assert data.is_proxy == "0"
        assert data.is_mintable == "1"

    def test_frozen(self) -> None:
        data = SecurityData(contract_address=TOKEN, chain_id="1")
        with pytest.raises(ValidationError):
            data.is_honeypot = "1"

    def test_top10_uses_given_order(self) -> None:
        """Only the first 10 entries count, whatever their size."""
        holders = [{"percent": "1"}] * 10 + [{"percent": "50"}]
        data = SecurityData.from_goplus("1", TOKEN, {"holders": holders})
        assert data.top10_percent == 10.0

    def test_camel_case_dump(self) -> None:
        data = SecurityData.from_goplus("1", TOKEN, {"selfdestruct": "1", "lp_holder_count": 7})
        dumped = data.model_dump(by_alias=True)
        assert dumped["contractAddress"] == TOKEN
        assert dumped["selfDestruct"] == "1"
        assert dumped["lpHolderCount"] == 7


class TestHolderInfo:
    def test_percent_value(self) -> None:
        assert HolderInfo(percent="15").percent_value == 15.0
        assert HolderInfo(percent="bad").percent_value == 0.0

    def test_camel_case_input(self) -> None:
        holder = HolderInfo.model_validate({"address": "0xB", "isContract": True})
        assert holder.is_contract is True


class TestCamelCaseInput:
    def test_end_to_end_scenario(self) -> None:
        """The normalized camelCase names score the same as GoPlus names."""
        data = SecurityData.model_validate(
            {
                "contractAddress": TOKEN,
                "chainId": "1",
                "isOpenSource": "0",
                "isMintable": "1",
                "lpHolderCount": 3,
                "holders": [{"address": "0xdev", "percent": "40", "isContract": False}],
                "creatorPercent": "35",
                "holderCount": 50,
            }
        )
        score = calculate_risk_score(data)

        assert data.contract_address == TOKEN
        assert score.factors.contract_security == 35
        assert score.factors.liquidity_safety == 40
        assert score.factors.holder_distribution == 40
        assert score.overall == 29
        assert score.category == "MEDIUM_RISK"

    def test_honeypot_flag(self) -> None:
        data = SecurityData.model_validate(
            {
                "contract_address": TOKEN,
                "chain_id": "1",
                "isHoneypot": "1",
                "isOpenSource": "1",
                "lpHolderCount": 150,
                "holderCount": 5000,
            }
        )
        assert data.flag("is_honeypot") is True
        assert calculate_risk_score(data).factors.trading_restrictions == 100

    def test_self_destruct_spellings(self) -> None:
        for key in ("self_destruct", "selfdestruct", "selfDestruct"):
            data = SecurityData.model_validate({"contract_address": TOKEN, "chain_id": "1", key: "1"})
            assert data.flag("self_destruct") is True

    def test_dump_reads_back(self) -> None:
        data = SecurityData.from_goplus(
            "1",
            TOKEN,
            {
                "selfdestruct": "1",
                "lp_holder_count": 7,
                "holder_count": "420",
                "buy_tax": "12.5",
                "holders": [{"address": "0xA", "percent": "40.5", "is_contract": 1}],
            },
        )
        assert SecurityData.model_validate(data.model_dump(by_alias=True)) == data

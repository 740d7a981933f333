"""Tests for the offline GoPlus payload provider and the CLI."""

import json

import pytest
from loguru import logger

from riskscan import cli
from riskscan.providers.goplus_payload import GoPlusPayloadError, GoPlusPayloadProvider, parse_goplus_response

TOKEN = "0xAbC0000000000000000000000000000000000001"

RESPONSE = {
    "code": 1,
    "message": "OK",
    "result": {
        TOKEN.lower(): {
            "token_name": "Sketchy",
            "token_symbol": "SKT",
            "holder_count": "50",
            "is_open_source": "0",
            "is_mintable": "1",
            "lp_holder_count": "3",
            "holders": [{"address": "0xdev", "balance": "400", "percent": "40", "is_contract": 0}],
            "creator_percent": "35",
        }
    },
}


class TestParseGoPlusResponse:
    def test_lowercase_lookup(self) -> None:
        data = parse_goplus_response(RESPONSE, "1", TOKEN)
        assert data is not None
        assert data.contract_address == TOKEN
        assert data.token_symbol == "SKT"
        assert data.lp_holder_count == 3

    def test_missing_entry(self) -> None:
        assert parse_goplus_response({"code": 1, "result": {}}, "1", TOKEN) is None
        assert parse_goplus_response({"code": 1, "result": None}, "1", TOKEN) is None

    def test_api_error(self) -> None:
        with pytest.raises(GoPlusPayloadError, match="rate limited"):
            parse_goplus_response({"code": 4029, "message": "rate limited"}, "1", TOKEN)

    def test_string_success_code(self) -> None:
        """Loosely typed responses send code as "1"."""
        body = {**RESPONSE, "code": "1"}
        data = parse_goplus_response(body, "1", TOKEN)
        assert data is not None
        assert data.token_symbol == "SKT"

    def test_string_error_code(self) -> None:
        with pytest.raises(GoPlusPayloadError):
            parse_goplus_response({"code": "4029", "message": "rate limited"}, "1", TOKEN)

    @pytest.mark.asyncio
    async def test_provider(self) -> None:
        provider = GoPlusPayloadProvider(RESPONSE)
        data = await provider.get_token_security("56", TOKEN)
        assert data.chain_id == "56"


class TestCli:
    @pytest.fixture
    def payload_file(self, tmp_path):
        path = tmp_path / "goplus.json"
        path.write_text(json.dumps(RESPONSE), encoding="utf-8")
        return path

    @pytest.fixture(autouse=True)
    def _logs_to_tmp(self, tmp_path, monkeypatch):
        monkeypatch.setattr(cli.settings, "log_dir", str(tmp_path / "logs"))
        yield
        logger.remove()

    def test_scan_prints_json(self, payload_file, capsys) -> None:
        code = cli.main([str(payload_file), "--address", TOKEN, "--chain", "1"])
        assert code == 0

        body = json.loads(capsys.readouterr().out)
        assert body["riskScore"]["overall"] == 29
        assert body["riskScore"]["category"] == "MEDIUM_RISK"
        assert body["verdict"]["rating"] in ("MODERATE", "RISKY")
        assert body["advanced"]["rugPull"]["risk"] == "CRITICAL"

    def test_basic_flag(self, payload_file, capsys) -> None:
        code = cli.main([str(payload_file), "--address", TOKEN, "--chain", "1", "--basic"])
        assert code == 0
        body = json.loads(capsys.readouterr().out)
        assert "advanced" not in body

    def test_unknown_token(self, payload_file, capsys) -> None:
        code = cli.main([str(payload_file), "--address", "0xdead", "--chain", "1"])
        assert code == 2
        assert capsys.readouterr().out == ""

    def test_payload_error(self, tmp_path) -> None:
        path = tmp_path / "err.json"
        path.write_text(json.dumps({"code": 2, "message": "bad chain"}), encoding="utf-8")
        assert cli.main([str(path), "--address", TOKEN, "--chain", "999"]) == 1

    def test_missing_payload_file(self, tmp_path, capsys) -> None:
        code = cli.main([str(tmp_path / "nope.json"), "--address", TOKEN, "--chain", "1"])
        assert code == 2
        assert capsys.readouterr().out == ""

    def test_malformed_payload_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert cli.main([str(path), "--address", TOKEN, "--chain", "1"]) == 2
        assert capsys.readouterr().out == ""

    def test_payload_not_utf8(self, tmp_path) -> None:
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        assert cli.main([str(path), "--address", TOKEN, "--chain", "1"]) == 2

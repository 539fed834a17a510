"""Tests for the ocpay command-line interface."""

import json

import pytest

from conftest import make_response
from ocpay import OCPay, cli


@pytest.fixture
def run(monkeypatch, tmp_path, session):
    """Run the CLI against the mocked session with a throwaway .env file."""
    monkeypatch.delenv("OCPAY_ACCESS_TOKEN", raising=False)
    monkeypatch.setattr(
        cli,
        "create_ocpay_client",
        lambda *, config: OCPay(config, session=session),
    )
    env_file = tmp_path / ".env"
    env_file.write_text("OCPAY_ACCESS_TOKEN=cli-token\n", encoding="utf-8")

    def _run(*argv):
        return cli.run_cli(["--env-file", str(env_file), *argv])

    return _run


class TestCreateLinkCommand:
    def test_prints_reference_and_url(self, run, session, link_data, capsys):
        session.request.return_value = make_response(200, {"success": True, "data": link_data})

        code = run("create-link", "--title", "Item", "--amount", "5000", "--fee-mode", "SPLIT_FEE")

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["paymentRef"] == "OCPL-A1B2C3-D4E5"
        assert output["isSandbox"] is True
        body = session.request.call_args.kwargs["json"]
        assert body == {"productInfo": {"title": "Item", "amount": 5000}, "feeMode": "SPLIT_FEE"}
        assert session.request.call_args.kwargs["headers"]["X-Access-Token"] == "cli-token"

    def test_validation_error_exits_non_zero(self, run, session):
        assert run("create-link", "--title", "Item", "--amount", "100") == 1
        session.request.assert_not_called()

    def test_unknown_fee_mode_is_a_usage_error(self, run):
        with pytest.raises(SystemExit) as exc_info:
            run("create-link", "--title", "Item", "--amount", "5000", "--fee-mode", "HALF")
        assert exc_info.value.code == 2


class TestCheckPaymentCommand:
    def test_prints_status_and_details(self, run, session, confirmed_data, capsys):
        session.request.return_value = make_response(
            200, {"success": True, "data": confirmed_data}
        )

        assert run("check-payment", "OCPL-A1B2C3-D4E5") == 0

        output = json.loads(capsys.readouterr().out)
        assert output["status"] == "CONFIRMED"
        assert output["transactionDetails"]["netAmount"] == 4850

    def test_api_error_exits_non_zero(self, run, session, capsys):
        session.request.return_value = make_response(
            410, {"success": False, "message": "Link expired", "meta": {"requestId": "req-1"}}
        )

        assert run("check-payment", "OCPL-A1B2C3-D4E5") == 1
        assert capsys.readouterr().out == ""


class TestConfiguration:
    def test_missing_token(self, monkeypatch, tmp_path):
        monkeypatch.delenv("OCPAY_ACCESS_TOKEN", raising=False)
        code = cli.run_cli(
            ["--env-file", str(tmp_path / "missing.env"), "check-payment", "OCPL-1"]
        )
        assert code == 1

    def test_set_overrides_env_file(self, run, session, confirmed_data):
        session.request.return_value = make_response(
            200, {"success": True, "data": confirmed_data}
        )

        assert run("--set", "OCPAY_ACCESS_TOKEN=override", "check-payment", "OCPL-1") == 0

        assert session.request.call_args.kwargs["headers"]["X-Access-Token"] == "override"

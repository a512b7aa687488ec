import logging
from unittest import mock

import pytest

from leader_slot_checker import cli
from leader_slot_checker.checker import CheckSummary
from leader_slot_checker.exceptions import InvalidPubkeyError, RpcLookupError
from leader_slot_checker.logging_config import PACKAGE_LOGGER

VALIDATOR = "11111111111111111111111111111111"


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: logging.getLogger(PACKAGE_LOGGER))


def test_validate_pubkey_rejects_bad_encoding():
    with pytest.raises(InvalidPubkeyError, match="not-a-key"):
        cli.validate_pubkey("not-a-key")
    assert str(cli.validate_pubkey(VALIDATOR)) == VALIDATOR


def test_invalid_pubkey_exits_before_any_network_use():
    with mock.patch.object(cli, "LedgerRpc") as ledger_rpc, \
            mock.patch.object(cli, "check_validator_slots") as check:
        assert cli.main(["--validator", "0OIl"]) == 1
    ledger_rpc.assert_not_called()
    check.assert_not_called()


def test_successful_run_exits_zero():
    summary = CheckSummary(VALIDATOR, 700, scheduled=True)
    with mock.patch.object(cli, "LedgerRpc") as ledger_rpc, \
            mock.patch.object(cli, "check_validator_slots", return_value=summary) as check:
        assert cli.main(["-v", VALIDATOR, "-e", "700", "--rpc-url", "http://rpc.test", "--no-progress"]) == 0
    ledger_rpc.assert_called_once_with("http://rpc.test")
    assert check.call_args.kwargs["epoch"] == 700
    assert check.call_args.kwargs["show_progress"] is False


def test_fatal_error_exits_one_with_cause(caplog):
    error = RpcLookupError("Failed to get epoch info")
    error.__cause__ = ConnectionError("connection reset")
    with mock.patch.object(cli, "LedgerRpc"), \
            mock.patch.object(cli, "check_validator_slots", side_effect=error):
        with caplog.at_level(logging.ERROR):
            assert cli.main(["-v", VALIDATOR]) == 1
    assert "Fatal error: Failed to get epoch info (caused by: connection reset)" in caplog.text


def test_validator_is_required():
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_negative_epoch_rejected():
    with pytest.raises(SystemExit):
        cli.parse_args(["-v", VALIDATOR, "-e", "-1"])

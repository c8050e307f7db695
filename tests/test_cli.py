"""Tests for the offline command-line resolver."""

import json

from cli import main


def test_user_input_command(capsys) -> None:
    code = main(["user-input", "--input", "+923001234567", "--validkeys", "pk,ae"])
    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out == {"code": "200", "result": [{"message": "pk"}]}


def test_whitelist_command(capsys) -> None:
    code = main(["whitelist", "--input", "1 415 555 0100", "--allowednumbers", "+14155550100"])
    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["result"][0]["message"] == "@llowed"


def test_rejected_request_exits_non_zero(capsys) -> None:
    code = main(["user-input", "--input", "+923001234567"])
    out = json.loads(capsys.readouterr().out)
    assert code == 1
    assert out["code"] == "400"
    assert out["result"][0]["type"] == "text"

"""Test the local command-line entrypoint."""
import json

import pytest

from calculator_function import main as cli


@pytest.fixture(autouse=True)
def env_setup(monkeypatch):
    monkeypatch.delenv("CALCULATOR_JSON_INDENT", raising=False)
    monkeypatch.delenv("CALCULATOR_ZERO_TOLERANCE", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")


def test_parse_args_key_value_pairs() -> None:
    """Positional key=value pairs become query parameters."""
    args = cli.parse_args(["a=6", "b=3", "op=/"])
    assert args.params == {"a": "6", "b": "3", "op": "/"}
    assert args.body is None


def test_parse_args_value_may_contain_equals() -> None:
    """Only the first '=' separates the key from the value."""
    args = cli.parse_args(["op==", "a=1", "b=2"])
    assert args.params["op"] == "="


def test_parse_args_rejects_bad_pair() -> None:
    """A pair without '=' is a usage error."""
    with pytest.raises(SystemExit):
        cli.parse_args(["a6"])


def test_to_event_without_params() -> None:
    """No parameters map to a null query string, like the gateway sends."""
    event = cli.CliArgs(body='{"a": 1}').to_event()
    assert event == {"body": '{"a": 1}', "queryStringParameters": None, "isBase64Encoded": False}


def test_main_prints_result(capsys) -> None:
    """main prints the response body and exits cleanly."""
    exit_code = cli.main(["number1=5", "number2=2", "operation=add"])
    captured = capsys.readouterr()
    assert exit_code == 0
    assert json.loads(captured.out)["result"] == 7.0
    assert "HTTP 200" in captured.err


def test_main_with_body(capsys) -> None:
    """A --body argument is sent as the JSON request body."""
    exit_code = cli.main(["--body", '{"a": 1, "b": 2, "op": "%"}'])
    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Invalid operation '%'" in json.loads(out)["error"]


def test_main_unexpected_fault_exit_code(monkeypatch, capsys) -> None:
    """A 500 from the adapter gives a non-zero exit code."""
    monkeypatch.setattr(
        cli, "lambda_handler", lambda event, context: {"statusCode": 500, "body": "{}"}
    )
    assert cli.main(["a=1", "b=2", "op=+"]) == 1

"""Test class CalculatorService."""
import json
import time

import pytest

from calculator_function.common.config import CalculatorSettings
from calculator_function.common.models import (
    CalculationError,
    CalculationRequest,
    CalculationResult,
    ErrorKind,
)
from calculator_function.handler.service import CalculatorService


@pytest.fixture
def service() -> CalculatorService:
    """Service with default settings."""
    return CalculatorService(settings=CalculatorSettings())


@pytest.mark.parametrize("a,b,op,expected", [
    (2.0, 3.0, "+", 5.0),
    (2.0, 3.0, "-", -1.0),
    (2.0, 3.0, "*", 6.0),
    (6.0, 3.0, "/", 2.0),
])
def test_calculate_valid(service, a, b, op, expected) -> None:
    """calculate validates and evaluates a normalized request."""
    result = service.calculate(CalculationRequest(a=a, b=b, op=op))
    assert isinstance(result, CalculationResult)
    assert result.result == expected


def test_calculate_invalid_operation(service) -> None:
    """calculate reports an unsupported operator without evaluating."""
    error = service.calculate(CalculationRequest(a=1, b=2, op="%"))
    assert isinstance(error, CalculationError)
    assert error.kind is ErrorKind.INVALID_OPERATION


def test_calculate_uses_configured_tolerance() -> None:
    """The zero tolerance comes from the settings."""
    service = CalculatorService(settings=CalculatorSettings(zero_tolerance=0.5))
    error = service.calculate(CalculationRequest(a=1, b=0.25, op="/"))
    assert isinstance(error, CalculationError)
    assert error.kind is ErrorKind.DIVISION_BY_ZERO


def test_process_json_body_division(service) -> None:
    """A JSON body produces the full result payload."""
    payload = json.loads(service.process(body='{"a":6,"b":3,"op":"/"}'))
    assert payload["result"] == 2.0
    assert payload["operation"] == "/"
    assert payload["operand1"] == 6.0
    assert payload["operand2"] == 3.0
    assert isinstance(payload["executionTime"], int)
    assert set(payload) == {"result", "operation", "operand1", "operand2", "executionTime"}


def test_process_legacy_division_by_zero(service) -> None:
    """Legacy parameters dividing by zero yield the division error payload."""
    payload = json.loads(
        service.process(params={"number1": "5", "number2": "0", "operation": "divide"})
    )
    assert payload["error"] == "Division by zero is not allowed"
    assert isinstance(payload["timestamp"], int)


def test_process_invalid_operation(service) -> None:
    """An unsupported operator is reported with the allowed set."""
    payload = json.loads(service.process(body='{"a":1,"b":2,"op":"%"}'))
    assert payload["error"] == (
        "Invalid operation '%'. Supported operations are '+', '-', '*', '/'"
    )


def test_process_unknown_legacy_word(service) -> None:
    """Unrecognized legacy words fail validation."""
    payload = json.loads(
        service.process(params={"number1": "2", "number2": "3", "operation": "power"})
    )
    assert "Invalid operation 'power'" in payload["error"]


def test_process_malformed_json(service) -> None:
    """A malformed body becomes an error payload, not an exception."""
    payload = json.loads(service.process(body="{bad json"))
    assert payload["error"] == "Invalid JSON format in request body"


def test_process_missing_parameters(service) -> None:
    """Neither convention present yields a missing parameters error."""
    payload = json.loads(service.process(params={"x": "1"}))
    assert payload["error"].startswith("Missing required parameters")


def test_error_response_shape(service) -> None:
    """Error payloads carry the message and the current epoch milliseconds."""
    before = int(time.time() * 1000)
    payload = json.loads(service.error_response("nope"))
    assert payload["error"] == "nope"
    assert payload["timestamp"] >= before


def test_responses_are_pretty_printed_by_default(service) -> None:
    """Default settings indent JSON output by two spaces."""
    text = service.process(params={"a": "1", "b": "1", "op": "+"})
    assert text.startswith("{\n  \"result\"")


def test_zero_indent_gives_compact_json() -> None:
    """An indent of zero produces single-line JSON."""
    service = CalculatorService(settings=CalculatorSettings(json_indent=0))
    text = service.process(params={"a": "1", "b": "1", "op": "+"})
    assert "\n" not in text
    assert json.loads(text)["result"] == 2.0


def test_overflowing_result_is_serialized_as_null(service) -> None:
    """A result beyond the double range is sent as null."""
    payload = json.loads(service.process(params={"a": "1e308", "b": "10", "op": "*"}))
    assert payload["result"] is None
    assert payload["operation"] == "*"
    assert payload["operand1"] == 1e308

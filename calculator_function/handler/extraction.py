"""Extract operands and operator from the supported calling conventions."""
import base64
import binascii
import json
from typing import Any, Mapping, Optional, Tuple, Union

from calculator_function.common.logger import logger
from calculator_function.common.models import CalculationError, CalculationRequest, ErrorKind
from calculator_function.common.operations import normalize_operation

CURRENT_KEYS: Tuple[str, str, str] = ("a", "b", "op")
LEGACY_KEYS: Tuple[str, str, str] = ("number1", "number2", "operation")

MISSING_PARAMETERS_MESSAGE = (
    "Missing required parameters. Please provide 'a', 'b', and 'op' "
    "or 'number1', 'number2', and 'operation'"
)


def _to_number(value: Any) -> Optional[float]:
    """
    Convert a JSON value or query string to a float.

    Booleans and ``None`` are not numbers even though ``float()`` would take some of them.

    :param Any value: Raw parameter value

    :return: Parsed float, or None if the value is not numeric
    :rtype: Optional[float]
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        return float(value)
    except (ValueError, OverflowError):
        # integers beyond the double range overflow
        return None


def _has_all(params: Mapping[str, Any], keys: Tuple[str, str, str]) -> bool:
    return all(key in params for key in keys)


def _build_request(
    params: Mapping[str, Any], keys: Tuple[str, str, str], legacy: bool
) -> Union[CalculationRequest, CalculationError]:
    first_key, second_key, op_key = keys
    a = _to_number(params[first_key])
    b = _to_number(params[second_key])
    if a is None or b is None:
        logger.warning(f"🔢❌ Invalid number format in '{first_key}' or '{second_key}'")
        return CalculationError(
            kind=ErrorKind.MALFORMED_NUMBER,
            message=f"Parameters '{first_key}' and '{second_key}' must be valid numbers",
        )

    op = str(params[op_key])
    if legacy:
        op = normalize_operation(op)
    return CalculationRequest(a=a, b=b, op=op)


def extract_from_params(
    params: Optional[Mapping[str, Any]],
) -> Union[CalculationRequest, CalculationError]:
    """
    Build a request from flat parameters, trying current names before legacy ones.

    :param Mapping params: Query string, direct invocation or decoded body parameters

    :return: Normalized request, or a MissingParameters / MalformedNumber error
    :rtype: Union[CalculationRequest, CalculationError]
    """
    if not params:
        logger.warning("📭 No query parameters or request body found")
        return CalculationError(
            kind=ErrorKind.MISSING_PARAMETERS,
            message="No calculation parameters provided",
        )

    if _has_all(params, CURRENT_KEYS):
        return _build_request(params, CURRENT_KEYS, legacy=False)

    if _has_all(params, LEGACY_KEYS):
        logger.debug("Using legacy parameter names")
        return _build_request(params, LEGACY_KEYS, legacy=True)

    logger.warning(f"📭 Missing required parameters, got keys: {sorted(params)}")
    return CalculationError(kind=ErrorKind.MISSING_PARAMETERS, message=MISSING_PARAMETERS_MESSAGE)


def parse_body(body: str, is_base64_encoded: bool = False) -> Union[dict, CalculationError]:
    """
    Decode a request body into a JSON object.

    :param str body: Raw request body
    :param bool is_base64_encoded: Whether the gateway base64-encoded the body

    :return: Decoded JSON object, or a MalformedJson error
    :rtype: Union[dict, CalculationError]
    """
    try:
        if is_base64_encoded:
            body = base64.b64decode(body, validate=True).decode("utf-8")
        payload = json.loads(body)
    except (binascii.Error, ValueError) as exc:
        # ValueError also covers JSONDecodeError, bad UTF-8 and over-long integer literals
        logger.warning(f"📄❌ Invalid JSON in request body: {exc}")
        return CalculationError(
            kind=ErrorKind.MALFORMED_JSON,
            message="Invalid JSON format in request body",
        )

    if not isinstance(payload, dict):
        logger.warning(f"📄❌ Request body is a {type(payload).__name__}, not an object")
        return CalculationError(
            kind=ErrorKind.MALFORMED_JSON,
            message="Request body must be a JSON object",
        )
    return payload


def extract_request(
    body: Optional[str] = None,
    params: Optional[Mapping[str, Any]] = None,
    is_base64_encoded: bool = False,
) -> Union[CalculationRequest, CalculationError]:
    """
    Pick the parameter source and normalize it into a request.

    Priority order:
        1. A non-empty body, parsed as a JSON object.
        2. Parameters ``a``, ``b`` and ``op``.
        3. Legacy parameters ``number1``, ``number2`` and ``operation``.

    :param str body: Raw request body, if any
    :param Mapping params: Query string or direct invocation parameters, if any
    :param bool is_base64_encoded: Whether the body is base64-encoded

    :return: Normalized request, or the error that stopped extraction
    :rtype: Union[CalculationRequest, CalculationError]
    """
    if body:
        payload = parse_body(body, is_base64_encoded)
        if isinstance(payload, CalculationError):
            return payload
        return extract_from_params(payload)

    return extract_from_params(params)

"""HTTP adapter for API Gateway (HTTP API) proxy events."""
from typing import Any, Dict, Mapping, Optional

from calculator_function.common.config import CalculatorSettings
from calculator_function.common.logger import configure_logger, logger
from calculator_function.common.models import CalculationError, ErrorKind, ErrorResponse
from calculator_function.handler.service import CalculatorService

CORS_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": (
        "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token"
    ),
}

FAULT_HEADERS: Dict[str, str] = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


def _response(status_code: int, body: str, headers: Mapping[str, str]) -> Dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(headers), "body": body}


def lambda_handler(event: Optional[Mapping[str, Any]], context: Any = None) -> Dict[str, Any]:
    """
    Evaluate a calculation carried by a gateway event.

    A JSON ``body`` takes precedence over ``queryStringParameters``. Validation
    failures are still answered with status 200 and an error payload; only an
    unexpected fault while handling the event produces a 500.

    :param Mapping event: API Gateway proxy event
    :param Any context: Platform invocation context, unused

    :return: Proxy response with ``statusCode``, ``headers`` and ``body``
    :rtype: Dict[str, Any]
    """
    try:
        settings = CalculatorSettings.from_env()
        configure_logger(settings.log_level)
        logger.info(f"📨 Received API Gateway event: {event}")

        event = event or {}
        body = CalculatorService(settings=settings).process(
            body=event.get("body"),
            params=event.get("queryStringParameters"),
            is_base64_encoded=bool(event.get("isBase64Encoded", False)),
        )
        return _response(200, body, CORS_HEADERS)

    except Exception as exc:
        logger.exception(f"💥 Unexpected error: {exc}")
        fault = CalculationError(
            kind=ErrorKind.UNEXPECTED_FAULT, message=f"Error processing request: {exc}"
        )
        payload = ErrorResponse(error=fault.message)
        return _response(500, payload.model_dump_json(indent=2), FAULT_HEADERS)

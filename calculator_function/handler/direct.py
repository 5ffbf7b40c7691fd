"""Entry point for direct (non-HTTP) invocations."""
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from calculator_function.common.config import CalculatorSettings
from calculator_function.common.logger import configure_logger, logger
from calculator_function.common.models import ErrorResponse
from calculator_function.handler.service import CalculatorService


def invoke(event: Optional[Mapping[str, Any]], context: Any = None) -> str:
    """
    Evaluate a flat parameter mapping and return the JSON response text.

    Accepts ``a``/``b``/``op`` or the legacy ``number1``/``number2``/``operation``.
    Handled errors, including invalid settings in the environment, come back as
    an error payload, never as an exception.

    :param Mapping event: Direct invocation parameters
    :param Any context: Platform invocation context, unused

    :return: JSON text of the result or of the error
    :rtype: str
    """
    try:
        settings = CalculatorSettings.from_env()
    except ValidationError as exc:
        logger.error(f"⚙️❌ Invalid calculator settings: {exc}")
        payload = ErrorResponse(error=f"Invalid calculator configuration: {exc}")
        return payload.model_dump_json(indent=2)

    configure_logger(settings.log_level)
    logger.info(f"📨 Received direct invocation: {event}")

    return CalculatorService(settings=settings).process(params=event)

"""Evaluator pipeline turning a raw request into a JSON response text."""
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from calculator_function.common.config import CalculatorSettings
from calculator_function.common.models import (
    CalculationError,
    CalculationRequest,
    CalculationResult,
    ErrorResponse,
)
from calculator_function.common.operations import evaluate, validate_operation
from calculator_function.handler.extraction import extract_request


class CalculatorService(BaseModel):
    """
    Stateless calculator built once per invocation.

    Pipeline:
        1. Extract operands and operator from the body or the parameters.
        2. Validate the operator.
        3. Evaluate the operation.
        4. Serialize the result, or the first error met, as JSON text.

    Handled failures never raise: they come back as an error payload.
    """

    model_config = ConfigDict(frozen=True)

    settings: CalculatorSettings = Field(
        default_factory=CalculatorSettings, description="Settings for this invocation"
    )

    def calculate(self, request: CalculationRequest) -> Union[CalculationResult, CalculationError]:
        """
        Validate the operator of a normalized request and evaluate it.

        :param CalculationRequest request: Normalized request

        :return: Result, or an InvalidOperation / DivisionByZero error
        :rtype: Union[CalculationResult, CalculationError]
        """
        operation = validate_operation(request.op)
        if isinstance(operation, CalculationError):
            return operation
        return evaluate(request.a, request.b, operation, self.settings.zero_tolerance)

    def process(
        self,
        body: Optional[str] = None,
        params: Optional[Mapping[str, Any]] = None,
        is_base64_encoded: bool = False,
    ) -> str:
        """
        Run the whole pipeline on a raw request.

        :param str body: Raw request body, if any
        :param Mapping params: Query string or direct invocation parameters, if any
        :param bool is_base64_encoded: Whether the body is base64-encoded

        :return: JSON text of the result or of the error
        :rtype: str
        """
        request = extract_request(body, params, is_base64_encoded)
        if isinstance(request, CalculationError):
            return self.error_response(request.message)

        outcome = self.calculate(request)
        if isinstance(outcome, CalculationError):
            return self.error_response(outcome.message)
        return self.result_response(outcome)

    def result_response(self, result: CalculationResult) -> str:
        """Serialize a successful result with its wire field names."""
        return result.model_dump_json(by_alias=True, indent=self._indent)

    def error_response(self, message: str) -> str:
        """Serialize an error message stamped with the current epoch milliseconds."""
        return ErrorResponse(error=message).model_dump_json(indent=self._indent)

    @property
    def _indent(self) -> Optional[int]:
        # 0 means compact output
        return self.settings.json_indent or None

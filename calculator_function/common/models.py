"""Pydantic models for calculation requests, results and errors."""
from enum import Enum
import time

from pydantic import BaseModel, ConfigDict, Field


class Operation(str, Enum):
    """Supported binary operations, valued by their external symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


class ErrorKind(str, Enum):
    """Categories of failure a request can end in."""

    MISSING_PARAMETERS = "MissingParameters"
    MALFORMED_NUMBER = "MalformedNumber"
    INVALID_OPERATION = "InvalidOperation"
    DIVISION_BY_ZERO = "DivisionByZero"
    MALFORMED_JSON = "MalformedJson"
    UNEXPECTED_FAULT = "UnexpectedFault"


class CalculationError(BaseModel):
    """Failure value handed back by a processing stage instead of raising."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = Field(..., description="Category of the failure")
    message: str = Field(..., description="Human-readable description sent to the caller")


class CalculationRequest(BaseModel):
    """Normalized operands and operator, whatever the calling convention was."""

    model_config = ConfigDict(frozen=True)

    a: float = Field(..., description="First operand")
    b: float = Field(..., description="Second operand")
    op: str = Field(..., description="Operator symbol, not yet validated")


class CalculationResult(BaseModel):
    """Successful evaluation of a single binary operation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    result: float = Field(..., description="Computed value")
    operation: Operation = Field(..., description="Operator that was applied")
    operand1: float = Field(..., description="First operand")
    operand2: float = Field(..., description="Second operand")
    execution_time_millis: int = Field(
        default=0,
        ge=0,
        alias="executionTime",
        description="Wall-clock duration of the evaluation in milliseconds",
    )


class ErrorResponse(BaseModel):
    """Error payload returned to the caller."""

    error: str = Field(..., description="Human-readable error message")
    timestamp: int = Field(
        default_factory=lambda: int(time.time() * 1000),
        description="Epoch milliseconds at which the error was produced",
    )

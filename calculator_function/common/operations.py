"""Operator table, legacy normalization, validation and evaluation."""
import operator
import time
from typing import Callable, Dict, Union

from calculator_function.common.logger import logger
from calculator_function.common.models import (
    CalculationError,
    CalculationResult,
    ErrorKind,
    Operation,
)

# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]

OPERATORS: Dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: operator.truediv,
}

# Word-form operators accepted through the legacy parameters
LEGACY_OPERATIONS: Dict[str, Operation] = {
    "add": Operation.ADD,
    "subtract": Operation.SUBTRACT,
    "multiply": Operation.MULTIPLY,
    "divide": Operation.DIVIDE,
}

# Divisors closer to zero than this are rejected. A policy choice, not an epsilon
# derived from the operands.
ZERO_DIVISION_TOLERANCE: float = 1e-10

SUPPORTED_OPERATIONS: str = ", ".join(f"'{op.value}'" for op in Operation)


def normalize_operation(legacy_op: str) -> str:
    """
    Translate a legacy operation word into its symbol.

    Unknown words are returned unchanged so that validation rejects them.

    :param str legacy_op: Operation word, e.g. ``"divide"``

    :return: Operator symbol, or the input itself when the word is unknown
    :rtype: str
    """
    operation = LEGACY_OPERATIONS.get(legacy_op)
    return operation.value if operation is not None else legacy_op


def validate_operation(op: str) -> Union[Operation, CalculationError]:
    """
    Check an operator symbol against the supported set.

    :param str op: Operator symbol

    :return: Matching Operation, or an InvalidOperation error
    :rtype: Union[Operation, CalculationError]
    """
    try:
        return Operation(op)
    except ValueError:
        logger.warning(f"🧮❌ Rejected operation {op!r}")
        return CalculationError(
            kind=ErrorKind.INVALID_OPERATION,
            message=f"Invalid operation '{op}'. Supported operations are {SUPPORTED_OPERATIONS}",
        )


def evaluate(
    a: float,
    b: float,
    operation: Operation,
    zero_tolerance: float = ZERO_DIVISION_TOLERANCE,
) -> Union[CalculationResult, CalculationError]:
    """
    Apply a validated operation to two operands.

    :param float a: First operand
    :param float b: Second operand
    :param Operation operation: Operation to apply
    :param float zero_tolerance: Divisors with ``abs(b) < zero_tolerance`` count as zero

    :return: Result with timing metadata, or a DivisionByZero error
    :rtype: Union[CalculationResult, CalculationError]
    """
    start = time.perf_counter()

    if operation is Operation.DIVIDE and (b == 0 or abs(b) < zero_tolerance):
        logger.warning(f"➗❌ Division by zero attempt: {a} / {b}")
        return CalculationError(
            kind=ErrorKind.DIVISION_BY_ZERO,
            message="Division by zero is not allowed",
        )

    result: float = OPERATORS[operation](a, b)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    logger.info(f"🧮✅ Calculation complete: {a} {operation.value} {b} = {result}")
    return CalculationResult(
        result=result,
        operation=operation,
        operand1=a,
        operand2=b,
        execution_time_millis=elapsed_ms,
    )

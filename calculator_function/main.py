"""
Local entrypoint that invokes the calculator function from the command line.

This script:
- Builds an API Gateway event from a JSON body or ``key=value`` parameters
- Runs it through the HTTP adapter
- Prints the status to stderr, the response body to stdout, and exits non-zero unless the status is 200

Examples
--------
calculator-function a=6 b=3 op=/
calculator-function number1=5 number2=0 operation=divide
calculator-function --body '{"a": 1, "b": 2, "op": "+"}'
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from calculator_function.handler.http import lambda_handler


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    body : Optional[str]
        Raw JSON request body.
    params : Dict[str, str]
        Query string parameters given as ``key=value`` pairs.
    """

    body: Optional[str] = Field(default=None, description="Raw JSON request body")
    params: Dict[str, str] = Field(default_factory=dict, description="Query string parameters")

    @field_validator("params", mode="before")
    def parse_key_value_pairs(cls, v: Any) -> Any:
        """Turn a list of ``key=value`` strings into a mapping."""
        if not isinstance(v, list):
            return v
        params: Dict[str, str] = {}
        for pair in v:
            key, sep, value = pair.partition("=")
            if not sep or not key:
                raise ValueError(f"Expected key=value, got {pair!r}")
            params[key] = value
        return params

    def to_event(self) -> Dict[str, Any]:
        """Build the gateway event the adapter expects."""
        return {
            "body": self.body,
            "queryStringParameters": self.params or None,
            "isBase64Encoded": False,
        }


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Invoke the calculator function locally"
    )

    parser.add_argument(
        "params",
        nargs="*",
        help="Query parameters as key=value pairs, e.g. a=6 b=3 op=/",
    )
    parser.add_argument(
        "--body",
        default=None,
        help="JSON request body, takes precedence over query parameters",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(body=args.body, params=args.params)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the ``calculator-function`` console script.

    :return: Process exit code
    :rtype: int
    """
    cli_args = parse_args(argv)
    response = lambda_handler(cli_args.to_event(), None)

    print(f"HTTP {response['statusCode']}", file=sys.stderr)
    print(response["body"])
    return 0 if response["statusCode"] == 200 else 1


if __name__ == "__main__":
    sys.exit(main())

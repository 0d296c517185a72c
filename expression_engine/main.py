"""
Command-line entrypoint.

This script:
- Takes a single arithmetic expression as argument
- Prints its value on stdout
- Prints the error on stderr and exits with status 1 if it cannot be evaluated
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from expression_engine.common.errors import EngineError
from expression_engine.common.logger import logger, set_verbose
from expression_engine.common.models import EvaluationRequest
from expression_engine.common.parser import ExpressionParser


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str
        Arithmetic expression to evaluate.
    verbose : bool
        Log every transformation and evaluation step.
    """

    expression: str
    verbose: bool = False


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate an arithmetic expression"
    )

    parser.add_argument(
        "expression",
        help="Expression to evaluate, e.g. \"max(1, 2) * -3 ^ 2\"",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log tokens, the postfix program and every evaluation step",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(expression=args.expression, verbose=args.verbose)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Evaluate the expression given on the command line.

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    set_verbose(cli_args.verbose)

    request = EvaluationRequest(expression=cli_args.expression)
    try:
        result = ExpressionParser.run(request)
    except EngineError as exc:
        logger.debug(f"❌ Evaluation failed for {request.expression!r}: {exc!r}")
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.debug(f"✅ {result}")
    print(repr(result.result))
    return 0


if __name__ == "__main__":
    sys.exit(main())

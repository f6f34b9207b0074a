import logging
import sys
from functools import wraps

import click

from ligen.constants import EXIT_CODE_FAILURE, EXIT_CODE_OK
from ligen.errors import LigenError, LigenException


LOG = logging.getLogger(__name__)


def output_exception(exception: Exception, exit_code_output: bool = True) -> None:
    """
    Output an exception message to the console and exit.

    Args:
        exception (Exception): The exception to output.
        exit_code_output (bool): Whether to output the exit code.

    Exits:
        Exits the program with the appropriate exit code.
    """
    click.secho(str(exception), fg="red", file=sys.stderr)

    if exit_code_output:
        exit_code = EXIT_CODE_FAILURE
        if hasattr(exception, "get_exit_code"):
            exit_code = exception.get_exit_code()
    else:
        exit_code = EXIT_CODE_OK

    sys.exit(exit_code)


def handle_cmd_exception(func):
    """
    Decorator to handle exceptions in command functions.

    Args:
        func: The command function to wrap.

    Returns:
        The wrapped function.
    """

    @wraps(func)
    def inner(ctx, *args, **kwargs):
        try:
            return func(ctx, *args, **kwargs)
        except click.ClickException as e:
            raise e
        except LigenError as e:
            LOG.exception("Expected LigenError happened: %s", e)
            output_exception(e, exit_code_output=True)
        except Exception as e:
            LOG.exception("Unexpected Exception happened: %s", e)
            exception = e if isinstance(e, LigenException) else LigenException(info=e)
            output_exception(exception, exit_code_output=True)

    return inner

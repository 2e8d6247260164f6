""" smartfee command line decorators """
import functools
import json
import logging
import traceback

import click

import smartfee.exceptions as exceptions
from smartfee.uxstring import UxString


def _echo_json(data):
    click.echo(json.dumps(data, indent=4, separators=(',', ': ')))


def json_output(f):
    """ Prints the command's return value as indented JSON.

    Logging is silenced while the command runs so stdout holds nothing but
    the JSON document. A SmartFeeError is printed as its details() before it
    propagates, so scripts get a JSON answer either way.
    """

    def _json_output(ctx, *args, **kwargs):
        previous_level = logging.root.manager.disable
        logging.disable(logging.CRITICAL)
        try:
            result = f(ctx, *args, **kwargs)
        except exceptions.SmartFeeError as ex:
            _echo_json(ex.details())
            raise
        finally:
            logging.disable(previous_level)
        _echo_json(result)
        return result

    return functools.update_wrapper(_json_output, f)


def catch_all(func):
    """ Reports unexpected exceptions in red and exits with status 1.

    Click exceptions, SmartFeeError included, and aborts are left to click.
    The traceback of anything else is only shown with --debug.
    """

    def _catch_all(ctx, *args, **kwargs):
        try:
            return func(ctx, *args, **kwargs)
        except (click.ClickException, click.Abort):
            raise
        except Exception:
            report = [UxString.Error.unexpected]
            if ctx.obj and ctx.obj.get('debug'):
                report.append(UxString.Error.unexpected_in.format(func.__module__, func.__name__))
                report.append(traceback.format_exc())
            else:
                report.append(UxString.Error.run_with_debug)
            click.echo(click.style('\n'.join(report), fg='red'), err=True)
            ctx.exit(1)

    return functools.update_wrapper(_catch_all, func)

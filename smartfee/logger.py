""" Routes the `smartfee` logger through click

    The smartfee command line tool prints everything with click.echo() and
    click.style(). Importing `smartfee.logger` attaches a ClickLogHandler to
    the `smartfee` logger and makes ClickLogger the class returned by
    `logging.getLogger()`, so that callers can write:

    >>> logger.info("Fee rate too low", fg="red", err=True)
"""
# standard python imports
import logging

# 3rd party imports
import click


class ClickLogFormatter(logging.Formatter):
    """ Styles messages by calling click.style() """

    # supported click styles
    STYLES = ("fg", "bg", "bold", "dim", "underline", "reverse", "reset", "blink")

    def format(self, record):
        """ Formats the record message with any click style attributes found on it

        Args:
            record (logging.LogRecord): record which gets styled with click.style()

        Returns:
            str: the styled message
        """
        message = record.getMessage()
        kwargs = {name: getattr(record, name) for name in self.STYLES if hasattr(record, name)}
        if kwargs:
            message = click.style(message, **kwargs)
        return message


class ClickLogHandler(logging.Handler):
    """ Logs messages using click.echo() """

    ECHO_KWARGS = ("nl", "err", "color", "file")

    def emit(self, record):
        try:
            message = self.format(record)
            kwargs = {name: getattr(record, name) for name in self.ECHO_KWARGS if hasattr(record, name)}
            if record.levelno >= logging.ERROR:
                kwargs.setdefault("err", True)
            click.echo(message, **kwargs)
        except (KeyboardInterrupt, SystemExit):
            raise
        except Exception:
            self.handleError(record)


class ClickLogger(logging.getLoggerClass()):
    """ Logger which turns keyword arguments into record attributes

        By passing click keywords to the log functions, the record will have the
        given key-value pair as an attribute making for easy to style and echo records.
    """

    def debug(self, msg, *args, **kwargs):
        super(ClickLogger, self).debug(msg, *args, extra=kwargs)

    def info(self, msg, *args, **kwargs):
        super(ClickLogger, self).info(msg, *args, extra=kwargs)

    def warning(self, msg, *args, **kwargs):
        super(ClickLogger, self).warning(msg, *args, extra=kwargs)

    def error(self, msg, *args, **kwargs):
        super(ClickLogger, self).error(msg, *args, extra=kwargs)

    def critical(self, msg, *args, **kwargs):
        super(ClickLogger, self).critical(msg, *args, extra=kwargs)


# creates the handler which prints records
click_log_handler = ClickLogHandler()

# creates the formatter which styles the records
click_log_handler.setFormatter(ClickLogFormatter())

# captures the package logger
click_logger = logging.getLogger('smartfee')

# adds the handler, formatter, and sets default level to info
click_logger.addHandler(click_log_handler)
click_logger.setLevel(logging.INFO)
logging.setLoggerClass(ClickLogger)

""" All smartfee related exceptions """
# 3rd party imports
import click


class SmartFeeError(click.ClickException):
    """
    Base of every error that aborts a Smart Fee build.

    Errors render in red, without click's "Error: " prefix, and carry an
    optional `data` payload (a parsed response body, a prebuild, ...) that
    `details()` folds into the JSON printed by `smartfee build`.
    """

    def __init__(self, message="", data=None):
        super(SmartFeeError, self).__init__(message)
        self.data = data

    def details(self):
        """Return the error as a JSON-ready dict keyed by 'error'."""
        if isinstance(self.data, dict):
            details = dict(self.data)
        elif self.data is None:
            details = {}
        else:
            details = {"data": self.data}
        details["error"] = self.message
        return details

    def format_message(self):
        return click.style(self.message, fg='red')

    def show(self, file=None):
        click.echo(self.format_message(), file=file, err=file is None)


class FileDecodeError(Exception):
    """ Error when a config file cannot be decoded """


class ConfigurationError(SmartFeeError):
    """ Required configuration is missing or invalid """


class RemoteRejection(SmartFeeError):
    """ The Smart Fee service answered with a non-success status """

    def __init__(self, message="", status_code=None, data=None):
        super(RemoteRejection, self).__init__(message, data=data)
        self.status_code = status_code

    def details(self):
        details = super(RemoteRejection, self).details()
        if self.status_code is not None:
            details["status_code"] = self.status_code
        return details


class ServerConnectionError(RemoteRejection):
    """ The Smart Fee service could not be reached at all """


class BuildFailure(SmartFeeError):
    """ The wallet engine failed to build, or returned an unusable build """


class InvalidRecipient(SmartFeeError):
    """ A recipient amount is not a non-negative integer """


class InsufficientFunds(SmartFeeError):
    """ The selected inputs cannot cover the recipients and fee without change """

    def __init__(self, message="", amount=None):
        super(InsufficientFunds, self).__init__(message, data={"amount": amount})
        self.amount = amount

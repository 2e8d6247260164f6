import io

import click
import pytest

from smartfee import exceptions


def test_errors_are_click_exceptions():
    for error_cls in (exceptions.ConfigurationError, exceptions.RemoteRejection,
                      exceptions.ServerConnectionError, exceptions.BuildFailure,
                      exceptions.InvalidRecipient, exceptions.InsufficientFunds):
        assert issubclass(error_cls, exceptions.SmartFeeError)
        assert issubclass(error_cls, click.ClickException)


def test_connection_error_is_a_remote_rejection():
    assert issubclass(exceptions.ServerConnectionError, exceptions.RemoteRejection)


def test_remote_rejection_carries_body():
    error = exceptions.RemoteRejection("rejected", status_code=400, data={'message': 'bad'})
    assert error.status_code == 400
    assert error.data == {'message': 'bad'}
    assert error.details() == {'message': 'bad', 'error': 'rejected', 'status_code': 400}
    assert str(error) == "rejected"


def test_insufficient_funds_carries_amount():
    error = exceptions.InsufficientFunds("short", amount=-42)
    assert error.amount == -42
    assert error.details() == {'amount': -42, 'error': 'short'}


def test_show_without_prefix():
    stream = io.StringIO()
    exceptions.ConfigurationError("Must set apiKey").show(file=stream)
    assert "Must set apiKey" in stream.getvalue()
    assert not stream.getvalue().startswith("Error")


@pytest.mark.parametrize("error, expected", [
    (exceptions.ConfigurationError("no key"), {'error': 'no key'}),
    (exceptions.BuildFailure("bad build", data=['u1']), {'error': 'bad build', 'data': ['u1']}),
    (exceptions.ServerConnectionError("offline"), {'error': 'offline'}),
    ])
def test_details(error, expected):
    assert error.details() == expected


def test_details_do_not_alias_data():
    data = {'message': 'bad'}
    exceptions.RemoteRejection("rejected", status_code=400, data=data).details()
    assert data == {'message': 'bad'}

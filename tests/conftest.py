# standard python imports
import unittest.mock as mock

# 3rd party imports
import pytest

# smartfee imports
import smartfee
from tests import mock as mock_objects


# py.test hooks
def pytest_report_header(config):
    """ Adds the smartfee version to the report header """
    return "smartfee: {}".format(smartfee.SMARTFEE_VERSION)


# fixtures
@pytest.fixture()
def recipients():
    """ Fixture that injects a withdrawal batch summing to 900,000 satoshis """
    return [
        {'address': 'tb1qrecipientone', 'amount': 600000},
        {'address': 'tb1qrecipienttwo', 'amount': '300000'},
    ]


@pytest.fixture()
def fee_service():
    """ Fixture that injects a MockFeeService """
    return mock_objects.MockFeeService()


@pytest.fixture()
def mock_wallet():
    """ Fixture that injects a MockWallet with a single change output prebuild """
    return mock_objects.MockWallet(mock_objects.make_trial_build())


@pytest.fixture()
def patch_click(monkeypatch):
    """ Fixture that monkeypatches click.echo to capture all output in a mock """
    echo_mock = mock.Mock()
    monkeypatch.setattr('click.echo', echo_mock)
    return echo_mock

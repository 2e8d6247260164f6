"""Mock objects for testing."""
import json

from smartfee.models import TrialBuild
from smartfee.server.base_service import BaseFeeService
from smartfee.wallet.base_wallet import BaseWalletEngine


class MockHttpResponse:

    def __init__(self, data=None, status_code=200):
        self.data = data
        self.text = data if data is not None else ""
        self.status_code = status_code
        self.ok = 200 <= status_code < 400

    def json(self):
        if self.data is None:
            raise ValueError("No JSON object could be decoded")
        return json.loads(self.data)


class MockFeeService(BaseFeeService):

    """Mock Smart Fee service with canned answers."""

    BUMP_ADDRESS = 'tb1qsmartfeebumpaddress'
    SATS_PER_KB = 2000

    def __init__(self, bump_address=BUMP_ADDRESS, sats_per_kb=SATS_PER_KB):
        self.bump_address = bump_address
        self.sats_per_kb = sats_per_kb
        self.return_addresses = []
        self.calls = []

    def issue_return_address(self, return_address):
        self.calls.append('issue_return_address')
        self.return_addresses.append(return_address)

    def issue_bump_address(self):
        self.calls.append('issue_bump_address')
        return self.bump_address

    def quote_fee_rate(self):
        self.calls.append('quote_fee_rate')
        return self.sats_per_kb


class MockWallet(BaseWalletEngine):

    """Mock wallet engine that replays a fixed prebuild."""

    RETURN_ADDRESS = 'tb1qwalletreturnaddress'

    def __init__(self, trial_build=None):
        self.trial_build = trial_build
        self.created = []
        self.prebuilds = []

    def create_address(self, chain, label=None):
        self.created.append(dict(chain=chain, label=label))
        return {'address': self.RETURN_ADDRESS, 'chain': chain}

    def prebuild_transaction(self, params):
        # snapshot, since the caller may update the params after the call
        self.prebuilds.append(params.to_dict())
        return self.trial_build


def make_trial_build(fee=1000, size=250, unspents=None, change_addresses=('addr1',)):
    if unspents is None:
        unspents = [{'id': 'u1', 'value': 1000000}]
    return TrialBuild(fee, size, unspents, change_addresses)


def make_prebuild(fee=1000, size=250, unspents=None, change_addresses=('addr1',)):
    """A prebuild response in the BitGo wire shape."""
    if unspents is None:
        unspents = [{'id': 'u1', 'value': 1000000}]
    return {
        'txHex': '0100',
        'feeInfo': {'fee': fee, 'size': size},
        'txInfo': {'unspents': unspents, 'changeAddresses': list(change_addresses)},
    }

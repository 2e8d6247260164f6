# standard python imports
import json
import logging

# 3rd party imports
import requests

# smartfee imports
import smartfee
from smartfee import exceptions
from smartfee.models import TrialBuild
from smartfee.uxstring import UxString
from smartfee.wallet.base_wallet import BaseWalletEngine


logger = logging.getLogger(__name__)


class BitGoWallet(BaseWalletEngine):
    """ Wallet engine backed by the BitGo v2 REST API.

    Args:
        wallet_id (str): BitGo wallet id.
        access_token (str): BitGo access token.
        coin (str): coin ticker, e.g. 'btc' or 'tbtc'.
        host (str): BitGo API host.
        timeout (float): optional per-request timeout in seconds.
    """

    def __init__(self, wallet_id, access_token, coin='tbtc', host=None, timeout=None):
        self.wallet_id = wallet_id
        self.access_token = access_token
        self.coin = coin
        self.host = (host or smartfee.SMARTFEE_BITGO_HOST).rstrip('/')
        self.timeout = timeout
        self._session = requests.Session()

    def _wallet_url(self, path):
        return "{}/api/v2/{}/wallet/{}{}".format(self.host, self.coin, self.wallet_id, path)

    def _post(self, path, body, error_message):
        headers = {
            "Authorization": "Bearer {}".format(self.access_token),
            "content-type": "application/json",
            "User-Agent": "smartfee/{}".format(smartfee.SMARTFEE_VERSION),
        }
        try:
            response = self._session.post(self._wallet_url(path), data=json.dumps(body),
                                          headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise exceptions.BuildFailure(error_message.format(e))

        try:
            data = response.json()
        except ValueError:
            data = {"error": response.text}

        if not 200 <= response.status_code < 300:
            raise exceptions.BuildFailure(error_message.format(json.dumps(data)), data=data)
        return data

    # POST /api/v2/{coin}/wallet/{id}/address
    def create_address(self, chain, label=None):
        body = {"chain": chain}
        if label:
            body["label"] = label
        return self._post("/address", body, UxString.Error.address_failed)

    # POST /api/v2/{coin}/wallet/{id}/tx/build
    def prebuild_transaction(self, params):
        body = params.to_dict() if hasattr(params, "to_dict") else dict(params)
        logger.debug("prebuilding with %s", body)
        data = self._post("/tx/build", body, UxString.Error.build_failed)
        return TrialBuild.from_prebuild(data)

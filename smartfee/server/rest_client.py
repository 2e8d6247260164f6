# standard python imports
import json
import logging

# 3rd party imports
import requests

# smartfee imports
import smartfee
from smartfee import environments
from smartfee import exceptions
from smartfee.server.base_service import BaseFeeService
from smartfee.uxstring import UxString


logger = logging.getLogger(__name__)


class SmartFeeRestClient(BaseFeeService):
    """ HTTP client for the Smart Fee bumper API.

    Args:
        api_key (str): Smart Fee API key, sent as the `x-api-key` header.
        environment (Environment or str): service instance to talk to.
        timeout (float): optional per-request timeout in seconds.
    """

    def __init__(self, api_key, environment=environments.STAGING, timeout=None):
        if not api_key:
            raise exceptions.ConfigurationError(UxString.Error.missing_api_key)
        self.api_key = api_key
        self.environment = environments.get_environment(environment)
        self.server_url = self.environment.url
        self.timeout = timeout
        self._session = None

    def _create_session(self):
        self._session = requests.Session()

    def _request(self, method="GET", path="", error_message=None, **kwargs):
        if self._session is None:
            self._create_session()

        url = self.server_url + path
        headers = {
            "x-api-key": self.api_key,
            "accept": "application/json",
            "User-Agent": "smartfee/{}".format(smartfee.SMARTFEE_VERSION),
        }
        if "data" in kwargs:
            headers["content-type"] = "application/json"
        if self.timeout is not None:
            kwargs.setdefault("timeout", self.timeout)

        try:
            response = self._session.request(method, url, headers=headers, **kwargs)
        except (requests.exceptions.Timeout,
                requests.exceptions.ConnectionError):
            raise exceptions.ServerConnectionError(UxString.Error.connection.format(self.server_url))

        if response.status_code != 200:
            try:
                data = response.json()
            except ValueError:
                data = {"error": "Request Error"}
            raise exceptions.RemoteRejection(
                (error_message or "{}").format(json.dumps(data)),
                status_code=response.status_code,
                data=data)

        return response

    def _field(self, response, name):
        try:
            data = response.json()
            return data[name]
        except (ValueError, KeyError, TypeError):
            raise exceptions.RemoteRejection(
                UxString.Error.missing_field.format(name, response.text),
                status_code=response.status_code,
                data={"error": response.text})

    # POST /bumper/return_address
    def issue_return_address(self, return_address):
        path = "/bumper/return_address"
        data = json.dumps({"return_address": return_address})
        self._request(method="POST", path=path, data=data,
                      error_message=UxString.Error.post_return_address)
        logger.info(UxString.posted_return_address)

    # POST /bumper/address
    def issue_bump_address(self):
        logger.info(UxString.requesting_bump_address)
        path = "/bumper/address"
        response = self._request(method="POST", path=path,
                                 error_message=UxString.Error.request_bump_address)
        address = self._field(response, "address")
        logger.info(UxString.received_bump_address.format(address))
        return address

    # GET /bumper/fee
    def quote_fee_rate(self):
        logger.info(UxString.requesting_fee_rate)
        path = "/bumper/fee"
        response = self._request(method="GET", path=path,
                                 error_message=UxString.Error.request_fee_rate)
        sats_per_kb = self._field(response, "current_sats_per_kb")
        if isinstance(sats_per_kb, bool) or not isinstance(sats_per_kb, (int, float)):
            raise exceptions.RemoteRejection(
                UxString.Error.missing_field.format("current_sats_per_kb", response.text),
                status_code=response.status_code,
                data={"error": response.text})
        if isinstance(sats_per_kb, float):
            if not sats_per_kb.is_integer():
                raise exceptions.RemoteRejection(
                    UxString.Error.fractional_fee_rate.format(sats_per_kb),
                    status_code=response.status_code,
                    data={"error": response.text})
            sats_per_kb = int(sats_per_kb)
        logger.info(UxString.current_fee_rate.format(sats_per_kb))
        return sats_per_kb

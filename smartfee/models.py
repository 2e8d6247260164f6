"""Value objects passed between the Smart Fee pipeline and the wallet engine."""
from smartfee import exceptions
from smartfee.uxstring import UxString


DEFAULT_ADDRESS_TYPE = 'p2wsh'


class SmartFeeOptions(object):
    """Caller options for a Smart Fee build.

    Args:
        api_key (str): Smart Fee API key. Required.
        return_address_label (str): label attached to the generated
            return address in the wallet.
        target_wallet_unspents (int): hint asking the engine to split
            change so the wallet ends up with this many unspents.
        address_type (str): script type of generated outputs.
    """

    def __init__(self, api_key=None, return_address_label=None, target_wallet_unspents=None,
                 address_type=DEFAULT_ADDRESS_TYPE):
        self.api_key = api_key
        self.return_address_label = return_address_label
        self.target_wallet_unspents = target_wallet_unspents
        self.address_type = address_type

    @classmethod
    def from_dict(cls, options):
        """Build options from a dict using either snake_case or camelCase keys."""
        if isinstance(options, cls):
            return options
        options = options or {}
        return cls(
            api_key=options.get('api_key', options.get('apiKey')),
            return_address_label=options.get('return_address_label', options.get('returnAddressLabel')),
            target_wallet_unspents=options.get('target_wallet_unspents', options.get('targetWalletUnspents')),
            address_type=options.get('address_type', options.get('addressType')) or DEFAULT_ADDRESS_TYPE)

    def validate(self):
        if not self.api_key:
            raise exceptions.ConfigurationError(UxString.Error.missing_api_key)


class BuildParams(object):
    """Parameters handed to the wallet engine's prebuild call."""

    def __init__(self, recipients, address_type=DEFAULT_ADDRESS_TYPE, fee_rate=None, unspents=None,
                 target_wallet_unspents=None, min_confirms=1, enforce_min_confirms_for_change=True):
        self.recipients = recipients
        self.min_confirms = min_confirms
        self.enforce_min_confirms_for_change = enforce_min_confirms_for_change
        self.no_split_change = not target_wallet_unspents
        self.address_type = address_type
        self.target_wallet_unspents = target_wallet_unspents
        self.unspents = unspents
        self.fee_rate = fee_rate

    def to_dict(self):
        """Render the camelCase form accepted by the wallet engine.

        Optional keys are left out when unset.
        """
        params = {
            'recipients': [dict(r) for r in self.recipients],
            'minConfirms': self.min_confirms,
            'enforceMinConfirmsForChange': self.enforce_min_confirms_for_change,
            'noSplitChange': self.no_split_change,
            'addressType': self.address_type,
        }
        if self.target_wallet_unspents:
            params['targetWalletUnspents'] = self.target_wallet_unspents
        if self.unspents:
            params['unspents'] = list(self.unspents)
        if self.fee_rate is not None:
            params['feeRate'] = self.fee_rate
        return params

    def __eq__(self, other):
        return isinstance(other, BuildParams) and self.to_dict() == other.to_dict()

    def __repr__(self):
        return 'BuildParams({!r})'.format(self.to_dict())


class TrialBuild(object):
    """Read-only view of a prebuilt transaction.

    Attributes:
        fee (int): realized fee in satoshis.
        size (int): realized size in bytes.
        unspents (tuple): selected inputs as dicts with 'id' and 'value'.
        change_addresses (tuple): change addresses the engine created.
    """

    def __init__(self, fee, size, unspents, change_addresses=()):
        self._fee = fee
        self._size = size
        self._unspents = tuple(dict(u) for u in unspents)
        self._change_addresses = tuple(change_addresses or ())

    @property
    def fee(self):
        return self._fee

    @property
    def size(self):
        return self._size

    @property
    def unspents(self):
        return self._unspents

    @property
    def change_addresses(self):
        return self._change_addresses

    @property
    def unspent_ids(self):
        return [u['id'] for u in self._unspents]

    @property
    def sum_inputs(self):
        return sum(u['value'] for u in self._unspents)

    @classmethod
    def from_prebuild(cls, prebuild):
        """Validate a prebuild response.

        Args:
            prebuild (TrialBuild or dict): either an existing TrialBuild or a
                response shaped like ``{"feeInfo": {"fee", "size"},
                "txInfo": {"unspents", "changeAddresses"}}``.

        Returns:
            TrialBuild: the validated build.

        Raises:
            BuildFailure: if fee, size or unspents are missing or malformed.
        """
        if isinstance(prebuild, TrialBuild):
            fee, size = prebuild.fee, prebuild.size
            unspents, change_addresses = prebuild.unspents, prebuild.change_addresses
        else:
            try:
                fee_info = prebuild['feeInfo']
                tx_info = prebuild['txInfo']
                fee, size = fee_info['fee'], fee_info['size']
                unspents = tx_info['unspents']
                change_addresses = tx_info.get('changeAddresses') or ()
            except (KeyError, TypeError, AttributeError):
                raise exceptions.BuildFailure(UxString.Error.invalid_build.format(prebuild), data=prebuild)

        if not _is_int(fee) or fee < 0 or not _is_int(size) or size <= 0:
            raise exceptions.BuildFailure(
                UxString.Error.invalid_build.format('fee={!r} size={!r}'.format(fee, size)))
        if not isinstance(unspents, (list, tuple)) or not unspents:
            raise exceptions.BuildFailure(UxString.Error.invalid_build.format('unspents={!r}'.format(unspents)))
        for unspent in unspents:
            if not isinstance(unspent, dict) or 'id' not in unspent or not _is_int(unspent.get('value')):
                raise exceptions.BuildFailure(UxString.Error.invalid_build.format('unspent={!r}'.format(unspent)))

        return cls(fee, size, unspents, change_addresses)

    def __repr__(self):
        return 'TrialBuild(fee={}, size={}, unspents={}, change_addresses={})'.format(
            self._fee, self._size, self.unspent_ids, list(self._change_addresses))


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)

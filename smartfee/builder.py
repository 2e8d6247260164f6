"""Builds wallet send parameters that pay Smart Fee and avoid change.

The flow is:

1. create a wallet receive address and register it with Smart Fee as the
   return address for bumped funds,
2. ask Smart Fee for a bumping address and the current fee rate,
3. append a Smart Fee output to the recipients and prebuild once,
4. keep that build if it has no change, or has split change; otherwise
   resize the Smart Fee output so the same inputs leave no change.

Nothing is retried. Any failure aborts the whole build.
"""
import logging

from smartfee import environments
from smartfee import exceptions
from smartfee import fees
from smartfee.models import DEFAULT_ADDRESS_TYPE
from smartfee.models import BuildParams
from smartfee.models import SmartFeeOptions
from smartfee.models import TrialBuild
from smartfee.server.rest_client import SmartFeeRestClient
from smartfee.uxstring import UxString

logger = logging.getLogger(__name__)


def issue_return_address(wallet, service, label=None, address_type=DEFAULT_ADDRESS_TYPE):
    """Create a wallet receive address and register it with Smart Fee.

    Smart Fee returns funds to the most recent address it was given.

    Returns:
        str: the registered address.
    """
    chain = fees.get_address_type(address_type).receive_chain
    return_address = wallet.create_address(chain=chain, label=label)['address']
    logger.info(UxString.generated_return_address.format(return_address))

    service.issue_return_address(return_address)
    return return_address


def smart_fee_build_params(sats_per_kb, recipients, unspent_ids=None, target_wallet_unspents=None,
                           address_type=DEFAULT_ADDRESS_TYPE):
    return BuildParams(recipients,
                       address_type=address_type,
                       fee_rate=sats_per_kb,
                       unspents=unspent_ids,
                       target_wallet_unspents=target_wallet_unspents)


def prebuild(wallet, params):
    """Prebuild once. Engine errors propagate untouched."""
    return TrialBuild.from_prebuild(wallet.prebuild_transaction(params))


def should_use_initial_build(trial_build):
    # One change output is the only case worth rebuilding; none means we are
    # done and several means the engine split change on purpose.
    return len(trial_build.change_addresses) != 1


def create_build_without_change(trial_build, recipients, smart_fee_output, address_type=DEFAULT_ADDRESS_TYPE):
    """Build params reusing the trial's inputs with a resized Smart Fee output.

    Args:
        trial_build (TrialBuild): build that produced exactly one change output.
        recipients (list): the caller's recipients, without Smart Fee.
        smart_fee_output (dict): Smart Fee output used for the trial build.
        address_type (str): script type of the change output being removed.

    Returns:
        BuildParams: params pinned to the trial build's unspents.
    """
    amount, sats_per_kb = fees.amount_without_change(trial_build, recipients, address_type)
    logger.info(UxString.rebuilding_without_change.format(amount, sats_per_kb))

    new_recipients, _ = fees.augment_recipients(recipients, smart_fee_output['address'], amount=amount)
    return smart_fee_build_params(sats_per_kb, new_recipients, trial_build.unspent_ids,
                                  address_type=address_type)


def generate_bitgo_send_params(wallet, recipients, smart_fee_options, env=environments.STAGING, service=None):
    """Generate send parameters for a wallet that pay Smart Fee without change.

    Args:
        wallet (BaseWalletEngine): wallet that creates addresses and prebuilds.
        recipients (iterable): dicts with 'address' and 'amount' in
            satoshis. Read once into a new list; the caller's list is not
            modified.
        smart_fee_options (SmartFeeOptions or dict): api key and optional
            return address label, target unspents and address type.
        env (Environment or str): Smart Fee environment.
        service (BaseFeeService): Smart Fee client; one is created for `env`
            when omitted.

    Returns:
        BuildParams: params to hand back to the wallet for the final build.

    Raises:
        ConfigurationError: if the api key is missing, before any request.
        RemoteRejection: if a Smart Fee request fails.
        BuildFailure: if the wallet cannot prebuild.
        InvalidRecipient: if a recipient amount is not a non-negative integer.
        InsufficientFunds: if the inputs cannot pay the recipients without change.
    """
    options = SmartFeeOptions.from_dict(smart_fee_options)
    options.validate()
    fees.get_address_type(options.address_type)
    try:
        recipients = list(recipients)
    except TypeError:
        raise exceptions.InvalidRecipient(UxString.Error.invalid_recipients.format(recipients))
    fees.sum_recipients(recipients)
    env = environments.get_environment(env)
    if service is None:
        service = SmartFeeRestClient(options.api_key, env)

    issue_return_address(wallet, service, options.return_address_label, options.address_type)
    smart_fee_address = service.issue_bump_address()
    sats_per_kb = service.quote_fee_rate()

    new_recipients, smart_fee_output = fees.augment_recipients(recipients, smart_fee_address)

    initial_build_params = smart_fee_build_params(sats_per_kb, new_recipients,
                                                  target_wallet_unspents=options.target_wallet_unspents,
                                                  address_type=options.address_type)
    initial_build = prebuild(wallet, initial_build_params)

    if should_use_initial_build(initial_build):
        logger.info(UxString.using_initial_build.format(len(initial_build.change_addresses)))
        initial_build_params.unspents = initial_build.unspent_ids
        return initial_build_params

    return create_build_without_change(initial_build, recipients, smart_fee_output, options.address_type)

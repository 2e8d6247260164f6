import collections
import logging

from smartfee import exceptions
from smartfee.uxstring import UxString

# Smallest output sent to Smart Fee, so a batch with a single tiny
# withdrawal still funds a usable bumping utxo.
MIN_SMART_FEE_AMOUNT_SATS = 50000

# Receive chain and the bytes one change output adds, per address type.
# An output is an 8 byte value, a 1 byte script length and the script:
# p2sh scripts are 23 bytes, p2wsh and p2tr witness programs are 34 bytes.
AddressType = collections.namedtuple('AddressType', ['receive_chain', 'change_output_size'])

ADDRESS_TYPES = {
    'p2sh': AddressType(receive_chain=0, change_output_size=32),
    'p2shP2wsh': AddressType(receive_chain=10, change_output_size=32),
    'p2wsh': AddressType(receive_chain=20, change_output_size=43),
    'p2tr': AddressType(receive_chain=30, change_output_size=43),
}

logger = logging.getLogger(__name__)


def get_address_type(address_type):
    try:
        return ADDRESS_TYPES[address_type]
    except KeyError:
        raise exceptions.ConfigurationError(
            UxString.Error.unknown_address_type.format(address_type, ', '.join(sorted(ADDRESS_TYPES))))


def change_output_size(address_type):
    """Bytes saved by dropping one change output of `address_type`."""
    return get_address_type(address_type).change_output_size


def parse_amount(amount):
    """Parse a recipient amount into satoshis.

    Args:
        amount (int or str): amount as an int or a string of digits.

    Returns:
        int: the amount in satoshis.

    Raises:
        InvalidRecipient: if the amount is not a non-negative integer.
    """
    if isinstance(amount, bool):
        raise exceptions.InvalidRecipient(UxString.Error.invalid_amount.format(amount))
    if isinstance(amount, int):
        sats = amount
    elif isinstance(amount, str):
        try:
            sats = int(amount)
        except ValueError:
            raise exceptions.InvalidRecipient(UxString.Error.invalid_amount.format(amount))
    else:
        raise exceptions.InvalidRecipient(UxString.Error.invalid_amount.format(amount))

    if sats < 0:
        raise exceptions.InvalidRecipient(UxString.Error.invalid_amount.format(amount))
    return sats


def sum_recipients(recipients):
    try:
        return sum(parse_amount(r['amount']) for r in recipients)
    except (KeyError, TypeError):
        raise exceptions.InvalidRecipient(UxString.Error.invalid_amount.format(recipients))


def smart_fee_amount(recipients):
    """Amount routed to Smart Fee before the trial build.

    Roughly the size of the whole batch, so Smart Fee ends up holding a good
    sized utxo rather than a small one.
    """
    return max(sum_recipients(recipients), MIN_SMART_FEE_AMOUNT_SATS)


def augment_recipients(recipients, smart_fee_address, amount=None):
    """Append a Smart Fee output to a copy of `recipients`.

    Args:
        recipients (list): caller's recipients, left untouched.
        smart_fee_address (str): Smart Fee bumping address.
        amount (int): output amount; defaults to smart_fee_amount().

    Returns:
        tuple: (new recipient list, the appended Smart Fee output)
    """
    if amount is None:
        amount = smart_fee_amount(recipients)
    smart_fee_output = {'address': smart_fee_address, 'amount': amount}
    new_recipients = list(recipients)
    new_recipients.append(smart_fee_output)
    return new_recipients, smart_fee_output


def exact_fee_rate(fee, size):
    """Return the realized rate as (ceiling, floor) sats/kB.

    Integer division keeps both bounds exact.
    """
    return -(-fee * 1000 // size), fee * 1000 // size


def fee_for_size(sats_per_kb, size):
    return -(-sats_per_kb * size // 1000)


def amount_without_change(trial_build, recipients, address_type):
    """Work out the Smart Fee amount that leaves no change.

    The rate is rounded up to size the Smart Fee output, so the retry's fee
    can never exceed what is left for it, and rounded down for the rate
    handed back to the engine.

    Args:
        trial_build (TrialBuild): build that produced one change output.
        recipients (list): the original recipients, without Smart Fee.
        address_type (str): script type of the change output.

    Returns:
        tuple: (smart fee amount, fee rate for the retry in sats/kB)

    Raises:
        BuildFailure: if the build is not larger than a change output.
        InsufficientFunds: if the inputs cannot cover recipients and fee.
    """
    new_size = trial_build.size - change_output_size(address_type)
    if new_size <= 0:
        raise exceptions.BuildFailure(UxString.Error.invalid_build.format(trial_build))

    ceiling_sats_per_kb, floor_sats_per_kb = exact_fee_rate(trial_build.fee, trial_build.size)
    new_fee = fee_for_size(ceiling_sats_per_kb, new_size)
    amount = trial_build.sum_inputs - sum_recipients(recipients) - new_fee
    logger.debug("new size %d bytes, new fee %d sats, smart fee amount %d sats", new_size, new_fee, amount)

    if amount < 0:
        raise exceptions.InsufficientFunds(UxString.Error.insufficient_funds.format(new_fee, amount), amount=amount)
    return amount, floor_sats_per_kb

import pytest

from smartfee import exceptions
from smartfee import fees
from tests.mock import make_trial_build


@pytest.mark.parametrize("amounts, expected", [
    # a big batch sends its own total
    ([600000, 300000], 900000),
    ([50000], 50000),
    (['25000', 25001], 50001),

    # small batches are topped up to the floor
    ([1], fees.MIN_SMART_FEE_AMOUNT_SATS),
    ([10000, '20000'], fees.MIN_SMART_FEE_AMOUNT_SATS),
    ([], fees.MIN_SMART_FEE_AMOUNT_SATS),
    ])
def test_smart_fee_amount(amounts, expected):
    recipients = [{'address': 'addr{}'.format(i), 'amount': a} for i, a in enumerate(amounts)]
    assert fees.smart_fee_amount(recipients) == expected


@pytest.mark.parametrize("amount", [-1, '-5', '12.5', 'abc', '', None, 1.5, True])
def test_parse_amount_rejects(amount):
    with pytest.raises(exceptions.InvalidRecipient):
        fees.parse_amount(amount)


def test_sum_recipients_missing_amount():
    with pytest.raises(exceptions.InvalidRecipient):
        fees.sum_recipients([{'address': 'addr'}])


def test_augment_recipients_copies(recipients):
    original = [dict(r) for r in recipients]
    new_recipients, output = fees.augment_recipients(recipients, 'bump')

    assert recipients == original
    assert len(recipients) == 2
    assert new_recipients[:2] == recipients
    assert new_recipients[-1] is output
    assert output == {'address': 'bump', 'amount': 900000}


def test_augment_recipients_explicit_amount(recipients):
    new_recipients, output = fees.augment_recipients(recipients, 'bump', amount=1234)
    assert output['amount'] == 1234
    assert new_recipients[-1] == output


@pytest.mark.parametrize("address_type, size", [
    ('p2wsh', 43),
    ('p2tr', 43),
    ('p2sh', 32),
    ('p2shP2wsh', 32),
    ])
def test_change_output_size(address_type, size):
    assert fees.change_output_size(address_type) == size


def test_unknown_address_type():
    with pytest.raises(exceptions.ConfigurationError):
        fees.change_output_size('p2pkh')


@pytest.mark.parametrize("fee, size, ceiling, floor", [
    (1000, 250, 4000, 4000),
    (1001, 250, 4004, 4004),
    (1000, 251, 3985, 3984),
    (1, 3, 334, 333),
    ])
def test_exact_fee_rate(fee, size, ceiling, floor):
    assert fees.exact_fee_rate(fee, size) == (ceiling, floor)


def test_amount_without_change(recipients):
    trial_build = make_trial_build(fee=1000, size=250)
    amount, sats_per_kb = fees.amount_without_change(trial_build, recipients, 'p2wsh')

    # 207 bytes at 4000 sats/kb is a 828 sat fee
    assert amount == 1000000 - 900000 - 828
    assert amount == 99172
    assert sats_per_kb == 4000


def test_amount_without_change_rounds_rate_up_for_amount_and_down_for_params(recipients):
    # 1000 * 1000 / 251 = 3984.06 sats/kb
    trial_build = make_trial_build(fee=1000, size=251)
    amount, sats_per_kb = fees.amount_without_change(trial_build, recipients, 'p2wsh')

    # ceil(3985 * 208 / 1000) = ceil(828.88)
    assert amount == 1000000 - 900000 - 829
    assert sats_per_kb == 3984


def test_amount_without_change_uses_address_type(recipients):
    trial_build = make_trial_build(fee=1000, size=250)
    amount, _ = fees.amount_without_change(trial_build, recipients, 'p2sh')

    # 218 bytes at 4000 sats/kb
    assert amount == 1000000 - 900000 - 872


def test_amount_without_change_insufficient_funds(recipients):
    trial_build = make_trial_build(unspents=[{'id': 'u1', 'value': 900500}])
    with pytest.raises(exceptions.InsufficientFunds) as ex_info:
        fees.amount_without_change(trial_build, recipients, 'p2wsh')

    assert ex_info.value.amount == 900500 - 900000 - 828
    assert str(ex_info.value.amount) in ex_info.value.message


def test_amount_without_change_too_small_build(recipients):
    trial_build = make_trial_build(size=43)
    with pytest.raises(exceptions.BuildFailure):
        fees.amount_without_change(trial_build, recipients, 'p2wsh')

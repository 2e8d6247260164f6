"""
The smartfee command line interface.

Talks to the Smart Fee bumping service and, for `smartfee build`, to a BitGo
wallet, printing the send parameters that pay Smart Fee without change.
"""
import json

import click

import smartfee
import smartfee.logger
from smartfee import builder
from smartfee import decorators
from smartfee import environments
from smartfee import exceptions
from smartfee.config import Config
from smartfee.server.rest_client import SmartFeeRestClient
from smartfee.uxstring import UxString
from smartfee.wallet.bitgo_wallet import BitGoWallet

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


def parse_config(config_file=smartfee.SMARTFEE_CONFIG_FILE, config_dict=None, debug=False):
    """Load the Config that drives every smartfee command.

    Returns:
        dict: the click context object with the Config and debug flag.
    """
    try:
        config = Config(config_file, config_dict)
    except exceptions.FileDecodeError as e:
        raise click.ClickException(UxString.Error.file_decode.format(str(e)))
    return dict(config=config, debug=debug)


def get_client(config):
    return SmartFeeRestClient(config.api_key, environments.get_environment(config.environment))


def get_wallet(config):
    if not config.bitgo_wallet_id or not config.bitgo_access_token:
        raise exceptions.ConfigurationError(UxString.Error.missing_bitgo)
    return BitGoWallet(config.bitgo_wallet_id, config.bitgo_access_token,
                       coin=config.bitgo_coin, host=config.bitgo_host)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option('--config-file',
              envvar='SMARTFEE_CONFIG_FILE',
              default=smartfee.SMARTFEE_CONFIG_FILE,
              metavar='PATH',
              help='Path to config (default: %s)' % smartfee.SMARTFEE_CONFIG_FILE)
@click.option('--config', 'config_pairs',
              nargs=2,
              multiple=True,
              metavar='KEY VALUE',
              help='Overrides a config key/value pair.')
@click.option('--env',
              type=click.Choice(sorted(environments.ENVIRONMENTS)),
              default=None,
              help='Smart Fee environment to use.')
@click.option('--debug',
              is_flag=True,
              envvar='SMARTFEE_DEBUG',
              help='Display stack traces for errors.')
@click.version_option(smartfee.SMARTFEE_VERSION, message=smartfee.SMARTFEE_VERSION_MESSAGE)
@click.pass_context
def main(ctx, config_file, config_pairs, env, debug):
    """Pay for fee bumping with Smart Fee and skip the change output."""
    config_dict = dict(config_pairs)
    if env:
        config_dict['environment'] = env
    ctx.obj = parse_config(config_file=config_file, config_dict=config_dict, debug=debug)


@main.command()
@click.pass_context
@decorators.catch_all
def fee(ctx):
    """Show the current next block minimum fee rate."""
    sats_per_kb = get_client(ctx.obj['config']).quote_fee_rate()
    click.echo(sats_per_kb)
    return sats_per_kb


@main.command()
@click.pass_context
@decorators.catch_all
def address(ctx):
    """Request a Smart Fee bumping address."""
    bump_address = get_client(ctx.obj['config']).issue_bump_address()
    click.echo(bump_address)
    return bump_address


@main.command()
@click.argument('recipients_file', type=click.File('r'))
@click.pass_context
@decorators.catch_all
@decorators.json_output
def build(ctx, recipients_file):
    """Print BitGo send params for the recipients in RECIPIENTS_FILE.

\b
RECIPIENTS_FILE holds a JSON list such as:
[{"address": "tb1q...", "amount": 120000}]
"""
    try:
        recipients = json.load(recipients_file)
    except ValueError as e:
        raise exceptions.InvalidRecipient(UxString.Error.recipients_file.format(e))
    if not isinstance(recipients, list):
        raise exceptions.InvalidRecipient(UxString.Error.recipients_file.format(recipients))

    config = ctx.obj['config']
    params = builder.generate_bitgo_send_params(
        get_wallet(config), recipients, config.smart_fee_options(),
        env=environments.get_environment(config.environment),
        service=get_client(config))
    return params.to_dict()


if __name__ == "__main__":
    main()

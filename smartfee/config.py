"""Manages configuration variables for the smartfee CLI."""
# standard python imports
import os
import json
import logging

# smartfee imports
import smartfee
import smartfee.exceptions as exceptions
from smartfee.models import DEFAULT_ADDRESS_TYPE


logger = logging.getLogger(__name__)


class Config:
    """Store information required to run smartfee commands."""

    DEFAULTS = dict(api_key=smartfee.SMARTFEE_API_KEY,
                    environment=smartfee.SMARTFEE_ENV,
                    return_address_label=None,
                    target_wallet_unspents=None,
                    address_type=DEFAULT_ADDRESS_TYPE,
                    bitgo_host=smartfee.SMARTFEE_BITGO_HOST,
                    bitgo_coin='tbtc',
                    bitgo_wallet_id=None,
                    bitgo_access_token=None)

    def __init__(self, config_file=smartfee.SMARTFEE_CONFIG_FILE, config=None):
        """Return a new Config object with defaults plus custom properties.
           the `config_file` is used to load any config variables found on the
           system, and then the `config` input dictionary is used as the final
           override.
        """
        # Load configuration defaults
        self.state = {key: val for key, val in Config.DEFAULTS.items()}

        if not isinstance(config_file, str):
            raise TypeError('Parameter "config_file" must be a filename.')
        self.config_abs_path = os.path.expanduser(config_file)

        self.load_file_config()

        # Override defaults with any custom configuration
        if config:
            self.load_dict_config(config)

    def load_file_config(self):
        """Set config properties from the config file, if there is one."""
        try:
            with open(self.config_abs_path, mode='r') as f:
                self.load_dict_config(json.loads(f.read()))
        except FileNotFoundError:
            logger.debug("no config file at %s, using defaults", self.config_abs_path)
        except ValueError:
            raise exceptions.FileDecodeError(self.config_abs_path)

    def load_dict_config(self, config):
        """Set config properties based on a dictionary."""
        if not isinstance(config, dict):
            raise TypeError('Parameter "config" must be a dictionary type.')
        for key, value in config.items():
            self.state[key] = value

    def smart_fee_options(self):
        """Return the options dict expected by generate_bitgo_send_params()."""
        target = self.target_wallet_unspents
        return dict(api_key=self.api_key,
                    return_address_label=self.return_address_label,
                    target_wallet_unspents=int(target) if target else None,
                    address_type=self.address_type)

    def __getattr__(self, key):
        """Look up a config property."""
        if key == 'state' or key not in self.state:
            raise AttributeError(key)
        return self.state[key]

    def __repr__(self):
        """Return a printable version of the config state, without secrets."""
        hidden = ('api_key', 'bitgo_access_token')
        shown = {k: ('***' if k in hidden and v else v) for k, v in self.state.items()}
        return '<Config {}>'.format(json.dumps(shown, sort_keys=True))

# flake8: noqa
from .base_wallet import BaseWalletEngine
from .bitgo_wallet import BitGoWallet

"""Interface of the wallet that generates addresses and prebuilds transactions."""


class BaseWalletEngine(object):
    """ Abstract base class for a wallet transaction engine.

        Implementations own coin selection, change handling and signing;
        the Smart Fee pipeline only asks them for addresses and prebuilds.
    """

    def create_address(self, chain, label=None):
        """ Creates a new receive address.

        Args:
            chain (int): derivation chain to create the address on.
            label (str): optional human readable label.

        Returns:
            dict: a dict with at least an 'address' key.
        """
        raise NotImplementedError

    def prebuild_transaction(self, params):
        """ Builds, without signing, a transaction for the given params.

        Args:
            params (BuildParams): recipients, fee rate and input constraints.

        Returns:
            TrialBuild or dict: the realized fee, size, selected unspents and
                change addresses. A dict must use the wire shape accepted by
                TrialBuild.from_prebuild().

        Raises:
            BuildFailure: if the transaction cannot be built.
        """
        raise NotImplementedError

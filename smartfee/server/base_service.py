

class BaseFeeService(object):
    """ Abstract base class for a Smart Fee service.
    """

    def issue_return_address(self, return_address):
        """ Registers the address that bumped funds are returned to.

            The service returns funds to the most recently registered
            address.

        Args:
            return_address (str): wallet receive address.
        """
        raise NotImplementedError

    def issue_bump_address(self):
        """ Requests a one time address for the fee bumping output.

        Returns:
            str: the Smart Fee address.
        """
        raise NotImplementedError

    def quote_fee_rate(self):
        """ Gets the current minimum fee rate for the next block.

        Returns:
            int: fee rate in satoshis per kilobyte.
        """
        raise NotImplementedError

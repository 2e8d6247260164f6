"""Strings for the smartfee CLI and library."""


class UxString:
    """ Class to namespace all user experience strings """

    # return address
    generated_return_address = "Generated wallet return address: {}"
    posted_return_address = "Posted return address to Smart Fee"

    # quotes
    requesting_bump_address = "Requesting an address from Smart Fee"
    received_bump_address = "Received Smart Fee address: {}"
    requesting_fee_rate = "Getting current fee rate from Smart Fee"
    current_fee_rate = "Smart Fee is reporting the current next block min-fee-rate to be {} sats/kb"

    # builds
    using_initial_build = "Using initial build with {} change output(s)"
    rebuilding_without_change = ("Initial build has a change output, rebuilding with a {} sat "
                                 "Smart Fee output at {} sats/kb")

    class Error:
        """ Class to namespace all error strings """
        missing_api_key = "Must set apiKey in smartFeeOptions"
        connection = "Error: Cannot connect to {}. Please check your Internet connection."
        post_return_address = "Error posting return address: {}"
        request_bump_address = "Error requesting bumper address: {}"
        request_fee_rate = "Error getting current fee rate: {}"
        missing_field = "Smart Fee response is missing '{}': {}"
        fractional_fee_rate = "Smart Fee quoted a fractional fee rate of {} sats/kb"
        invalid_amount = "Recipient amount must be a non-negative integer number of satoshis: {!r}"
        invalid_recipients = "Recipients must be a list of {{address, amount}} objects: {!r}"
        invalid_build = "Wallet returned an unusable prebuild: {}"
        build_failed = "Wallet failed to build transaction: {}"
        address_failed = "Wallet failed to create an address: {}"
        insufficient_funds = ("Selected unspents cannot cover the recipients and a {} sat fee "
                              "without change (Smart Fee output would be {} sats)")
        unknown_address_type = "Unknown address type '{}'. Choose one of: {}"
        file_decode = "Config file {} is not valid JSON."
        recipients_file = "Recipients file must contain a JSON list of {{address, amount}} objects: {}"
        missing_bitgo = "Set bitgo_wallet_id and bitgo_access_token to build transactions."
        unexpected = "You have experienced a client-side technical error."
        unexpected_in = "In {}.{}:"
        run_with_debug = "For more detail, run your command with the debug flag: `smartfee --debug <command>`."

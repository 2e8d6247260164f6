"""Smart Fee service instances a client can talk to."""
import collections

from smartfee import exceptions


Environment = collections.namedtuple('Environment', ['name', 'url'])

STAGING = Environment(name='staging', url='https://api-staging.smartfee.live')
PRODUCTION = Environment(name='production', url='https://api.smartfee.live')

ENVIRONMENTS = {env.name: env for env in (STAGING, PRODUCTION)}


def get_environment(name):
    """Look up an environment by name.

    Args:
        name (str or Environment): environment name, e.g. 'staging'. An
            Environment instance is returned as is.

    Returns:
        Environment: the matching environment.

    Raises:
        ConfigurationError: if no environment has that name.
    """
    if isinstance(name, Environment):
        return name
    try:
        return ENVIRONMENTS[str(name).lower()]
    except KeyError:
        raise exceptions.ConfigurationError(
            'Unknown environment "{}". Choose one of: {}'.format(name, ', '.join(sorted(ENVIRONMENTS))))

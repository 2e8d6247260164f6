"""Smart Fee project variables."""
import os


VERSION = (0, 3, 0)

__version__ = '.'.join(map(str, VERSION))


# Defines hard coded global variables
SMARTFEE_VERSION = __version__
SMARTFEE_VERSION_MESSAGE = 'smartfee version %(version)s'
SMARTFEE_USER_FOLDER = os.path.expanduser('~/.smartfee/')
SMARTFEE_CONFIG_FILE = SMARTFEE_USER_FOLDER + 'smartfee.json'
# two parents up from current dir
SMARTFEE_BASE_DIR = os.path.abspath(os.path.join(os.path.abspath(__file__), os.pardir, os.pardir))


ENV_FILE = os.path.join(SMARTFEE_BASE_DIR, ".env")


def load_env_file(path=ENV_FILE, environ=os.environ):
    """Copy SMARTFEE_* settings from a .env file into `environ`.

    Lines look like `SMARTFEE_API_KEY=abc`, optionally prefixed with
    `export` and with the value quoted. Variables already set win over the
    file. A missing file is not an error.

    Returns:
        dict: the settings that were applied.
    """
    applied = {}
    if not os.path.exists(path):
        return applied
    with open(path, "rt") as f:
        for line in f:
            line = line.strip()
            if line.startswith('export '):
                line = line[len('export '):]
            if not line or line.startswith('#') or '=' not in line:
                continue
            key, value = (part.strip() for part in line.split('=', 1))
            if not key.startswith('SMARTFEE_') or key in environ:
                continue
            environ[key] = applied[key] = value.strip("'\"")
    return applied


load_env_file()


# Defines configurable global variables
SMARTFEE_ENV = os.environ.get('SMARTFEE_ENV', 'staging')
SMARTFEE_API_KEY = os.environ.get('SMARTFEE_API_KEY')
SMARTFEE_BITGO_HOST = os.environ.get('SMARTFEE_BITGO_HOST', 'https://app.bitgo-test.com')

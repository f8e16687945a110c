"""
Default settings of the Gengo client library.

All values are read once from environment variables (prefixed with
``GENGO_``) so the deployment environment can point the client at a
different API host or tune the timeout without code changes.  They are only
defaults: every :class:`~gengo_lib.client.GengoClient` builds its own
immutable :class:`~gengo_lib.config.ClientConfig` from them.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "GENGO_"


# Production endpoint of the Gengo API
API_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}API_URL", "https://api.gengo.com/v2/"
).strip()

# Sandbox endpoint of the Gengo API
SANDBOX_API_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}SANDBOX_API_URL",
    "http://api.sandbox.gengo.com/v2/",
).strip()

# Timeout (in seconds) of a single request to the Gengo API
REQUEST_TIMEOUT = int(os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", 300))

# Default logging level
LOG_LEVEL = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip()

# Number of threads used by ``GengoClient.submit``
MAX_WORKERS = int(os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}MAX_WORKERS", 4))


class Environments:
    PRODUCTION = "production"
    SANDBOX = "sandbox"


ENVIRONMENT_URLS = {
    Environments.PRODUCTION: API_URL,
    Environments.SANDBOX: SANDBOX_API_URL,
}


class HttpMethods:
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# Methods which carry their parameters in the query string
QUERY_STRING_METHODS = [HttpMethods.GET, HttpMethods.DELETE]

# Name of the form field holding the JSON-encoded payload of POST/PUT calls
FORM_DATA_FIELD = "data"

# Envelope discriminator values returned by the API
OPSTAT_OK = "ok"
OPSTAT_ERROR = "error"

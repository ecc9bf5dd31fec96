import os
import ssl
from typing import Any, Dict, Optional, Union

import certifi

from .constants import ENV_CA_BUNDLE, ENV_DISABLE_SSL_VERIFY

_TRUTHY = ("1", "true", "yes", "on")


def _ca_bundle() -> Optional[str]:
    for name in (ENV_CA_BUNDLE, "SSL_CERT_FILE"):
        path = os.environ.get(name)
        if path:
            return os.path.expanduser(os.path.expandvars(path))
    return None


def tls_verify() -> Union[bool, ssl.SSLContext]:
    """What to pass as httpx's ``verify`` for Bot API connections.

    An explicit CA bundle wins. Without one, the system store is used through
    ``truststore`` when it is installed, and ``certifi`` otherwise.
    """
    if os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower() in _TRUTHY:
        return False

    bundle = _ca_bundle()
    if bundle:
        return ssl.create_default_context(cafile=bundle)

    try:
        import truststore
    except ImportError:
        return ssl.create_default_context(cafile=certifi.where())

    return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)


def get_httpx_client_kwargs() -> Dict[str, Any]:
    # proxies come from HTTP(S)_PROXY through httpx itself
    return {"follow_redirects": True, "verify": tls_verify()}

"""Client configuration and defaults."""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

# Public key BART hands out to every developer. Register your own and pass
# it in Config.key, or set BART_API_KEY.
DEFAULT_KEY = "MW9S-E7SL-26DU-VV8V"
BASE_URL = "https://api.bart.gov/api"
KEY_ENV_VAR = "BART_API_KEY"


@dataclass
class Config:
    """
    Named settings for a client.

    Attributes:
        key: BART API key. Empty means BART_API_KEY, then the public key.
        http: HTTP executor, normally a requests.Session. Anything with a
            compatible ``get(url, timeout=...)`` works.
        timeout: Seconds passed to every request, or None to leave it to
            the executor.
        validate_stations: Reject unknown station abbreviations before
            sending a request.
    """

    key: str = ""
    http: Optional[Any] = None
    timeout: Optional[float] = None
    validate_stations: bool = True
    base_url: str = field(default=BASE_URL, init=False, repr=False)


def resolve_config(conf: Optional[Config] = None) -> Config:
    """Return a copy of conf with every empty setting filled in."""
    if conf is None:
        conf = Config()
    else:
        conf = replace(conf)

    if not conf.key:
        conf.key = os.environ.get(KEY_ENV_VAR) or DEFAULT_KEY
    if conf.key == DEFAULT_KEY:
        logger.debug("Using the public BART API key")
    if conf.http is None:
        conf.http = requests.Session()
    conf.base_url = BASE_URL
    return conf


# Seeds clients created without a configuration. Handed out only as copies.
DEFAULT_CONFIG = resolve_config(None)

__all__ = [
    "DEFAULT_KEY",
    "BASE_URL",
    "KEY_ENV_VAR",
    "Config",
    "resolve_config",
    "DEFAULT_CONFIG",
]

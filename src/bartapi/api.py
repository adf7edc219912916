"""Request building and HTTP transport for the BART API."""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Type, TypeVar
from urllib.parse import urlencode

import requests
from pydantic import BaseModel

from .config import DEFAULT_CONFIG, Config, resolve_config
from .envelope import decode_response
from .models import validate_station_abbr

logger = logging.getLogger(__name__)

RESERVED_PARAMS = ("cmd", "json", "key")

M = TypeVar("M", bound=BaseModel)


@dataclass
class APIRequest:
    """
    Descriptor for a single API call.

    Attributes:
        path: Endpoint path, e.g. "/etd.aspx".
        cmd: Command token, e.g. "etd".
        options: Extra query parameters. Each key maps to its values in the
            order they should be sent.
    """

    path: str
    cmd: str
    options: Dict[str, List[str]] = field(default_factory=dict)

    def build_url(self, conf: Config) -> str:
        """
        Build the full request URL.

        Query parameters are sorted by key. cmd, json and key are always set
        from the descriptor and configuration, whatever the options say.
        """
        params: Dict[str, List[str]] = {}
        for key, values in self.options.items():
            if key in RESERVED_PARAMS:
                logger.debug(f"Ignoring reserved parameter {key!r} in options")
                continue
            params[key] = list(values)
        params["cmd"] = [self.cmd]
        params["json"] = ["y"]
        params["key"] = [conf.key]

        query = urlencode([(key, value) for key in sorted(params) for value in params[key]])
        return f"{conf.base_url}{self.path}?{query}"

    def request(self, conf: Config, model: Type[M]) -> M:
        """Send the request and decode the response into model."""
        raw = fetch(self.build_url(conf), conf)
        return decode_response(raw, model)


def fetch(url: str, conf: Config) -> bytes:
    """
    Issue a GET request and read the whole body.

    Status codes are not checked; BART reports errors in the body, sometimes
    with a 200.

    Args:
        url: Full URL to fetch.
        conf: Configuration supplying the HTTP executor and timeout.

    Returns:
        Raw response body.
    """
    logger.debug(f"Fetching {url.split('?')[0]}")
    try:
        with conf.http.get(url, timeout=conf.timeout) as response:
            return response.content
    except requests.RequestException as e:
        logger.error(f"Failed to fetch {url.split('?')[0]}: {e}")
        raise


class BaseAPI:
    """Common plumbing for the endpoint namespaces."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the namespace.

        Args:
            config: Client configuration. If None, a copy of the process-wide
                default configuration is used.
        """
        if config is None:
            self._config = replace(DEFAULT_CONFIG)
        else:
            self._config = resolve_config(config)

    @property
    def config(self) -> Config:
        return self._config

    def _station(self, abbr: str) -> str:
        if self.config.validate_stations:
            return validate_station_abbr(abbr)
        return abbr

    def _request(self, request: APIRequest, model: Type[M]) -> M:
        return request.request(self.config, model)

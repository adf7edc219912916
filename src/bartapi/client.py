"""Composite client exposing every BART API namespace."""

import logging
from typing import Optional

from .advisories import AdvisoriesAPI
from .config import DEFAULT_CONFIG, Config
from .estimates import EstimatesAPI
from .routes import RoutesAPI
from .schedules import SchedulesAPI
from .stations import StationsAPI

logger = logging.getLogger(__name__)


class BartClient(AdvisoriesAPI, EstimatesAPI, RoutesAPI, SchedulesAPI, StationsAPI):
    """
    Easy access to every BART API endpoint.

    A client is safe to share between threads; its configuration is only
    read after construction.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the client.

        Args:
            config: Client settings. If None, or for any setting left empty,
                the defaults are used: the BART_API_KEY environment variable
                or the public key, and a fresh requests.Session.
        """
        super().__init__(config if config is not None else Config())
        logger.debug(f"Created BART client for {self.config.base_url}")


def new_client(config: Optional[Config] = None) -> BartClient:
    """Create a client, filling in defaults for anything config leaves empty."""
    return BartClient(config)


def default_client() -> BartClient:
    """Create a client with the process-wide default settings."""
    return BartClient(DEFAULT_CONFIG)


__all__ = ["BartClient", "new_client", "default_client"]

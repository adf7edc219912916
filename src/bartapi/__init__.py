"""bartapi - Client for the BART (Bay Area Rapid Transit) JSON API."""

__version__ = "0.1.0"

from .config import Config, DEFAULT_KEY
from .errors import BartError, BartAPIError, BartDecodeError, InvalidStationError
from .models import EstimateParams, TripParams, STATION_ABBREVIATIONS
from .advisories import AdvisoriesAPI
from .estimates import EstimatesAPI
from .routes import RoutesAPI
from .schedules import SchedulesAPI
from .stations import StationsAPI
from .client import BartClient, new_client, default_client

__all__ = [
    "BartClient",
    "new_client",
    "default_client",
    "Config",
    "DEFAULT_KEY",
    "AdvisoriesAPI",
    "EstimatesAPI",
    "RoutesAPI",
    "SchedulesAPI",
    "StationsAPI",
    "EstimateParams",
    "TripParams",
    "STATION_ABBREVIATIONS",
    "BartError",
    "BartAPIError",
    "BartDecodeError",
    "InvalidStationError",
]

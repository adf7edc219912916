"""Shared data models for the BART API client."""

from dataclasses import dataclass
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import InvalidStationError
from .scalars import CData

STATION_ABBREVIATIONS = frozenset(
    [
        "12th", "16th", "19th", "24th", "ashb", "antc", "balb", "bayf",
        "bery", "cast", "civc", "cols", "colm", "conc", "daly", "dbrk",
        "dubl", "deln", "plza", "embr", "frmt", "ftvl", "glen", "hayw",
        "lafy", "lake", "mcar", "mlbr", "mlpt", "mont", "nbrk", "ncon",
        "oakl", "orin", "pitt", "pctr", "phil", "powl", "rich", "rock",
        "sbrn", "sfia", "sanl", "shay", "ssan", "ucty", "warm", "wcrk",
        "wdub", "woak",
    ]
)


def validate_station_abbr(abbr: str) -> str:
    """
    Check a station abbreviation against the known stations.

    Args:
        abbr: 4-letter abbreviation in any case, e.g. "MCAR" or "embr".

    Returns:
        The abbreviation, unchanged.

    Raises:
        InvalidStationError: If the abbreviation is unknown.
    """
    if not isinstance(abbr, str) or abbr.lower() not in STATION_ABBREVIATIONS:
        raise InvalidStationError(abbr)
    return abbr


class BartModel(BaseModel):
    """Base for response records.

    Keys are bound through field aliases and matched case-insensitively,
    because BART is inconsistent about capitalization across endpoints.
    Missing keys fall back to field defaults; keys that are present must
    have the declared shape.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        by_lower = {}
        for key in data:
            if isinstance(key, str):
                by_lower.setdefault(key.lower(), key)

        matched = dict(data)
        for name, info in cls.model_fields.items():
            alias = info.alias or name
            if alias in data:
                continue
            key = by_lower.get(alias.lower())
            if key is not None:
                matched[alias] = data[key]
        return matched


class ResponseMetaData(BartModel):
    """Fields found under ``root`` on every endpoint.

    Not all of them are filled by every endpoint. ``message`` is left
    untyped: it is an empty string on most successful responses and an
    object on some others.
    """

    uri: CData = ""
    date: str = ""
    time: str = ""
    message: Any = None


@dataclass
class EstimateParams:
    """Named parameters for real-time departure estimates.

    orig is a 4-letter station abbreviation or "all". plat is "1" through "4",
    or empty for every platform. direction is "n", "s", or empty for both.
    """

    orig: str
    plat: str = ""
    direction: str = ""

    def to_options(self) -> Dict[str, List[str]]:
        options = {"orig": [self.orig]}
        if self.plat:
            options["plat"] = [self.plat]
        if self.direction:
            options["dir"] = [self.direction]
        return options


@dataclass
class TripParams:
    """Named parameters for trip planning (arrivals and departures).

    orig and dest are required 4-letter station abbreviations. time and date
    follow the formats in the official BART docs; leave them empty to use the
    current time and date. before and after are the number of extra trips to
    return on either side of the requested time.
    """

    orig: str
    dest: str
    time: str = ""
    date: str = ""
    before: int = 0
    after: int = 0
    legend: bool = False

    def to_options(self) -> Dict[str, List[str]]:
        options = {"orig": [self.orig], "dest": [self.dest]}
        if self.time:
            options["time"] = [self.time]
        if self.date:
            options["date"] = [self.date]
        if self.legend:
            options["l"] = ["1"]

        # b=0 with a=0 or a=1 makes BART return an object or empty string
        # where the trip list should be.
        if self.before == 0 and self.after in (0, 1):
            return options

        # BART clamps out of range values itself.
        options["b"] = [str(self.before)]
        options["a"] = [str(self.after)]
        return options


__all__ = [
    "STATION_ABBREVIATIONS",
    "validate_station_abbr",
    "BartModel",
    "ResponseMetaData",
    "EstimateParams",
    "TripParams",
]

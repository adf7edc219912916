"""Real-time departure estimate requests to /etd.aspx.

See official docs at https://api.bart.gov/docs/etd/.
"""

from pydantic import Field

from .api import APIRequest, BaseAPI
from .models import BartModel, EstimateParams, ResponseMetaData
from .scalars import Boolish, IntStr, Minute, XmlList

ALL_STATIONS = "all"


class Estimate(BartModel):
    """A single predicted departure. minutes is 0 when the train is leaving."""

    minutes: Minute = 0
    platform: IntStr = 0
    direction: str = ""
    length: IntStr = 0
    color: str = ""
    hexcolor: str = ""
    bike_flag: Boolish = Field(False, alias="bikeflag")
    delay: IntStr = 0


class Etd(BartModel):
    destination: str = ""
    abbreviation: str = ""
    limited: str = ""
    estimates: XmlList[Estimate] = Field(default_factory=list, alias="estimate")


class EstimateStation(BartModel):
    name: str = ""
    abbr: str = ""
    etds: XmlList[Etd] = Field(default_factory=list, alias="etd")


class EstimatesRoot(ResponseMetaData):
    data: XmlList[EstimateStation] = Field(default_factory=list, alias="station")


class EstimatesResponse(BartModel):
    """Shape of an etd response."""

    root: EstimatesRoot = Field(default_factory=EstimatesRoot)


class EstimatesAPI(BaseAPI):
    """Namespace for real-time departure estimates."""

    def request_etd(self, orig: str, plat: str = "", direction: str = "") -> EstimatesResponse:
        """
        Request estimated departure times for a station.

        Args:
            orig: 4-letter station abbreviation, or "all" for every station.
            plat: "1", "2", "3" or "4" for one platform, empty for all of them.
            direction: "n" for north, "s" for south, empty for both.

        See https://api.bart.gov/docs/etd/etd.aspx.
        """
        return self.request_estimate(EstimateParams(orig=orig, plat=plat, direction=direction))

    def request_estimate(self, params: EstimateParams) -> EstimatesResponse:
        """Same as request_etd, with the parameters given as an EstimateParams."""
        if params.orig.lower() != ALL_STATIONS:
            self._station(params.orig)
        request = APIRequest(path="/etd.aspx", cmd="etd", options=params.to_options())
        return self._request(request, EstimatesResponse)


__all__ = [
    "EstimatesAPI",
    "Estimate",
    "EstimatesResponse",
]

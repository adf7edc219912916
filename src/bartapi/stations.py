"""Station information requests to /stn.aspx.

See official docs at https://api.bart.gov/docs/stn/.
"""

from pydantic import Field

from .api import APIRequest, BaseAPI
from .models import STATION_ABBREVIATIONS, BartModel, ResponseMetaData, validate_station_abbr
from .scalars import Boolish, CData, FloatStr, XmlList


def init_stations_request(cmd: str, orig: str = "") -> APIRequest:
    request = APIRequest(path="/stn.aspx", cmd=cmd)
    if orig:
        request.options["orig"] = [orig]
    return request


class StationAccess(BartModel):
    name: str = ""
    abbr: str = ""
    entering: CData = ""
    exiting: CData = ""
    fill_time: CData = ""
    car_share: CData = ""
    lockers: CData = ""
    bike_station_text: CData = ""
    destinations: CData = ""
    link: str = ""
    parking_flag: Boolish = Field(False, alias="@parking_flag")
    bike_flag: Boolish = Field(False, alias="@bike_flag")
    bike_station_flag: Boolish = Field(False, alias="@bike_station_flag")
    locker_flag: Boolish = Field(False, alias="@locker_flag")


class StationAccessData(BartModel):
    station: StationAccess = Field(default_factory=StationAccess)


class StationAccessRoot(ResponseMetaData):
    data: StationAccessData = Field(default_factory=StationAccessData, alias="stations")


class StationAccessResponse(BartModel):
    """Shape of a stnaccess response."""

    root: StationAccessRoot = Field(default_factory=StationAccessRoot)


class RouteRefs(BartModel):
    routes: XmlList[str] = Field(default_factory=list, alias="route")


class PlatformRefs(BartModel):
    platforms: XmlList[str] = Field(default_factory=list, alias="platform")


class StationInfo(BartModel):
    name: str = ""
    abbr: str = ""
    latitude: FloatStr = Field(0.0, alias="gtfs_latitude")
    longitude: FloatStr = Field(0.0, alias="gtfs_longitude")
    address: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    zipcode: str = ""
    north_routes: RouteRefs = Field(default_factory=RouteRefs)
    south_routes: RouteRefs = Field(default_factory=RouteRefs)
    north_platforms: PlatformRefs = Field(default_factory=PlatformRefs)
    south_platforms: PlatformRefs = Field(default_factory=PlatformRefs)
    platform_info: str = ""
    intro: CData = ""
    cross_street: CData = ""
    food: CData = ""
    shopping: CData = ""
    attraction: CData = ""
    link: CData = ""


class StationInfoData(BartModel):
    station: StationInfo = Field(default_factory=StationInfo)


class StationInfoRoot(ResponseMetaData):
    data: StationInfoData = Field(default_factory=StationInfoData, alias="stations")


class StationInfoResponse(BartModel):
    """Shape of a stninfo response."""

    root: StationInfoRoot = Field(default_factory=StationInfoRoot)


class Station(BartModel):
    name: str = ""
    abbr: str = ""
    latitude: FloatStr = Field(0.0, alias="gtfs_latitude")
    longitude: FloatStr = Field(0.0, alias="gtfs_longitude")
    address: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    zipcode: str = ""


class StationList(BartModel):
    stations: XmlList[Station] = Field(default_factory=list, alias="station")


class StationsRoot(ResponseMetaData):
    data: StationList = Field(default_factory=StationList, alias="stations")


class StationsResponse(BartModel):
    """Shape of a stns response."""

    root: StationsRoot = Field(default_factory=StationsRoot)


class StationsAPI(BaseAPI):
    """Namespace for station information requests."""

    def request_station_access(self, orig: str) -> StationAccessResponse:
        """
        Request how to access a station and what is around it.

        Args:
            orig: 4-letter station abbreviation.

        See https://api.bart.gov/docs/stn/stnaccess.aspx.
        """
        request = init_stations_request("stnaccess", self._station(orig))
        return self._request(request, StationAccessResponse)

    def request_station_info(self, orig: str) -> StationInfoResponse:
        """
        Request detailed information about a station.

        Args:
            orig: 4-letter station abbreviation.

        See https://api.bart.gov/docs/stn/stninfo.aspx.
        """
        request = init_stations_request("stninfo", self._station(orig))
        return self._request(request, StationInfoResponse)

    def request_stations(self) -> StationsResponse:
        """Request the list of all stations. See https://api.bart.gov/docs/stn/stns.aspx."""
        return self._request(init_stations_request("stns"), StationsResponse)


__all__ = [
    "STATION_ABBREVIATIONS",
    "validate_station_abbr",
    "StationsAPI",
    "StationAccess",
    "StationAccessResponse",
    "StationInfo",
    "StationInfoResponse",
    "Station",
    "StationsResponse",
]

"""Route information requests to /route.aspx.

See official docs at https://api.bart.gov/docs/route/.
"""

from pydantic import Field

from .api import APIRequest, BaseAPI
from .models import BartModel, ResponseMetaData
from .scalars import IntStr, XmlList


def init_routes_request(cmd: str, date: str = "") -> APIRequest:
    request = APIRequest(path="/route.aspx", cmd=cmd)
    if date:
        request.options["date"] = [date]
    return request


class RouteConfig(BartModel):
    stations: XmlList[str] = Field(default_factory=list, alias="station")


class RouteInfo(BartModel):
    name: str = ""
    abbr: str = ""
    route_id: str = Field("", alias="routeID")
    number: IntStr = 0
    origin: str = ""
    destination: str = ""
    direction: str = ""
    hexcolor: str = ""
    color: str = ""
    holidays: IntStr = 0
    num_stations: IntStr = Field(0, alias="num_stns")
    route_config: RouteConfig = Field(default_factory=RouteConfig, alias="config")


class RouteInfoList(BartModel):
    routes: XmlList[RouteInfo] = Field(default_factory=list, alias="route")


class RoutesInfoRoot(ResponseMetaData):
    sched_num: IntStr = 0
    data: RouteInfoList = Field(default_factory=RouteInfoList, alias="routes")


class RoutesInfoResponse(BartModel):
    """Shape of a routeinfo response."""

    root: RoutesInfoRoot = Field(default_factory=RoutesInfoRoot)


class Route(BartModel):
    name: str = ""
    abbr: str = ""
    route_id: str = Field("", alias="routeID")
    number: IntStr = 0
    hexcolor: str = ""
    color: str = ""


class RouteList(BartModel):
    routes: XmlList[Route] = Field(default_factory=list, alias="route")


class RoutesRoot(ResponseMetaData):
    sched_num: IntStr = 0
    data: RouteList = Field(default_factory=RouteList, alias="routes")


class RoutesResponse(BartModel):
    """Shape of a routes response."""

    root: RoutesRoot = Field(default_factory=RoutesRoot)


class RoutesAPI(BaseAPI):
    """Namespace for route information requests."""

    def request_routes_info(self, date: str = "") -> RoutesInfoResponse:
        """
        Request detailed information for all routes.

        Args:
            date: "mm/dd/yyyy", "wd", "sa", "su", or empty for the current schedule.

        See https://api.bart.gov/docs/route/routeinfo.aspx.
        """
        request = init_routes_request("routeinfo", date)
        request.options["route"] = ["all"]
        return self._request(request, RoutesInfoResponse)

    def request_routes(self, date: str = "") -> RoutesResponse:
        """Request a summary of current routes. See https://api.bart.gov/docs/route/routes.aspx."""
        return self._request(init_routes_request("routes", date), RoutesResponse)


__all__ = [
    "RoutesAPI",
    "Route",
    "RouteInfo",
    "RoutesResponse",
    "RoutesInfoResponse",
]

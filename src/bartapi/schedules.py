"""Schedule information requests to /sched.aspx.

See official docs at https://api.bart.gov/docs/sched/.
"""

from typing import Any

from pydantic import Field, field_validator

from .api import APIRequest, BaseAPI
from .models import BartModel, ResponseMetaData, TripParams
from .scalars import Boolish, CData, FloatStr, IntStr, XmlList


def init_schedules_request(cmd: str) -> APIRequest:
    return APIRequest(path="/sched.aspx", cmd=cmd)


class OrigDestTimeData(BartModel):
    origin: str = Field("", alias="@origin")
    destination: str = Field("", alias="@destination")
    orig_time_min: str = Field("", alias="@origTimeMin")
    orig_time_date: str = Field("", alias="@origTimeDate")
    dest_time_min: str = Field("", alias="@destTimeMin")
    dest_time_date: str = Field("", alias="@destTimeDate")


class TripLeg(OrigDestTimeData):
    order: IntStr = Field(0, alias="@order")
    line: str = Field("", alias="@line")
    bike_flag: Boolish = Field(False, alias="@bikeflag")
    train_head_station: str = Field("", alias="@trainHeadStation")
    load: IntStr = Field(0, alias="@load")


class Trip(OrigDestTimeData):
    fare: FloatStr = Field(0.0, alias="@fare")
    clipper: FloatStr = Field(0.0, alias="@clipper")
    trip_time: IntStr = Field(0, alias="@tripTime")
    legs: XmlList[TripLeg] = Field(default_factory=list, alias="leg")


class TripRequest(BartModel):
    trips: XmlList[Trip] = Field(default_factory=list, alias="trip")


class TripSchedule(BartModel):
    date: str = ""
    time: str = ""
    before: IntStr = 0
    after: IntStr = 0
    request: TripRequest = Field(default_factory=TripRequest)


class TripsRoot(ResponseMetaData):
    origin: str = ""
    destination: str = ""
    sched_num: IntStr = 0
    data: TripSchedule = Field(default_factory=TripSchedule, alias="schedule")


class TripsResponse(BartModel):
    """Shape of an arrive or depart response."""

    root: TripsRoot = Field(default_factory=TripsRoot)


class Holiday(BartModel):
    name: str = ""
    date: str = ""
    schedule_type: str = ""


class HolidayList(BartModel):
    holidays: XmlList[Holiday] = Field(default_factory=list, alias="holiday")


class HolidaySchedulesRoot(ResponseMetaData):
    data: XmlList[HolidayList] = Field(default_factory=list, alias="holidays")


class HolidaySchedulesResponse(BartModel):
    """Shape of a holiday response."""

    root: HolidaySchedulesRoot = Field(default_factory=HolidaySchedulesRoot)


class Schedule(BartModel):
    id: IntStr = Field(0, alias="@id")
    effective_date: str = Field("", alias="@effectivedate")


class ScheduleList(BartModel):
    schedules: XmlList[Schedule] = Field(default_factory=list, alias="schedule")


class AvailableSchedulesRoot(ResponseMetaData):
    data: ScheduleList = Field(default_factory=ScheduleList, alias="schedules")


class AvailableSchedulesResponse(BartModel):
    """Shape of a scheds response."""

    root: AvailableSchedulesRoot = Field(default_factory=AvailableSchedulesRoot)


class SpecialSchedule(BartModel):
    start_date: str = ""
    end_date: str = ""
    start_time: str = ""
    end_time: str = ""
    text: CData = ""
    link: CData = ""
    orig: str = ""
    dest: str = ""
    day_of_week: str = ""
    routes_affected: str = ""


class SpecialScheduleList(BartModel):
    special_schedules: XmlList[SpecialSchedule] = Field(
        default_factory=list, alias="special_schedule"
    )


class SpecialSchedulesRoot(ResponseMetaData):
    data: SpecialScheduleList = Field(
        default_factory=SpecialScheduleList, alias="special_schedules"
    )

    @field_validator("data", mode="before")
    @classmethod
    def _empty_string_means_empty_list(cls, value: Any) -> Any:
        # BART sends "" instead of an object when nothing is scheduled.
        if value == "":
            return {}
        return value


class SpecialSchedulesResponse(BartModel):
    """Shape of a special response. root.data is empty when nothing is scheduled."""

    root: SpecialSchedulesRoot = Field(default_factory=SpecialSchedulesRoot)


class StationScheduleItem(BartModel):
    line: str = Field("", alias="@line")
    train_head_station: str = Field("", alias="@trainHeadStation")
    orig_time: str = Field("", alias="@origTime")
    dest_time: str = Field("", alias="@destTime")
    train_idx: IntStr = Field(0, alias="@trainIdx")
    bike_flag: Boolish = Field(False, alias="@bikeflag")
    train_id: str = Field("", alias="@trainId")
    load: IntStr = Field(0, alias="@load")


class StationSchedule(BartModel):
    name: str = ""
    abbr: str = ""
    items: XmlList[StationScheduleItem] = Field(default_factory=list, alias="item")


class StationSchedulesRoot(ResponseMetaData):
    sched_num: IntStr = 0
    data: StationSchedule = Field(default_factory=StationSchedule, alias="station")


class StationSchedulesResponse(BartModel):
    """Shape of a stnsched response."""

    root: StationSchedulesRoot = Field(default_factory=StationSchedulesRoot)


class RouteScheduleStop(BartModel):
    station: str = Field("", alias="@station")
    orig_time: str = Field("", alias="@origTime")
    load: str = Field("", alias="@load")
    level: str = Field("", alias="@level")
    bike_flag: Boolish = Field(False, alias="@bikeflag")


class RouteScheduleTrain(BartModel):
    train_id: str = Field("", alias="@trainId")
    train_idx: IntStr = Field(0, alias="@trainIdx")
    index: IntStr = Field(0, alias="@index")
    stops: XmlList[RouteScheduleStop] = Field(default_factory=list, alias="stop")


class RouteSchedule(BartModel):
    trains: XmlList[RouteScheduleTrain] = Field(default_factory=list, alias="train")


class RouteSchedulesRoot(ResponseMetaData):
    sched_num: IntStr = 0
    data: RouteSchedule = Field(default_factory=RouteSchedule, alias="route")


class RouteSchedulesResponse(BartModel):
    """Shape of a routesched response."""

    root: RouteSchedulesRoot = Field(default_factory=RouteSchedulesRoot)


class SchedulesAPI(BaseAPI):
    """Namespace for schedule information requests."""

    def _trip_request(self, cmd: str, params: TripParams) -> APIRequest:
        self._station(params.orig)
        self._station(params.dest)
        request = init_schedules_request(cmd)
        request.options.update(params.to_options())
        return request

    def request_arrivals(self, params: TripParams) -> TripsResponse:
        """
        Request a trip plan based on arriving by the specified time.

        See TripParams for the inputs, and
        https://api.bart.gov/docs/sched/arrive.aspx.
        """
        return self._request(self._trip_request("arrive", params), TripsResponse)

    def request_departures(self, params: TripParams) -> TripsResponse:
        """
        Request a trip plan based on departing at the specified time.

        See TripParams for the inputs, and
        https://api.bart.gov/docs/sched/depart.aspx.
        """
        return self._request(self._trip_request("depart", params), TripsResponse)

    def request_holiday_schedules(self) -> HolidaySchedulesResponse:
        """Request upcoming BART holidays and the schedule type run on each."""
        return self._request(init_schedules_request("holiday"), HolidaySchedulesResponse)

    def request_available_schedules(self) -> AvailableSchedulesResponse:
        """Request the currently available schedules."""
        return self._request(init_schedules_request("scheds"), AvailableSchedulesResponse)

    def request_special_schedules(self) -> SpecialSchedulesResponse:
        """Request all special schedule notices in effect."""
        return self._request(init_schedules_request("special"), SpecialSchedulesResponse)

    def request_station_schedules(self, orig: str, date: str = "") -> StationSchedulesResponse:
        """
        Request a full daily schedule for a station.

        Args:
            orig: 4-letter station abbreviation.
            date: "mm/dd/yyyy", or empty for today.

        See https://api.bart.gov/docs/sched/stnsched.aspx.
        """
        request = init_schedules_request("stnsched")
        request.options["orig"] = [self._station(orig)]
        if date:
            request.options["date"] = [date]
        return self._request(request, StationSchedulesResponse)

    def request_route_schedules(
        self, route: int, date: str = "", time: str = "", legend: bool = False
    ) -> RouteSchedulesResponse:
        """
        Request a full schedule for a route.

        Args:
            route: Route number, e.g. 1.
            date: "mm/dd/yyyy", "wd", "sa", "su", or empty for today.
            time: Time of day, e.g. "4:30pm", or empty for now.
            legend: Include the legend for the schedule.

        See https://api.bart.gov/docs/sched/routesched.aspx.
        """
        request = init_schedules_request("routesched")
        request.options["route"] = [str(int(route))]
        if date:
            request.options["date"] = [date]
        if time:
            request.options["time"] = [time]
        if legend:
            request.options["l"] = ["1"]
        return self._request(request, RouteSchedulesResponse)


__all__ = [
    "SchedulesAPI",
    "Trip",
    "TripLeg",
    "TripsResponse",
    "HolidaySchedulesResponse",
    "AvailableSchedulesResponse",
    "SpecialSchedule",
    "SpecialSchedulesResponse",
    "StationSchedulesResponse",
    "RouteSchedulesResponse",
]

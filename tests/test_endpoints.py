"""Tests for the endpoint namespaces against an in-process stub server."""

import unittest
import sys
from pathlib import Path

# Add src to path so we can import bartapi
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from stub_server import StubServer, load_fixture

from bartapi.client import BartClient
from bartapi.config import Config
from bartapi.errors import BartAPIError, InvalidStationError
from bartapi.models import STATION_ABBREVIATIONS, EstimateParams, TripParams, validate_station_abbr
from bartapi.stations import StationsAPI


class EndpointTestCase(unittest.TestCase):
    """Serve a fixture and point a fresh client at it."""

    fixture = "ok.json"

    def setUp(self):
        self.server = StubServer(load_fixture(self.fixture)).__enter__()
        self.addCleanup(self.server.__exit__, None, None, None)
        self.client = BartClient(Config(key="TEST-KEY"))
        self.client.config.base_url = self.server.url

    def assertRequested(self, path: str, cmd: str):
        self.assertEqual(self.server.last_path, path)
        query = self.server.last_query
        self.assertEqual(query["cmd"], [cmd])
        self.assertEqual(query["json"], ["y"])
        self.assertEqual(query["key"], ["TEST-KEY"])


class TestTrainCount(EndpointTestCase):
    fixture = "ok.json"

    def test_request_train_count(self):
        res = self.client.request_train_count()
        self.assertEqual(res.count, 58)
        self.assertEqual(res.root.data, 58)
        self.assertRequested("/bsa.aspx", "count")
        self.assertEqual(self.server.last_raw_query, "cmd=count&json=y&key=TEST-KEY")


class TestNestedTrainCount(unittest.TestCase):
    def test_count_under_data(self):
        body = b'{"root":{"uri":{"#cdata-section":"ok"},"data":{"TrainCount":"42"}}}'
        with StubServer(body) as server:
            client = BartClient(Config(key="k"))
            client.config.base_url = server.url
            res = client.request_train_count()
            self.assertEqual(server.last_raw_query, "cmd=count&json=y&key=k")
        self.assertEqual(res.count, 42)


class TestAdvisories(EndpointTestCase):
    fixture = "bsa.json"

    def test_request_bsa(self):
        res = self.client.request_bsa()
        self.assertRequested("/bsa.aspx", "bsa")
        self.assertEqual(len(res.root.data), 1)
        advisory = res.root.data[0]
        self.assertEqual(advisory.id, "245351")
        self.assertEqual(advisory.type, "DELAY")
        self.assertTrue(advisory.description.startswith("There is a 10-minute delay"))
        self.assertTrue(advisory.sms_text.startswith("10-min delay"))


class TestElevator(EndpointTestCase):
    fixture = "elev.json"

    def test_request_elevator_single_object(self):
        res = self.client.request_elevator()
        self.assertRequested("/bsa.aspx", "elev")
        self.assertEqual(len(res.root.data), 1)
        self.assertEqual(res.root.data[0].type, "ELEVATOR")


class TestEstimates(EndpointTestCase):
    fixture = "etd.json"

    def test_request_etd(self):
        res = self.client.request_etd("RICH")
        self.assertRequested("/etd.aspx", "etd")
        self.assertEqual(self.server.last_query["orig"], ["RICH"])
        self.assertNotIn("plat", self.server.last_query)
        self.assertNotIn("dir", self.server.last_query)

        station = res.root.data[0]
        self.assertEqual(station.abbr, "RICH")
        berryessa, millbrae = station.etds
        self.assertEqual(berryessa.estimates[0].minutes, 0)
        self.assertEqual(berryessa.estimates[1].minutes, 7)
        self.assertEqual(berryessa.estimates[1].delay, 95)
        self.assertTrue(berryessa.estimates[0].bike_flag)
        self.assertEqual(len(millbrae.estimates), 1)
        self.assertEqual(millbrae.estimates[0].minutes, 12)

    def test_platform_and_direction(self):
        self.client.request_etd("rich", plat="2", direction="s")
        self.assertEqual(self.server.last_query["plat"], ["2"])
        self.assertEqual(self.server.last_query["dir"], ["s"])

    def test_request_estimate_record_form(self):
        self.client.request_estimate(EstimateParams(orig="ALL", direction="n"))
        self.assertEqual(self.server.last_query["orig"], ["ALL"])
        self.assertEqual(self.server.last_query["dir"], ["n"])
        self.assertNotIn("plat", self.server.last_query)

    def test_invalid_origin_rejected_before_dispatch(self):
        with self.assertRaises(InvalidStationError) as ctx:
            self.client.request_etd("BOOF")
        self.assertEqual(ctx.exception.abbr, "BOOF")
        self.assertEqual(self.server.requests, [])


class TestRoutes(EndpointTestCase):
    fixture = "routes.json"

    def test_request_routes(self):
        res = self.client.request_routes()
        self.assertRequested("/route.aspx", "routes")
        self.assertNotIn("date", self.server.last_query)
        self.assertEqual(res.root.sched_num, 67)
        self.assertEqual([r.number for r in res.root.data.routes], [3, 8])
        self.assertEqual(res.root.data.routes[0].route_id, "ROUTE 3")

    def test_date_passed_through(self):
        self.client.request_routes("10/19/2026")
        self.assertEqual(self.server.last_query["date"], ["10/19/2026"])
        self.client.request_routes("sa")
        self.assertEqual(self.server.last_query["date"], ["sa"])


class TestRoutesInfo(EndpointTestCase):
    fixture = "routeinfo.json"

    def test_request_routes_info(self):
        res = self.client.request_routes_info()
        self.assertRequested("/route.aspx", "routeinfo")
        self.assertEqual(self.server.last_query["route"], ["all"])
        route = res.root.data.routes[0]
        self.assertEqual(route.num_stations, 4)
        self.assertEqual(route.route_config.stations, ["RICH", "DELN", "PLZA", "NBRK"])


class TestRoutesInfoSingleStation(EndpointTestCase):
    fixture = "routeinfo.json"

    def test_lone_config_station_is_a_list(self):
        body = b'{"root":{"routes":{"route":{"number":"20","config":{"station":"OAKL"}}}}}'
        with StubServer(body) as server:
            self.client.config.base_url = server.url
            res = self.client.request_routes_info()
        route = res.root.data.routes[0]
        self.assertEqual(route.number, 20)
        self.assertEqual(route.route_config.stations, ["OAKL"])


class TestTrips(EndpointTestCase):
    fixture = "trips_ok.json"

    def _check_trips(self, res):
        trips = res.root.data.request.trips
        self.assertGreater(len(trips), 0)
        for trip in trips:
            self.assertNotEqual(trip.orig_time_min, "")
            self.assertNotEqual(trip.dest_time_min, "")

    def test_arrivals_omit_before_after_when_zero(self):
        res = self.client.request_arrivals(TripParams(orig="woak", dest="embr"))
        self.assertRequested("/sched.aspx", "arrive")
        self.assertNotIn("a=", self.server.last_raw_query)
        self.assertNotIn("b=", self.server.last_raw_query)
        self._check_trips(res)

    def test_arrivals_omit_before_after_for_zero_one(self):
        self.client.request_arrivals(TripParams(orig="woak", dest="embr", before=0, after=1))
        self.assertNotIn("a=", self.server.last_raw_query)
        self.assertNotIn("b=", self.server.last_raw_query)

    def test_arrivals_emit_before_after_otherwise(self):
        res = self.client.request_arrivals(TripParams(orig="woak", dest="embr", before=0, after=4))
        self.assertEqual(self.server.last_query["a"], ["4"])
        self.assertEqual(self.server.last_query["b"], ["0"])
        self._check_trips(res)

    def test_departures(self):
        res = self.client.request_departures(
            TripParams(orig="WOAK", dest="EMBR", time="8:30am", date="10/19/2026", before=2, after=2, legend=True)
        )
        self.assertRequested("/sched.aspx", "depart")
        query = self.server.last_query
        self.assertEqual(query["time"], ["8:30am"])
        self.assertEqual(query["date"], ["10/19/2026"])
        self.assertEqual(query["l"], ["1"])
        self.assertEqual(query["b"], ["2"])
        self.assertEqual(query["a"], ["2"])
        self._check_trips(res)

    def test_trip_details(self):
        res = self.client.request_departures(TripParams(orig="woak", dest="embr"))
        first, second = res.root.data.request.trips
        self.assertEqual(res.root.origin, "WOAK")
        self.assertEqual(res.root.data.before, 2)
        self.assertAlmostEqual(first.fare, 2.60)
        self.assertAlmostEqual(first.clipper, 2.50)
        self.assertEqual(first.trip_time, 8)
        self.assertEqual(len(first.legs), 1)
        self.assertEqual(first.legs[0].train_head_station, "DALY")
        self.assertTrue(first.legs[0].bike_flag)
        self.assertFalse(second.legs[0].bike_flag)
        self.assertEqual(second.legs[0].load, 2)

    def test_invalid_destination(self):
        with self.assertRaises(InvalidStationError):
            self.client.request_arrivals(TripParams(orig="woak", dest="nope"))
        self.assertEqual(self.server.requests, [])

    def test_serialization_round_trip(self):
        cases = [
            TripParams(orig="woak", dest="embr"),
            TripParams(orig="woak", dest="embr", before=0, after=1),
            TripParams(orig="woak", dest="embr", time="4:30pm", date="wd", before=3, after=0, legend=True),
        ]
        for params in cases:
            with self.subTest(params=params):
                self.client.request_arrivals(params)
                query = self.server.last_query
                parsed = TripParams(
                    orig=query["orig"][0],
                    dest=query["dest"][0],
                    time=query.get("time", [""])[0],
                    date=query.get("date", [""])[0],
                    before=int(query.get("b", ["0"])[0]),
                    after=int(query.get("a", ["0"])[0]),
                    legend=query.get("l", ["0"])[0] == "1",
                )
                if params.before == 0 and params.after == 1:
                    params.after = 0
                self.assertEqual(parsed, params)


class TestHolidays(EndpointTestCase):
    fixture = "holiday.json"

    def test_request_holiday_schedules(self):
        res = self.client.request_holiday_schedules()
        self.assertRequested("/sched.aspx", "holiday")
        holidays = res.root.data[0].holidays
        self.assertEqual([h.name for h in holidays], ["Thanksgiving Day", "Christmas Day"])
        self.assertEqual(holidays[0].schedule_type, "Sunday")


class TestAvailableSchedules(EndpointTestCase):
    fixture = "scheds.json"

    def test_request_available_schedules(self):
        res = self.client.request_available_schedules()
        self.assertRequested("/sched.aspx", "scheds")
        self.assertEqual([s.id for s in res.root.data.schedules], [67, 68])
        self.assertEqual(res.root.data.schedules[0].effective_date, "09/08/2026 12:00 AM")


class TestSpecialSchedulesEmpty(EndpointTestCase):
    fixture = "special_schedules_empty.json"

    def test_empty_data(self):
        res = self.client.request_special_schedules()
        self.assertRequested("/sched.aspx", "special")
        self.assertEqual(res.root.data.special_schedules, [])


class TestSpecialSchedulesNonEmpty(EndpointTestCase):
    fixture = "special_schedules_non_empty.json"

    def test_non_empty_data(self):
        res = self.client.request_special_schedules()
        schedules = res.root.data.special_schedules
        self.assertEqual(len(schedules), 1)
        self.assertEqual(schedules[0].start_date, "10/24/2026")
        self.assertEqual(schedules[0].end_date, "10/25/2026")
        self.assertTrue(schedules[0].text.startswith("Weekend track work"))
        self.assertEqual(schedules[0].routes_affected, "ROUTE 1,ROUTE 2,ROUTE 11,ROUTE 12")


class TestMinimalSpecialSchedules(unittest.TestCase):
    def test_only_empty_string(self):
        with StubServer(b'{"root":{"special_schedules":""}}') as server:
            client = BartClient()
            client.config.base_url = server.url
            res = client.request_special_schedules()
        self.assertEqual(res.root.data.special_schedules, [])


class TestStationSchedules(EndpointTestCase):
    fixture = "stnsched.json"

    def test_request_station_schedules(self):
        res = self.client.request_station_schedules("12th", date="10/19/2026")
        self.assertRequested("/sched.aspx", "stnsched")
        self.assertEqual(self.server.last_query["orig"], ["12th"])
        self.assertEqual(self.server.last_query["date"], ["10/19/2026"])
        items = res.root.data.items
        self.assertEqual(items[0].train_head_station, "MLBR")
        self.assertEqual(items[1].train_idx, 2)

    def test_date_optional(self):
        self.client.request_station_schedules("12TH")
        self.assertNotIn("date", self.server.last_query)


class TestRouteSchedules(EndpointTestCase):
    fixture = "routesched.json"

    def test_request_route_schedules(self):
        res = self.client.request_route_schedules(6)
        self.assertRequested("/sched.aspx", "routesched")
        self.assertEqual(self.server.last_query["route"], ["6"])
        for key in ("date", "time", "l"):
            self.assertNotIn(key, self.server.last_query)
        train = res.root.data.trains[0]
        self.assertEqual(train.train_id, "601")
        self.assertEqual([s.station for s in train.stops], ["DALY", "BALB"])

    def test_optional_params(self):
        self.client.request_route_schedules(6, date="sa", time="4:30pm", legend=True)
        query = self.server.last_query
        self.assertEqual(query["date"], ["sa"])
        self.assertEqual(query["time"], ["4:30pm"])
        self.assertEqual(query["l"], ["1"])


class TestStationAccess(EndpointTestCase):
    fixture = "stnaccess.json"

    def test_request_station_access(self):
        res = self.client.request_station_access("12TH")
        self.assertRequested("/stn.aspx", "stnaccess")
        access = res.root.data.station
        self.assertFalse(access.parking_flag)
        self.assertTrue(access.bike_flag)
        self.assertTrue(access.bike_station_flag)
        self.assertEqual(access.fill_time, "")
        self.assertTrue(access.entering.startswith("Entrances"))


class TestStationInfo(EndpointTestCase):
    fixture = "stninfo.json"

    def test_request_station_info(self):
        res = self.client.request_station_info("mcar")
        self.assertRequested("/stn.aspx", "stninfo")
        info = res.root.data.station
        self.assertAlmostEqual(info.latitude, 37.829065)
        self.assertAlmostEqual(info.longitude, -122.26704)
        self.assertEqual(info.north_routes.routes, ["ROUTE 2", "ROUTE 3", "ROUTE 7"])
        self.assertEqual(info.south_platforms.platforms, ["2", "4"])
        self.assertEqual(info.cross_street, "Nearby Cross: 40th St.")

    def test_validation_can_be_disabled(self):
        api = StationsAPI(Config(validate_stations=False))
        api.config.base_url = self.server.url
        api.request_station_info("NEWS")
        self.assertEqual(self.server.last_query["orig"], ["NEWS"])

    def test_validation_on_by_default(self):
        with self.assertRaises(InvalidStationError):
            self.client.request_station_info("NEWS")


class TestStationInfoSingleEntries(EndpointTestCase):
    fixture = "stninfo_single.json"

    def test_lone_route_and_platform_are_lists(self):
        res = self.client.request_station_info("OAKL")
        info = res.root.data.station
        self.assertEqual(info.abbr, "OAKL")
        self.assertEqual(info.north_routes.routes, ["ROUTE 20"])
        self.assertEqual(info.south_routes.routes, ["ROUTE 19"])
        self.assertEqual(info.north_platforms.platforms, ["1"])
        self.assertEqual(info.south_platforms.platforms, ["1"])
        self.assertEqual(info.cross_street, "")


class TestStations(EndpointTestCase):
    fixture = "stns.json"

    def test_request_stations(self):
        res = self.client.request_stations()
        self.assertRequested("/stn.aspx", "stns")
        self.assertNotIn("orig", self.server.last_query)
        self.assertEqual([s.abbr for s in res.root.data.stations], ["12TH", "WOAK"])


class TestErrorEnvelopes(EndpointTestCase):
    fixture = "err_object.json"

    def test_any_operation_surfaces_remote_error(self):
        with self.assertRaises(BartAPIError) as ctx:
            self.client.request_stations()
        self.assertIn("Invalid orig", str(ctx.exception))
        self.assertIn("NOPE", str(ctx.exception))


class TestValidateStationAbbr(unittest.TestCase):
    """Test the station allow-list."""

    def test_known_stations_any_case(self):
        for abbr in STATION_ABBREVIATIONS:
            self.assertEqual(validate_station_abbr(abbr.lower()), abbr.lower())
            self.assertEqual(validate_station_abbr(abbr.upper()), abbr.upper())

    def test_unknown_station(self):
        with self.assertRaises(InvalidStationError) as ctx:
            validate_station_abbr("BOOF")
        self.assertIn("BOOF", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()

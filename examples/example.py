"""Example usage of BartClient."""

import logging
import sys
from pathlib import Path

# Add src to path so we can import bartapi
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bartapi import BartAPIError, BartClient, InvalidStationError, TripParams

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def print_departures(client: BartClient, orig: str):
    """
    Fetch and display real-time departures for a station.

    Args:
        client: Configured BART client.
        orig: Station abbreviation (e.g., "MCAR" or "embr")
    """
    print(f"\n{'='*70}")
    print(f"Departures for: {orig.upper()}")
    print(f"{'='*70}\n")

    res = client.request_etd(orig)
    for station in res.root.data:
        print(f"Station: {station.name}")
        for etd in station.etds:
            minutes = ", ".join(
                "Leaving" if e.minutes == 0 else f"{e.minutes} min" for e in etd.estimates
            )
            print(f"  {etd.destination:<28} {minutes}")


def print_advisories(client: BartClient):
    """Display current service advisories and the number of trains running."""
    print("\n" + "=" * 70)
    print("SERVICE ADVISORIES:")
    print("-" * 70)
    for advisory in client.request_bsa().root.data:
        print(f"  [{advisory.type or 'INFO'}] {advisory.description}")

    count = client.request_train_count().count
    print(f"\nTrains in service: {count}")


def print_next_trip(client: BartClient, orig: str, dest: str):
    """Display the next few trips between two stations."""
    print("\n" + "=" * 70)
    print(f"TRIPS {orig.upper()} -> {dest.upper()}:")
    print("-" * 70)
    res = client.request_departures(TripParams(orig=orig, dest=dest, before=0, after=3))
    for trip in res.root.data.request.trips:
        lines = " / ".join(leg.train_head_station for leg in trip.legs)
        print(f"  {trip.orig_time_min} -> {trip.dest_time_min}  ${trip.fare:.2f}  via {lines}")


if __name__ == "__main__":
    orig = sys.argv[1] if len(sys.argv) > 1 else "MCAR"
    dest = sys.argv[2] if len(sys.argv) > 2 else "EMBR"

    client = BartClient()
    try:
        print_departures(client, orig)
        print_advisories(client)
        print_next_trip(client, orig, dest)
        print("\n" + "=" * 70 + "\n")
    except InvalidStationError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except BartAPIError as e:
        print(f"BART API error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to fetch data: {e}", exc_info=True)
        print(f"Error: {e}")
        sys.exit(1)

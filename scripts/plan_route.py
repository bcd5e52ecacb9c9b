from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from georoute.config import RoutingConfig
from georoute.exceptions import RoutingError
from georoute.schemas import RouteRequest
from georoute.service import RouteService


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find the shortest hop-by-hop route between two points of interest.")
    parser.add_argument(
        "pois",
        type=Path,
        help="JSON file holding a list of {id, name, latitude, longitude} records.",
    )
    parser.add_argument("start_id", type=str, help="Identifier of the starting point of interest.")
    parser.add_argument("end_id", type=str, help="Identifier of the destination point of interest.")
    parser.add_argument(
        "--max-edge-km",
        type=float,
        default=None,
        help="Maximum distance in km between two directly connected points (defaults to config).",
    )
    parser.add_argument(
        "--points-per-leg",
        type=int,
        default=None,
        help="Number of interpolated waypoints per leg of the route overlay.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level for command output.",
    )
    return parser.parse_args()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _match_id(raw_id: str, records: list) -> object:
    # ids arrive as strings on the command line; reuse the type stored in the file
    for record in records:
        if str(record.get("id")) == raw_id:
            return record["id"]
    return raw_id


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)

    records = json.loads(args.pois.read_text(encoding="utf-8"))
    logging.info("Loaded %d points of interest from %s", len(records), args.pois)

    config = RoutingConfig.from_env()
    if args.points_per_leg is not None:
        config.points_per_leg = args.points_per_leg

    try:
        request = RouteRequest(
            pois=records,
            start_id=_match_id(args.start_id, records),
            end_id=_match_id(args.end_id, records),
            max_edge_distance_km=args.max_edge_km,
        )
        plan = RouteService(config).plan(request)
    except (RoutingError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not plan.result.reachable:
        logging.warning("No route found; consider a larger --max-edge-km.")

    print(json.dumps(plan.to_response().model_dump(by_alias=True), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

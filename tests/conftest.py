from __future__ import annotations

from typing import List

import pytest

from georoute.routing.types import PointOfInterest


def make_poi(poi_id, latitude: float, longitude: float, name: str = "") -> PointOfInterest:
    return PointOfInterest(id=poi_id, name=name or f"POI {poi_id}", latitude=latitude, longitude=longitude)


@pytest.fixture
def la_paz_pair() -> List[PointOfInterest]:
    return [make_poi(1, -16.50, -68.15), make_poi(2, -16.51, -68.16)]


@pytest.fixture
def equator_line() -> List[PointOfInterest]:
    # A-B and B-C are ~3.34 km apart, A-C ~6.67 km
    return [
        make_poi("A", 0.0, 0.0),
        make_poi("B", 0.0, 0.03),
        make_poi("C", 0.0, 0.06),
    ]

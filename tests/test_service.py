from __future__ import annotations

import pytest
from pydantic import ValidationError

from georoute.config import RoutingConfig
from georoute.exceptions import DuplicateIdError
from georoute.schemas import PointOfInterestModel, RouteRequest
from georoute.service import RouteService

RECORDS = [
    {"id": 1, "name": "Plaza Murillo", "latitude": -16.50, "longitude": -68.15},
    {"id": 2, "name": "Mercado de las Brujas", "latitude": -16.51, "longitude": -68.16},
]


def _request(**overrides) -> RouteRequest:
    payload = {"pois": RECORDS, "startId": 1, "endId": 2}
    payload.update(overrides)
    return RouteRequest(**payload)


def test_request_accepts_camel_case_and_field_names() -> None:
    camel = _request(maxEdgeDistanceKm=2.5)
    snake = RouteRequest(pois=RECORDS, start_id=1, end_id=2, max_edge_distance_km=2.5)

    assert camel == snake
    assert camel.pois[0].to_poi().name == "Plaza Murillo"


@pytest.mark.parametrize(
    "overrides",
    [
        {"pois": []},
        {"maxEdgeDistanceKm": 0},
        {"pois": [{"id": 1, "name": "x", "latitude": 95.0, "longitude": 0.0}]},
        {"pois": [{"id": 1, "name": "x", "latitude": 0.0, "longitude": 200.0}]},
    ],
)
def test_request_validation(overrides) -> None:
    with pytest.raises(ValidationError):
        _request(**overrides)


def test_plan_reachable_route() -> None:
    plan = RouteService().plan(_request())

    assert plan.result.ids == [1, 2]
    assert plan.summary["reachable"] is True
    assert plan.summary["num_stops"] == 2
    assert plan.summary["num_pois"] == 2
    assert plan.summary["max_edge_distance_km"] == 5.0
    assert plan.summary["total_distance_km"] == pytest.approx(1.54, abs=0.01)
    assert plan.visualization["label"] == "Total distance: 1.54 km"

    response = plan.to_response().model_dump(by_alias=True)
    assert response["reachable"] is True
    assert [poi["id"] for poi in response["path"]] == [1, 2]
    assert response["totalDistanceKm"] == pytest.approx(1.54, abs=0.01)


def test_plan_unreachable_route_has_null_distance() -> None:
    plan = RouteService().plan(_request(maxEdgeDistanceKm=0.1))

    response = plan.to_response()
    assert response.reachable is False
    assert response.path == []
    assert response.total_distance_km is None
    assert plan.summary["total_distance_km"] is None


def test_request_threshold_overrides_config() -> None:
    service = RouteService(RoutingConfig(max_edge_distance_km=0.1))

    assert not service.plan(_request()).result.reachable
    assert service.plan(_request(maxEdgeDistanceKm=5.0)).result.reachable


def test_config_points_per_leg_shapes_polyline() -> None:
    plan = RouteService(RoutingConfig(points_per_leg=3)).plan(_request())

    assert len(plan.visualization["polyline"]) == 4


def test_duplicate_ids_propagate_from_service() -> None:
    records = RECORDS + [{"id": 2, "name": "dup", "latitude": -16.52, "longitude": -68.17}]

    with pytest.raises(DuplicateIdError):
        RouteService().plan(_request(pois=records))


def test_poi_model_round_trip_keeps_string_ids() -> None:
    model = PointOfInterestModel(id="museo", name="Museo", latitude=-16.49, longitude=-68.13)

    assert PointOfInterestModel.from_poi(model.to_poi()) == model
    assert model.to_poi().id == "museo"


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GEOROUTE_MAX_EDGE_DISTANCE_KM", "2.5")
    monkeypatch.setenv("GEOROUTE_POINTS_PER_LEG", "4")

    config = RoutingConfig.from_env()

    assert config.max_edge_distance_km == 2.5
    assert config.points_per_leg == 4


def test_config_from_env_falls_back_on_bad_values(monkeypatch) -> None:
    monkeypatch.setenv("GEOROUTE_MAX_EDGE_DISTANCE_KM", "far")
    monkeypatch.setenv("GEOROUTE_POINTS_PER_LEG", "0")

    config = RoutingConfig.from_env()

    assert config == RoutingConfig()


def test_config_defaults_without_env(monkeypatch) -> None:
    monkeypatch.delenv("GEOROUTE_MAX_EDGE_DISTANCE_KM", raising=False)
    monkeypatch.delenv("GEOROUTE_POINTS_PER_LEG", raising=False)

    assert RoutingConfig.from_env() == RoutingConfig(max_edge_distance_km=5.0, points_per_leg=10)


def test_request_rejects_mixed_id_types() -> None:
    records = RECORDS + [{"id": "w", "name": "Mirador", "latitude": 0.0, "longitude": -0.01}]

    with pytest.raises(ValidationError):
        _request(pois=records)


def test_summary_keys_are_snake_case() -> None:
    summary = RouteService().plan(_request()).summary

    assert summary["start_id"] == 1
    assert summary["end_id"] == 2
    assert all(key == key.lower() for key in summary)

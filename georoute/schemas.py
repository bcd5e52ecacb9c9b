from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .routing.types import PathResult, PointOfInterest


class PointOfInterestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Union[int, str]
    name: str = ""
    latitude: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)

    def to_poi(self) -> PointOfInterest:
        return PointOfInterest(id=self.id, name=self.name, latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_poi(cls, poi: PointOfInterest) -> "PointOfInterestModel":
        return cls(id=poi.id, name=poi.name, latitude=poi.latitude, longitude=poi.longitude)


class RouteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pois: List[PointOfInterestModel] = Field(..., min_length=1)
    start_id: Union[int, str] = Field(..., alias="startId")
    end_id: Union[int, str] = Field(..., alias="endId")
    max_edge_distance_km: Optional[float] = Field(None, alias="maxEdgeDistanceKm", gt=0, allow_inf_nan=False)

    @model_validator(mode="after")
    def check_single_id_type(self) -> "RouteRequest":
        id_types = {type(poi.id) for poi in self.pois}
        if len(id_types) > 1:
            raise ValueError("POI ids must be all integers or all strings.")
        return self


class RouteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: List[PointOfInterestModel]
    total_distance_km: Optional[float] = Field(None, alias="totalDistanceKm")
    reachable: bool
    summary: Dict[str, Any] = Field(default_factory=dict)
    visualization: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_result(
        cls,
        result: PathResult,
        *,
        summary: Optional[Dict[str, Any]] = None,
        visualization: Optional[Dict[str, Any]] = None,
    ) -> "RouteResponse":
        return cls(
            path=[PointOfInterestModel.from_poi(poi) for poi in result.path],
            total_distance_km=float(result.total_distance_km) if result.reachable else None,
            reachable=result.reachable,
            summary=summary or {},
            visualization=visualization or {},
        )

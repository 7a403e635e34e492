from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AreaFailure(BaseModel):
    area_name: str
    message: str


class ExportResult(BaseModel):
    filename: str | None = None
    text: str = ""
    names: list[str] = Field(default_factory=list)
    failures: list[AreaFailure] = Field(default_factory=list)

    @property
    def delivered(self) -> bool:
        return self.filename is not None


class SkippedPlacemark(BaseModel):
    placemark: int | None = None
    message: str


class AreaLoadResponse(BaseModel):
    areas: list[str]
    skipped: list[SkippedPlacemark] = Field(default_factory=list)


class AreaListResponse(BaseModel):
    areas: list[str]


class SelectionResponse(BaseModel):
    name: str
    bounds: list[float]
    newly_rendered: bool
    feature: dict[str, Any] | None = None


class StatusResponse(BaseModel):
    loading: bool
    errors: list[str] = Field(default_factory=list)

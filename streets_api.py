import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import Response

from core.exceptions import NotFoundError, ParseError
from street_export.models import (
    AreaListResponse,
    AreaLoadResponse,
    ExportResult,
    SelectionResponse,
    SkippedPlacemark,
    StatusResponse,
)
from street_export.service import StreetListService
from street_export.sinks import MEDIA_TYPE, MemorySink

# Setup
logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["streets"])

street_list_service = StreetListService(MemorySink())


def get_street_list_service() -> StreetListService:
    return street_list_service


def _content_disposition(filename: str) -> str:
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "'")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _file_response(result: ExportResult) -> Response:
    return Response(
        content=result.text.encode("utf-8"),
        media_type=MEDIA_TYPE,
        headers={
            "Content-Disposition": _content_disposition(result.filename),
            "X-Failed-Areas": str(len(result.failures)),
        },
    )


@router.post("/areas", response_model=AreaLoadResponse)
async def upload_areas(
    file: UploadFile = File(...),
    service: StreetListService = Depends(get_street_list_service),
):
    """Load a KML file, replacing the areas loaded before."""
    content = await file.read()
    try:
        names = service.parse_boundaries(content)
    except ParseError as exc:
        logger.warning("Rejected boundary upload %s: %s", file.filename, exc.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        ) from exc

    skipped = [
        SkippedPlacemark(placemark=error.details.get("placemark"), message=error.message)
        for error in service.skipped
    ]
    return AreaLoadResponse(areas=names, skipped=skipped)


@router.get("/areas", response_model=AreaListResponse)
async def list_areas(service: StreetListService = Depends(get_street_list_service)):
    return AreaListResponse(areas=service.store.list())


@router.post("/areas/{name:path}/select", response_model=SelectionResponse)
async def select_area(
    name: str,
    service: StreetListService = Depends(get_street_list_service),
):
    try:
        selection = service.select_area(name)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.message,
        ) from exc

    overlays = getattr(service.map_view, "overlays", {})
    return SelectionResponse(
        name=selection.name,
        bounds=list(selection.bounds),
        newly_rendered=selection.newly_rendered,
        feature=overlays.get(selection.overlay_handle),
    )


@router.get("/areas/{name:path}/streets")
async def export_area_streets(
    name: str,
    service: StreetListService = Depends(get_street_list_service),
):
    try:
        result = await service.export_one(name)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exc.message,
        ) from exc

    if not result.delivered:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=result.failures[0].message,
        )
    return _file_response(result)


@router.get("/streets")
async def export_all_streets(
    service: StreetListService = Depends(get_street_list_service),
):
    result = await service.export_all()
    return _file_response(result)


@router.get("/status", response_model=StatusResponse)
async def get_status(service: StreetListService = Depends(get_street_list_service)):
    return StatusResponse(loading=service.loading.active, errors=service.errors)

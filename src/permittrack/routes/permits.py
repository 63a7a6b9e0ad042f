import uuid

from fastapi import APIRouter, Depends, Query, Response

from permittrack.config import settings
from permittrack.schemas.permit import PermitRequest, PermitResponse
from permittrack.services.permit_registry import PermitRegistry, get_permit_registry

router = APIRouter(prefix="/permits", tags=["permits"])


# Registered before the GET routes, which Starlette also serves for HEAD
@router.head("")
async def head_permits() -> Response:
    """Reachability check: 200 with no body."""
    return Response(status_code=200)


@router.post("")
async def create_permit(
    body: PermitRequest,
    registry: PermitRegistry = Depends(get_permit_registry),
) -> PermitResponse:
    permit = await registry.create(body)
    return PermitResponse.model_validate(permit)


@router.get("")
async def list_permits(
    page: int = Query(ge=0),
    registry: PermitRegistry = Depends(get_permit_registry),
) -> list[PermitResponse]:
    permits = registry.list_page(page, settings.default_page_size)
    return [PermitResponse.model_validate(p) for p in permits]


@router.get("/{permit_id}")
async def get_permit(
    permit_id: uuid.UUID,
    registry: PermitRegistry = Depends(get_permit_registry),
) -> PermitResponse:
    return PermitResponse.model_validate(registry.get(permit_id))


@router.put("/{permit_id}")
async def update_permit(
    permit_id: uuid.UUID,
    body: PermitRequest,
    registry: PermitRegistry = Depends(get_permit_registry),
) -> PermitResponse:
    permit = await registry.update(permit_id, body)
    return PermitResponse.model_validate(permit)


@router.delete("/{permit_id}", status_code=204)
async def delete_permit(
    permit_id: uuid.UUID,
    registry: PermitRegistry = Depends(get_permit_registry),
) -> Response:
    await registry.delete(permit_id)
    return Response(status_code=204)

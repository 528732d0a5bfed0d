from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from ..models.schemas import (
    DeleteResponse,
    MessageResponse,
    Resource,
    ResourceCreate,
    ResourcePatch,
    ResourceReplace,
)
from ..services.resource_service import (
    NOT_FOUND_MESSAGE,
    ResourceNotFoundError,
    ResourceService,
)

# Mounted by the app under settings.API_PREFIX (default /resources).
router = APIRouter(tags=["Resources"])

_NOT_FOUND = {404: {"model": MessageResponse, "description": NOT_FOUND_MESSAGE}}
_INVALID = {400: {"model": MessageResponse, "description": "Request body failed validation."}}


# PUBLIC_INTERFACE
def get_resource_service(request: Request) -> ResourceService:
    """Dependency returning the service bound to the running app."""
    return request.app.state.resource_service


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)


# PUBLIC_INTERFACE


@router.get(
    "",
    response_model=List[Resource],
    summary="List resources",
    description="Returns the full collection in insertion order.",
)
def list_resources(service: ResourceService = Depends(get_resource_service)) -> List[Resource]:
    return service.list_resources()


# PUBLIC_INTERFACE


@router.get(
    "/{resource_id}",
    response_model=Resource,
    summary="Get resource by id",
    responses=_NOT_FOUND,
)
def get_resource(resource_id: str, service: ResourceService = Depends(get_resource_service)) -> Resource:
    try:
        return service.get_resource(resource_id)
    except ResourceNotFoundError:
        raise _not_found()


# PUBLIC_INTERFACE


@router.post(
    "",
    response_model=Resource,
    status_code=201,
    summary="Create resource",
    description="Create a resource. The id and both timestamps are generated by the server.",
    responses=_INVALID,
)
def create_resource(
    payload: ResourceCreate, service: ResourceService = Depends(get_resource_service)
) -> Resource:
    return service.create_resource(payload.model_dump())


# PUBLIC_INTERFACE


@router.put(
    "/{resource_id}",
    response_model=Resource,
    summary="Replace resource",
    description="Overwrite name, type and any supplied amount/price. id and createdAt are kept.",
    responses={**_NOT_FOUND, **_INVALID},
)
def replace_resource(
    resource_id: str,
    payload: ResourceReplace,
    service: ResourceService = Depends(get_resource_service),
) -> Resource:
    try:
        return service.update_resource(resource_id, payload.model_dump(exclude_unset=True))
    except ResourceNotFoundError:
        raise _not_found()


# PUBLIC_INTERFACE


@router.patch(
    "/{resource_id}",
    response_model=Resource,
    summary="Partially update resource",
    description="Update amount and/or price. Every other field is preserved.",
    responses={**_NOT_FOUND, **_INVALID},
)
def patch_resource(
    resource_id: str,
    payload: ResourcePatch,
    service: ResourceService = Depends(get_resource_service),
) -> Resource:
    try:
        return service.update_resource(resource_id, payload.model_dump(exclude_unset=True))
    except ResourceNotFoundError:
        raise _not_found()


# PUBLIC_INTERFACE


@router.delete(
    "/{resource_id}",
    response_model=DeleteResponse,
    summary="Delete resource",
    responses=_NOT_FOUND,
)
def delete_resource(resource_id: str, service: ResourceService = Depends(get_resource_service)) -> DeleteResponse:
    try:
        removed_id = service.delete_resource(resource_id)
    except ResourceNotFoundError:
        raise _not_found()
    return DeleteResponse(id=removed_id)

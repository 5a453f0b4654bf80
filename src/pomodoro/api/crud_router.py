"""
Router factory for owned record kinds.

Every kind exposes the same five routes under ``/<kind>``:

    GET    /own        records owned by the caller
    GET    /own/{id}   one record; 404 if missing, 403 if not the caller's
    POST   /           create a record owned by the caller
    PUT    /own/{id}   replace a record owned by the caller
    DELETE /own/{id}   delete a record owned by the caller

All routes require a bearer token (401 otherwise).
"""

from typing import Callable, List, Optional, Type
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from pomodoro.api.responses import map_service_response
from pomodoro.core.security import get_current_user_id
from pomodoro.schemas.common import DetailResponse, OwnedSchema
from pomodoro.services.crud_service import CrudService
from pomodoro.services.response import ServiceResponse

ID_MISMATCH_MESSAGE = "id in path does not match id in body"


def build_crud_router(
    kind: str,
    schema: Type[OwnedSchema],
    get_service: Callable[..., CrudService],
    tags: Optional[List[str]] = None,
) -> APIRouter:
    """
    Create the CRUD router for one kind.

    Args:
        kind: Path segment and route name prefix, e.g. ``"category"``
        schema: Pydantic schema used for request and response bodies
        get_service: FastAPI dependency returning the kind's CrudService
        tags: OpenAPI tags (defaults to ``[kind]``)

    Returns:
        APIRouter with prefix ``/<kind>``
    """
    router = APIRouter(
        prefix=f"/{kind}",
        tags=tags or [kind],
        responses={status.HTTP_401_UNAUTHORIZED: {"description": "Available only for registered users"}},
    )
    get_by_id_route = f"{kind}_get_by_id"

    @router.get(
        "/own",
        response_model=List[schema],
        summary=f"List own {kind} records",
    )
    async def get_own_all(
        caller_id: UUID = Depends(get_current_user_id),
        service: CrudService = Depends(get_service),
    ) -> Response:
        return map_service_response(service.get_own_all(caller_id))

    @router.get(
        "/own/{id}",
        name=get_by_id_route,
        response_model=schema,
        responses={
            status.HTTP_403_FORBIDDEN: {"description": "Object doesn't belong to current user"},
            status.HTTP_404_NOT_FOUND: {"description": "Object not found"},
        },
        summary=f"Get own {kind} by id",
    )
    async def get_by_id(
        id: UUID,
        caller_id: UUID = Depends(get_current_user_id),
        service: CrudService = Depends(get_service),
    ) -> Response:
        return map_service_response(service.get_own_by_id(id, caller_id))

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        response_model=schema,
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": DetailResponse},
            status.HTTP_409_CONFLICT: {"model": DetailResponse},
        },
        summary=f"Create {kind}",
    )
    async def add_one(
        model: schema,
        request: Request,
        caller_id: UUID = Depends(get_current_user_id),
        service: CrudService = Depends(get_service),
    ) -> Response:
        result = service.add_one_own(model, caller_id)
        location = None
        if result.data is not None:
            location = str(request.url_for(get_by_id_route, id=str(result.data.id)))
        return map_service_response(result, created_location=location)

    @router.put(
        "/own/{id}",
        response_model=schema,
        responses={status.HTTP_400_BAD_REQUEST: {"model": DetailResponse}},
        summary=f"Update own {kind}",
    )
    async def update_one(
        id: UUID,
        model: schema,
        caller_id: UUID = Depends(get_current_user_id),
        service: CrudService = Depends(get_service),
    ) -> Response:
        if model.id != id:
            return map_service_response(ServiceResponse.error(ID_MISMATCH_MESSAGE))

        return map_service_response(service.update_one_own(model, caller_id))

    @router.delete(
        "/own/{id}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses={status.HTTP_400_BAD_REQUEST: {"model": DetailResponse}},
        summary=f"Delete own {kind}",
    )
    async def delete_one(
        id: UUID,
        caller_id: UUID = Depends(get_current_user_id),
        service: CrudService = Depends(get_service),
    ) -> Response:
        return map_service_response(service.delete_one_own(id, caller_id))

    return router

"""
Router factory for pass-through entity CRUD.

Each generated router exposes create / list / get / update / delete on one
BaseService; list accepts skip/limit and exact-match query filters.
"""

from typing import Any, Callable, Dict, List, Sequence, Type
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from backoffice.api.errors import unwrap
from backoffice.core.exceptions import ValidationError
from backoffice.schemas.common.base import BaseSchema
from backoffice.services.base import BaseService


def coerce_filter(model: Any, key: str, raw: str) -> Any:
    """Convert a query-string value to the python type of the model column."""
    python_type = model.__table__.columns[key].type.python_type
    if python_type is bool:
        return raw.lower() in ("1", "true", "yes")
    try:
        return python_type(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Invalid value for {key}", field_errors={key: [str(exc)]}) from exc


def create_crud_router(
    *,
    entity_name: str,
    get_service: Callable[..., BaseService],
    create_schema: Type[BaseSchema],
    update_schema: Type[BaseSchema],
    response_schema: Type[BaseSchema],
    filter_fields: Sequence[str] = (),
) -> APIRouter:
    """
    Build a router for one entity.

    ``filter_fields`` names the query parameters accepted by the list
    endpoint; they are passed to the service as exact-match filters.
    """
    router = APIRouter()

    @router.post(
        "",
        response_model=response_schema,
        status_code=status.HTTP_201_CREATED,
        summary=f"Create {entity_name}",
    )
    def create_entity(payload: create_schema, service: BaseService = Depends(get_service)):  # type: ignore[valid-type]
        return unwrap(service.create(payload))

    @router.get("", response_model=List[response_schema], summary=f"List {entity_name}")  # type: ignore[valid-type]
    def list_entities(
        request: Request,
        skip: int = Query(0, ge=0),
        limit: int = Query(100, ge=1, le=1000),
        service: BaseService = Depends(get_service),
    ):
        model = service.repository.model
        filters: Dict[str, Any] = {
            key: coerce_filter(model, key, value)
            for key, value in request.query_params.items()
            if key in filter_fields
        }
        return unwrap(service.list(skip=skip, limit=limit, filters=filters))

    @router.get("/{entity_id}", response_model=response_schema, summary=f"Get {entity_name}")
    def get_entity(entity_id: UUID, service: BaseService = Depends(get_service)):
        return unwrap(service.get_by_id(entity_id))

    @router.patch("/{entity_id}", response_model=response_schema, summary=f"Update {entity_name}")
    def update_entity(
        entity_id: UUID,
        payload: update_schema,  # type: ignore[valid-type]
        service: BaseService = Depends(get_service),
    ):
        return unwrap(service.update(entity_id, payload))

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT, summary=f"Delete {entity_name}")
    def delete_entity(entity_id: UUID, service: BaseService = Depends(get_service)) -> Response:
        unwrap(service.delete(entity_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router

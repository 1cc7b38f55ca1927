from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from app.api.v1.entities import EntityConfig
from app.api.v1.service import (
    build_list_query,
    create_entity_service,
    delete_entity_service,
    get_entity_service,
    is_empty_listing,
    list_entities_service,
    update_entity_service,
)
from app.core.config import settings
from app.db.session import get_db

# Query keys the list route consumes itself; any other key is a filter.
LIST_PARAMS = {"dataSource", "recordStatus", "page", "pageSize", "q", "sortBy", "sortDir"}


def _list_filters(request: Request) -> dict[str, str]:
    return {key: value for key, value in request.query_params.items() if key not in LIST_PARAMS}


def build_entity_router(config: EntityConfig) -> APIRouter:
    router = APIRouter()
    create_schema = config.create_schema
    update_schema = config.update_schema
    delete_schema = config.delete_schema

    @router.get("/schema")
    def entity_schema():
        if not settings.is_development:
            raise HTTPException(status_code=403, detail="Schema is only available in development")
        return config.describe()

    @router.get("")
    def list_entities(
        request: Request,
        data_source: str = Query(alias="dataSource"),
        record_status: str = Query("true", alias="recordStatus"),
        page: Optional[str] = Query(None),
        page_size: Optional[str] = Query(None, alias="pageSize"),
        q: Optional[str] = Query(None),
        sort_by: Optional[str] = Query(None, alias="sortBy"),
        sort_dir: Optional[str] = Query(None, alias="sortDir"),
        db: Session = Depends(get_db),
    ):
        query = build_list_query(
            config,
            record_status=record_status,
            page=page,
            page_size=page_size,
            filters=_list_filters(request),
            q=q,
            sort_by=sort_by,
            sort_dir=sort_dir,
        )
        result = list_entities_service(config, data_source, query, db)
        if is_empty_listing(result):
            return Response(status_code=204)
        return result

    @router.get("/{entity_id}")
    def get_entity(
        entity_id: str,
        data_source: str = Query(alias="dataSource"),
        db: Session = Depends(get_db),
    ):
        return get_entity_service(config, data_source, entity_id, db)

    @router.post("", status_code=201)
    def create_entity(payload: create_schema, db: Session = Depends(get_db)):
        return create_entity_service(config, payload, db)

    @router.put("/{entity_id}")
    def update_entity(entity_id: str, payload: update_schema, db: Session = Depends(get_db)):
        return update_entity_service(config, entity_id, payload, db)

    @router.delete("/{entity_id}")
    def delete_entity(entity_id: str, payload: delete_schema, db: Session = Depends(get_db)):
        return delete_entity_service(config, entity_id, payload, db)

    return router

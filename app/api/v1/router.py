from fastapi import APIRouter

from app.api.v1.crud import build_entity_router
from app.api.v1.entities import ENTITIES

router = APIRouter()
for entity in ENTITIES:
    router.include_router(build_entity_router(entity), prefix=f"/{entity.name}", tags=[entity.tag])

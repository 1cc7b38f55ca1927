import math
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class PageMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(ge=0)
    page: int
    page_size: int = Field(alias="pageSize")
    total_pages: int = Field(alias="totalPages")


class PaginatedResult(BaseModel):
    data: List[Any] = []
    meta: PageMeta

    def to_envelope(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


def build_page_meta(total: int, page: int, page_size: int) -> PageMeta:
    total_pages = max(1, math.ceil(total / page_size))
    return PageMeta(total=total, page=page, page_size=page_size, total_pages=total_pages)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from app.core.config import settings
from app.models.address import Address
from app.models.blog import Blog
from app.models.contact import Contact
from app.models.person import Person
from app.models.product import Product
from app.models.template import Template
from app.models.user import User
from app.schemas.entities import (
    AddressCreate,
    AddressUpdate,
    BlogCreate,
    BlogUpdate,
    ContactCreate,
    ContactUpdate,
    PersonCreate,
    PersonUpdate,
    ProductCreate,
    ProductUpdate,
    RecordDelete,
    TemplateCreate,
    TemplateUpdate,
    UserCreate,
    UserUpdate,
)


@dataclass(frozen=True)
class EntityConfig:
    """How one entity is exposed: its table/collection, payload schemas and list allow-lists.

    ``name`` is both the URL segment and the document-store collection;
    ``table`` is the relational table. They only differ when the table name
    is not a good URL.
    """

    name: str
    table: str
    model: type
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    allowed_filters: tuple[str, ...]
    search_columns: tuple[str, ...]
    allowed_sorts: tuple[str, ...]
    delete_schema: type[BaseModel] = RecordDelete
    order_by: str = settings.DEFAULT_ORDER_BY
    tag: str = ""

    def describe(self) -> dict[str, Any]:
        return {
            "entity": self.name,
            "table": self.table,
            "allowedFilters": list(self.allowed_filters),
            "searchColumns": list(self.search_columns),
            "allowedSorts": list(self.allowed_sorts),
            "create": self.create_schema.model_json_schema(by_alias=True),
            "update": self.update_schema.model_json_schema(by_alias=True),
            "delete": self.delete_schema.model_json_schema(by_alias=True),
        }


ENTITIES: tuple[EntityConfig, ...] = (
    EntityConfig(
        name="people",
        table="people",
        model=Person,
        create_schema=PersonCreate,
        update_schema=PersonUpdate,
        allowed_filters=("nameOne", "nameTwo", "slug", "identificationNumber", "useAs"),
        search_columns=("nameOne", "nameTwo", "slug", "identificationNumber"),
        allowed_sorts=("updatedAt", "createdAt", "nameOne", "nameTwo"),
        tag="People",
    ),
    EntityConfig(
        name="products",
        table="products",
        model=Product,
        create_schema=ProductCreate,
        update_schema=ProductUpdate,
        allowed_filters=("brand", "categoryId", "code", "sku", "slug", "color"),
        search_columns=("brand", "code", "description", "sumary", "sku"),
        allowed_sorts=("updatedAt", "createdAt", "price", "rating", "brand"),
        tag="Products",
    ),
    EntityConfig(
        name="template",
        table="template",
        model=Template,
        create_schema=TemplateCreate,
        update_schema=TemplateUpdate,
        allowed_filters=("brand", "categoryId", "sku", "code"),
        search_columns=("brand", "code", "description", "sumary"),
        allowed_sorts=("updatedAt", "createdAt", "brand", "code"),
        tag="Template",
    ),
    EntityConfig(
        name="users",
        table="users",
        model=User,
        create_schema=UserCreate,
        update_schema=UserUpdate,
        allowed_filters=("userName", "email", "role", "status", "peopleId"),
        search_columns=("userName", "email", "location"),
        allowed_sorts=("updatedAt", "createdAt", "userName", "lastLogin"),
        tag="Users",
    ),
    EntityConfig(
        name="blogs",
        table="blogs",
        model=Blog,
        create_schema=BlogCreate,
        update_schema=BlogUpdate,
        allowed_filters=("title", "slug", "userId"),
        search_columns=("title", "sumary", "content"),
        allowed_sorts=("updatedAt", "createdAt", "date", "title"),
        tag="Blogs",
    ),
    EntityConfig(
        name="contacts",
        table="contacts",
        model=Contact,
        create_schema=ContactCreate,
        update_schema=ContactUpdate,
        allowed_filters=("nameOne", "email", "subject", "peopleId"),
        search_columns=("nameOne", "email", "subject", "message"),
        allowed_sorts=("updatedAt", "createdAt", "nameOne"),
        tag="Contacts",
    ),
    EntityConfig(
        name="address",
        table="address",
        model=Address,
        create_schema=AddressCreate,
        update_schema=AddressUpdate,
        allowed_filters=("city", "state", "country", "postalCode", "peopleId"),
        search_columns=("street", "city", "state", "country"),
        allowed_sorts=("updatedAt", "createdAt", "city", "country"),
        tag="Address",
    ),
)

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional

DataSource = Literal["sql", "nosql", "both", "fake"]

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
HOUR_PATTERN = r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


# Fields every entity payload carries, per operation.

class RecordCreate(CamelModel):
    data_source: DataSource
    id: str = Field(pattern=UUID_PATTERN)
    created_at: datetime
    updated_at: datetime
    updated_by: str = Field(pattern=UUID_PATTERN)
    record_status: bool
    use_as: str
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN)


class RecordUpdate(CamelModel):
    data_source: DataSource
    id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)
    updated_at: datetime
    updated_by: str = Field(pattern=UUID_PATTERN)
    record_status: bool
    use_as: Optional[str] = None
    slug: Optional[str] = Field(default=None, pattern=SLUG_PATTERN)


class RecordDelete(CamelModel):
    data_source: DataSource
    id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)
    record_status: Literal[False]
    updated_at: datetime
    updated_by: str = Field(pattern=UUID_PATTERN)


class PersonFields(CamelModel):
    name_one: Optional[str] = None
    name_two: Optional[str] = None
    name_three: Optional[str] = None
    birthdate: Optional[date] = None
    birth_hour: Optional[str] = Field(default=None, pattern=HOUR_PATTERN)
    birth_country: Optional[str] = None
    identification_number: Optional[str] = None
    identification_type: Optional[str] = None
    gender_birth: Optional[Literal["male", "female"]] = None
    gender_current: Optional[Literal["male", "female", "binary"]] = None
    marital_status: Optional[Literal["single", "married", "divorced", "widowed"]] = None
    language: Optional[str] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    blood_type: Optional[Literal["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]] = None


class PersonCreate(RecordCreate, PersonFields):
    name_one: str
    identification_number: str
    identification_type: str


class PersonUpdate(RecordUpdate, PersonFields):
    pass


class ProductFields(CamelModel):
    brand: Optional[str] = None
    category_id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)
    code: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    flavor: Optional[str] = None
    material: Optional[str] = None
    photo_url: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    size: Optional[str] = None
    sku: Optional[str] = None
    stock: Optional[int] = Field(default=None, ge=0)
    sumary: Optional[str] = None
    tags: Optional[List[str]] = None
    units: Optional[int] = Field(default=None, ge=0)
    weight: Optional[float] = None
    height: Optional[float] = None
    length: Optional[float] = None
    width: Optional[float] = None


class ProductCreate(RecordCreate, ProductFields):
    sumary: str
    price: float = Field(ge=0)


class ProductUpdate(RecordUpdate, ProductFields):
    pass


class TemplateFields(CamelModel):
    brand: Optional[str] = None
    category_id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)
    code: Optional[str] = None
    sku: Optional[str] = None
    description: Optional[str] = None
    sumary: Optional[str] = None


class TemplateCreate(RecordCreate, TemplateFields):
    pass


class TemplateUpdate(RecordUpdate, TemplateFields):
    pass


class UserFields(CamelModel):
    user_name: Optional[str] = None
    email: Optional[str] = None
    password_hash: Optional[str] = None
    password_reset_token: Optional[str] = None
    token_verification: Optional[str] = None
    people_id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)
    location: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    last_login: Optional[datetime] = None


class UserCreate(RecordCreate, UserFields):
    user_name: str
    password_hash: str
    role: str
    status: str


class UserUpdate(RecordUpdate, UserFields):
    pass


class BlogFields(CamelModel):
    title: Optional[str] = None
    sumary: Optional[str] = None
    content: Optional[str] = None
    feature_image: Optional[str] = None
    is_published: Optional[bool] = None
    published_at: Optional[datetime] = Field(default=None, alias="date")
    tag_list: Optional[List[str]] = None
    user_id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)


class BlogCreate(RecordCreate, BlogFields):
    title: str
    sumary: str
    content: str
    feature_image: str
    is_published: bool
    published_at: datetime = Field(alias="date")
    user_id: str = Field(pattern=UUID_PATTERN)


class BlogUpdate(RecordUpdate, BlogFields):
    pass


class ContactFields(CamelModel):
    name_one: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    people_id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)


class ContactCreate(RecordCreate, ContactFields):
    name_one: str


class ContactUpdate(RecordUpdate, ContactFields):
    pass


class AddressFields(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    people_id: Optional[str] = Field(default=None, pattern=UUID_PATTERN)


class AddressCreate(RecordCreate, AddressFields):
    street: str
    city: str


class AddressUpdate(RecordUpdate, AddressFields):
    pass

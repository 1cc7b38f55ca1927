"""init
Revision ID: 0001_init
Revises:
Create Date: 2026-10-16
"""

from alembic import op
import sqlalchemy as sa

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

ENTITY_TABLES = ("people", "products", "template", "users", "blogs", "contacts", "address")


def _record_columns():
    return [
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updatedBy", sa.String(length=36), nullable=True),
        sa.Column("recordStatus", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("useAs", sa.String(length=100), nullable=True),
        sa.Column("slug", sa.String(length=200), nullable=True),
    ]


def upgrade():
    op.create_table(
        "people",
        *_record_columns(),
        sa.Column("nameOne", sa.String(length=200), nullable=False),
        sa.Column("nameTwo", sa.String(length=200), nullable=True),
        sa.Column("nameThree", sa.String(length=200), nullable=True),
        sa.Column("birthdate", sa.Date(), nullable=True),
        sa.Column("birthHour", sa.String(length=5), nullable=True),
        sa.Column("birthCountry", sa.String(length=100), nullable=True),
        sa.Column("identificationNumber", sa.String(length=50), nullable=False),
        sa.Column("identificationType", sa.String(length=50), nullable=False),
        sa.Column("genderBirth", sa.String(length=10), nullable=True),
        sa.Column("genderCurrent", sa.String(length=10), nullable=True),
        sa.Column("maritalStatus", sa.String(length=20), nullable=True),
        sa.Column("language", sa.String(length=50), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("bloodType", sa.String(length=3), nullable=True),
    )

    op.create_table(
        "products",
        *_record_columns(),
        sa.Column("brand", sa.String(length=200), nullable=True),
        sa.Column("categoryId", sa.String(length=36), nullable=True),
        sa.Column("code", sa.String(length=100), nullable=True),
        sa.Column("color", sa.String(length=50), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("flavor", sa.String(length=100), nullable=True),
        sa.Column("material", sa.String(length=100), nullable=True),
        sa.Column("photoUrl", sa.String(length=500), nullable=True),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("size", sa.String(length=50), nullable=True),
        sa.Column("sku", sa.String(length=100), nullable=True),
        sa.Column("stock", sa.Integer(), nullable=True),
        sa.Column("sumary", sa.Text(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("units", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("length", sa.Float(), nullable=True),
        sa.Column("width", sa.Float(), nullable=True),
    )

    op.create_table(
        "template",
        *_record_columns(),
        sa.Column("brand", sa.String(length=200), nullable=True),
        sa.Column("categoryId", sa.String(length=36), nullable=True),
        sa.Column("code", sa.String(length=100), nullable=True),
        sa.Column("sku", sa.String(length=100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("sumary", sa.Text(), nullable=True),
    )

    op.create_table(
        "users",
        *_record_columns(),
        sa.Column("userName", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("passwordHash", sa.String(length=255), nullable=False),
        sa.Column("passwordResetToken", sa.String(length=255), nullable=True),
        sa.Column("tokenVerification", sa.String(length=255), nullable=True),
        sa.Column("peopleId", sa.String(length=36), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("role", sa.String(length=30), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("lastLogin", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "blogs",
        *_record_columns(),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("sumary", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("featureImage", sa.String(length=500), nullable=True),
        sa.Column("isPublished", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("tagList", sa.JSON(), nullable=True),
        sa.Column("userId", sa.String(length=36), nullable=True),
    )

    op.create_table(
        "contacts",
        *_record_columns(),
        sa.Column("nameOne", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("subject", sa.String(length=300), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("peopleId", sa.String(length=36), nullable=True),
    )

    op.create_table(
        "address",
        *_record_columns(),
        sa.Column("street", sa.String(length=300), nullable=False),
        sa.Column("city", sa.String(length=100), nullable=False),
        sa.Column("state", sa.String(length=100), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("postalCode", sa.String(length=20), nullable=True),
        sa.Column("peopleId", sa.String(length=36), nullable=True),
    )

    for table in ENTITY_TABLES:
        op.create_index(f"ix_{table}_updatedAt", table, ["updatedAt"])
        op.create_index(f"ix_{table}_recordStatus", table, ["recordStatus"])


def downgrade():
    for table in reversed(ENTITY_TABLES):
        op.drop_table(table)

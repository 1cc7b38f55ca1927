import os
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from sqlalchemy import create_engine, delete
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.errors import InvalidArgument
from app.models.person import Person
from app.services.pagination.relational import RelationalPaginator, build_sql_statements
from app.services.pagination.types import ListQuery, PageRequest, SearchSpec, SortSpec

PEOPLE_FILTERS = ("nameOne", "nameTwo", "slug", "identificationNumber", "useAs")


class SqlStatementBuilderTests(unittest.TestCase):
    def test_unknown_filter_is_rejected_before_sql_is_built(self):
        query = ListQuery(source="people", filters={"passwordHash": "x"}, allowed_filters=PEOPLE_FILTERS)
        with self.assertRaises(InvalidArgument) as ctx:
            build_sql_statements(query)
        self.assertIn("passwordHash", ctx.exception.detail)

    def test_empty_allow_list_rejects_any_filter(self):
        query = ListQuery(source="people", filters={"nameOne": "Maria"})
        with self.assertRaises(InvalidArgument):
            build_sql_statements(query)

    def test_invalid_table_name_is_rejected(self):
        with self.assertRaises(InvalidArgument) as ctx:
            build_sql_statements(ListQuery(source="people; DROP TABLE people"))
        self.assertIn("table", ctx.exception.detail)

    def test_invalid_columns_are_rejected(self):
        with self.assertRaises(InvalidArgument):
            build_sql_statements(ListQuery(source="people", columns="id, nameOne;--"))

    def test_count_and_select_share_where_and_params(self):
        query = ListQuery(
            source="people",
            record_status=True,
            filters={"nameOne": "Maria", "slug": "*lopez*"},
            allowed_filters=PEOPLE_FILTERS,
            search=SearchSpec(q="Ali", columns=("nameOne", "nameTwo")),
        )
        stmts = build_sql_statements(query)

        self.assertEqual(stmts.count_sql, f"SELECT COUNT(*) AS total FROM people WHERE {stmts.where}")
        self.assertTrue(stmts.data_sql.startswith(f"SELECT * FROM people WHERE {stmts.where} ORDER BY"))
        data_params = dict(stmts.data_params)
        data_params.pop("limit")
        data_params.pop("offset")
        self.assertEqual(data_params, stmts.params)

    def test_filters_record_status_and_search(self):
        query = ListQuery(
            source="people",
            record_status=True,
            filters={"nameOne": "Maria", "slug": "*lopez*"},
            allowed_filters=PEOPLE_FILTERS,
            search=SearchSpec(q="Ali", columns=("nameOne", "nameTwo")),
        )
        stmts = build_sql_statements(query)

        self.assertEqual(
            stmts.where,
            "recordStatus = :recordStatus AND LOWER(nameOne) = :f_nameOne AND LOWER(slug) LIKE :f_slug"
            " AND (LOWER(nameOne) LIKE :q_search OR LOWER(nameTwo) LIKE :q_search)",
        )
        self.assertEqual(
            stmts.params,
            {"recordStatus": True, "f_nameOne": "maria", "f_slug": "%lopez%", "q_search": "%ali%"},
        )
        self.assertNotIn("Maria", stmts.data_sql)
        self.assertNotIn("Ali", stmts.data_sql)

    def test_no_predicates_uses_tautology(self):
        stmts = build_sql_statements(ListQuery(source="people"))
        self.assertEqual(stmts.where, "1 = 1")
        self.assertEqual(stmts.params, {})

    def test_limit_and_offset_follow_page(self):
        stmts = build_sql_statements(ListQuery(source="people", page=PageRequest(page=3, page_size=5)))
        self.assertEqual(stmts.data_params["limit"], 5)
        self.assertEqual(stmts.data_params["offset"], 10)
        self.assertTrue(stmts.data_sql.endswith("LIMIT :limit OFFSET :offset"))

    def test_out_of_range_page_is_clamped_before_binding(self):
        stmts = build_sql_statements(ListQuery(source="people", page=PageRequest(page=0, page_size=0)))
        self.assertEqual(stmts.data_params["limit"], 1)
        self.assertEqual(stmts.data_params["offset"], 0)

        stmts = build_sql_statements(ListQuery(source="people", page=PageRequest(page=-3, page_size=5000)))
        self.assertEqual(stmts.data_params["limit"], 100)
        self.assertEqual(stmts.data_params["offset"], 0)

    def test_non_string_filter_keeps_plain_equality(self):
        query = ListQuery(source="people", filters={"useAs": 7}, allowed_filters=PEOPLE_FILTERS)
        stmts = build_sql_statements(query)
        self.assertEqual(stmts.where, "useAs = :f_useAs")
        self.assertEqual(stmts.params, {"f_useAs": 7})

    def test_sort_falls_back_to_order_by_when_not_requested(self):
        stmts = build_sql_statements(ListQuery(source="people", order_by="updatedAt DESC"))
        self.assertEqual(stmts.order_by, "updatedAt DESC")

    def test_allowed_sort_is_used(self):
        query = ListQuery(
            source="people",
            sort=SortSpec(column="nameOne", direction="ASC"),
            allowed_sort_columns=("nameOne", "updatedAt"),
        )
        self.assertEqual(build_sql_statements(query).order_by, "nameOne ASC")

    def test_disallowed_sort_is_rejected(self):
        query = ListQuery(source="people", sort=SortSpec(column="passwordHash"), allowed_sort_columns=("nameOne",))
        with self.assertRaises(InvalidArgument) as ctx:
            build_sql_statements(query)
        self.assertIn("passwordHash", ctx.exception.detail)

    def test_search_without_valid_columns_is_rejected(self):
        query = ListQuery(source="people", search=SearchSpec(q="Ali", columns=("name one",)))
        with self.assertRaises(InvalidArgument):
            build_sql_statements(query)

    def test_quote_callable_wraps_identifiers(self):
        query = ListQuery(
            source="people",
            record_status=False,
            filters={"nameOne": "Maria"},
            allowed_filters=PEOPLE_FILTERS,
        )
        stmts = build_sql_statements(query, quote=lambda name: f'"{name}"')
        self.assertIn('FROM "people"', stmts.count_sql)
        self.assertIn('LOWER("nameOne") = :f_nameOne', stmts.where)
        self.assertEqual(stmts.order_by, '"updatedAt" DESC')


class RelationalPaginatorTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autocommit=False, autoflush=False)
        Person.__table__.create(bind=cls.engine)

    @classmethod
    def tearDownClass(cls):
        Person.__table__.drop(bind=cls.engine)
        cls.engine.dispose()

    def setUp(self):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        with self.SessionLocal() as db:
            db.execute(delete(Person))
            for index in range(25):
                db.add(
                    Person(
                        name_one=f"Person{index:02d}",
                        name_two="Alison" if index % 5 == 0 else "Smith",
                        identification_number=f"ID{index:03d}",
                        identification_type="dni",
                        use_as="supplier" if index == 7 else "client",
                        record_status=index < 24,
                        updated_at=base + timedelta(hours=index),
                    )
                )
            db.commit()

    def test_first_page_of_active_rows(self):
        with self.SessionLocal() as db:
            result = RelationalPaginator(db).paginate(
                ListQuery(source="people", record_status=True, page=PageRequest(page=1, page_size=10))
            )

        envelope = result.to_envelope()
        self.assertEqual(envelope["meta"], {"total": 24, "page": 1, "pageSize": 10, "totalPages": 3})
        self.assertEqual(len(envelope["data"]), 10)
        # updatedAt DESC: newest active row first
        self.assertEqual(envelope["data"][0]["nameOne"], "Person23")

    def test_page_beyond_last_is_empty_but_keeps_total(self):
        with self.SessionLocal() as db:
            result = RelationalPaginator(db).paginate(
                ListQuery(source="people", record_status=True, page=PageRequest(page=9, page_size=10))
            )
        self.assertEqual(result.data, [])
        self.assertEqual(result.meta.total, 24)

    def test_no_record_status_includes_inactive_rows(self):
        with self.SessionLocal() as db:
            result = RelationalPaginator(db).paginate(ListQuery(source="people"))
        self.assertEqual(result.meta.total, 25)

    def test_exact_filter(self):
        with self.SessionLocal() as db:
            result = RelationalPaginator(db).paginate(
                ListQuery(source="people", filters={"useAs": "supplier"}, allowed_filters=PEOPLE_FILTERS)
            )
        self.assertEqual(result.meta.total, 1)
        self.assertEqual(result.data[0]["nameOne"], "Person07")

    def test_wildcard_filter_and_search(self):
        with self.SessionLocal() as db:
            paginator = RelationalPaginator(db)
            wildcard = paginator.paginate(
                ListQuery(source="people", filters={"nameOne": "*Person1*"}, allowed_filters=PEOPLE_FILTERS)
            )
            search = paginator.paginate(
                ListQuery(source="people", search=SearchSpec(q="Ali", columns=("nameOne", "nameTwo")))
            )
        self.assertEqual(wildcard.meta.total, 10)
        self.assertEqual(search.meta.total, 5)

    def test_sort_ascending(self):
        with self.SessionLocal() as db:
            result = RelationalPaginator(db).paginate(
                ListQuery(
                    source="people",
                    sort=SortSpec(column="nameOne", direction="ASC"),
                    allowed_sort_columns=("nameOne",),
                    page=PageRequest(page=1, page_size=3),
                )
            )
        self.assertEqual([row["nameOne"] for row in result.data], ["Person00", "Person01", "Person02"])

    def test_validation_error_never_reaches_the_database(self):
        with self.SessionLocal() as db:
            with patch.object(db, "execute") as execute:
                with self.assertRaises(InvalidArgument):
                    RelationalPaginator(db).paginate(
                        ListQuery(source="people", filters={"passwordHash": "x"}, allowed_filters=PEOPLE_FILTERS)
                    )
            execute.assert_not_called()

    def test_backend_errors_propagate_unchanged(self):
        failure = OperationalError("SELECT", {}, Exception("connection lost"))
        with self.SessionLocal() as db:
            with patch.object(db, "execute", side_effect=failure):
                with self.assertRaises(OperationalError) as ctx:
                    RelationalPaginator(db).paginate(ListQuery(source="people"))
        self.assertIs(ctx.exception, failure)

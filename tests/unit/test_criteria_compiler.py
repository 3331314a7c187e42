"""Unit tests for ListingQuery -> SQL compilation (statements are compiled, never executed)."""
import pytest
from sqlalchemy import select
from sqlalchemy.dialects import postgresql

from tradehub.domain.enums.listing_status import ProductStatus
from tradehub.domain.query.criteria import (
    AnyFieldContains,
    FieldEquals,
    FieldEqualsIgnoreCase,
    NumericRange,
    SortOrder,
)
from tradehub.infrastructure.database.criteria_compiler import (
    CriteriaCompiler,
    RelatedColumn,
    UnsupportedFieldError,
)
from tradehub.infrastructure.database.models import CategoryModel, ProductModel, UserModel

compiler = CriteriaCompiler(
    {
        "id": ProductModel.id,
        "status": ProductModel.status,
        "title": ProductModel.title,
        "country": ProductModel.country,
        "price": ProductModel.price,
        "owner_company": RelatedColumn(ProductModel.owner, UserModel.company),
        "category_name": RelatedColumn(ProductModel.category, CategoryModel.name),
    }
)


def _sql(*criteria, ordering=()) -> str:  # type: ignore[no-untyped-def]
    stmt = (
        select(ProductModel.id)
        .where(*compiler.where(tuple(criteria)))
        .order_by(*compiler.order_by(tuple(ordering)))
    )
    return str(stmt.compile(dialect=postgresql.dialect())).upper()


class TestCriteriaCompiler:
    def test_field_equals(self) -> None:
        sql = _sql(FieldEquals("status", ProductStatus.ACTIVE))
        assert "PRODUCTS.STATUS =" in sql

    def test_case_insensitive_equality_lowers_the_column(self) -> None:
        sql = _sql(FieldEqualsIgnoreCase("country", "India"))
        assert "LOWER(PRODUCTS.COUNTRY) =" in sql

    def test_related_field_compiles_to_exists(self) -> None:
        sql = _sql(FieldEqualsIgnoreCase("category_name", "Textiles"))
        assert "EXISTS" in sql
        assert "LOWER(CATEGORIES.NAME)" in sql

    def test_search_is_an_or_of_escaped_likes(self) -> None:
        sql = _sql(AnyFieldContains(("title", "owner_company"), "50%"))
        assert " OR " in sql
        assert "LIKE" in sql
        assert "ESCAPE" in sql
        assert "USERS.COMPANY" in sql

    def test_price_range_excludes_nulls(self) -> None:
        sql = _sql(NumericRange("price", lower=10, upper=20))
        assert "PRODUCTS.PRICE IS NOT NULL" in sql
        assert "PRODUCTS.PRICE >=" in sql
        assert "PRODUCTS.PRICE <=" in sql

    def test_ordering_puts_nulls_last(self) -> None:
        sql = _sql(ordering=(SortOrder("price", descending=True), SortOrder("id")))
        assert "ORDER BY PRODUCTS.PRICE DESC NULLS LAST, PRODUCTS.ID ASC NULLS LAST" in sql

    def test_unknown_field_is_rejected(self) -> None:
        with pytest.raises(UnsupportedFieldError):
            compiler.where((FieldEquals("hs_code", "1006"),))

    def test_ordering_on_related_field_is_rejected(self) -> None:
        with pytest.raises(UnsupportedFieldError):
            compiler.order_by((SortOrder("owner_company"),))

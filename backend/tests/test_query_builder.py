import itertools
from decimal import Decimal

import pytest

from app.repositories.query_builder import ProductSearchCriteria, build_product_predicate

VALUES = {
    "category_id": 3,
    "min_price": Decimal("10.00"),
    "max_price": Decimal("99.99"),
    "color": "red",
}
ORDER = ["category_id", "min_price", "max_price", "color"]


@pytest.mark.parametrize("present", list(itertools.product([False, True], repeat=4)))
def test_one_clause_per_criterion_in_fixed_order(present):
    kwargs = {name: VALUES[name] for name, on in zip(ORDER, present) if on}
    predicate = build_product_predicate(ProductSearchCriteria(**kwargs))

    expected = [name for name, on in zip(ORDER, present) if on]
    assert len(predicate.clauses) == len(expected)
    assert len(predicate.params) == len(predicate.clauses)
    assert [p.key for p in predicate.params] == expected
    assert [p.value for p in predicate.params] == [VALUES[n] for n in expected]
    for clause, name in zip(predicate.clauses, expected):
        assert f":{name}" in clause


def test_no_criteria_matches_everything():
    predicate = build_product_predicate(ProductSearchCriteria())
    assert predicate.sql == "1=1"
    assert predicate.params == ()


def test_empty_color_is_no_filter():
    assert build_product_predicate(ProductSearchCriteria(color="")) == build_product_predicate(
        ProductSearchCriteria()
    )


def test_rendered_sql_order():
    predicate = build_product_predicate(
        ProductSearchCriteria(color="red", category_id=1, max_price=Decimal("5"))
    )
    assert predicate.sql == "1=1 AND category_id = :category_id AND price <= :max_price AND color = :color"


def test_values_are_bound_not_inlined():
    hostile = "red' OR '1'='1"
    stmt = build_product_predicate(ProductSearchCriteria(color=hostile)).apply(
        "SELECT * FROM products", order_by="product_id"
    )
    sql = str(stmt)
    assert hostile not in sql
    assert sql == "SELECT * FROM products WHERE 1=1 AND color = :color ORDER BY product_id"
    assert stmt.compile().params["color"] == hostile

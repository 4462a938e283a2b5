"""Translation of ``PostQuery`` specifications to SQLAlchemy Core."""

from typing import Any, Callable

from sqlalchemy import ColumnElement, Select, asc, desc, func, select

from bunko.domain.value import Condition, Operator, PostQuery
from bunko.persistence.tables import posts_table

OPERATORS: dict[Operator, Callable[[Any, Any], ColumnElement[bool]]] = {
    Operator.GT: lambda column, value: column > value,
    Operator.GE: lambda column, value: column >= value,
    Operator.LT: lambda column, value: column < value,
    Operator.LE: lambda column, value: column <= value,
    Operator.IN: lambda column, value: column.in_(list(value)),
}


def condition_clause(condition: Condition) -> ColumnElement[bool]:
    column = posts_table.c[condition.field.value]
    value = condition.value
    # Equality against None must compile to IS / IS NOT
    if condition.op == Operator.EQ:
        return column.is_(None) if value is None else column == value
    if condition.op == Operator.NE:
        return column.is_not(None) if value is None else column != value
    return OPERATORS[condition.op](column, value)


def where_clauses(query: PostQuery) -> list[ColumnElement[bool]]:
    return [condition_clause(condition) for condition in query.conditions]


def select_posts(query: PostQuery) -> Select:
    """SELECT for the query's conditions and ordering.

    ``id`` is appended as a final sort key so that limit/offset pages are
    stable when the ordering column has ties or NULLs.
    """
    order = [
        desc(posts_table.c[o.field.value]).nulls_last()
        if o.descending
        else asc(posts_table.c[o.field.value]).nulls_last()
        for o in query.ordering
    ]
    return (
        select(posts_table)
        .where(*where_clauses(query))
        .order_by(*order, posts_table.c.id)
    )


def count_posts(query: PostQuery) -> Select:
    """SELECT COUNT(*) for the query's conditions (ordering is ignored)."""
    return select(func.count()).select_from(posts_table).where(*where_clauses(query))

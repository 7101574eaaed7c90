"""Conditional SQL assembly for searches, partial updates and deletes.

Callers describe what *may* go into a statement (optional filters, optional
assignments, a required identity predicate) and get back SQL text plus the
values to bind, in placeholder order. Values never reach the SQL text.

Templates mark parameter positions with ``?``. The dialect decides how each
marker is rendered: ``?`` for qmark drivers, ``:p_0``, ``:p_1``... for named
binds (SQLAlchemy ``text()``).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

MARKER = "?"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 6
SUPPORTED_JOINERS = {"AND", "OR"}
SUPPORTED_PARAMSTYLES = {"qmark", "named"}

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ConstructionError(ValueError):
    """A statement could not be assembled from the given contributions."""


class EmptyAssignmentSet(ConstructionError):
    def __init__(self, table: str) -> None:
        super().__init__(f"No fields to update on {table}")
        self.table = table


class InvalidPagination(ConstructionError):
    pass


class PlaceholderMismatch(ConstructionError):
    pass


def _param_name(index: int) -> str:
    return f"p_{index}"


def _check_identifier(name: str, kind: str) -> str:
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise ConstructionError(f"Invalid {kind} name: {name!r}")
    return name


@dataclass(frozen=True)
class Dialect:
    paramstyle: str = "qmark"
    # OFFSET ? LIMIT ? (PostgreSQL) vs LIMIT ? OFFSET ? (SQLite, MySQL)
    offset_first: bool = True

    def __post_init__(self) -> None:
        if self.paramstyle not in SUPPORTED_PARAMSTYLES:
            raise ConstructionError(f"Unsupported paramstyle: {self.paramstyle!r}")


DEFAULT_DIALECT = Dialect()


class Statement(NamedTuple):
    sql: str
    values: Tuple[Any, ...]

    def params(self) -> Dict[str, Any]:
        """Bound values keyed by the names used with the named paramstyle."""
        return {_param_name(i): value for i, value in enumerate(self.values)}


class Predicate(NamedTuple):
    template: str
    values: Tuple[Any, ...] = ()


def predicate(template: str, *values: Any) -> Predicate:
    return Predicate(template, tuple(values))


@dataclass(frozen=True)
class Pagination:
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        for name in ("page", "limit"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidPagination(f"{name} must be a positive integer (got {value!r})")

    @classmethod
    def from_query(cls, page: Optional[int] = None, limit: Optional[int] = None) -> "Pagination":
        return cls(
            page=DEFAULT_PAGE if page is None else page,
            limit=DEFAULT_LIMIT if limit is None else limit,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class _OptionalPairs:
    """Ordered (key, value) contributions where a ``None`` value means absent."""

    def __init__(self, items: Iterable[Tuple[str, Any]] = ()) -> None:
        self._items: List[Tuple[str, Any]] = []
        for key, value in items:
            self.add(key, value)

    def add(self, key: str, value: Any):
        self._items.append((key, value))
        return self

    def present(self) -> List[Tuple[str, Any]]:
        return [(key, value) for key, value in self._items if value is not None]

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(self.present())

    def __len__(self) -> int:
        return len(self.present())

    def __bool__(self) -> bool:
        return any(value is not None for _, value in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class FilterSet(_OptionalPairs):
    """Optional predicates for a search; each template holds exactly one ``?``."""


class AssignmentSet(_OptionalPairs):
    """Optional ``column = value`` assignments for a partial update."""

    def add(self, key: str, value: Any):
        return super().add(_check_identifier(key, "column"), value)


class _Binder:
    """Per-statement placeholder renderer; collects values in emission order."""

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect
        self.values: List[Any] = []

    def bind(self, value: Any) -> str:
        index = len(self.values)
        self.values.append(value)
        if self.dialect.paramstyle == "named":
            return f":{_param_name(index)}"
        return MARKER

    def render(self, template: str, values: Sequence[Any]) -> str:
        pieces = template.split(MARKER)
        if len(pieces) - 1 != len(values):
            raise PlaceholderMismatch(
                f"{template!r} has {len(pieces) - 1} placeholder(s) for {len(values)} value(s)"
            )
        rendered = [pieces[0]]
        for value, piece in zip(values, pieces[1:]):
            rendered.append(self.bind(value))
            rendered.append(piece)
        return "".join(rendered)

    def statement(self, parts: Iterable[str]) -> Statement:
        return Statement("".join(parts), tuple(self.values))


def join_clause(keyword: str, separator: str, fragments: Iterable[str]) -> str:
    """Emit ``keyword`` before the first fragment and ``separator`` before the rest.

    Returns an empty string when there are no fragments.
    """
    parts: List[str] = []
    started = False
    for fragment in fragments:
        if started:
            parts.append(separator)
        else:
            parts.append(keyword)
            started = True
        parts.append(fragment)
    return "".join(parts)


def _normalize_joiner(joiner: str) -> str:
    normalized = (joiner or "").strip().upper()
    if normalized not in SUPPORTED_JOINERS:
        raise ConstructionError(f"Unsupported filter joiner: {joiner!r}")
    return normalized


def _identity_clause(binder: _Binder, identity: Predicate) -> str:
    template, values = identity
    if not template or not template.strip():
        raise ConstructionError("Identity predicate is required")
    return " WHERE " + binder.render(template, values)


def _pagination_clause(binder: _Binder, pagination: Pagination) -> str:
    if binder.dialect.offset_first:
        offset = binder.bind(pagination.offset)
        limit = binder.bind(pagination.limit)
        return f" OFFSET {offset} LIMIT {limit}"
    limit = binder.bind(pagination.limit)
    offset = binder.bind(pagination.offset)
    return f" LIMIT {limit} OFFSET {offset}"


def build_select(
    base_query: str,
    filters: FilterSet,
    pagination: Pagination,
    *,
    joiner: str = "AND",
    scope: Optional[Predicate] = None,
    order_by: Optional[str] = None,
    dialect: Dialect = DEFAULT_DIALECT,
) -> Statement:
    """Assemble a paginated SELECT from ``base_query`` and the present filters.

    ``scope`` is an always-present predicate (e.g. ``role = ?``); when given,
    the optional filters are AND-ed onto it as a parenthesized group. Filters
    are joined with ``joiner`` (``AND`` or ``OR``).
    """
    joiner = _normalize_joiner(joiner)
    binder = _Binder(dialect)
    parts = [base_query.rstrip()]

    if scope is not None:
        parts.append(_identity_clause(binder, scope))

    fragments = [binder.render(template, (value,)) for template, value in filters.present()]
    keyword = " AND (" if scope is not None else " WHERE ("
    clause = join_clause(keyword, f" {joiner} ", fragments)
    if clause:
        parts.append(clause + ")")

    if order_by:
        parts.append(f" ORDER BY {order_by}")

    parts.append(_pagination_clause(binder, pagination))
    return binder.statement(parts)


def build_update(
    table: str,
    assignments: AssignmentSet,
    identity: Predicate,
    *,
    dialect: Dialect = DEFAULT_DIALECT,
) -> Statement:
    """Assemble ``UPDATE table SET ... WHERE identity`` from the present assignments.

    Raises EmptyAssignmentSet when nothing is present; callers are expected
    to reject such requests before getting here.
    """
    _check_identifier(table, "table")
    present = assignments.present()
    if not present:
        raise EmptyAssignmentSet(table)

    binder = _Binder(dialect)
    fragments = [f"{column} = {binder.bind(value)}" for column, value in present]
    parts = [
        f"UPDATE {table}",
        join_clause(" SET ", ", ", fragments),
        _identity_clause(binder, identity),
    ]
    return binder.statement(parts)


def build_delete(
    table: str,
    identity: Predicate,
    *,
    dialect: Dialect = DEFAULT_DIALECT,
) -> Statement:
    _check_identifier(table, "table")
    binder = _Binder(dialect)
    return binder.statement([f"DELETE FROM {table}", _identity_clause(binder, identity)])

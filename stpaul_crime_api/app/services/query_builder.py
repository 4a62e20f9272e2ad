"""
Construction of filtered ``SELECT`` statements.

Each read resource declares the query‑string filters it understands
as a tuple of :class:`FilterSpec` entries.  ``build_query`` walks that
declaration, turns every present filter into a predicate with ``?``
placeholders and returns the final SQL text together with the ordered
parameter list.  Column names only ever come from the declarations;
values supplied by the caller are always bound, never interpolated.

Keys that are not declared for a resource are ignored.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple


MAX_SQL_INTEGER = 2**63 - 1


class FilterKind(str, enum.Enum):
    """Value type of a declared filter."""

    ID_LIST = "id_list"
    DATE_FROM = "date_from"
    DATE_TO = "date_to"


@dataclass(frozen=True)
class FilterSpec:
    """A recognised filter: query‑string name, target column and kind."""

    name: str
    column: str
    kind: FilterKind

    def predicate(self, raw: Optional[str]) -> Tuple[Optional[str], List[str]]:
        """Return ``(sql, params)`` for ``raw`` or ``(None, [])`` when absent."""
        if raw is None:
            return None, []
        if self.kind is FilterKind.ID_LIST:
            values = split_list(raw)
            if not values:
                return None, []
            placeholders = ", ".join("?" for _ in values)
            return f"{self.column} IN ({placeholders})", values
        value = raw.strip()
        if not value:
            return None, []
        operator = ">=" if self.kind is FilterKind.DATE_FROM else "<="
        return f"date({self.column}) {operator} ?", [value]


CODE_FILTERS: Tuple[FilterSpec, ...] = (
    FilterSpec("code", "code", FilterKind.ID_LIST),
)

NEIGHBORHOOD_FILTERS: Tuple[FilterSpec, ...] = (
    FilterSpec("id", "neighborhood_number", FilterKind.ID_LIST),
)

INCIDENT_FILTERS: Tuple[FilterSpec, ...] = (
    FilterSpec("start_date", "date_time", FilterKind.DATE_FROM),
    FilterSpec("end_date", "date_time", FilterKind.DATE_TO),
    FilterSpec("code", "code", FilterKind.ID_LIST),
    FilterSpec("grid", "police_grid", FilterKind.ID_LIST),
    FilterSpec("neighborhood", "neighborhood_number", FilterKind.ID_LIST),
)


def split_list(raw: str) -> List[str]:
    """Split a comma list, trimming each element and dropping empty ones."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def parse_limit(raw: Optional[str], default: int) -> int:
    """Parse a row cap, falling back to ``default`` on anything unusable.

    Negative numbers and values beyond SQLite's signed 64-bit integer
    range are treated as unusable; ``0`` is a valid cap.
    """
    if raw is None:
        return default
    try:
        limit = int(str(raw).strip())
    except ValueError:
        return default
    return limit if 0 <= limit <= MAX_SQL_INTEGER else default


def build_where(
    filters: Sequence[FilterSpec], values: Mapping[str, Optional[str]]
) -> Tuple[str, List[str]]:
    """Build a ``WHERE`` fragment (possibly empty) and its parameters.

    Present filters are combined with ``AND`` in declaration order.
    """
    clauses: List[str] = []
    params: List[str] = []
    for spec in filters:
        clause, args = spec.predicate(values.get(spec.name))
        if clause is None:
            continue
        clauses.append(clause)
        params.extend(args)
    if not clauses:
        return "", params
    return " WHERE " + " AND ".join(clauses), params


def build_query(
    base: str,
    filters: Sequence[FilterSpec],
    values: Mapping[str, Optional[str]],
    order_by: str,
    limit: Optional[int] = None,
) -> Tuple[str, list]:
    """Compose ``base`` with filters, a fixed ordering and an optional cap."""
    where, params = build_where(filters, values)
    query = f"{base.strip()}{where} ORDER BY {order_by}"
    bound: list = list(params)
    if limit is not None:
        query += " LIMIT ?"
        bound.append(limit)
    return query, bound

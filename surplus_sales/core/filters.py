"""
Composition of optional list filters into a parameterized WHERE clause.

Each repository declares which filter names it accepts and how each one
matches (see the rule constructors below). Column names only ever come from
those declarations; request values are always bound as parameters.

    query = build_filter_query(
        {"make": "Toyota", "status": "Available"},
        {"make": exact("make"), "status": exact("status")},
    )
    query.where  # "LOWER(make) = LOWER(:p0) AND LOWER(status) = LOWER(:p1)"
    query.args   # ["Toyota", "Available"]
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from sqlalchemy import text

EXACT = "exact"
EQUALS = "equals"
SEARCH = "search"
GTE = "gte"
LTE = "lte"

LIKE_ESCAPE = "!"

# Longest numeric term still treated as an id (fits a signed 64-bit integer)
MAX_ID_DIGITS = 18


@dataclass(frozen=True)
class FilterRule:
    kind: str
    columns: tuple
    id_column: str | None = None


def is_id_term(term: str) -> bool:
    return term.isascii() and term.isdigit() and len(term) <= MAX_ID_DIGITS


def escape_like(term: str) -> str:
    """Make LIKE wildcards in a search term match literally."""
    for char in (LIKE_ESCAPE, "%", "_"):
        term = term.replace(char, LIKE_ESCAPE + char)
    return term


def exact(column: str) -> FilterRule:
    """Case-insensitive equality."""
    return FilterRule(EXACT, (column,))


def equals(column: str) -> FilterRule:
    """Plain equality, for identifiers."""
    return FilterRule(EQUALS, (column,))


def search(*columns: str, id_column: str | None = None) -> FilterRule:
    """Case-insensitive substring match over one or more columns.

    With ``id_column`` set, a purely numeric term matches that column
    exactly instead.
    """
    return FilterRule(SEARCH, tuple(columns), id_column)


def contains(column: str) -> FilterRule:
    return FilterRule(SEARCH, (column,))


def gte(column: str) -> FilterRule:
    return FilterRule(GTE, (column,))


def lte(column: str) -> FilterRule:
    return FilterRule(LTE, (column,))


@dataclass
class FilterQuery:
    conditions: list = field(default_factory=list)
    args: list = field(default_factory=list)

    @property
    def where(self) -> str:
        return " AND ".join(self.conditions)

    @property
    def params(self) -> dict:
        return {f"p{index}": value for index, value in enumerate(self.args)}

    def bind(self, value: Any) -> str:
        placeholder = f":p{len(self.args)}"
        self.args.append(value)
        return placeholder

    def add(self, rule: FilterRule, value: Any) -> None:
        if rule.kind == EXACT:
            column = rule.columns[0]
            self.conditions.append(f"LOWER({column}) = LOWER({self.bind(value)})")
        elif rule.kind == EQUALS:
            self.conditions.append(f"{rule.columns[0]} = {self.bind(value)}")
        elif rule.kind == SEARCH:
            term = str(value)
            if rule.id_column and is_id_term(term):
                self.conditions.append(f"{rule.id_column} = {self.bind(int(term))}")
                return
            placeholder = self.bind(f"%{escape_like(term)}%")
            matches = [
                f"LOWER({column}) LIKE LOWER({placeholder}) ESCAPE '{LIKE_ESCAPE}'"
                for column in rule.columns
            ]
            if len(matches) == 1:
                self.conditions.append(matches[0])
            else:
                self.conditions.append("(" + " OR ".join(matches) + ")")
        elif rule.kind == GTE:
            self.conditions.append(f"{rule.columns[0]} >= {self.bind(value)}")
        elif rule.kind == LTE:
            self.conditions.append(f"{rule.columns[0]} <= {self.bind(value)}")
        else:
            raise ValueError(f"Unknown filter rule: {rule.kind}")

    def apply(self, query):
        """Narrow an ORM query by the composed clause."""
        if not self.conditions:
            return query
        return query.filter(text(self.where)).params(**self.params)


def build_filter_query(
    filters: Mapping[str, Any],
    fields: Mapping[str, FilterRule],
) -> FilterQuery:
    query = FilterQuery()

    for name, value in filters.items():
        if name not in fields:
            raise ValueError(f"Unsupported filter: {name}")

        # Absent filters are left out entirely
        if value is None or (isinstance(value, str) and not value.strip()):
            continue

        query.add(fields[name], value)

    return query

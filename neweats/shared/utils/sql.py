"""
SQL Helpers

Builds the SET clause of a partial UPDATE from a sparse payload.

    sql_for_partial_update(
        {"firstName": "Aliya", "email": "a@b.com"},
        {"firstName": "first_name", "lastName": "last_name"},
    )
    # → PartialUpdate(
    #       set_clauses=['"first_name" = $1', '"email" = $2'],
    #       values=["Aliya", "a@b.com"],
    #   )

Placeholders are asyncpg-style positional markers numbered from 1 in the
order the payload was supplied. Keys missing from the column map are used
verbatim as the column name. The caller appends its own WHERE parameters
starting at PartialUpdate.next_placeholder.
"""

from typing import Any, Mapping, NamedTuple, Optional

from neweats.shared.core.exceptions import EmptyInputError


class PartialUpdate(NamedTuple):
    """SET fragments and their bound values, in matching order."""

    set_clauses: list[str]
    values: list[Any]

    @property
    def set_cols(self) -> str:
        """Fragments joined for direct use after SET."""
        return ", ".join(self.set_clauses)

    @property
    def next_placeholder(self) -> str:
        """First placeholder free for the caller's WHERE clause."""
        return f"${len(self.values) + 1}"


def quote_identifier(name: str) -> str:
    """Double-quote a column name, escaping embedded quotes."""
    return '"' + name.replace('"', '""') + '"'


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_map: Mapping[str, str],
) -> PartialUpdate:
    """
    Build a parameterized SET clause for the supplied fields only.

    Args:
        data: Field name → new value, containing only fields to change
        column_map: Field name → column name for fields whose column differs

    Returns:
        PartialUpdate with one fragment and one value per field

    Raises:
        EmptyInputError: If data is empty
    """
    keys = list(data.keys())
    if not keys:
        raise EmptyInputError()

    set_clauses = [
        f"{quote_identifier(column_map.get(key, key))} = ${idx}"
        for idx, key in enumerate(keys, start=1)
    ]
    return PartialUpdate(set_clauses=set_clauses, values=[data[key] for key in keys])


# PostgreSQL error codes inspected when a write is rejected
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def sqlstate(error: Exception) -> Optional[str]:
    """SQLSTATE of a DBAPI error wrapped by SQLAlchemy, if the driver exposes one."""
    return getattr(getattr(error, "orig", None), "sqlstate", None)

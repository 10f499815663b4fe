import pytest

from neweats.shared.core.exceptions import EmptyInputError
from neweats.shared.repositories.user_repository import USER_COLUMN_MAP
from neweats.shared.utils.sql import quote_identifier, sql_for_partial_update


def test_fragments_follow_input_order_and_column_map():
    update = sql_for_partial_update(
        {"firstName": "Aliya", "email": "a@b.com"},
        USER_COLUMN_MAP,
    )

    assert update.set_clauses == ['"first_name" = $1', '"email" = $2']
    assert update.values == ["Aliya", "a@b.com"]
    assert update.set_cols == '"first_name" = $1, "email" = $2'
    assert update.next_placeholder == "$3"


def test_unmapped_key_is_used_as_column_name():
    update = sql_for_partial_update({"password": "digest"}, USER_COLUMN_MAP)

    assert update.set_clauses == ['"password" = $1']
    assert update.next_placeholder == "$2"


def test_all_user_fields():
    update = sql_for_partial_update(
        {"lastName": "L", "password": "p", "firstName": "F", "email": "e@x.com"},
        USER_COLUMN_MAP,
    )

    assert update.set_clauses == [
        '"last_name" = $1',
        '"password" = $2',
        '"first_name" = $3',
        '"email" = $4',
    ]
    assert update.values == ["L", "p", "F", "e@x.com"]


def test_empty_payload_is_rejected():
    with pytest.raises(EmptyInputError) as exc_info:
        sql_for_partial_update({}, USER_COLUMN_MAP)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "No data"


def test_quote_identifier_escapes_quotes():
    assert quote_identifier("first_name") == '"first_name"'
    assert quote_identifier('we"ird') == '"we""ird"'

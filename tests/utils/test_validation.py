from typing import Annotated

import pytest
from pydantic import BaseModel, ValidationError

from compete_api.utils.validation import (
    boolean,
    collect_field_errors,
    humanize,
    is_boolean,
    is_numeric,
    min_length,
    numeric,
    one_of,
    text,
)


class TeamForm(BaseModel):
    team_name: Annotated[str, text("Team name is required")]
    leader_id: Annotated[int, numeric("Leader ID must be a number")]
    password: Annotated[str, min_length(6, "Password too short")] = "secret"
    role: Annotated[str, one_of(("captain", "member"), "Bad role")] = "member"
    active: Annotated[bool, boolean("Active must be a boolean")] = True


@pytest.mark.parametrize("value, expected", [(7, 7), ("42", 42), (3.0, 3), (" 5 ", 5)])
def test_is_numeric_accepts(value, expected):
    assert is_numeric(value) == expected


@pytest.mark.parametrize("value", ["4a", "", 2.5, True, None, "-1"])
def test_is_numeric_rejects(value):
    with pytest.raises((TypeError, ValueError)):
        is_numeric(value)


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), (0, False), ("true", True), ("FALSE", False), ("1", True)],
)
def test_is_boolean(value, expected):
    assert is_boolean(value) is expected


def test_is_boolean_rejects_other_values():
    with pytest.raises(ValueError):
        is_boolean("yes")


def test_every_failure_is_reported():
    with pytest.raises(ValidationError) as info:
        TeamForm(team_name="  ", leader_id="x", password="abc", role="coach", active="maybe")

    assert collect_field_errors(info.value.errors()) == [
        {"field": "team_name", "message": "Team name is required"},
        {"field": "leader_id", "message": "Leader ID must be a number"},
        {"field": "password", "message": "Password too short"},
        {"field": "role", "message": "Bad role"},
        {"field": "active", "message": "Active must be a boolean"},
    ]


def test_missing_fields_get_generated_message():
    with pytest.raises(ValidationError) as info:
        TeamForm()

    assert collect_field_errors(info.value.errors()) == [
        {"field": "team_name", "message": "Team name is required"},
        {"field": "leader_id", "message": "Leader id is required"},
    ]


def test_valid_form_is_coerced():
    form = TeamForm(team_name="Segfaults", leader_id="12", active="0")
    assert form.leader_id == 12
    assert form.active is False


def test_humanize():
    assert humanize("type_of_institution") == "Type of institution"


def test_malformed_body_is_reported_on_body():
    errors = [
        {"type": "json_invalid", "loc": ("body", 14), "msg": "JSON decode error"},
        {"type": "int_parsing", "loc": ("body", "items", 2), "msg": "Bad item"},
    ]
    assert collect_field_errors(errors) == [
        {"field": "body", "message": "JSON decode error"},
        {"field": "body", "message": "Bad item"},
    ]

# tests/test_forms.py
import pytest

from ticket_portal.ticket.forms import initial_form_values, validate_ticket_form


def form(**overrides):
    values = {"title": "Printer", "description": "It prints nothing at all", "priority": "Medium"}
    values.update(overrides)
    return values


def test_initial_values_default_priority_to_medium():
    assert initial_form_values() == {"title": "", "description": "", "priority": "Medium"}


def test_valid_form_has_no_invalid_fields():
    assert validate_ticket_form(form()) == set()


@pytest.mark.parametrize("title, ok", [("", False), ("a", False), ("ab", False), ("abc", True), ("abcd", True)])
def test_title_min_length_boundary(title, ok):
    assert ("title" not in validate_ticket_form(form(title=title))) is ok


@pytest.mark.parametrize("length, ok", [(0, False), (1, False), (9, False), (10, True), (40, True)])
def test_description_min_length_boundary(length, ok):
    assert ("description" not in validate_ticket_form(form(description="x" * length))) is ok


def test_blank_values_are_missing():
    assert validate_ticket_form(form(title="   ", description=" " * 12)) == {"title", "description"}


def test_missing_fields_are_reported():
    assert validate_ticket_form({}) == {"title", "description", "priority"}


@pytest.mark.parametrize("priority", ["Low", "Medium", "High", "Critical"])
def test_known_priorities_accepted(priority):
    assert validate_ticket_form(form(priority=priority)) == set()


def test_unknown_priority_rejected():
    assert validate_ticket_form(form(priority="Urgent")) == {"priority"}

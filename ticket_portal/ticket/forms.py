# ticket_portal/ticket/forms.py
from collections.abc import Mapping

from ticket_portal.ticket.schemas import (
    DESCRIPTION_MIN_LENGTH,
    TITLE_MIN_LENGTH,
    Priority,
)

PRIORITIES = [p.value for p in Priority]

# field name -> minimum length
MIN_LENGTHS = {
    "title": TITLE_MIN_LENGTH,
    "description": DESCRIPTION_MIN_LENGTH,
}


def initial_form_values() -> dict[str, str]:
    return {"title": "", "description": "", "priority": Priority.MEDIUM.value}


def validate_ticket_form(values: Mapping[str, str]) -> set[str]:
    # blank after trimming counts as missing; min length uses the raw value
    invalid: set[str] = set()
    for field, min_length in MIN_LENGTHS.items():
        value = values.get(field) or ""
        if not value.strip() or len(value) < min_length:
            invalid.add(field)
    if values.get("priority") not in PRIORITIES:
        invalid.add("priority")
    return invalid

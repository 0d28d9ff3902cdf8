from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from app.exceptions import GameValidationError
from app.models import GameFields

FIELD_ORDER = list(GameFields.model_fields)


def _format_error(error: Dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error["loc"]) or "game"
    return f"{field}: {error['msg']}"


def _check(candidate: Dict[str, Any]) -> Tuple[Optional[GameFields], List[str]]:
    # Absent form fields arrive as None; drop them so they report as missing
    present = {k: v for k, v in candidate.items() if v is not None}
    try:
        return GameFields.model_validate(present), []
    except ValidationError as e:
        errors = sorted(
            e.errors(),
            key=lambda err: FIELD_ORDER.index(err["loc"][0])
            if err["loc"] and err["loc"][0] in FIELD_ORDER
            else len(FIELD_ORDER),
        )
        return None, [_format_error(err) for err in errors]


def validate_game(candidate: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """
    Check every field of a candidate game and collect all violations.

    `price` may be given as text; anything that does not parse as a
    non-negative number is reported as a violation.
    """
    _, errors = _check(candidate)
    return not errors, errors


def parse_game(candidate: Dict[str, Any]) -> GameFields:
    """Validate a candidate and return the typed fields, or raise GameValidationError."""
    fields, errors = _check(candidate)
    if errors:
        raise GameValidationError(errors)
    return fields

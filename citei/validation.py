"""Colecao input validation.

Pure functions: each takes the candidate field values and returns the list
of violations (empty when the input is acceptable). ``ensure_valid`` turns a
non-empty list into a ColecaoValidationError, which the HTTP layer renders
as 422.

Rules:
    - Any present field longer than MAX_FIELD_LENGTH characters is rejected.
    - On create, titulo, autor and imagem are required. A payload carrying
      only titulo is a quick create and needs nothing else.
    - None and blank strings count as absent. A blank autor or imagem
      still makes the payload a full create.
"""
from dataclasses import dataclass, asdict
from typing import Mapping, Optional

from .config import MAX_FIELD_LENGTH
from .infrastructure.repositories import COLECAO_FIELDS

REQUIRED_ON_CREATE = ("titulo", "autor", "imagem")
FILTER_FIELDS = ("titulo",)

INVALID_DATA_MESSAGE = "Dados inválidos"


@dataclass(frozen=True)
class Violation:
    """A field failing a validation rule."""
    field: Optional[str]
    rule: str
    message: str
    location: str = "body"

    def to_dict(self) -> dict:
        return asdict(self)


class ColecaoValidationError(Exception):
    """Request rejected by validation. Maps to HTTP 422."""

    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        fields = ", ".join(str(v.field) for v in self.violations)
        super().__init__(f"{INVALID_DATA_MESSAGE}: {fields}")

    def to_response(self) -> dict:
        return {
            "message": INVALID_DATA_MESSAGE,
            "errors": [v.to_dict() for v in self.violations],
        }


def _is_present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def _required(field: str, location: str) -> Violation:
    return Violation(field, "required", f"O campo {field} é obrigatório", location)


def max_length_violation(field: str, location: str) -> Violation:
    return Violation(
        field,
        "max_length",
        f"O campo {field} deve ter no máximo {MAX_FIELD_LENGTH} caracteres",
        location,
    )


def _too_long(field: str, value, location: str) -> Optional[Violation]:
    if isinstance(value, str) and len(value) > MAX_FIELD_LENGTH:
        return max_length_violation(field, location)
    return None


def _length_violations(data: Mapping, fields, location: str) -> list[Violation]:
    violations = []
    for field in fields:
        violation = _too_long(field, data.get(field), location)
        if violation:
            violations.append(violation)
    return violations


def validate_filter(params: Mapping) -> list[Violation]:
    """Validate list query parameters."""
    return _length_violations(params, FILTER_FIELDS, "query")


def validate_create(data: Mapping) -> list[Violation]:
    """Validate a create payload."""
    sent = {f for f in COLECAO_FIELDS if data.get(f) is not None}
    present = {f for f in sent if _is_present(data.get(f))}
    # Quick create: titulo is the only key sent, blank or not
    required = ("titulo",) if sent == {"titulo"} else REQUIRED_ON_CREATE

    violations = []
    for field in COLECAO_FIELDS:
        if field in required and field not in present:
            violations.append(_required(field, "body"))
            continue
        violation = _too_long(field, data.get(field), "body")
        if violation:
            violations.append(violation)
    return violations


def validate_update(data: Mapping) -> list[Violation]:
    """Validate an update payload. Every field is optional."""
    return _length_violations(data, COLECAO_FIELDS, "body")


def ensure_valid(violations: list[Violation]) -> None:
    """Raise ColecaoValidationError if there is any violation."""
    if violations:
        raise ColecaoValidationError(violations)

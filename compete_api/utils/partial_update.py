"""Sparse PATCH payloads turned into a single parameterized UPDATE."""
from typing import Any, Iterable, Mapping

from sqlalchemy import Update, update
from sqlalchemy.orm import InstrumentedAttribute

from compete_api.exceptions import UnknownFieldError


class PartialUpdate:
    def __init__(self, assignments: list[str], values: list[Any]) -> None:
        # ``values`` lines up with ``assignments`` and ends with the entity key
        self.assignments = assignments
        self.values = values

    @property
    def fields(self) -> list[str]:
        return [assignment.split(" = ", 1)[0] for assignment in self.assignments]

    @property
    def key(self) -> Any:
        return self.values[-1]

    @property
    def changes(self) -> dict[str, Any]:
        return dict(zip(self.fields, self.values[:-1]))

    def statement(self, model: type, key_column: InstrumentedAttribute) -> Update:
        return update(model).where(key_column == self.key).values(**self.changes)

    def __repr__(self) -> str:
        return f"PartialUpdate(assignments={self.assignments!r}, values={self.values!r})"


def build_partial_update(
    allowed_fields: Iterable[str],
    payload: Mapping[str, Any],
    key: Any,
    flags: Iterable[str] = (),
) -> PartialUpdate | None:
    """Return the assignments for ``payload`` or ``None`` when there is nothing to set.

    Raises :class:`UnknownFieldError` naming every key outside ``allowed_fields``;
    nothing is applied in that case. A field counts as supplied when its key is
    present, so ``""`` and ``0`` are written like any other value. ``flags`` are
    stored as 0/1.
    """
    allowed = set(allowed_fields)
    unknown = [field for field in payload if field not in allowed]
    if unknown:
        raise UnknownFieldError(unknown)

    flags = set(flags)
    assignments: list[str] = []
    values: list[Any] = []
    for field, value in payload.items():
        if field in flags:
            value = 1 if value else 0
        assignments.append(f"{field} = ?")
        values.append(value)

    if not assignments:
        return None
    values.append(key)
    return PartialUpdate(assignments, values)

"""Declarative request validation.

A ``Validator`` subclass lists ``FieldRule`` entries; ``validate()``
runs every rule of every field and returns the collected messages keyed
by property name (``Name``, ``StockQuantity``...).  Validators never
raise: controllers inspect the result and raise
``RequestValidationFailed`` themselves.

Individual checks are Django validators (``MaxLengthValidator``,
``MinValueValidator``, ``URLValidator``...), so any callable raising
``django.core.exceptions.ValidationError`` can be used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from django.core.exceptions import ValidationError as DjangoValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.core.exceptions import RequestValidationFailed

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

ValidationErrors = Dict[str, List[str]]


def _is_present(value: Any) -> bool:
    return value is not None


def when_not_empty(value: Any) -> bool:
    return bool(value)


@dataclass(frozen=True)
class FieldRule:
    """Rules for one request attribute.

    ``attribute`` is read from the request object, ``field`` is the
    PascalCase key reported to clients.  When ``required_message`` is set,
    a missing or blank value fails with it.  ``None`` values skip ``validators``.
    ``when`` gates ``validators`` on the value (e.g. only non-empty).
    """

    attribute: str
    field: str
    validators: Tuple[Callable[[Any], None], ...] = ()
    required_message: Optional[str] = None
    when: Callable[[Any], bool] = _is_present

    def check(self, value: Any) -> List[str]:
        messages: List[str] = []
        if self.required_message and _is_blank(value):
            messages.append(self.required_message)
        if value is None or not self.when(value):
            return messages
        for validator in self.validators:
            try:
                validator(value)
            except DjangoValidationError as exc:
                messages.extend(exc.messages)
        return messages


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class Validator(Generic[T]):
    """Base class: subclasses declare ``rules``."""

    rules: Tuple[FieldRule, ...] = ()

    def validate(self, request: T) -> ValidationErrors:
        errors: ValidationErrors = {}
        for rule in self.rules:
            messages = rule.check(getattr(request, rule.attribute, None))
            if messages:
                errors.setdefault(rule.field, []).extend(messages)
        return errors


def property_name(field: str) -> str:
    """Error key for a request field: ``stockQuantity`` -> ``StockQuantity``."""
    return field[:1].upper() + field[1:]


def pydantic_errors(exc: PydanticValidationError) -> ValidationErrors:
    """Flatten a Pydantic error into ``{Property: [messages]}``."""
    errors: ValidationErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        key = ".".join(property_name(str(part)) for part in loc) or "body"
        errors.setdefault(key, []).append(error["msg"])
    return errors


def parse_request(model: Type[M], data: Any) -> M:
    """Build a request DTO from raw input.

    Raises:
        RequestValidationFailed: if the payload does not fit the DTO's types.
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise RequestValidationFailed(pydantic_errors(exc)) from exc

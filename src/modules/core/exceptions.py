"""Application error taxonomy.

Raised by controllers and the Service Layer; translated into the JSON
error envelope by ``modules.core.exception_handler`` and nowhere else.
Each class carries the HTTP status it maps to.
"""

from __future__ import annotations

from typing import Dict, List, Optional


class ApplicationError(Exception):
    """Base class for errors with a known client-facing meaning."""

    status_code = 500

    @property
    def message(self) -> str:
        return str(self)

    @property
    def errors(self) -> Optional[Dict[str, List[str]]]:
        return None


class EntityNotFound(ApplicationError):
    """The entity addressed by identifier does not exist."""

    status_code = 404

    def __init__(self, entity_name: str, entity_id: object) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} with ID {entity_id} was not found")


class RequestValidationFailed(ApplicationError):
    """One or more request fields violated their rules.

    ``field_errors`` maps the wire field name to every message
    collected for it.
    """

    status_code = 400
    default_message = "One or more validation errors occurred"

    def __init__(self, field_errors: Dict[str, List[str]]) -> None:
        self.field_errors = {field: list(msgs) for field, msgs in field_errors.items()}
        super().__init__(self.default_message)

    @property
    def errors(self) -> Dict[str, List[str]]:
        return self.field_errors


class InvalidArgument(ApplicationError, ValueError):
    """An argument reaching the Service Layer is malformed."""

    status_code = 400

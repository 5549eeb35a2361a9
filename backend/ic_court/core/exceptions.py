"""
Domain errors raised by the service layer.

Validation failures never reach this module: request shapes are rejected by
pydantic before a service runs. Storage failures that are not classified here
propagate unchanged.
"""


class CourtError(Exception):
    """Base class for errors the API translates into client responses."""

    code = "court_error"


class NotFoundError(CourtError):
    code = "not_found"

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")


class DuplicateError(CourtError):
    code = "conflict"

    def __init__(self, entity: str, field: str | None = None):
        self.entity = entity
        self.field = field
        if field:
            message = f"{entity} with this {field} already exists"
        else:
            message = f"{entity} violates a uniqueness constraint"
        super().__init__(message)


class PermissionDeniedError(CourtError):
    code = "forbidden"

    def __init__(self, role: str, action: str):
        self.role = role
        self.action = action
        super().__init__(f"Role '{role}' is not allowed to {action.replace('_', ' ')}")

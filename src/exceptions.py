# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Service layer errors."""

import uuid


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""


class ForbiddenError(ServiceError):
    """The caller lacks the privilege required for the operation."""

    def __init__(self, privilege: str | None = None) -> None:
        self.privilege = privilege
        message = f"Permission denied: {privilege}" if privilege else "Permission denied"
        super().__init__(message)


class EntityNotFoundError(ServiceError):
    """A referenced entity does not exist or is deleted."""

    def __init__(self, entity_id: uuid.UUID, entity: str = "Entity") -> None:
        self.entity_id = entity_id
        self.entity = entity
        super().__init__(f"{entity} {entity_id} not found")


class CalculationError(ServiceError):
    """A date or week combination could not be resolved."""


class ValidationError(ServiceError):
    """Input rejected by a service before any computation."""


class RepositoryError(ServiceError):
    """Wraps a failure of the persistence layer."""

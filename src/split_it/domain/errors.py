"""Domain exceptions used across API, CLI and services."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a user-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class DomainError(Exception):
    """Base exception for predictable domain failures."""

    code: str
    message: str
    status_code: int
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidInputError(DomainError):
    """Raised when a computation receives input it cannot work with."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_INPUT",
            message=message
            or compose_error_message(
                cause="Balances need at least one participant.",
                action="Add participants before computing the settlement.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class DuplicateNameError(DomainError):
    """Raised when a participant name is already registered."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="DUPLICATE_NAME",
            message=message
            or compose_error_message(
                cause="That participant name already exists.",
                action="Choose a different name.",
            ),
            status_code=HTTPStatus.CONFLICT,
            details=details or {},
        )


class HasDependentExpensesError(DomainError):
    """Raised when removing a participant who paid for recorded expenses."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="HAS_DEPENDENT_EXPENSES",
            message=message
            or compose_error_message(
                cause="The participant already has recorded expenses.",
                action="Delete the participant's expenses before removing them.",
            ),
            status_code=HTTPStatus.CONFLICT,
            details=details or {},
        )


class NoPayerSelectedError(DomainError):
    """Raised when an expense is submitted without a payer."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="NO_PAYER_SELECTED",
            message=message
            or compose_error_message(
                cause="No payer was selected for the expense.",
                action="Add participants first and pick who paid.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class InvalidAmountError(DomainError):
    """Raised when an expense amount is not a positive finite number."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_AMOUNT",
            message=message
            or compose_error_message(
                cause="The amount must be a number greater than zero.",
                action="Enter a valid amount.",
            ),
            status_code=HTTPStatus.BAD_REQUEST,
            details=details or {},
        )


class UnknownParticipantError(DomainError):
    """Raised when an expense references a name outside the participant set."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="UNKNOWN_PARTICIPANT",
            message=message
            or compose_error_message(
                cause="The payer is not a registered participant.",
                action="Register the participant or pick an existing one.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )


class ExpenseNotFoundError(DomainError):
    """Raised when deleting an expense id that is not stored."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="EXPENSE_NOT_FOUND",
            message=message
            or compose_error_message(
                cause="No expense exists with the given id.",
                action="Refresh the expense list and retry.",
            ),
            status_code=HTTPStatus.NOT_FOUND,
            details=details or {},
        )

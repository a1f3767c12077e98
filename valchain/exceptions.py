"""Failure signal raised for invalid validation results."""

from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from valchain.validation.results import ValidationResults


class ValidationException(Exception):
    """Raised by throw_if_invalid() when an aggregate holds violations.

    Attributes:
        results: The whole ValidationResults aggregate
        status_code: Status classifier for the embedding application
    """

    def __init__(
        self,
        results: "ValidationResults",
        status_code: HTTPStatus | int = HTTPStatus.BAD_REQUEST,
    ):
        self.results = results
        self.status_code = HTTPStatus(status_code)
        super().__init__("; ".join(self.messages))

    @property
    def messages(self) -> list[str]:
        """Rendered message of every violation, in order."""
        return [result.message for result in self.results]

    def __repr__(self) -> str:
        return (
            f"ValidationException(status_code={int(self.status_code)}, "
            f"violations={len(self.results)})"
        )

"""Validation service for orchestrating multiple validators.

This module provides a service layer that runs a set of independent
validators against one subject and aggregates their results.
"""

from functools import reduce
from typing import Any

from valchain.utils.logging import get_logger
from valchain.validation.results import ValidationResults
from valchain.validation.validators import Validator

logger = get_logger(__name__)


class ValidationService:
    """Orchestrates multiple validators and aggregates results.

    The service runs all registered validators in order and provides methods
    to check for errors and format reports.
    """

    def __init__(self, validators: list[Validator[Any]]):
        """Initialize service with list of validators.

        Args:
            validators: Validator instances, run in list order
        """
        self.validators = validators

    def validate_all(self, data: Any) -> ValidationResults:
        """Run all validators and join their results.

        Args:
            data: Subject handed to every validator

        Returns:
            One aggregate holding every violation, in validator order
        """
        results = ValidationResults()
        for validator in self.validators:
            results.join(validator.validate(data))

        logger.debug(
            "validate_all_complete",
            validators=len(self.validators),
            violations=len(results),
        )
        return results

    def chain(self) -> Validator[Any]:
        """Fold the registered validators into one and_then() chain.

        Raises:
            ValueError: If no validator is registered
        """
        if not self.validators:
            raise ValueError("Cannot chain an empty validator list")
        return reduce(lambda left, right: left.and_then(right), self.validators)

    def has_errors(self, results: ValidationResults) -> bool:
        """Check if any validator reported a violation."""
        return results.is_invalid()

    def format_error_report(self, results: ValidationResults) -> str:
        """Format violations for display.

        Returns:
            One line per violation, empty string if there is none
        """
        lines = []
        for result in results:
            line = f"- [{result.key}] {result.message}"
            if result.fields:
                line += f" (fields: {', '.join(result.fields)})"
            lines.append(line)
        return "\n".join(lines)

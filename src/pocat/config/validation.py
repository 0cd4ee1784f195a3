"""Option validation utilities."""

from typing import List
import structlog

from ..contracts.errors import ValidationError
from .model import MergeOptions, Order

logger = structlog.get_logger()


def validate_options(options: MergeOptions) -> None:
    """Validate merge options for conflicts and suspicious settings.

    Args:
        options: Options to validate

    Raises:
        ValidationError: If the options are contradictory
    """
    errors: List[str] = []
    warnings: List[str] = []

    _validate_width(options, warnings)
    _validate_header_fields(options, errors)
    _validate_comment_toggles(options, warnings)

    for warning in warnings:
        logger.warning(warning)

    if errors:
        raise ValidationError(
            f"Option validation failed: {'; '.join(errors)}"
        )


def _validate_width(options: MergeOptions, warnings: List[str]) -> None:
    if options.width is not None and not options.wrap:
        warnings.append(
            f"width={options.width} has no effect when wrapping is disabled"
        )
    if options.width is not None and options.width < 10:
        warnings.append(
            f"width={options.width} will split strings into very short lines"
        )


def _validate_header_fields(options: MergeOptions, errors: List[str]) -> None:
    seen = set()
    for name in options.remove_header_fields:
        if name in seen:
            errors.append(f"header field {name!r} listed more than once")
        seen.add(name)


def _validate_comment_toggles(options: MergeOptions, warnings: List[str]) -> None:
    if options.drop_all_comments and options.order is Order.BY_LOCATION:
        warnings.append(
            "sorting by location uses reference comments that are dropped from the output"
        )

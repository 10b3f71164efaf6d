"""Template contract validation."""
import logging
from typing import Any, Sequence

from fix_whitespace.utils.exceptions import TemplateContractError

logger = logging.getLogger(__name__)


def validate_template_parts(segments: Sequence[str], values: Sequence[Any]) -> bool:
    """
    Validate the literal segments and values of a template.

    Args:
        segments: Literal text chunks, in order
        values: Interpolated values, in order

    Returns:
        True if valid

    Raises:
        TemplateContractError: If len(segments) != len(values) + 1 or a segment
            is not a string
    """
    if len(segments) != len(values) + 1:
        logger.error(
            f"Template contract violated: {len(segments)} segments, {len(values)} values"
        )
        raise TemplateContractError(
            f"Expected {len(values) + 1} segments for {len(values)} values, "
            f"got {len(segments)}"
        )

    for index, segment in enumerate(segments):
        if not isinstance(segment, str):
            raise TemplateContractError(
                f"Segment {index} must be a string, got {type(segment).__name__}"
            )

    return True

"""Whitespace normalization for templated multi-line strings.

A template is rendered in three stages:

* join: literal segments and values are merged, and every continuation line of
  a multi-line value is indented to match the line it was inserted on
* dedent: the smallest indentation of the literal text is removed from every
  line, keeping relative nesting intact
* trim: whitespace-only lines at the very start and end are dropped

For example, with items = "<li>A</li>\\n<li>B</li>":

    normalize_template(["\\n    <ul>\\n      ", "\\n    </ul>\\n"], [items])

gives:

    <ul>
      <li>A</li>
      <li>B</li>
    </ul>
"""
import logging
from typing import Any, Optional, Sequence

from fix_whitespace.models.template import Template
from fix_whitespace.services.config_service import is_strict_contract
from fix_whitespace.utils.lines import join_lines, split_lines, squish_lines
from fix_whitespace.utils.validation import validate_template_parts
from fix_whitespace.utils.values import is_falsy, stringify
from fix_whitespace.utils.whitespace import (
    is_only_whitespace,
    min_indentation,
    whitespace_at_beginning,
)

logger = logging.getLogger(__name__)


def join_template(segments: Sequence[str], values: Sequence[Any]) -> str:
    """
    Join literal segments and values while keeping the literals' indentation.

    Args:
        segments: Literal text chunks
        values: Values inserted after each segment but the last

    Returns:
        Joined multi-line string

    Behavior:
        - Falsy values are skipped, so their neighbouring segments merge
        - A value's first line continues the line it was inserted on
        - A value's later lines get the leading spaces of that line prepended
        - Missing values (fewer values than expected) count as falsy
    """
    template = Template(segments=segments, values=values)
    result_lines = []

    for index, segment in enumerate(template.segments):
        segment_lines = split_lines(segment)

        value = template.value_at(index)
        if not is_falsy(value):
            offset = " " * whitespace_at_beginning(segment_lines[-1])
            first, *rest = split_lines(stringify(value))
            segment_lines = squish_lines(
                segment_lines, [first, *(offset + line for line in rest)]
            )

        result_lines = squish_lines(result_lines, segment_lines)

    return join_lines(result_lines)


def dedent(joined: str, raw_literal: str) -> str:
    """
    Remove the literal text's minimum indentation from every joined line.

    Args:
        joined: Output of join_template
        raw_literal: The segments concatenated without values

    Returns:
        Dedented string

    Note:
        The indentation is measured on the literals only but removed from
        every line, including the lines that came from values. Lines shorter
        than the indentation become empty.
    """
    indent = min_indentation(raw_literal)
    logger.debug(f"Removing {indent} leading characters from each line")

    if indent == 0:
        return joined

    return join_lines(line[indent:] for line in split_lines(joined))


def remove_initial_whitespace_lines(text: str) -> str:
    """Remove whitespace-only lines from the beginning of a string."""
    lines = split_lines(text)

    start = 0
    while start < len(lines) and is_only_whitespace(lines[start]):
        start += 1

    return join_lines(lines[start:])


def remove_trailing_whitespace_lines(text: str) -> str:
    """Remove whitespace-only lines from the end of a string."""
    lines = split_lines(text)

    end = len(lines)
    while end > 0 and is_only_whitespace(lines[end - 1]):
        end -= 1

    return join_lines(lines[:end])


def trim_edges(text: str) -> str:
    """Remove whitespace-only lines at the start and end; interior ones are kept."""
    trimmed = remove_trailing_whitespace_lines(remove_initial_whitespace_lines(text))

    kept = len(split_lines(trimmed)) if trimmed else 0
    logger.debug(f"Trimmed {len(split_lines(text)) - kept} blank edge lines")

    return trimmed


def render(template: Template) -> str:
    """
    Run the join, dedent and trim stages on a template.

    Args:
        template: Template to render

    Returns:
        Normalized string
    """
    logger.debug(
        f"Rendering template with {len(template.segments)} segments "
        f"and {len(template.values)} values"
    )

    joined = join_template(template.segments, template.values)
    dedented = dedent(joined, template.literal_text())
    return trim_edges(dedented)


def normalize_template(
    segments: Sequence[str],
    values: Sequence[Any],
    strict: Optional[bool] = None
) -> str:
    """
    Normalize the whitespace of a templated multi-line string.

    Args:
        segments: Literal text chunks, len(segments) == len(values) + 1
        values: Interpolated values
        strict: Enforce the length contract; None reads
            FIX_WHITESPACE_STRICT_CONTRACT (default: enforced)

    Returns:
        Normalized string

    Raises:
        TemplateContractError: If strict and the segments/values don't match
        ValueConversionError: If a truthy value can't be converted to a string
    """
    if strict is None:
        strict = is_strict_contract()

    if strict:
        validate_template_parts(segments, values)

    return render(Template(segments=segments, values=values))


def normalize_text(text: str) -> str:
    """Normalize a plain multi-line string (a template without values)."""
    return render(Template.from_text(text))

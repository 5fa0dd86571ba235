"""Extraction and application of values embedded in ability tokens."""

import logging
import re
from typing import Dict, List, Optional, Tuple, Union

from .types import (
    ANNOTATION_PREFIX,
    ARRAY_SUFFIX,
    AbilitySet,
    ValueAnnotation,
    ValueKind,
    ValueMap,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{([^}]+)\}")


def to_list(value: Optional[Union[str, List[str]]]) -> List[str]:
    """Normalize a single value, a list of values, or None into a list.

    The empty string is a value in its own right and becomes `[""]`.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def is_annotation(ability: str) -> bool:
    return ability.startswith(ANNOTATION_PREFIX)


def parse_annotation(ability: str) -> ValueAnnotation:
    """Parse an annotation token like `?key=value` or `?key[]=value`."""
    body = ability[len(ANNOTATION_PREFIX):]
    key, sep, value = body.partition("=")
    parsed_value = value if sep else None
    if key.endswith(ARRAY_SUFFIX):
        return ValueAnnotation(key[: -len(ARRAY_SUFFIX)], ValueKind.ARRAY, parsed_value)
    return ValueAnnotation(key, ValueKind.SCALAR, parsed_value)


def extract_values(abilities: AbilitySet) -> Tuple[ValueMap, AbilitySet]:
    """Split abilities into a map of embedded values and the remaining abilities.

    Example::

        >>> extract_values(["foo", "bam", "?foo=1", "?x[]=3"])
        ({'foo': '1', 'x': ['3']}, ['foo', 'bam'])

    Scalar keys are last-write-wins; array keys accumulate in encounter order.
    """
    values: ValueMap = {}
    remainder: AbilitySet = []
    for ability in abilities:
        if not is_annotation(ability):
            remainder.append(ability)
            continue

        annotation = parse_annotation(ability)
        if annotation.kind == ValueKind.ARRAY:
            current = values.get(annotation.key)
            if not isinstance(current, list):
                current = []
                values[annotation.key] = current
            if annotation.value is not None:
                current.append(annotation.value)
        else:
            values[annotation.key] = annotation.value if annotation.value is not None else ""
    return values, remainder


def encode_values(values: ValueMap) -> AbilitySet:
    """Render a value map as annotation tokens, the inverse of `extract_values`.

    Raises:
        ValueError: if a key contains `=`, or a scalar key ends in `[]`;
            such keys cannot be read back by `extract_values`
    """
    abilities: AbilitySet = []
    for key, value in values.items():
        if "=" in key:
            raise ValueError(f"Value key '{key}' must not contain '='")
        if isinstance(value, str) and key.endswith(ARRAY_SUFFIX):
            raise ValueError(f"Scalar value key '{key}' must not end in '{ARRAY_SUFFIX}'")
        if isinstance(value, str):
            abilities.append(f"{ANNOTATION_PREFIX}{key}={value}")
        elif not value:
            abilities.append(f"{ANNOTATION_PREFIX}{key}{ARRAY_SUFFIX}")
        else:
            abilities.extend(f"{ANNOTATION_PREFIX}{key}{ARRAY_SUFFIX}={v}" for v in value)
    return abilities


def find_placeholders(ability: str) -> List[str]:
    """Distinct `{name}` placeholder names in first-occurrence order."""
    names: List[str] = []
    for name in PLACEHOLDER_PATTERN.findall(ability):
        if name not in names:
            names.append(name)
    return names


def apply_values(abilities: AbilitySet, values: ValueMap) -> AbilitySet:
    """Substitute values into template abilities.

    Each template expands to the cartesian product of the values bound to its
    placeholders. Templates with a placeholder that has no values are removed.

    Example::

        >>> apply_values(["article:{articleId}:read", "post:{postId}:read"], {"articleId": ["1", "2"]})
        ['article:1:read', 'article:2:read']
    """
    applied: AbilitySet = []
    for ability in abilities:
        names = find_placeholders(ability)
        if not names:
            applied.append(ability)
            continue

        # Bound values are never rescanned for placeholders.
        combos: List[Dict[str, str]] = [{}]
        for name in names:
            combos = [{**combo, name: v} for combo in combos for v in to_list(values.get(name))]
            if not combos:
                logger.debug("Dropping %r: no value bound to %r", ability, name)
                break
        for combo in combos:
            applied.append(PLACEHOLDER_PATTERN.sub(lambda m: combo[m.group(1)], ability))
    return applied

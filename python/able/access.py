"""Ability resolution and access checks."""

from .group import flatten
from .types import AbilitySet, AbleError, ErrorCode, GroupDefinition
from .values import apply_values, extract_values


def resolve(definition: GroupDefinition, abilities: AbilitySet) -> AbilitySet:
    """Flatten abilities, then extract and apply embedded values.

    Example::

        >>> resolve({"writer": ["article:{articleId}:write"]}, ["writer", "?articleId[]=4"])
        ['writer', 'article:4:write']
    """
    flattened = flatten(definition, abilities)
    values, remainder = extract_values(flattened)
    return apply_values(remainder, values)


def get_missing_abilities(abilities: AbilitySet, required: AbilitySet) -> AbilitySet:
    """Return every ability in `required` that is not in `abilities`."""
    present = set(abilities)
    return [ability for ability in required if ability not in present]


def can_access(applied: AbilitySet, required: AbilitySet) -> bool:
    """Check that resolved abilities include all required abilities."""
    return not get_missing_abilities(applied, required)


def require_abilities(applied: AbilitySet, required: AbilitySet) -> None:
    """Check access and raise if any required ability is missing.

    Raises:
        AbleError: with ACCESS_DENIED, naming the missing abilities
    """
    missing = get_missing_abilities(applied, required)
    if missing:
        raise AbleError(ErrorCode.ACCESS_DENIED, f"Missing abilities: {', '.join(missing)}")

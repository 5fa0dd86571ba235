"""Group (alias) expansion for ability sets."""

import logging

from .types import AbilitySet, GroupDefinition
from .values import to_list

logger = logging.getLogger(__name__)


def flatten(definition: GroupDefinition, abilities: AbilitySet) -> AbilitySet:
    """Expand aliases in `abilities` into their transitive group members.

    Unlike `resolve`, values are neither extracted nor applied.

    Example::

        >>> flatten({"foo": ["bar"]}, ["foo", "bam"])
        ['foo', 'bam', 'bar']

    Cyclic definitions are allowed; a member is only added once.
    """
    flattened = list(abilities)
    seen = set(flattened)
    i = 0
    while i < len(flattened):
        for member in to_list(definition.get(flattened[i])):
            if member not in seen:
                seen.add(member)
                flattened.append(member)
        i += 1

    logger.debug("Flattened %d abilities into %d", len(abilities), len(flattened))
    return flattened

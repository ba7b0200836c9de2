"""Value cycling for settings fields.

Advances one field of a record to the next or previous value in its
domain, wrapping at both ends.
"""

import logging

from .record import GraphicsSettings
from .registry import get_descriptor
from .schema import DomainKind, FieldDescriptor, FieldId

logger = logging.getLogger(__name__)

FORWARD = 1
BACKWARD = -1


def cycle(record: GraphicsSettings, field_id: FieldId, direction: int) -> None:
    """Cycle a field of ``record`` in place.

    Args:
        record: The record to mutate.
        field_id: Which field to advance.
        direction: FORWARD (+1) or BACKWARD (-1). Ignored for toggles.

    Raises:
        ValueError: If direction is not +1 or -1.
    """
    cycle_descriptor(record, get_descriptor(field_id), direction)


def cycle_descriptor(
    record: GraphicsSettings, descriptor: FieldDescriptor, direction: int
) -> None:
    """Cycle the field described by ``descriptor`` in place."""
    if direction not in (FORWARD, BACKWARD):
        raise ValueError(f"direction must be +1 or -1, got {direction!r}")

    current = descriptor.get(record)

    if descriptor.kind == DomainKind.TOGGLE:
        descriptor.set(record, not current)
        return

    position = descriptor.index_of(current)
    if position is None:
        # Out-of-domain values restart from the first option.
        logger.debug(
            "%s value %r not in domain, cycling from first option",
            descriptor.field_id.value,
            current,
        )
        position = 0

    # Python's % already returns a non-negative result for a positive modulus.
    next_position = (position + direction) % len(descriptor.options)
    descriptor.set(record, descriptor.options[next_position][1])

"""Ordered catalog of editable graphics settings.

The registry order is both the display order and the navigation order.
``EnableMetalFXSU`` and ``EnableHalfResTransparent`` live in the record
but are deliberately absent here: they round-trip through load/save and
are never edited.
"""

from functools import lru_cache
from typing import Dict, Tuple

from .schema import (
    DomainKind,
    FieldDescriptor,
    FieldId,
    int_options,
    scale_options,
)

QUALITY_LEVELS = int_options(range(1, 6))
OFF_ON = (("Off", 0), ("On", 1))


def _build_fields() -> Tuple[FieldDescriptor, ...]:
    def select(field_id: FieldId, attr: str, options) -> FieldDescriptor:
        return FieldDescriptor(field_id, DomainKind.SELECT_INT, attr, tuple(options))

    return (
        select(FieldId.FPS, "fps", int_options((30, 60, 120))),
        FieldDescriptor(FieldId.VSYNC, DomainKind.TOGGLE, "enable_vsync"),
        FieldDescriptor(
            FieldId.RENDER_SCALE,
            DomainKind.SELECT_FLOAT,
            "render_scale",
            scale_options(6, 20, 2),
        ),
        select(FieldId.RESOLUTION_QUALITY, "resolution_quality", QUALITY_LEVELS),
        select(FieldId.SHADOW_QUALITY, "shadow_quality", QUALITY_LEVELS),
        select(FieldId.LIGHT_QUALITY, "light_quality", QUALITY_LEVELS),
        select(FieldId.CHARACTER_QUALITY, "character_quality", QUALITY_LEVELS),
        select(FieldId.ENV_DETAIL_QUALITY, "env_detail_quality", QUALITY_LEVELS),
        select(FieldId.REFLECTION_QUALITY, "reflection_quality", QUALITY_LEVELS),
        select(FieldId.SFX_QUALITY, "sfx_quality", QUALITY_LEVELS),
        select(FieldId.BLOOM_QUALITY, "bloom_quality", QUALITY_LEVELS),
        select(FieldId.AA_MODE, "aa_mode", OFF_ON),
        select(FieldId.SELF_SHADOW, "enable_self_shadow", OFF_ON),
        select(FieldId.DLSS_QUALITY, "dlss_quality", (("Off", 0),) + QUALITY_LEVELS),
        select(FieldId.PARTICLE_TRAIL, "particle_trail_smoothness", QUALITY_LEVELS),
    )


@lru_cache(maxsize=None)
def all_fields() -> Tuple[FieldDescriptor, ...]:
    """Get every field descriptor in display order.

    Built once per process; repeated calls return the same tuple.
    """
    return _build_fields()


@lru_cache(maxsize=None)
def _by_id() -> Dict[FieldId, FieldDescriptor]:
    return {descriptor.field_id: descriptor for descriptor in all_fields()}


def get_descriptor(field_id: FieldId) -> FieldDescriptor:
    """Look up the descriptor for a field identifier.

    Raises:
        KeyError: If the identifier has no registry entry.
    """
    return _by_id()[field_id]


def field_count() -> int:
    """Number of editable fields."""
    return len(all_fields())

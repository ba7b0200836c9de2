"""Tests for the field registry and descriptors."""

import pytest

from railgfx.settings import (
    DomainKind,
    FieldDescriptor,
    FieldId,
    GraphicsSettings,
    all_fields,
    field_count,
    get_descriptor,
)


class TestRegistry:
    """Tests for the ordered field catalog."""

    def test_order(self):
        """Registry order is the display and navigation order."""
        ids = [d.field_id for d in all_fields()]
        assert ids == [
            FieldId.FPS,
            FieldId.VSYNC,
            FieldId.RENDER_SCALE,
            FieldId.RESOLUTION_QUALITY,
            FieldId.SHADOW_QUALITY,
            FieldId.LIGHT_QUALITY,
            FieldId.CHARACTER_QUALITY,
            FieldId.ENV_DETAIL_QUALITY,
            FieldId.REFLECTION_QUALITY,
            FieldId.SFX_QUALITY,
            FieldId.BLOOM_QUALITY,
            FieldId.AA_MODE,
            FieldId.SELF_SHADOW,
            FieldId.DLSS_QUALITY,
            FieldId.PARTICLE_TRAIL,
        ]
        assert field_count() == 15

    def test_stable_across_calls(self):
        assert all_fields() is all_fields()
        assert all_fields() == all_fields()

    def test_one_entry_per_identifier(self):
        ids = [d.field_id for d in all_fields()]
        assert len(ids) == len(set(ids)) == len(FieldId)

    def test_non_editable_fields_absent(self):
        """Upscaler flag and half-res transparency are never editable."""
        attrs = {d.attr for d in all_fields()}
        assert "enable_metal_fxsu" not in attrs
        assert "enable_half_res_transparent" not in attrs

    def test_fps_options(self):
        fps = get_descriptor(FieldId.FPS)
        assert fps.kind == DomainKind.SELECT_INT
        assert fps.options == (("30", 30), ("60", 60), ("120", 120))

    def test_render_scale_options(self):
        scale = get_descriptor(FieldId.RENDER_SCALE)
        assert scale.kind == DomainKind.SELECT_FLOAT
        assert [label for label, _ in scale.options] == [
            "0.6", "0.8", "1.0", "1.2", "1.4", "1.6", "1.8", "2.0",
        ]
        assert scale.options[0][1] == pytest.approx(0.6)
        assert scale.options[-1][1] == pytest.approx(2.0)

    def test_quality_levels(self):
        shadow = get_descriptor(FieldId.SHADOW_QUALITY)
        assert shadow.options == tuple((str(i), i) for i in range(1, 6))

    def test_off_on_fields(self):
        for field_id in (FieldId.AA_MODE, FieldId.SELF_SHADOW):
            assert get_descriptor(field_id).options == (("Off", 0), ("On", 1))

    def test_dlss_options(self):
        dlss = get_descriptor(FieldId.DLSS_QUALITY)
        assert dlss.options[0] == ("Off", 0)
        assert [v for _, v in dlss.options] == [0, 1, 2, 3, 4, 5]

    def test_vsync_is_toggle(self):
        vsync = get_descriptor(FieldId.VSYNC)
        assert vsync.kind == DomainKind.TOGGLE
        assert vsync.options == ()

    def test_defaults_are_in_domain(self, defaults):
        """Every default value is a legal option of its field."""
        for descriptor in all_fields():
            if descriptor.is_discrete:
                assert descriptor.index_of(descriptor.get(defaults)) is not None


class TestFieldDescriptor:
    """Tests for FieldDescriptor configuration and lookups."""

    def test_unknown_attribute_rejected(self):
        with pytest.raises(ValueError, match="unknown attribute"):
            FieldDescriptor(FieldId.FPS, DomainKind.SELECT_INT, "frames", (("30", 30),))

    def test_select_requires_options(self):
        with pytest.raises(ValueError, match="require options"):
            FieldDescriptor(FieldId.FPS, DomainKind.SELECT_INT, "fps")

    def test_toggle_takes_no_options(self):
        with pytest.raises(ValueError, match="TOGGLE takes no options"):
            FieldDescriptor(FieldId.VSYNC, DomainKind.TOGGLE, "enable_vsync", (("x", 1),))

    def test_get_and_set(self, defaults):
        fps = get_descriptor(FieldId.FPS)
        fps.set(defaults, 30)
        assert defaults.fps == 30
        assert fps.get(defaults) == 30

    def test_float_lookup_uses_tolerance(self):
        scale = get_descriptor(FieldId.RENDER_SCALE)
        assert scale.index_of(1.4000001) == 4
        assert scale.index_of(1.0005) == 2
        assert scale.index_of(1.1) is None

    def test_int_lookup_is_exact(self):
        fps = get_descriptor(FieldId.FPS)
        assert fps.index_of(60) == 1
        assert fps.index_of(59) is None

    def test_label_for(self):
        assert get_descriptor(FieldId.AA_MODE).label_for(0) == "Off"
        assert get_descriptor(FieldId.AA_MODE).label_for(7) is None


def test_descriptor_attrs_exist_on_record():
    for descriptor in all_fields():
        assert descriptor.attr in GraphicsSettings.model_fields

"""Tests for the terminal UI helpers and key handling."""

from __future__ import annotations

import pytest

from conftest import FailingStore
from railgfx.i18n import LANGUAGE_CHOICES, Language
from railgfx.session import SettingsSession
from railgfx.settings import SettingsStore
from railgfx.ui import (
    EDITOR_KEYS,
    PICKER_KEYS,
    EditorAction,
    LanguagePicker,
    PickerAction,
    apply_editor_action,
)
from railgfx.ui import renderer


def plain(fragments) -> str:
    return "".join(text for _style, text in fragments)


@pytest.fixture
def session(settings_store):
    return SettingsSession(settings_store, Language.EN)


class TestScrollOffset:
    def test_cursor_inside_first_page(self):
        assert renderer.scroll_offset(3, 10) == 0

    def test_cursor_past_first_page(self):
        assert renderer.scroll_offset(10, 10) == 1
        assert renderer.scroll_offset(14, 5) == 10


class TestRenderRows:
    """Tests for the settings list rendering."""

    def test_all_rows_when_space(self, session):
        text = plain(renderer.render_rows(session, 40))
        lines = text.split("\n")
        assert len(lines) == session.field_count
        assert lines[0].startswith("▸ FPS")
        assert "◂ 60 ▸" in lines[0]
        assert lines[1].startswith("  VSync")

    def test_label_padding(self, session):
        line = plain(renderer.render_rows(session, 40)).split("\n")[2]
        assert line == "  " + "Render Scale".ljust(24) + "  ◂ 1.0 ▸"

    def test_window_follows_cursor(self, session):
        for _ in range(session.field_count):
            session.move_cursor(1)
        lines = plain(renderer.render_rows(session, 4)).split("\n")
        assert len(lines) == 4
        assert lines[-1].startswith("▸ Particle Trail")

    def test_selected_row_styles(self, session):
        fragments = renderer.render_rows(session, 40)
        assert fragments[0][0] == "class:row.selected"
        assert fragments[2][0] == "class:value.selected"

    def test_scroll_indicator(self, session):
        assert renderer.render_scroll_indicator(session, 40) == ""
        assert renderer.render_scroll_indicator(session, 5) == " 1-5/15 "


class TestStatus:
    def test_message_style(self, session):
        assert renderer.status_style(session) == "class:status.message"

    def test_success_style(self, session):
        session.save()
        assert renderer.status_style(session) == "class:status.success"
        assert plain(renderer.render_status(session)) == " Settings saved."

    def test_failure_uses_message_style(self):
        store = SettingsStore(FailingStore(OSError("nope")))
        session = SettingsSession(store, Language.EN)
        session.save()
        assert renderer.status_style(session) == "class:status.message"


class TestEditorActions:
    """Tests for the editor key table."""

    def test_key_table(self):
        assert EDITOR_KEYS["right"] == EDITOR_KEYS["l"] == EditorAction.NEXT_VALUE
        assert EDITOR_KEYS["left"] == EDITOR_KEYS["h"] == EditorAction.PREV_VALUE
        assert EDITOR_KEYS["q"] == EDITOR_KEYS["escape"] == EditorAction.QUIT
        assert EDITOR_KEYS["s"] == EditorAction.SAVE

    def test_navigation_and_cycle(self, session):
        assert apply_editor_action(session, EditorAction.DOWN) is True
        assert apply_editor_action(session, EditorAction.DOWN) is True
        apply_editor_action(session, EditorAction.PREV_VALUE)
        assert session.record.render_scale == pytest.approx(0.8)
        apply_editor_action(session, EditorAction.UP)
        assert session.cursor == 1

    def test_save(self, session):
        apply_editor_action(session, EditorAction.SAVE)
        assert session.status_is_success

    def test_quit(self, session):
        assert apply_editor_action(session, EditorAction.QUIT) is False


class TestLanguagePicker:
    """Tests for the language picker state."""

    def test_confirm_default(self):
        picker = LanguagePicker()
        picker.apply(PickerAction.CONFIRM)
        assert picker.done
        assert picker.selected == Language.EN

    def test_move_and_confirm(self):
        picker = LanguagePicker()
        picker.apply(PickerAction.DOWN)
        picker.apply(PickerAction.DOWN)
        picker.apply(PickerAction.DOWN)
        assert picker.cursor == len(LANGUAGE_CHOICES) - 1
        picker.apply(PickerAction.CONFIRM)
        assert picker.selected == Language.JA

    def test_up_clamps(self):
        picker = LanguagePicker()
        picker.apply(PickerAction.UP)
        assert picker.cursor == 0

    def test_quit(self):
        picker = LanguagePicker()
        picker.apply(PickerAction.QUIT)
        assert picker.done
        assert picker.selected is None

    def test_shortcut(self):
        picker = LanguagePicker()
        assert picker.press_shortcut("2") is True
        assert picker.selected == Language.KO
        assert LanguagePicker().press_shortcut("9") is False

    def test_enter_confirms(self):
        assert PICKER_KEYS["enter"] == PickerAction.CONFIRM

    def test_render_marks_cursor(self):
        text = plain(renderer.render_picker(1))
        assert "▸ [2] 한국어 (Korean)" in text
        assert "  [1] English" in text
        assert "Enter to confirm" in text

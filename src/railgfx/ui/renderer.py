"""Rendering helpers for the terminal UI.

Everything here turns session state into prompt_toolkit formatted text.
No function reads the terminal or mutates state, so the layout can be
checked without a live screen.
"""

from __future__ import annotations

from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.styles import Style

from ..i18n import LANGUAGE_CHOICES, PICKER_HINT, PICKER_TITLE
from ..session import SettingsSession

POINTER = "▸ "
NO_POINTER = "  "
LABEL_WIDTH = 24

STYLE = Style.from_dict(
    {
        "title": "fg:ansicyan bold",
        "row": "fg:ansiwhite",
        "row.selected": "fg:ansiyellow bold",
        "value": "fg:ansibrightblack",
        "value.selected": "fg:ansigreen bold",
        "status.success": "fg:ansigreen",
        "status.message": "fg:ansiyellow",
        "status.empty": "fg:ansibrightblack",
        "hint": "fg:ansibrightblack",
        "scroll": "fg:ansibrightblack",
    }
)


def scroll_offset(cursor: int, visible_height: int) -> int:
    """First visible row so that ``cursor`` stays on screen."""
    if visible_height <= 0:
        return cursor
    if cursor >= visible_height:
        return cursor - visible_height + 1
    return 0


def render_picker(cursor: int) -> StyleAndTextTuples:
    """Render the language picker with ``cursor`` highlighted."""
    fragments: StyleAndTextTuples = [("class:title", f"  {PICKER_TITLE}\n"), ("", "\n")]
    for i, (key, _language, name) in enumerate(LANGUAGE_CHOICES):
        selected = i == cursor
        style = "class:row.selected" if selected else "class:row"
        pointer = POINTER if selected else NO_POINTER
        fragments.append((style, f"{pointer}[{key}] {name}\n"))
    fragments.append(("", "\n"))
    fragments.append(("class:hint", f"  {PICKER_HINT}"))
    return fragments


def render_header(session: SettingsSession) -> StyleAndTextTuples:
    return [("class:title", session.strings.title)]


def render_rows(session: SettingsSession, visible_height: int) -> StyleAndTextTuples:
    """Render the visible slice of the settings list.

    Args:
        session: Session providing labels, values, and the cursor.
        visible_height: Number of rows the list area can show.

    Returns:
        Formatted text with one line per visible field.
    """
    offset = scroll_offset(session.cursor, visible_height)
    end = min(session.field_count, offset + max(visible_height, 1))

    fragments: StyleAndTextTuples = []
    for i in range(offset, end):
        selected = i == session.cursor
        pointer = POINTER if selected else NO_POINTER
        label = f"{session.field_label(i):<{LABEL_WIDTH}}"
        value = f"  ◂ {session.display_value(i)} ▸"
        row_style = "class:row.selected" if selected else "class:row"
        value_style = "class:value.selected" if selected else "class:value"
        fragments.extend(
            [
                (row_style, pointer),
                (row_style, label),
                (value_style, value),
            ]
        )
        if i < end - 1:
            fragments.append(("", "\n"))
    return fragments


def render_scroll_indicator(session: SettingsSession, visible_height: int) -> str:
    """Position text shown when the list overflows, empty otherwise."""
    total = session.field_count
    if total <= visible_height:
        return ""
    offset = scroll_offset(session.cursor, visible_height)
    last = min(total, offset + visible_height)
    return f" {offset + 1}-{last}/{total} "


def status_style(session: SettingsSession) -> str:
    if session.status_is_success:
        return "class:status.success"
    if session.status:
        return "class:status.message"
    return "class:status.empty"


def render_status(session: SettingsSession) -> StyleAndTextTuples:
    return [(status_style(session), f" {session.status}")]

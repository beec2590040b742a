# tests/test_gui_menu.py

import pytest

pytest.importorskip("tkinter")

from radix_widgets.config import VIEWS
from radix_widgets.gui_menu import MENU_SPEC, _modifier_mask, _platform_keycfg, _resolve_shortcut, shortcut_lines

# Fixed platform keycfgs so tests are deterministic
MAC_CFG = _platform_keycfg("Darwin")
LINUX_CFG = _platform_keycfg("Linux")


@pytest.mark.parametrize("shortcut,cfg,expected_label,expected_bind", [
    # View shortcuts: digits bind as keys, not mouse buttons
    ("MOD+1", MAC_CFG,            "Cmd+1",         "<Command-Key-1>"),
    ("MOD+5", LINUX_CFG,          "Ctrl+5",        "<Control-Key-5>"),

    # Letters: label as typed, bind lower
    ("MOD+L", MAC_CFG,            "Cmd+L",         "<Command-l>"),
    ("CTRL+a", LINUX_CFG,         "Ctrl+A",        "<Control-a>"),

    # Modifier order is MOD, CTRL, ALT, SHIFT
    ("SHIFT+MOD+S", MAC_CFG,      "Cmd+Shift+S",   "<Command-Shift-s>"),
    ("CTRL+ALT+SHIFT+X", MAC_CFG, "Ctrl+Opt+Shift+X", "<Control-Option-Shift-x>"),
    ("CTRL+ALT+K", LINUX_CFG,     "Ctrl+Alt+K",    "<Control-Alt-k>"),

    # MOD and CTRL collapse where they are the same key
    ("MOD+CTRL+A", LINUX_CFG,     "Ctrl+A",        "<Control-a>"),
    ("MOD+CTRL+A", MAC_CFG,       "Cmd+Ctrl+A",    "<Command-Control-a>"),

    # Named keysyms
    ("MOD+ENTER", MAC_CFG,        "Cmd+Enter",     "<Command-Return>"),
    ("MOD+ESC", LINUX_CFG,        "Ctrl+Esc",      "<Control-Escape>"),
    ("SHIFT+F5", MAC_CFG,         "Shift+F5",      "<Shift-F5>"),
    ("ALT+TAB", LINUX_CFG,        "Alt+Tab",       "<Alt-Tab>"),

    # Unknown token: title-cased label, raw keysym
    ("MOD+MYKEY", MAC_CFG,        "Cmd+Mykey",     "<Command-MYKEY>"),
])
def test_resolve_shortcut_variants(shortcut, cfg, expected_label, expected_bind):
    label, bind = _resolve_shortcut(shortcut, cfg)
    assert label == expected_label
    assert bind == expected_bind


def test_resolve_shortcut_modifiers_only():
    assert _resolve_shortcut("CTRL+SHIFT", LINUX_CFG) == ("Ctrl+Shift", "<Control-Shift>")


def test_resolve_shortcut_empty():
    assert _resolve_shortcut("", MAC_CFG) == ("", "")


def test_view_menu_has_one_item_per_view():
    view_menu = next(m for m in MENU_SPEC if m["menu"] == "View")
    assert [item["command_args"] for item in view_menu["items"]] == [[v] for v in VIEWS]
    assert all(item["command"] == "_set_view" for item in view_menu["items"])


def test_shortcut_lines():
    assert shortcut_lines(MENU_SPEC, LINUX_CFG) == [
        "ASCII Converter: Ctrl+1",
        "Color Converter: Ctrl+2",
        "IP Converter: Ctrl+3",
        "Logic Converter: Ctrl+4",
        "Base Converter: Ctrl+5",
    ]


def test_modifier_mask_per_platform():
    num_lock_on_windows = 0x0008
    alt_on_windows = 0x20000
    assert not _modifier_mask("Windows") & num_lock_on_windows
    assert _modifier_mask("Windows") & alt_on_windows
    assert _modifier_mask("Linux") & 0x0008
    assert _modifier_mask("Darwin") & 0x0008
    for system in ("Windows", "Linux", "Darwin"):
        assert _modifier_mask(system) & 0x0004

# radix_widgets/gui_menu.py

from __future__ import annotations

import platform
import tkinter as tk
import tkinter.messagebox as mbox

from .__about__ import APP_NAME, about_text
from .config import VIEWS


# Declarative menu spec; "shortcut" tokens are joined with "+", e.g. "MOD+1".
# Modifiers: MOD (Cmd on macOS, Ctrl elsewhere), CTRL, ALT, SHIFT.
MENU_SPEC = [
    {
        "menu": "View",
        "items": [
            {
                "label": f"{view} Converter",
                "command": "_set_view",
                "command_args": [view],
                "shortcut": f"MOD+{idx}",
            }
            for idx, view in enumerate(VIEWS, start=1)
        ],
    },
    {
        "menu": "Help",
        "items": [
            {"label": "About", "command": "_show_about"},
            {"label": "Shortcuts…", "command": "_show_shortcuts"},
        ],
    },
]

NAMED_KEYS = {
    "ENTER": ("Enter", "Return"),
    "ESC": ("Esc", "Escape"),
    "TAB": ("Tab", "Tab"),
    "SPACE": ("Space", "space"),
    **{f"F{i}": (f"F{i}", f"F{i}") for i in range(1, 13)},
}

MODIFIER_ORDER = ("MOD", "CTRL", "ALT", "SHIFT")


def _platform_keycfg(system: str | None = None) -> dict[str, tuple[str, str]]:
    """Map modifier tokens to (menu label, Tk event modifier)."""
    if (system or platform.system()) == "Darwin":
        return {
            "MOD": ("Cmd", "Command"),
            "CTRL": ("Ctrl", "Control"),
            "ALT": ("Opt", "Option"),
            "SHIFT": ("Shift", "Shift"),
        }
    return {
        "MOD": ("Ctrl", "Control"),
        "CTRL": ("Ctrl", "Control"),
        "ALT": ("Alt", "Alt"),
        "SHIFT": ("Shift", "Shift"),
    }


def _modifier_mask(system: str | None = None) -> int:
    """Bits of ``event.state`` meaning a shortcut modifier is held."""
    control = 0x0004
    system = system or platform.system()
    if system == "Darwin":
        # Command (Mod1) and Option (Mod2)
        return control | 0x0008 | 0x0010
    if system == "Windows":
        # 0x0008 is Num Lock here; Alt is reported as 0x20000
        return control | 0x20000
    return control | 0x0008


def _resolve_shortcut(shortcut: str, keycfg: dict[str, tuple[str, str]]) -> tuple[str, str]:
    """Turn "MOD+SHIFT+S" into an accelerator label and a Tk event sequence."""
    tokens = [t.strip().upper() for t in shortcut.split("+") if t.strip()]
    mods = [m for m in MODIFIER_ORDER if m in tokens]
    keys = [t for t in tokens if t not in MODIFIER_ORDER]
    # MOD and CTRL are the same key off macOS
    if "MOD" in mods and "CTRL" in mods and keycfg["MOD"][1] == keycfg["CTRL"][1]:
        mods.remove("CTRL")

    labels = [keycfg[m][0] for m in mods]
    binds = [keycfg[m][1] for m in mods]

    if keys:
        key = keys[-1]
        if key in NAMED_KEYS:
            label, keysym = NAMED_KEYS[key]
        elif key.isdigit():
            # "<Control-1>" would be a mouse button
            label, keysym = key, f"Key-{key}"
        elif len(key) == 1:
            label, keysym = key, key.lower()
        else:
            label, keysym = key.title(), key
        labels.append(label)
        binds.append(keysym)

    if not binds:
        return "", ""
    return "+".join(labels), "<" + "-".join(binds) + ">"


def build_menubar(root: tk.Tk, app: object, spec: list[dict] = MENU_SPEC) -> tk.Menu:
    """Attach a menubar built from ``spec``; commands are method names on ``app``."""
    keycfg = _platform_keycfg()
    menubar = tk.Menu(root)
    root.config(menu=menubar)

    for menu_def in spec:
        m = tk.Menu(menubar, tearoff=False)
        menubar.add_cascade(label=menu_def["menu"], menu=m)

        for item in menu_def.get("items", []):
            command = getattr(app, item["command"])
            args = item.get("command_args", [])

            def invoke(fn=command, args=args):
                fn(*args)

            accel = ""
            if item.get("shortcut"):
                accel, seq = _resolve_shortcut(item["shortcut"], keycfg)
                if seq:
                    root.bind_all(seq, lambda e, inv=invoke: (inv(), "break")[1])

            m.add_command(label=item["label"], command=invoke, accelerator=accel)

    return menubar


def shortcut_lines(spec: list[dict] = MENU_SPEC, keycfg: dict[str, tuple[str, str]] | None = None) -> list[str]:
    keycfg = keycfg or _platform_keycfg()
    return [
        f"{item['label']}: {_resolve_shortcut(item['shortcut'], keycfg)[0]}"
        for menu in spec
        for item in menu.get("items", [])
        if item.get("shortcut")
    ]


def show_about_dialog(root: tk.Misc) -> None:
    mbox.showinfo(f"About {APP_NAME}", about_text(), parent=root)


def show_shortcuts_dialog(root: tk.Misc) -> None:
    mbox.showinfo("Keyboard Shortcuts", "\n".join(shortcut_lines()), parent=root)

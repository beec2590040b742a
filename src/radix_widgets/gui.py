# radix_widgets/gui.py

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk

from .__about__ import APP_TITLE
from .bitwise import Gate
from .config import VIEWS, Settings, configure_logging, load_settings
from .gui_menu import _modifier_mask, build_menubar, show_about_dialog, show_shortcuts_dialog
from .radix import Radix
from .sync import (
    BaseConverterSync,
    ColorSync,
    GateSync,
    IpSync,
    SyncResult,
    TextCodesSync,
)

logger = logging.getLogger(__name__)

ERROR_ENTRY_STYLE = "Error.TEntry"
SWATCH_SIZE = (12, 4)  # characters × lines


class ConverterApp:
    """Tkinter front end; all conversion and syncing is delegated to ``sync``."""

    def __init__(self, root: tk.Tk, settings: Settings | None = None) -> None:
        self.root = root
        self.settings = settings or Settings()
        root.title(APP_TITLE)
        root.minsize(720, 360)

        self.main = ttk.Frame(root, padding=12)
        self.main.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)
        self.main.columnconfigure(1, weight=1)

        style = ttk.Style(root)
        style.configure(ERROR_ENTRY_STYLE, foreground="#8B0000", fieldbackground="#FFE4E1")

        self.view_var = tk.StringVar(value=self.settings.default_view)

        # Per-view widget registry, rebuilt on every view change
        self._vars: dict[str, tk.StringVar] = {}
        self._entries: dict[str, ttk.Entry] = {}
        self._rows: dict[str, list[tk.Widget]] = {}
        self._swatch: tk.Label | None = None
        self._updating = False
        self._modifier_mask = _modifier_mask()

        self.base_sync = BaseConverterSync(max_digits=self.settings.max_digits)
        self.text_sync = TextCodesSync()
        self.color_sync = ColorSync()
        self.ip_sync = IpSync()
        self.gate_sync = GateSync()

        build_menubar(self.root, self)
        self._build_controls_bar(row=0)

        ttk.Separator(self.main, orient="horizontal").grid(
            row=1, column=0, columnspan=3, sticky="ew", pady=(8, 10)
        )

        self.content = ttk.Frame(self.main)
        self.content.grid(row=2, column=0, columnspan=3, sticky="nsew")
        self.main.rowconfigure(2, weight=1)
        self.content.columnconfigure(1, weight=1)

        self._render_view()


    # ----------------- Controls bar -----------------
    def _build_controls_bar(self, row: int) -> None:
        ttk.Label(self.main, text="Converter:").grid(row=row, column=0, sticky="w", padx=(0, 8))
        view_frame = ttk.Frame(self.main)
        view_frame.grid(row=row, column=1, sticky="w")
        for v in VIEWS:
            ttk.Radiobutton(
                view_frame,
                text=v,
                value=v,
                variable=self.view_var,
                command=self._render_view
            ).pack(side="left", padx=(0, 10))

    def _show_about(self) -> None:
        show_about_dialog(self.root)

    def _show_shortcuts(self) -> None:
        show_shortcuts_dialog(self.root)

    def _set_view(self, view: str) -> None:
        self.view_var.set(view)
        self._render_view()

    def _render_view(self) -> None:
        for w in self.content.winfo_children():
            w.destroy()
        self._vars.clear()
        self._entries.clear()
        self._rows.clear()
        self._swatch = None

        builders = {
            "ASCII": self._build_ascii_ui,
            "Color": self._build_color_ui,
            "IP": self._build_ip_ui,
            "Logic": self._build_logic_ui,
            "Base": self._build_base_ui,
        }
        builders[self.view_var.get()](self.content)


    # ----------------- Shared plumbing -----------------
    def _add_field(self, parent: ttk.Frame, name: str, label: str, row: int, width: int = 48) -> ttk.Entry:
        lbl = ttk.Label(parent, text=label)
        lbl.grid(row=row, column=0, sticky="w", padx=(0, 8), pady=2)
        var = tk.StringVar()
        entry = ttk.Entry(parent, textvariable=var, width=width)
        entry.grid(row=row, column=1, sticky="ew", pady=2)
        self._vars[name] = var
        self._entries[name] = entry
        self._rows[name] = [lbl, entry]
        return entry

    def _watch(self, name: str, handler) -> None:
        self._vars[name].trace_add("write", lambda *_: None if self._updating else handler(name))

    def _apply(self, result: SyncResult) -> None:
        """Push a controller result into the widgets without re-triggering traces."""
        self._updating = True
        try:
            for name, value in result.values.items():
                var = self._vars.get(name)
                if var is not None and var.get() != value:
                    var.set(value)
            for name in result.cleared:
                if name in self._entries:
                    self._entries[name].configure(style="TEntry")
            for name in result.errors:
                if name in self._entries:
                    self._entries[name].configure(style=ERROR_ENTRY_STYLE)
            for name in result.enabled:
                if name in self._entries:
                    self._entries[name].state(["!disabled"])
            for name in result.disabled:
                if name in self._entries:
                    self._entries[name].state(["disabled"])
            for name in result.hidden:
                for w in self._rows.get(name, []):
                    w.grid_remove()
            for name in result.shown:
                for w in self._rows.get(name, []):
                    w.grid()
            if result.swatch and self._swatch is not None:
                self._swatch.configure(background=result.swatch)
            if result.focus and result.focus in self._entries:
                entry = self._entries[result.focus]
                entry.focus_set()
                entry.icursor("end")
        finally:
            self._updating = False


    # ===========================================================
    # ==================  BASE CONVERTER  =======================
    # ===========================================================
    def _build_base_ui(self, parent: ttk.Frame) -> None:
        labels = {"hex": "Hexadecimal (0x…):", "dec": "Decimal:", "bin": "Binary:"}
        for r, name in enumerate(self.base_sync.fields):
            self._add_field(parent, name, labels.get(name, name), r)
            self._watch(name, self._update_from_base)
        self._entries["hex"].focus()

    def _update_from_base(self, name: str) -> None:
        self._apply(self.base_sync.edit(name, self._vars[name].get()))


    # ===========================================================
    # ===================  ASCII / CODES  =======================
    # ===========================================================
    def _build_ascii_ui(self, parent: ttk.Frame) -> None:
        labels = {"text": "Text:", "hex": "Hex codes:", "dec": "Decimal codes:", "bin": "Binary codes:"}
        for r, name in enumerate(self.text_sync.fields):
            self._add_field(parent, name, labels[name], r, width=64)
            self._watch(name, self._update_from_text)
        self._entries["text"].focus()

    def _update_from_text(self, name: str) -> None:
        self._apply(self.text_sync.edit(name, self._vars[name].get()))


    # ===========================================================
    # =======================  COLOR  ===========================
    # ===========================================================
    def _build_color_ui(self, parent: ttk.Frame) -> None:
        labels = {"hex": "Hex (#RRGGBB):", "rgb": "RGB:", "hsl": "HSL:"}
        for r, name in enumerate(self.color_sync.fields):
            self._add_field(parent, name, labels[name], r, width=24)
            self._watch(name, self._update_from_color)

        width, height = SWATCH_SIZE
        self._swatch = tk.Label(parent, width=width, height=height, relief="groove")
        self._swatch.grid(row=0, column=2, rowspan=3, sticky="nsew", padx=(12, 0))

        self._entries["hex"].focus()
        self._vars["hex"].set(self.settings.default_color)

    def _update_from_color(self, name: str) -> None:
        self._apply(self.color_sync.edit(name, self._vars[name].get()))


    # ===========================================================
    # ========================  IP  =============================
    # ===========================================================
    def _build_ip_ui(self, parent: ttk.Frame) -> None:
        for r, radix in enumerate(IpSync.RADICES):
            ttk.Label(parent, text=f"{radix.label}:").grid(row=r, column=0, sticky="w", padx=(0, 8), pady=2)
            row = ttk.Frame(parent)
            row.grid(row=r, column=1, sticky="w", pady=2)
            for octet in range(1, 5):
                name = IpSync.field_id(octet, radix)
                var = tk.StringVar()
                entry = ttk.Entry(row, textvariable=var, width=radix.octet_width + 1, justify="center")
                entry.grid(row=0, column=2 * octet, sticky="w")
                if octet < 4:
                    ttk.Label(row, text=".").grid(row=0, column=2 * octet + 1, padx=2)
                self._vars[name] = var
                self._entries[name] = entry
                self._watch(name, self._update_from_ip)
                entry.bind("<KeyPress>", lambda e, n=name: self._on_ip_key(n, e))

        self._apply(self.ip_sync.load_address(self.settings.default_ip))
        self._entries[IpSync.field_id(1, Radix.DECIMAL)].focus()

    def _update_from_ip(self, name: str) -> None:
        self._apply(self.ip_sync.edit(name, self._vars[name].get()))

    def _on_ip_key(self, name: str, event: tk.Event) -> str | None:
        char = event.char or ""
        key = char if len(char) == 1 and char.isprintable() else event.keysym
        modifier = bool(event.state & self._modifier_mask)
        entry = self._entries[name]
        current = self._vars[name].get()
        if entry.selection_present():
            current = ""
        result = self.ip_sync.key(name, current, key, modifier=modifier)
        self._apply(result)
        return None if result.accept else "break"


    # ===========================================================
    # ====================  LOGIC GATES  ========================
    # ===========================================================
    def _build_logic_ui(self, parent: ttk.Frame) -> None:
        ttk.Label(parent, text="Gate:").grid(row=0, column=0, sticky="w", padx=(0, 8), pady=2)
        self.gate_var = tk.StringVar(value=Gate.AND.value)
        gate_box = ttk.Combobox(
            parent, textvariable=self.gate_var, values=[g.value for g in Gate], state="readonly", width=8
        )
        gate_box.grid(row=0, column=1, sticky="w", pady=2)
        self._vars["gate"] = self.gate_var

        self._add_field(parent, GateSync.A, "Input A (0-255):", 1, width=8)
        self._add_field(parent, GateSync.B, "Input B (0-255):", 2, width=8)

        for r, (name, label) in enumerate(
            ((GateSync.OUT_DEC, "Output Y (dec):"), (GateSync.OUT_BIN, "Output Y (bin):")), start=3
        ):
            ttk.Label(parent, text=label).grid(row=r, column=0, sticky="w", padx=(0, 8), pady=2)
            var = tk.StringVar()
            ttk.Label(parent, textvariable=var, font=("TkFixedFont", 11)).grid(row=r, column=1, sticky="w")
            self._vars[name] = var

        for name in ("gate", GateSync.A, GateSync.B):
            self._watch(name, self._update_from_gate)

        self._update_from_gate("gate")

    def _update_from_gate(self, _name: str) -> None:
        self._apply(
            self.gate_sync.edit(
                self._vars["gate"].get(), self._vars[GateSync.A].get(), self._vars[GateSync.B].get()
            )
        )


def run(settings: Settings | None = None) -> None:
    root = tk.Tk()
    ConverterApp(root, settings)
    root.mainloop()


def main() -> None:
    try:
        settings = load_settings()
    except ValueError as exc:
        raise SystemExit(f"error: {exc}") from None
    configure_logging(settings)
    logger.debug("starting GUI with %s", settings)
    run(settings)


if __name__ == "__main__":
    main()

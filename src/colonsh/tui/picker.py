"""Interactive pickers: single select, multi select, confirm.

All pickers draw on stderr so that stdout stays capturable
(``cd "$(colonsh pd)"``).
"""

from __future__ import annotations

import sys
from typing import Protocol

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout
from prompt_toolkit.layout.containers import HSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import create_output


class Picker(Protocol):
    def select(self, title: str, options: list[str]) -> str | None: ...

    def select_many(self, title: str, options: list[str]) -> list[str]: ...

    def confirm(self, title: str) -> bool: ...


def _stderr_output():
    return create_output(stdout=sys.stderr)


def _run(get_text, kb: KeyBindings) -> None:
    layout = Layout(HSplit([Window(FormattedTextControl(get_text))]))
    app: Application = Application(
        layout=layout, key_bindings=kb, full_screen=False, output=_stderr_output()
    )
    app.run()


def _add_navigation(kb: KeyBindings, selected: list[int], count: int) -> None:
    @kb.add("up")
    @kb.add("k")
    def _up(event):
        selected[0] = max(0, selected[0] - 1)

    @kb.add("down")
    @kb.add("j")
    def _down(event):
        selected[0] = min(count - 1, selected[0] + 1)


def pick_one(title: str, options: list[str]) -> str | None:
    """Pick one of *options*. Returns None when cancelled or empty."""
    if not options:
        return None

    selected = [0]
    result: list[str | None] = [None]

    def _get_text():
        lines = [("bold", f"{title}\n")]
        for i, opt in enumerate(options):
            sel = i == selected[0]
            marker = ">" if sel else " "
            lines.append(("bold" if sel else "", f" {marker} {opt}\n"))
        lines.append(("dim", "\n ↑/↓ navigate  enter select  esc cancel"))
        return lines

    kb = KeyBindings()
    _add_navigation(kb, selected, len(options))

    @kb.add("enter")
    def _select(event):
        result[0] = options[selected[0]]
        event.app.exit()

    @kb.add("escape")
    @kb.add("q")
    @kb.add("c-c")
    def _cancel(event):
        event.app.exit()

    _run(_get_text, kb)
    return result[0]


def pick_many(title: str, options: list[str]) -> list[str]:
    """Pick any number of *options*, in option order. Empty when cancelled."""
    if not options:
        return []

    selected = [0]
    checked: set[int] = set()
    done = [False]

    def _get_text():
        lines = [("bold", f"{title}\n")]
        for i, opt in enumerate(options):
            sel = i == selected[0]
            marker = ">" if sel else " "
            box = "[x]" if i in checked else "[ ]"
            lines.append(("bold" if sel else "", f" {marker} {box} {opt}\n"))
        lines.append(("dim", "\n ↑/↓ navigate  space toggle  enter confirm  esc cancel"))
        return lines

    kb = KeyBindings()
    _add_navigation(kb, selected, len(options))

    @kb.add("space")
    @kb.add("x")
    def _toggle(event):
        checked.symmetric_difference_update({selected[0]})

    @kb.add("enter")
    def _confirm(event):
        done[0] = True
        event.app.exit()

    @kb.add("escape")
    @kb.add("q")
    @kb.add("c-c")
    def _cancel(event):
        event.app.exit()

    _run(_get_text, kb)
    if not done[0]:
        return []
    return [opt for i, opt in enumerate(options) if i in checked]


def confirm(title: str) -> bool:
    """Yes/No prompt; defaults to No."""
    answer = [False]
    result = [False]

    def _get_text():
        yes = ("reverse", " Yes ") if answer[0] else ("", " Yes ")
        no = ("", " No ") if answer[0] else ("reverse", " No ")
        return [
            ("bold", f"{title}\n"),
            yes,
            ("", " "),
            no,
            ("dim", "\n y/n  ←/→ toggle  enter confirm"),
        ]

    kb = KeyBindings()

    @kb.add("left")
    @kb.add("right")
    @kb.add("tab")
    def _toggle(event):
        answer[0] = not answer[0]

    @kb.add("y")
    def _yes(event):
        result[0] = True
        event.app.exit()

    @kb.add("n")
    @kb.add("escape")
    @kb.add("c-c")
    def _no(event):
        event.app.exit()

    @kb.add("enter")
    def _enter(event):
        result[0] = answer[0]
        event.app.exit()

    _run(_get_text, kb)
    return result[0]


class TuiPicker:
    """Picker backed by the prompt_toolkit widgets above."""

    def select(self, title: str, options: list[str]) -> str | None:
        return pick_one(title, options)

    def select_many(self, title: str, options: list[str]) -> list[str]:
        return pick_many(title, options)

    def confirm(self, title: str) -> bool:
        return confirm(title)

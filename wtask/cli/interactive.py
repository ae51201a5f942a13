"""
Interactive prompts built on prompt_toolkit.

Both helpers return None when the user backs out; callers treat that as a
clean exit rather than an error.
"""
from typing import List, Optional, Tuple

from prompt_toolkit import prompt
from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from wtask.core.models import TaskTable

MENU_STYLE = Style.from_dict({
    "title": "bold",
    "selected": "reverse",
    "hint": "ansibrightblack",
})


def build_choices(tasks: TaskTable):
    """Menu entries as ``(alias, label)`` pairs in table order."""
    choices = []
    for alias, task in tasks.items():
        label = task.label(alias)
        if task.description:
            label = f"{label}  ({task.description})"
        choices.append((alias, label))
    return choices


class AliasMenu:
    """
    Single-choice menu: arrows (or j/k) move, Enter picks, Escape or Ctrl-C
    cancels. ``run()`` returns the picked alias or None.
    """

    def __init__(self, choices: List[Tuple[str, str]], message: str, title: str):
        self.choices = choices
        self.message = message
        self.title = title
        self.index = 0
        self.key_bindings = self._build_key_bindings()

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("up")
        @kb.add("k")
        def _up(event):
            self.index = (self.index - 1) % len(self.choices)

        @kb.add("down")
        @kb.add("j")
        def _down(event):
            self.index = (self.index + 1) % len(self.choices)

        @kb.add("enter")
        def _pick(event):
            event.app.exit(result=self.choices[self.index][0])

        @kb.add("escape", eager=True)
        @kb.add("c-c")
        def _cancel(event):
            event.app.exit(result=None)

        return kb

    def render(self) -> FormattedText:
        fragments = [("class:title", f"{self.title}: {self.message}\n")]
        for i, (_, label) in enumerate(self.choices):
            if i == self.index:
                fragments.append(("class:selected", f"> {label}"))
            else:
                fragments.append(("", f"  {label}"))
            fragments.append(("", "\n"))
        fragments.append(("class:hint", "Enter: run  Esc: cancel"))
        return FormattedText(fragments)

    def build_application(self) -> Application:
        body = Window(FormattedTextControl(self.render, show_cursor=False))
        return Application(
            layout=Layout(HSplit([body])),
            key_bindings=self.key_bindings,
            style=MENU_STYLE,
            full_screen=False,
            erase_when_done=True,
        )

    def run(self) -> Optional[str]:
        if not self.choices:
            return None
        try:
            return self.build_application().run()
        except (KeyboardInterrupt, EOFError):
            return None


def select_alias(
    tasks: TaskTable, message: str = "Select a task to run:", title: str = "wtask"
) -> Optional[str]:
    """
    Let the user pick an alias from ``tasks``.

    Returns:
        The chosen alias, or None on Escape or Ctrl-C
    """
    return AliasMenu(build_choices(tasks), message, title).run()


def prompt_query(message: str = "Search for: ") -> Optional[str]:
    """
    Ask for free text.

    Returns:
        The stripped answer, or None on Ctrl-C, Ctrl-D or a blank answer
    """
    try:
        answer = prompt(message)
    except (KeyboardInterrupt, EOFError):
        return None
    return answer.strip() or None

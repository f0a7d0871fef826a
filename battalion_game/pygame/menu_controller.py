"""Menu state management for the pygame client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


@dataclass(frozen=True)
class MenuOption:
    """Entry rendered in a menu overlay."""

    label: str
    action: Callable[[], None]


OptionBuilder = Callable[[], List[MenuOption]]


@dataclass
class MenuDefinition:
    """Declarative description of a menu screen.

    Screens with ``accepts_text`` collect a line of typed text (the level
    prompt) instead of offering options.
    """

    title: str
    build_options: OptionBuilder
    message: Optional[str] = None
    accepts_text: bool = False
    on_submit: Optional[Callable[[str], None]] = None


@dataclass
class MenuController:
    """Track the active menu, highlighted option, typed text and status line."""

    definitions: Dict[str, MenuDefinition] = field(default_factory=dict)
    state: Optional[str] = None
    title: str = "Tank Battalion"
    message: Optional[str] = None
    selection: int = 0
    options: List[MenuOption] = field(default_factory=list)
    text: str = ""
    max_text_length: int = 120

    def register(self, name: str, definition: MenuDefinition) -> None:
        self.definitions[name] = definition

    def activate(self, name: str, *, message: Optional[str] = None) -> None:
        if name not in self.definitions:
            raise KeyError(f"Unknown menu '{name}'")
        definition = self.definitions[name]
        self.state = name
        self.title = definition.title
        self.options = definition.build_options()
        self.selection = 0
        self.text = ""
        self.message = message if message is not None else definition.message

    def close(self) -> None:
        self.state = None
        self.options = []
        self.text = ""

    @property
    def accepts_text(self) -> bool:
        return self.state is not None and self.definitions[self.state].accepts_text

    def change_selection(self, delta: int) -> None:
        if not self.options:
            return
        self.selection = (self.selection + delta) % len(self.options)

    def execute_current(self) -> None:
        if not self.options:
            return
        self.options[self.selection].action()

    # ------------------------------------------------------------------
    # Text entry
    def type_text(self, text: str) -> None:
        if not self.accepts_text:
            return
        room = self.max_text_length - len(self.text)
        if room > 0:
            self.text += text[:room]

    def backspace(self) -> None:
        self.text = self.text[:-1]

    def submit_text(self) -> None:
        if not self.accepts_text:
            return
        handler = self.definitions[self.state].on_submit
        if handler is not None:
            handler(self.text)


__all__ = ["MenuController", "MenuDefinition", "MenuOption"]

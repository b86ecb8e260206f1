"""
Prompting for the interactive menu.

`ChoiceTable` holds a reference list as stable keys (row ids) mapped to the
labels shown to the user, so a selection comes back as a key and never has to
be matched against display strings. `RichPrompter` asks on the terminal;
`ScriptedPrompter` answers from a list, for tests and non-interactive runs.
"""
from collections import OrderedDict, deque
from typing import Any, Callable, Iterable, List, Optional, Tuple

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from employee_tracker.utils.custom_responses import create_console, render_notice
from employee_tracker.utils.exceptions import PromptExhausted, ValidationError


class ChoiceTable:

    def __init__(self, items: Optional[Iterable[Tuple[Any, str]]] = None):
        self._labels = OrderedDict()
        self._keys = {}
        for key, label in items or []:
            self.add(key, label)

    def add(self, key, label: str):
        self._labels[key] = label
        # First row wins when two rows share a label.
        self._keys.setdefault(label, key)

    def with_extra(self, key, label: str) -> "ChoiceTable":
        extended = ChoiceTable(self.items())
        extended.add(key, label)
        return extended

    def label_for(self, key) -> str:
        return self._labels[key]

    def key_for(self, label: str):
        return self._keys[label]

    def keys(self) -> List:
        return list(self._labels.keys())

    def labels(self) -> List[str]:
        return list(self._labels.values())

    def items(self) -> List[Tuple[Any, str]]:
        return list(self._labels.items())

    def __len__(self):
        return len(self._labels)

    def __contains__(self, key):
        return key in self._labels

    def __iter__(self):
        return iter(self._labels)


class RichPrompter:

    def __init__(self, console: Optional[Console] = None):
        self.console = console or create_console()

    def ask_text(self, message: str, validator: Optional[Callable] = None):
        while True:
            value = Prompt.ask(message, console=self.console)
            try:
                return validator(value) if validator else value
            except ValidationError as e:
                render_notice(self.console, e.message)

    def ask_choice(self, message: str, choices: ChoiceTable):
        keys = choices.keys()
        self.console.print(message, style="bold")
        for number, key in enumerate(keys, start=1):
            self.console.print(f"  {number}. {choices.label_for(key)}", markup=False)
        number = IntPrompt.ask(
            "Select",
            console=self.console,
            choices=[str(n) for n in range(1, len(keys) + 1)],
            show_choices=False,
        )
        return keys[number - 1]


class ScriptedPrompter:
    """Answers prompts from a fixed list. Choices are answered by their label."""

    def __init__(self, answers: Iterable, console: Optional[Console] = None):
        self.answers = deque(answers)
        self.console = console or create_console()
        self.asked = []

    def _next_answer(self, message):
        self.asked.append(message)
        if not self.answers:
            raise PromptExhausted(f"No answer left for: {message}")
        return self.answers.popleft()

    def ask_text(self, message: str, validator: Optional[Callable] = None):
        while True:
            value = self._next_answer(message)
            try:
                return validator(value) if validator else value
            except ValidationError as e:
                render_notice(self.console, e.message)

    def ask_choice(self, message: str, choices: ChoiceTable):
        label = self._next_answer(message)
        try:
            return choices.key_for(label)
        except KeyError:
            raise ValueError(f"{label!r} is not one of {choices.labels()}")

"""Interactive question sequences built on Rich prompts.

A command describes what it needs as an ordered list of :class:`Question`
objects and hands them to :func:`ask`, which returns the answers keyed by
question name.

``when`` receives the answers collected so far and decides whether the
question is asked at all. It may also write an answer itself, which is how a
question with only one possible answer can be settled without prompting.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from lagoon_cli.client.errors import PromptError
from lagoon_cli.models.project import ReferenceOption

Answers = dict[str, Any]
Validator = Callable[[str], bool | str]


@dataclass
class Question:
    """One entry of a question sequence."""

    type: Literal["input", "list"]
    name: str
    message: str
    choices: Sequence[ReferenceOption] = ()
    default: Any = ...
    validate: Validator | None = None
    when: Callable[[Answers], bool] | None = None


def _ask_input(question: Question, console: Console) -> Any:
    while True:
        answer = Prompt.ask(
            question.message, console=console, default=question.default,
        )
        if question.validate is None:
            return answer
        verdict = question.validate(answer or "")
        if verdict is True:
            return answer
        console.print(f"[red]>>[/] {escape(str(verdict))}")


def _ask_list(question: Question, console: Console) -> Any:
    if not question.choices:
        console.print(question.message)
        raise PromptError(f"No choices available for '{question.name}'.")
    for index, choice in enumerate(question.choices, start=1):
        console.print(f"  [bold]{index}[/]) {escape(choice.name)}")
    picked = Prompt.ask(
        question.message,
        console=console,
        choices=[str(i) for i in range(1, len(question.choices) + 1)],
        show_choices=False,
        default="1",
    )
    return question.choices[int(picked) - 1].value


def ask(questions: Sequence[Question], console: Console) -> Answers:
    """Ask *questions* in order and return the answers by question name."""
    answers: Answers = {}
    for question in questions:
        if question.when is not None and not question.when(answers):
            continue
        if question.type == "list":
            answers[question.name] = _ask_list(question, console)
        else:
            answers[question.name] = _ask_input(question, console)
    return answers

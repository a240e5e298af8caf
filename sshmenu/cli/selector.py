"""Arrow-key selection widget backed by questionary."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any

import questionary
from prompt_toolkit.output import Output, create_output

from sshmenu.cli.output_filter import BellFilter
from sshmenu.core.interfaces import (
    EndOfInput,
    Failed,
    Interrupted,
    Selected,
    SelectionResult,
)

__all__ = ["QuestionarySelector"]

OutputFactory = Callable[[], Output]


def _bell_filtered_output() -> Output:
    """Create a prompt_toolkit output that never rings the terminal bell."""

    return create_output(stdout=BellFilter(sys.stdout))


class QuestionarySelector:
    """Present a list with questionary and translate the outcome."""

    def __init__(self, output_factory: OutputFactory | None = None) -> None:
        self._output_factory = (
            output_factory if output_factory is not None else _bell_filtered_output
        )

    def select(self, label: str, items: Sequence[str]) -> SelectionResult:
        choices = [questionary.Choice(title=item, value=index) for index, item in enumerate(items)]
        try:
            question = questionary.select(
                label,
                choices=choices,
                qmark="",
                instruction=" ",
                erase_when_done=True,
                output=self._output_factory(),
            )
            answer: Any = question.unsafe_ask()
        except KeyboardInterrupt:
            return Interrupted()
        except EOFError:
            return EndOfInput()
        except (OSError, RuntimeError, ValueError) as exc:
            return Failed(str(exc) or exc.__class__.__name__)

        if answer is None:
            return Interrupted()
        return Selected(int(answer))

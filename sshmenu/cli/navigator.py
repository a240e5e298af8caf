"""Interactive project/server menu that drives command dispatch."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import typer

from sshmenu.cli.dispatcher import dispatch
from sshmenu.config import MenuConfig, Server, load_config
from sshmenu.core.filtering import filter_servers
from sshmenu.core.interfaces import (
    EndOfInput,
    Failed,
    Interrupted,
    Selected,
    SelectionResult,
    Selector,
)

__all__ = [
    "BACK_LABEL",
    "CLEAR_LINE",
    "NAVIGATION_HINT",
    "QUIT_LABEL",
    "MenuNavigator",
    "ProjectSelect",
    "ServerSelect",
]

OutputFn = Callable[[str], None]
WriteFn = Callable[[str], None]
LoaderFn = Callable[[Path], MenuConfig]
DispatchFn = Callable[[Server, str], int]

QUIT_LABEL = "⏻ Quit"
BACK_LABEL = "⬅ Back"
NAVIGATION_HINT = f"Use ↑/↓ to navigate, Enter to select. Select '{QUIT_LABEL}' to exit."
CLEAR_LINE = "\r\x1b[K"


@dataclass(frozen=True, slots=True)
class ProjectSelect:
    """Choosing a project from the top-level list."""


@dataclass(frozen=True, slots=True)
class ServerSelect:
    """Choosing a server inside the project at ``project_index``."""

    project_index: int


def _default_output(message: str) -> None:
    typer.echo(message)


def _default_write(text: str) -> None:
    typer.echo(text, nl=False, color=True)


def _default_selector() -> Selector:
    from sshmenu.cli.selector import QuestionarySelector

    return QuestionarySelector()


class MenuNavigator:
    """Run the flat search menu or the two-step project/server menu."""

    def __init__(
        self,
        config_path: Path,
        *,
        selector: Selector | None = None,
        loader: LoaderFn | None = None,
        dispatcher: DispatchFn | None = None,
        output: OutputFn | None = None,
        write: WriteFn | None = None,
    ) -> None:
        self._config_path = config_path
        self._selector = selector if selector is not None else _default_selector()
        self._loader = loader if loader is not None else load_config
        self._dispatch = dispatcher if dispatcher is not None else dispatch
        self._output = output if output is not None else _default_output
        self._write = write if write is not None else _default_write

    def run(self, search: str = "") -> int:
        """Show the menu matching ``search`` and return an exit code.

        :class:`~sshmenu.config.ConfigError` propagates to the caller.
        """

        if search:
            return self._run_filtered(search)
        return self._run_hierarchical()

    def _run_filtered(self, search: str) -> int:
        config = self._loader(self._config_path)
        matches = filter_servers(config, search)
        if not matches:
            self._output(f"No servers found matching: {search}")
            return 0

        items = [server.label for server in matches]
        items.append(QUIT_LABEL)
        result = self._select("Select Server", items)
        if not isinstance(result, Selected):
            return self._handle_cancel(result)
        if result.index == len(matches):
            self._output("Exiting.")
            return 0
        if not 0 <= result.index < len(matches):
            return 0

        self._dispatch(matches[result.index], config.global_command)
        return 0

    def _run_hierarchical(self) -> int:
        state: ProjectSelect | ServerSelect = ProjectSelect()
        config = MenuConfig()
        printed_hint = False

        while True:
            if isinstance(state, ProjectSelect):
                config = self._loader(self._config_path)
                if not printed_hint:
                    self._output(NAVIGATION_HINT)
                    printed_hint = True

                items = [project.name for project in config.projects]
                items.append(QUIT_LABEL)
                result = self._select("Select Project", items)
                if not isinstance(result, Selected):
                    return self._handle_cancel(result)
                if result.index == len(config.projects):
                    self._output("Exiting.")
                    return 0
                if not 0 <= result.index < len(config.projects):
                    continue
                state = ServerSelect(result.index)
                continue

            project = config.projects[state.project_index]
            items = [server.label for server in project.servers]
            items.append(BACK_LABEL)
            result = self._select("Select Server", items)
            if not isinstance(result, Selected):
                return self._handle_cancel(result)
            if result.index == len(project.servers):
                state = ProjectSelect()
                continue
            if not 0 <= result.index < len(project.servers):
                continue

            self._dispatch(project.servers[result.index], config.global_command)

    def _select(self, label: str, items: list[str]) -> SelectionResult:
        result = self._selector.select(label, items)
        self._write(CLEAR_LINE)
        return result

    def _handle_cancel(self, result: SelectionResult) -> int:
        if isinstance(result, (Interrupted, EndOfInput)):
            self._output("Exiting.")
        elif isinstance(result, Failed):
            self._output(f"Prompt failed: {result.reason}")
        return 0

"""Main entry point - one command per selection task."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from PySide6.QtWidgets import QApplication

from selection_gemini.coordinators import CommandCoordinator
from selection_gemini.core import TaskKind
from selection_gemini.services import (
    CommandPipeline,
    CredentialResolver,
    GeminiModelInvoker,
    QtSelectionProvider,
    SettingsManager,
)
from selection_gemini.ui import ResultWindow


app = typer.Typer(no_args_is_help=True, help="Send the selected text to Gemini.")

EnvDirOption = typer.Option(
    None,
    "--env-dir",
    help="Directory holding the .env file (defaults to the project root).",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log requests at DEBUG level.")


def connect_window(coordinator: CommandCoordinator, window: ResultWindow) -> None:
    """Wire coordinator signals to the window and the refresh action back."""
    coordinator.run_started.connect(window.show_loading)
    coordinator.run_succeeded.connect(window.show_success)
    coordinator.run_failed.connect(window.show_failure)
    window.refresh_requested.connect(coordinator.refresh)


def launch(task: TaskKind, env_dir: Optional[Path] = None, verbose: bool = False) -> int:
    """
    Bootstrap one command following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1. Initialize Application
    qt_app = QApplication.instance() or QApplication(sys.argv[:1])
    qt_app.setApplicationName("Selection Gemini")

    # 2. Initialize Services
    settings_manager = SettingsManager(project_root=env_dir)
    pipeline = CommandPipeline(
        settings_manager=settings_manager,
        credential_resolver=CredentialResolver(),
        model_invoker=GeminiModelInvoker(),
    )

    # 3. Construct UI and Coordinator
    window = ResultWindow(task)
    coordinator = CommandCoordinator(
        task=task,
        pipeline=pipeline,
        selection_provider=QtSelectionProvider(),
    )
    connect_window(coordinator, window)

    # 4. First run, then the event loop
    window.show()
    coordinator.start()
    return qt_app.exec()


@app.command("summarize-japanese")
def summarize_japanese(
    env_dir: Optional[Path] = EnvDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Summarize the selected text in Japanese."""
    raise typer.Exit(launch(TaskKind.SUMMARIZE_JA, env_dir, verbose))


@app.command("translate-to-english")
def translate_to_english(
    env_dir: Optional[Path] = EnvDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Translate the selected Japanese text to English."""
    raise typer.Exit(launch(TaskKind.TRANSLATE_TO_EN, env_dir, verbose))


@app.command("translate-to-japanese")
def translate_to_japanese(
    env_dir: Optional[Path] = EnvDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Translate the selected English text to Japanese."""
    raise typer.Exit(launch(TaskKind.TRANSLATE_TO_JA, env_dir, verbose))


def main():
    app()


if __name__ == "__main__":
    main()

"""Main entry point for pomo."""

import typer

from pomo.commands.session_command import start

app = typer.Typer(
    name="pomo",
    help="A command-line Pomodoro timer: focus blocks, breaks and a live countdown.",
    add_completion=False,
)

app.command()(start)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

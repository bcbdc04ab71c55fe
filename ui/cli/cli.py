"""CLI entrypoint for frame-restore."""

from __future__ import annotations

import typer

from ui.cli import commands

app = typer.Typer(help="Persist and restore application frame geometry")
config_app = typer.Typer(help="Configuration commands")


@app.command("show")
def show_cmd() -> None:
    """Show the saved frame snapshots."""
    commands.show()


@app.command("clear")
def clear_cmd() -> None:
    """Forget the saved frame snapshots."""
    commands.clear()


@app.command("demo")
def demo_cmd(
    frames: int = typer.Option(2, min=1, max=8, help="Frames to open on a cold start"),
) -> None:
    """Open a Tk demo that remembers its frames across runs."""
    commands.demo(frames=frames)


@config_app.command("show")
def config_show_cmd() -> None:
    """Show effective configuration."""
    commands.config_show()


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()

"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from core.orchestrator import Orchestrator
from memory.stores.snapshot_store import SnapshotLoadError, SnapshotNotFoundError


def _orchestrator(root: Path | None = None) -> Orchestrator:
    orchestrator = Orchestrator(root=root)
    level = str(orchestrator.load_config().get("logging", {}).get("level", "WARNING")).upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format="%(levelname)s %(name)s: %(message)s")
    return orchestrator


def show(root: Path | None = None) -> None:
    """Print the stored snapshot sequence."""
    store = _orchestrator(root).build_store()
    try:
        sequence = store.load()
    except SnapshotNotFoundError:
        typer.echo(f"No saved frames at {store.path}")
        return
    except SnapshotLoadError as e:
        typer.echo(f"Unreadable snapshot: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(sequence, indent=2))


def clear(root: Path | None = None) -> None:
    """Delete the stored snapshot file."""
    store = _orchestrator(root).build_store()
    if store.clear():
        typer.echo(f"Removed {store.path}")
    else:
        typer.echo(f"No saved frames at {store.path}")


def config_show(root: Path | None = None) -> None:
    """Show effective runtime config."""
    orchestrator = _orchestrator(root)
    config = dict(orchestrator.load_config())
    config["snapshot_path"] = str(orchestrator.build_store().path)
    typer.echo(json.dumps(config, indent=2))


def demo(frames: int = 2, root: Path | None = None) -> None:
    """Run the Tk demo with frame restore enabled."""
    from demo_frames import run_demo

    run_demo(frames=frames, orchestrator=_orchestrator(root))

"""Input/output helpers shared by the CLI commands."""

from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator

import typer

from .. import logging as clog
from ..config import Config
from ..errors import ClassHashError

log = clog.get_logger("class_hash.cli")


def read_text(path: str) -> str:
    """Read a file, or stdin when path is '-'."""
    if path == "-":
        return sys.stdin.read()
    p = Path(path)
    if not p.is_file():
        raise typer.BadParameter(f"no such file: {path}")
    return p.read_text(encoding="utf-8")


def emit(ctx: typer.Context, value: str, **fields: Any) -> None:
    """Print a hash (text) or a JSON object with the hash and extra fields."""
    cfg: Config | None = ctx.obj
    if cfg is not None and cfg.output.format == "json":
        payload: Dict[str, Any] = dict(fields)
        payload["result"] = value
        typer.echo(json.dumps(payload, separators=(",", ":")))
    else:
        typer.echo(value)


@contextmanager
def user_errors(source: str) -> Iterator[None]:
    """Report input errors on stderr with exit code 1."""
    clog.bind(source=source)
    try:
        yield
    except ClassHashError as e:
        log.debug("input rejected", extra={"error": e.to_dict()})
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1)
    except json.JSONDecodeError as e:
        typer.echo(f"error: malformed JSON in {source}: {e}", err=True)
        raise typer.Exit(1)
    finally:
        clog.unbind("source")

"""
class_hash.cli
--------------
Command-line entrypoints:

- class-hash           : class hash of a legacy or Sierra class (auto-detected)
- compiled-class-hash  : compiled (CASM) class hash
- hinted-class-hash    : legacy hinted class hash
- address              : contract address from class hash, salt, deployer, calldata
- selector             : entry-point selector for a function name

Usage:
  class-hash class-hash contract.json
  python -m class_hash.cli address --class-hash 0x.. --salt 0x1 --calldata 1,2
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .. import config as cfg_mod
from .. import logging as clog
from ..errors import ConfigError
from ..version import runtime_banner
from . import address_cmd, hash_cmds

__all__ = ["build_app", "main"]


def build_app() -> typer.Typer:
    app = typer.Typer(
        name="class-hash",
        help="Contract class hashes and deployment addresses",
        no_args_is_help=True,
        add_completion=False,
    )

    @app.callback(invoke_without_command=True)
    def _meta(
        ctx: typer.Context,
        version: bool = typer.Option(
            False, "--version", "-V", help="Print version and exit", is_eager=True
        ),
        config: Optional[Path] = typer.Option(
            None, "--config", "-c", help="TOML config file (env: CLASS_HASH_CONFIG)"
        ),
        log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
        json_out: bool = typer.Option(False, "--json", help="Emit JSON results"),
    ) -> None:
        if version:
            typer.echo(runtime_banner())
            raise typer.Exit(0)
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit(0)

        overrides: dict = {}
        if log_level:
            overrides["log"] = {"level": log_level}
        if json_out:
            overrides["output"] = {"format": "json"}
        try:
            cfg = cfg_mod.load(config, overrides=overrides)
        except ConfigError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(2)

        clog.configure_from_config(cfg)
        clog.bind(component="cli")
        ctx.obj = cfg

    app.command(name="class-hash")(hash_cmds.class_hash)
    app.command(name="compiled-class-hash")(hash_cmds.compiled_class_hash)
    app.command(name="hinted-class-hash")(hash_cmds.hinted_class_hash)
    app.command(name="selector")(hash_cmds.selector)
    app.command(name="address")(address_cmd.address)
    return app


def main(argv: Optional[list[str]] = None) -> int:
    """Entrypoint for the `class-hash` console script and `python -m class_hash.cli`."""
    app = build_app()
    app(args=argv)
    return 0

"""
Contract address command.

    class-hash address --class-hash 0x.. --salt 0x1 --deployer 0x0 --calldata 1,0x2,name
    class-hash address --class-hash 0x.. --salt 0x1 --calldata-json args.json

`--calldata` is a comma-separated flat list; `--calldata-json` takes a JSON
array or object of (possibly nested) constructor arguments.
"""

from __future__ import annotations

from typing import Any, List, Optional

import typer

from ..address import calculate_contract_address_from_hash
from ..encoding.canonical import parse
from ._io import emit, read_text, user_errors


def _split(v: str) -> List[str]:
    return [s.strip() for s in v.split(",") if s.strip()]


def address(
    ctx: typer.Context,
    class_hash: str = typer.Option(..., "--class-hash", help="Class hash (hex or decimal)"),
    salt: str = typer.Option(..., "--salt", help="Deployment salt"),
    deployer: str = typer.Option("0", "--deployer", help="Deployer address (0 for none)"),
    calldata: Optional[str] = typer.Option(None, "--calldata", help="Comma-separated calldata"),
    calldata_json: Optional[str] = typer.Option(
        None, "--calldata-json", help="JSON file with constructor arguments, or '-'"
    ),
) -> None:
    """Address a class will be deployed at."""
    if calldata is not None and calldata_json is not None:
        raise typer.BadParameter("use either --calldata or --calldata-json")

    args: Any = []
    source = "calldata"
    if calldata is not None:
        args = _split(calldata)
    elif calldata_json is not None:
        source = calldata_json
        args = read_text(calldata_json)

    with user_errors(source):
        if isinstance(args, str):
            args = parse(args)
        result = calculate_contract_address_from_hash(salt, class_hash, args, deployer)
        emit(ctx, result, class_hash=class_hash, salt=salt, deployer=deployer)

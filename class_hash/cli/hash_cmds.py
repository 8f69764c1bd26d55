"""
Class hash commands.

    class-hash class-hash contract_class.json
    class-hash compiled-class-hash contract.casm.json
    class-hash hinted-class-hash legacy.json
    class-hash selector transfer
    cat contract_class.json | class-hash --json class-hash -
"""

from __future__ import annotations

import typer

from ..crypto import get_selector_from_name
from ..dispatch import class_kind, compute_class_hash
from ..legacy import compute_hinted_class_hash
from ..sierra import compute_compiled_class_hash
from ..types import decode_contract_class
from ._io import emit, read_text, user_errors

PATH_ARG = typer.Argument(..., help="JSON file, or '-' for stdin")


def class_hash(ctx: typer.Context, path: str = PATH_ARG) -> None:
    """Class hash of a legacy or Sierra contract class."""
    text = read_text(path)
    with user_errors(path):
        cls = decode_contract_class(text)
        emit(ctx, compute_class_hash(cls), kind=class_kind(cls))


def compiled_class_hash(ctx: typer.Context, path: str = PATH_ARG) -> None:
    """Compiled (CASM) class hash."""
    text = read_text(path)
    with user_errors(path):
        emit(ctx, compute_compiled_class_hash(text), kind="casm")


def hinted_class_hash(ctx: typer.Context, path: str = PATH_ARG) -> None:
    """Hinted class hash of a legacy contract class."""
    text = read_text(path)
    with user_errors(path):
        emit(ctx, compute_hinted_class_hash(text), kind="legacy")


def selector(ctx: typer.Context, name: str = typer.Argument(..., help="Function name")) -> None:
    """Entry-point selector of a function name."""
    with user_errors(name):
        try:
            value = get_selector_from_name(name)
        except UnicodeEncodeError:
            raise typer.BadParameter("function names must be ASCII")
        emit(ctx, value, name=name)

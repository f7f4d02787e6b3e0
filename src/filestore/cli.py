"""CLI commands using Typer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated, NoReturn

if TYPE_CHECKING:
    from filestore.context import AppContext

import typer

from filestore import __version__
from filestore.console import Output
from filestore.context import create_context
from filestore.errors import FileStoreError

app = typer.Typer(
    name="filestore",
    help="Read, write, list and remove files and directories",
    no_args_is_help=True,
)

out = Output()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        out.console.print(f"filestore v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
    ] = False,
) -> None:
    """Read, write, list and remove files and directories."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            force=True,
        )


def _fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    out.show_error(message)
    raise typer.Exit(1)


def _load_context(context: AppContext | None) -> AppContext:
    if context is not None:
        return context
    try:
        return create_context()
    except FileStoreError as e:
        _fail(str(e))


def _resolve_lock(ctx: AppContext, lock: bool | None) -> bool:
    return ctx.settings.lock if lock is None else lock


LockOption = Annotated[
    bool | None,
    typer.Option("--lock/--no-lock", help="Hold an advisory lock (default from config)"),
]


# ============================================================================
# Content Commands
# ============================================================================


@app.command("read")
def read(
    path: Annotated[str, typer.Argument(help="File to read")],
    lock: LockOption = None,
    _context=None,
) -> None:
    """Print a file's content."""
    ctx = _load_context(_context)
    try:
        content = ctx.store.read(path, _resolve_lock(ctx, lock))
    except FileStoreError as e:
        _fail(str(e))
    out.show_content(content)


@app.command("write")
def write(
    path: Annotated[str, typer.Argument(help="File to write")],
    content: Annotated[str, typer.Argument(help="New content")],
    lock: LockOption = None,
    _context=None,
) -> None:
    """Replace a file's content."""
    ctx = _load_context(_context)
    if not ctx.store.write(path, content, _resolve_lock(ctx, lock)):
        _fail(f"Failed to write '{path}'")
    out.show_success(f"Wrote '{path}'")


@app.command("append")
def append(
    path: Annotated[str, typer.Argument(help="File to append to")],
    content: Annotated[str, typer.Argument(help="Content to append")],
    lock: LockOption = None,
    _context=None,
) -> None:
    """Append content to the end of a file."""
    ctx = _load_context(_context)
    if not ctx.store.append(path, content, _resolve_lock(ctx, lock)):
        _fail(f"Failed to append to '{path}'")
    out.show_success(f"Appended to '{path}'")


@app.command("prepend")
def prepend(
    path: Annotated[str, typer.Argument(help="File to prepend to")],
    content: Annotated[str, typer.Argument(help="Content to insert")],
    lock: LockOption = None,
    _context=None,
) -> None:
    """Insert content at the start of a file."""
    ctx = _load_context(_context)
    try:
        ok = ctx.store.prepend(path, content, _resolve_lock(ctx, lock))
    except FileStoreError as e:
        _fail(str(e))
    if not ok:
        _fail(f"Failed to prepend to '{path}'")
    out.show_success(f"Prepended to '{path}'")


# ============================================================================
# Directory Commands
# ============================================================================


@app.command("ls")
def ls(
    path: Annotated[str, typer.Argument(help="Directory to list")],
    files: Annotated[bool, typer.Option("--files", "-f", help="List files only")] = False,
    ext: Annotated[
        list[str] | None,
        typer.Option("--ext", "-e", help="Keep only this extension (with --files, repeatable)"),
    ] = None,
    _context=None,
) -> None:
    """List directory entries."""
    ctx = _load_context(_context)
    try:
        names = ctx.store.list_dir(path, only_files=files, extensions=ext or None)
    except FileStoreError as e:
        _fail(str(e))
    out.show_entries(names)


@app.command("size")
def size(
    path: Annotated[str, typer.Argument(help="File or directory")],
    _context=None,
) -> None:
    """Print the size in bytes, summed recursively for directories."""
    ctx = _load_context(_context)
    out.console.print(str(ctx.store.size(path)))


@app.command("rm")
def rm(
    path: Annotated[str, typer.Argument(help="File or directory to remove")],
    recursive: Annotated[
        bool | None,
        typer.Option("--recursive/--no-recursive", "-r/-R", help="Remove directory contents"),
    ] = None,
    _context=None,
) -> None:
    """Remove a file or directory."""
    ctx = _load_context(_context)
    if recursive is None:
        recursive = ctx.settings.recursive_remove
    try:
        ctx.store.remove(path, recursive=recursive)
    except FileStoreError as e:
        _fail(str(e))
    out.show_success(f"Removed '{path}'")


@app.command("mkdir")
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="Octal permission bits, e.g. 755")
    ] = None,
    parents: Annotated[
        bool | None,
        typer.Option("--parents/--no-parents", "-p/-P", help="Create missing parents"),
    ] = None,
    _context=None,
) -> None:
    """Create a directory."""
    ctx = _load_context(_context)
    if mode is None:
        mode_bits = ctx.settings.dir_mode
    else:
        try:
            mode_bits = int(mode, 8)
        except ValueError:
            _fail(f"Invalid mode '{mode}'")
    if parents is None:
        parents = ctx.settings.recursive_mkdir
    try:
        ctx.store.mkdir(path, mode_bits, recursive=parents)
    except FileStoreError as e:
        _fail(str(e))
    out.show_success(f"Created '{path}'")


@app.command("stat")
def stat(
    path: Annotated[str, typer.Argument(help="Path to inspect")],
    _context=None,
) -> None:
    """Show kind, access and size of a path."""
    ctx = _load_context(_context)
    out.show_info(ctx.store.info(path))


if __name__ == "__main__":
    app()

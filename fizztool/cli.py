from __future__ import annotations

import contextlib
import io
import sys
from typing import Any

import click
import typer

from .build import BuildInfo, platform_suffix
from .cli_shared import (
    GlobalOpts,
    OpError,
    _eprint,
    _print_json,
    _rich_error,
)
from .config import _bootstrap_env, load_settings, resolve_key
from .lookup import LookupRequest, lookup
from .version_info import formatted_notice, get_version_info

PROG_NAME = "fizztool"

ROOT_HELP = """fizztool is a small application that emits output for test scenarios.

When you use the 'get' command, fizztool:

- Writes informational messages, such as banner text, progress, etc. to stderr

- Writes error messages to stderr

- Writes successful output to stdout as a JSON object of simple key-value pairs
"""

GET_HELP = """Retrieve a key from the data store by name.

When you use this command, it always emits a license header with the name of
the application, its version, and the copyright notice to stderr.

If you pass the '--key' flag with 'fizz' as the value, it emits a JSON blob to
stdout.

If you pass any other value for '--key', it emits an error message reporting
that the key is invalid to stderr.

You can only retrieve one key at a time.
"""

VERSION_HELP = """Display the extended version information for fizztool.

By default, this command emits a JSON blob to stdout that includes the
application name, the version, the commit SHA this version was built on, the
date this version was built, and the URL to this version's release notes.

You can use the '--one-line' flag to emit a shorter string output, which only
includes the name and version separated by a dash wrapped in spaces.
"""


app = typer.Typer(
    name=PROG_NAME,
    help=ROOT_HELP,
    short_help="A small app for emitting output for test scenarios.",
    no_args_is_help=True,
    invoke_without_command=True,
    add_completion=False,
)


def _injected(ctx: click.Context) -> tuple[BuildInfo, str]:
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    build = obj.get("build")
    if not isinstance(build, BuildInfo):
        build = BuildInfo.current()
    suffix = obj.get("platform_suffix")
    if not isinstance(suffix, str):
        suffix = platform_suffix()
    return build, suffix


def _version_callback(ctx: typer.Context, value: bool) -> None:
    if value:
        build, suffix = _injected(ctx)
        typer.echo(get_version_info(build, suffix=suffix).one_line())
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        help="config file (default is $HOME/.fizztool.yaml)",
    ),
    quiet: bool = typer.Option(False, "--quiet", help="Reduce stderr logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    del version
    if ctx.invoked_subcommand is None:
        typer.echo(_command_help_text(ctx))
        raise typer.Exit(code=0)
    build, suffix = _injected(ctx)
    g = GlobalOpts(
        settings=load_settings(config),
        build=build,
        platform_suffix=suffix,
        quiet=quiet,
    )
    if g.settings.config_file_used and not g.quiet:
        _eprint(f"Using config file: {g.settings.config_file_used}")
    ctx.obj = {"g": g}


def _ctx_global(ctx: typer.Context) -> GlobalOpts:
    if isinstance(ctx.obj, dict) and isinstance(ctx.obj.get("g"), GlobalOpts):
        return ctx.obj["g"]
    build, suffix = _injected(ctx)
    return GlobalOpts(settings=load_settings(None), build=build, platform_suffix=suffix)


@app.command("get", help=GET_HELP, short_help="Retrieve a key from the data store.")
def get(
    ctx: typer.Context,
    key: str | None = typer.Option(None, "--key", "-k", help="the key to fizz"),
) -> None:
    g = _ctx_global(ctx)
    resolved = resolve_key(key, g.settings)
    if not resolved:
        typer.echo(_command_help_text(ctx))
        return

    _eprint(formatted_notice(g.build.version, suffix=g.platform_suffix))
    _print_json(lookup(LookupRequest(key=resolved)))


@app.command(
    "version",
    help=VERSION_HELP,
    short_help="Display the extended version information for fizztool.",
)
def version(
    ctx: typer.Context,
    one_line: bool = typer.Option(False, "--one-line", help="Return short version on one line"),
) -> None:
    g = _ctx_global(ctx)
    info = get_version_info(g.build, suffix=g.platform_suffix)
    if one_line:
        typer.echo(info.one_line())
        return
    _print_json(info.to_json())


def _root_help_text() -> str:
    buf = io.StringIO()
    try:
        with contextlib.redirect_stdout(buf):
            try:
                app(args=["--help"], prog_name=PROG_NAME, standalone_mode=False)
            except (typer.Exit, click.ClickException):
                pass
    except Exception:
        return ""
    return str(buf.getvalue() or "").strip()


def _command_help_text(ctx: click.Context) -> str:
    # Rich-formatted help is printed as a side effect instead of returned.
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        text = str(ctx.get_help() or "")
    return (text or buf.getvalue()).strip()


def _render_usage_error_with_help(*, message: str, ctx: click.Context | None = None) -> None:
    _rich_error(message)
    help_text = ""
    if isinstance(ctx, click.Context):
        try:
            help_text = _command_help_text(ctx)
        except Exception:
            help_text = ""
    if not help_text:
        help_text = _root_help_text()
    if help_text:
        _eprint("")
        _eprint(help_text)


def main(
    argv: list[str] | None = None,
    *,
    build: BuildInfo | None = None,
    suffix: str | None = None,
) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        argv = ["--help"]
    obj: dict[str, Any] = {
        "build": build if build is not None else BuildInfo.current(),
        "platform_suffix": platform_suffix() if suffix is None else suffix,
    }
    try:
        _bootstrap_env()
        result = app(args=argv, prog_name=PROG_NAME, standalone_mode=False, obj=obj)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except click.ClickException as e:
        if isinstance(e, click.UsageError):
            _render_usage_error_with_help(message=e.format_message(), ctx=getattr(e, "ctx", None))
            return int(e.exit_code)
        _rich_error(e.format_message())
        return int(e.exit_code)
    except OpError as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

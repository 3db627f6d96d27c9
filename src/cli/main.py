"""CLI principal (Typer).

Por qué la CLI es un caller externo:
- La librería (adapters/core) no imprime ni captura errores; la CLI es el
  único sitio que traduce cada tipo de error a un mensaje y exit code.
"""

from __future__ import annotations

import asyncio
import json
from typing import NoReturn

import httpx
import typer
from rich.console import Console
from rich.markup import escape

from adapters.github_api import GitHubAPI
from cli import doctor
from cli.ui_components import build_user_table, configure_logging
from core.config import AppSettings
from core.errors import BadResponse, DecodeError, InvalidURL, NotAnObject

app = typer.Typer(no_args_is_help=True, help="Fetch GitHub user profiles as typed data.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    _err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(code=1)


@app.command()
def user(
    username: str = typer.Argument(..., help="GitHub username."),
    as_json: bool = typer.Option(False, "--json", help="Print the typed profile as JSON."),
    raw: bool = typer.Option(False, "--raw", help="Print the full payload without a schema."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Fetch a user profile from the GitHub API."""

    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level, _err_console)
    api = GitHubAPI(settings)

    try:
        if raw:
            payload = asyncio.run(api.get_user_json(username))
            _console.print_json(json.dumps(payload, ensure_ascii=False))
            return
        profile = asyncio.run(api.get_user(username))
    except InvalidURL as exc:
        _fail(str(exc))
    except BadResponse as exc:
        _fail(f"bad response from API (status {exc.status_code})")
    except NotAnObject as exc:
        _fail(str(exc))
    except DecodeError as exc:
        _fail(f"could not decode profile ({exc})")
    except httpx.TransportError as exc:
        _fail(f"transport error: {exc!r}")

    if as_json:
        _console.print_json(profile.model_dump_json())
    else:
        _console.print(build_user_table(profile))


def run() -> None:
    app()


if __name__ == "__main__":
    run()

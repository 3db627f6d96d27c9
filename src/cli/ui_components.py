"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from core.domain.models import GitHubUser


def configure_logging(level: str, console: Console) -> None:
    """Instala un `RichHandler` en el logger raíz (solo desde la CLI)."""

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=False, show_path=False)],
        force=True,
    )


def build_user_table(user: GitHubUser) -> Table:
    table = Table(title=f"GitHub user: {user.login}")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("login", user.login)
    table.add_row("name", user.name)
    table.add_row("url", user.url)
    table.add_row("followers", str(user.followers))
    table.add_row("following", str(user.following))
    return table

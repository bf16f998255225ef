"""Typer-based CLI for update-notifier.

Provides commands:
- update-notifier notify: Print the boxed update notice on stderr
- update-notifier check: Report whether a notice would be shown
- update-notifier doctor: Show detected context and configuration
"""

import json
import logging
import platform
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__, config
from .automation import detect_automated_context, detect_package_manager
from .exceptions import UnknownBorderStyleError
from .logging_config import setup_logging
from .models import NotifyOptions
from .notifier import UpdateNotifier
from .renderer import BORDER_STYLES, get_border
from .version_gate import should_notify

logger = logging.getLogger(__name__)
console = Console()

app = typer.Typer(help="Update Notifier Command-Line Interface")


def _resolve_automated(automated: Optional[bool]) -> bool:
    """Use the explicit flag when given, otherwise look at the environment."""
    if automated is None:
        return detect_automated_context()
    return automated


@app.callback()
def main(
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level", help="Logging level"),
    log_format: str = typer.Option(config.LOG_FORMAT, "--log-format", help="Log format: text or json"),
) -> None:
    """Boxed package-update notices for the terminal."""
    setup_logging(level=log_level, format_type=log_format, log_file=config.LOG_FILE)


# ============================================================================
# Notify Command
# ============================================================================


@app.command()
def notify(
    package: str = typer.Argument(..., help="Package name used in the update command"),
    current: str = typer.Argument(..., help="Installed version"),
    latest: str = typer.Argument(..., help="Latest available version"),
    is_global: bool = typer.Option(False, "--global/--no-global", help="Suggest npm i --location=global"),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Custom template with {packageName}, {currentVersion}, {latestVersion}, {updateCommand}",
    ),
    automated: Optional[bool] = typer.Option(
        None,
        "--automated/--interactive",
        help="Force the automated-context flag (default: detect from environment)",
    ),
    notify_in_script: bool = typer.Option(
        config.NOTIFY_IN_SCRIPT, "--notify-in-script", help="Show the notice inside npm/yarn/pnpm scripts"
    ),
    padding: int = typer.Option(config.BOX_PADDING, "--padding", min=0, help="Horizontal padding inside the box"),
    border: str = typer.Option(config.BORDER_STYLE, "--border", help="Border style"),
) -> None:
    """Print the update notice on stderr when an update is available.

    Example:
        update-notifier notify my-cli 0.0.2 1.0.0 --global
    """
    try:
        get_border(border)
    except UnknownBorderStyleError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(2)

    notifier = UpdateNotifier(
        package,
        current,
        latest,
        is_automated_context=_resolve_automated(automated),
        notify_in_automated_context=notify_in_script,
    )
    options = NotifyOptions(
        is_global=is_global,
        message=message.replace("\\n", "\n") if message else None,
        padding=padding,
        border_style=border,
    )
    notifier.notify(options)


# ============================================================================
# Check Command
# ============================================================================


@app.command()
def check(
    current: str = typer.Argument(..., help="Installed version"),
    latest: str = typer.Argument(..., help="Latest available version"),
    automated: Optional[bool] = typer.Option(
        None,
        "--automated/--interactive",
        help="Force the automated-context flag (default: detect from environment)",
    ),
    notify_in_script: bool = typer.Option(
        config.NOTIFY_IN_SCRIPT, "--notify-in-script", help="Show the notice inside npm/yarn/pnpm scripts"
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output for scripting"),
) -> None:
    """Report whether a notice would be shown; exit code 1 means no.

    Example:
        update-notifier check 1.0.0 1.1.0 --interactive
    """
    is_automated = _resolve_automated(automated)
    decision = should_notify(
        current,
        latest,
        is_automated_context=is_automated,
        notify_in_automated_context=notify_in_script,
    )

    if json_output:
        payload = {
            "current": current,
            "latest": latest,
            "automated_context": is_automated,
            "notify_in_script": notify_in_script,
            "notify": decision,
        }
        console.print(json.dumps(payload, indent=2))
    elif decision:
        console.print(f"✅ Update available: {current} → {latest}")
    else:
        console.print(f"No notice for {current} → {latest}")

    raise typer.Exit(0 if decision else 1)


# ============================================================================
# Doctor Command
# ============================================================================


@app.command()
def doctor(
    json_output: bool = typer.Option(False, "--json", help="JSON output for scripting"),
) -> None:
    """Show the detected execution context and effective configuration."""
    context = {
        "automated_context": detect_automated_context(),
        "package_manager": detect_package_manager(),
        "stderr_is_tty": sys.stderr.isatty(),
    }
    if json_output:
        output = {
            "version": __version__,
            "system": {
                "platform": platform.system(),
                "python_version": platform.python_version(),
            },
            "context": context,
            "config": config.as_dict(),
        }
        console.print(json.dumps(output, indent=2))
        return

    console.print(Panel(f"Update Notifier {__version__} Diagnostics", style="bold blue"))

    context_table = Table(title="Execution Context", show_header=False)
    context_table.add_column("Key", style="cyan")
    context_table.add_column("Value", style="white")
    context_table.add_row("Platform", platform.system())
    context_table.add_row("Python Version", platform.python_version())
    context_table.add_row("Automated Context", "✅ Yes" if context["automated_context"] else "❌ No")
    context_table.add_row("Package Manager", context["package_manager"] or "—")
    context_table.add_row("stderr is a TTY", "✅ Yes" if context["stderr_is_tty"] else "❌ No")
    console.print(context_table)

    config_table = Table(title="Configuration", show_header=False)
    config_table.add_column("Key", style="cyan")
    config_table.add_column("Value", style="white")
    for key, value in config.as_dict().items():
        config_table.add_row(key, "—" if value is None else str(value))
    config_table.add_row("border_styles", ", ".join(sorted(BORDER_STYLES)))
    console.print(config_table)


if __name__ == "__main__":
    app()

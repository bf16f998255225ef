"""Show a boxed update notice on stderr.

``UpdateNotifier`` is a plain object: the caller provides the versions and
whether the process runs in an automated context, and ``notify`` applies the
version gate, renders the box and writes it.

Usage:
    from update_notifier import NotifyOptions, UpdateNotifier

    notifier = UpdateNotifier("my-cli", "0.0.2", "1.0.0")
    notifier.notify(NotifyOptions(is_global=True))
"""

import atexit
import logging
from typing import Optional

from rich.console import Console
from rich.text import Text

from . import config
from .models import NotifyOptions, UpdateInfo
from .renderer import render
from .version_gate import should_notify

logger = logging.getLogger(__name__)


def colorize_border(message: str, color: Optional[str]) -> Text:
    """Wrap a rendered box in a Text with only the border characters styled."""
    text = Text(message)
    if not color:
        return text

    lines = message.split("\n")
    offset = 0
    for index, line in enumerate(lines):
        if index in (0, len(lines) - 1):
            text.stylize(color, offset, offset + len(line))
        elif line:
            text.stylize(color, offset, offset + 1)
            text.stylize(color, offset + len(line) - 1, offset + len(line))
        offset += len(line) + 1
    return text


class UpdateNotifier:
    """Notice printer for one package.

    Attributes:
        update: Package name with current and latest versions
        is_automated_context: Running inside a package-manager script
        notify_in_automated_context: Show the notice in scripts anyway
        console: Rich console bound to stderr (created lazily)
    """

    def __init__(
        self,
        package_name: str,
        current_version: str,
        latest_version: str,
        *,
        is_automated_context: bool = False,
        notify_in_automated_context: bool = False,
        console: Optional[Console] = None,
    ):
        self.update = UpdateInfo(
            package_name=package_name,
            current_version=current_version,
            latest_version=latest_version,
        )
        self.is_automated_context = is_automated_context
        self.notify_in_automated_context = notify_in_automated_context
        self._console = console

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console(stderr=True, highlight=False)
        return self._console

    def should_notify(self, options: NotifyOptions) -> bool:
        """Apply the opt-out and the version/automation gate for ``options``."""
        if config.DISABLED:
            logger.debug("Update notice for %s disabled by NO_UPDATE_NOTIFIER", self.update.package_name)
            return False

        override = (
            self.notify_in_automated_context
            or config.NOTIFY_IN_SCRIPT
            or not options.suppress_in_automated_context
        )
        return should_notify(
            self.update.current_version,
            self.update.latest_version,
            is_automated_context=self.is_automated_context,
            notify_in_automated_context=override,
        )

    def notify(self, options: Optional[NotifyOptions] = None) -> Optional[str]:
        """Print the update notice if it should be shown.

        Args:
            options: Display options; defaults to ``NotifyOptions()``

        Returns:
            The rendered box, or None when nothing is printed. Never raises.
        """
        options = options or NotifyOptions()
        try:
            if not self.should_notify(options):
                logger.debug(
                    "No update notice for %s (%s -> %s, automated=%s)",
                    self.update.package_name,
                    self.update.current_version,
                    self.update.latest_version,
                    self.is_automated_context,
                )
                return None

            message = render(
                self.update,
                template=options.message,
                include_global_flag=options.is_global,
                padding=options.padding,
                border_style=options.border_style,
            )
        except Exception as e:
            logger.debug(f"Update notice for {self.update.package_name} skipped: {e}", exc_info=True)
            return None

        border_color = config.BORDER_COLOR if options.border_color is None else options.border_color
        if options.defer:
            atexit.register(self._write, message, border_color)
            logger.debug("Update notice for %s deferred until exit", self.update.package_name)
        else:
            self._write(message, border_color)
        return message

    def _write(self, message: str, border_color: Optional[str] = None) -> None:
        try:
            self.console.print()
            self.console.print(
                colorize_border(message, border_color),
                no_wrap=True,
                overflow="ignore",
                crop=False,
                highlight=False,
            )
        except Exception as e:
            logger.debug(f"Failed to write update notice: {e}", exc_info=True)

"""Boxed package-update notices for command-line tools.

Example usage:
    from update_notifier import NotifyOptions, UpdateNotifier

    notifier = UpdateNotifier("my-cli", "0.0.2", "1.0.0")
    notifier.notify(NotifyOptions(is_global=True))
"""

__version__ = "1.0.0"

from .exceptions import InvalidVersionError, UnknownBorderStyleError, UpdateNotifierError
from .models import NotifyOptions, UpdateInfo
from .notifier import UpdateNotifier
from .renderer import render
from .version_gate import should_notify

__all__ = [
    "__version__",
    # Core
    "UpdateNotifier",
    "should_notify",
    "render",
    # Models
    "UpdateInfo",
    "NotifyOptions",
    # Errors
    "UpdateNotifierError",
    "InvalidVersionError",
    "UnknownBorderStyleError",
]

"""Value objects passed between the gate, the renderer and the notifier."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UpdateInfo:
    """What is installed and what is available for one package."""

    package_name: str
    current_version: str
    latest_version: str


@dataclass(frozen=True)
class NotifyOptions:
    """Per-call display options for :meth:`UpdateNotifier.notify`.

    Attributes:
        defer: Print when the interpreter exits instead of immediately
        is_global: Suggest a global install (``npm i --location=global``)
        message: Custom template; ``None`` or empty uses the default notice
        suppress_in_automated_context: Stay quiet inside npm/yarn/pnpm scripts
        padding: Spaces between the border and the widest line
        border_style: Named border style (see ``renderer.BORDER_STYLES``)
        border_color: Rich colour for the border, applied on terminals only;
            ``""`` turns colouring off

    ``None`` for the presentation fields means "use the current ``config``
    value" at the time :meth:`UpdateNotifier.notify` runs.
    """

    defer: bool = False
    is_global: bool = False
    message: Optional[str] = None
    suppress_in_automated_context: bool = True
    padding: Optional[int] = None
    border_style: Optional[str] = None
    border_color: Optional[str] = None

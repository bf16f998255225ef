"""Render the update notice as a bordered box of plain text.

The output is plain text with no ANSI codes: colouring is left to the writer
(``UpdateNotifier`` prints through a Rich console, which only styles the
border when stderr is a terminal).

Layout, for content lines of maximum display width W and padding P::

    ╭──────── W + 2P ────────╮
    │                        │
    │   <line centred in W>  │
    │                        │
    ╰────────────────────────╯

Widths are measured in terminal cells, so wide (CJK, emoji) characters count
as two columns.
"""

import re
from typing import Dict, List, Optional

from rich import box
from rich.cells import cell_len

from . import config
from .exceptions import UnknownBorderStyleError
from .models import UpdateInfo

DEFAULT_TEMPLATE = "Update available {currentVersion} → {latestVersion}\nRun {updateCommand} to update"

PLACEHOLDERS = ("packageName", "currentVersion", "latestVersion", "updateCommand")

_PLACEHOLDER_PATTERN = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")

BORDER_STYLES: Dict[str, box.Box] = {
    "round": box.ROUNDED,
    "single": box.SQUARE,
    "double": box.DOUBLE,
    "heavy": box.HEAVY,
    "classic": box.ASCII,
}


def build_update_command(package_name: str, include_global_flag: bool = False) -> str:
    """Return the npm command that installs the latest version."""
    if include_global_flag:
        return f"npm i --location=global {package_name}"
    return f"npm i {package_name}"


def placeholder_values(update_info: UpdateInfo, include_global_flag: bool = False) -> Dict[str, str]:
    return {
        "packageName": update_info.package_name,
        "currentVersion": update_info.current_version,
        "latestVersion": update_info.latest_version,
        "updateCommand": build_update_command(update_info.package_name, include_global_flag),
    }


def substitute_placeholders(template: str, values: Dict[str, str]) -> str:
    """Replace known ``{name}`` placeholders in a single pass.

    Substituted text is never scanned again, and placeholders without a value
    (or unknown names) are left exactly as written.
    """

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        return values.get(name, match.group(0))

    return _PLACEHOLDER_PATTERN.sub(_replace, template)


def get_border(style: str) -> box.Box:
    try:
        return BORDER_STYLES[style]
    except KeyError:
        raise UnknownBorderStyleError(style, BORDER_STYLES) from None


def center_line(line: str, width: int) -> str:
    """Centre ``line`` in ``width`` cells; odd leftover space goes right."""
    gap = max(width - cell_len(line), 0)
    left = gap // 2
    return " " * left + line + " " * (gap - left)


def draw_box(lines: List[str], padding: int = 1, border_style: str = "round") -> str:
    """Frame ``lines`` with a border, centring each line.

    Args:
        lines: Content lines (no newlines inside)
        padding: Spaces between the vertical edges and the widest line
        border_style: Key of :data:`BORDER_STYLES`

    Returns:
        The box as a newline-joined string without a trailing newline
    """
    border = get_border(border_style)
    padding = max(padding, 0)
    width = max((cell_len(line) for line in lines), default=0)
    inner = width + 2 * padding
    side = " " * padding

    rows = [border.top_left + border.top * inner + border.top_right]
    rows.append(border.mid_left + " " * inner + border.mid_right)
    for line in lines:
        rows.append(border.mid_left + side + center_line(line, width) + side + border.mid_right)
    rows.append(border.mid_left + " " * inner + border.mid_right)
    rows.append(border.bottom_left + border.bottom * inner + border.bottom_right)
    return "\n".join(rows)


def render(
    update_info: UpdateInfo,
    template: Optional[str] = None,
    include_global_flag: bool = False,
    padding: Optional[int] = None,
    border_style: Optional[str] = None,
) -> str:
    """Build the boxed update notice for ``update_info``.

    Args:
        update_info: Package name and versions
        template: Custom message; ``None`` or empty uses :data:`DEFAULT_TEMPLATE`
        include_global_flag: Suggest ``npm i --location=global``
        padding: Horizontal padding inside the border (default ``config.BOX_PADDING``)
        border_style: Key of :data:`BORDER_STYLES` (default ``config.BORDER_STYLE``)

    Raises:
        UnknownBorderStyleError: if ``border_style`` is not recognised
    """
    text = substitute_placeholders(
        template or DEFAULT_TEMPLATE,
        placeholder_values(update_info, include_global_flag),
    )
    return draw_box(
        text.splitlines() or [""],
        padding=config.BOX_PADDING if padding is None else padding,
        border_style=border_style or config.BORDER_STYLE,
    )

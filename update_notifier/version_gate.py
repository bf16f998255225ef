"""Decide whether an update notice should be shown at all.

Usage:
    from update_notifier.version_gate import should_notify

    if should_notify("0.0.2", "1.0.0", is_automated_context=False):
        ...

The gate is a pure function: it reads no environment, writes nothing and
logs nothing. Automated-context detection belongs to the caller (see
``update_notifier.automation``).
"""

import semver

from .exceptions import InvalidVersionError


def parse_version(text: str) -> semver.Version:
    """Parse a semantic version such as ``1.2.3``, ``v1.2.3`` or ``1.0.0-rc.1``.

    Ordering follows semver: pre-releases sort before their release and build
    metadata (``+build.5``) is ignored.

    Raises:
        InvalidVersionError: if the string is empty or not a valid version
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidVersionError(str(text))
    cleaned = text.strip()
    if cleaned[:1] in ("v", "V"):
        cleaned = cleaned[1:]
    try:
        return semver.Version.parse(cleaned)
    except ValueError as exc:
        raise InvalidVersionError(text) from exc


def is_newer(current: str, latest: str) -> bool:
    """Return True when ``latest`` sorts strictly after ``current``."""
    return parse_version(latest) > parse_version(current)


def should_notify(
    current: str,
    latest: str,
    is_automated_context: bool = False,
    notify_in_automated_context: bool = False,
) -> bool:
    """Return True when a notice for ``current -> latest`` should be shown.

    Args:
        current: Installed version
        latest: Latest published version
        is_automated_context: Running inside a package-manager script
        notify_in_automated_context: Show the notice in scripts anyway

    Returns:
        False for unparseable versions, when ``latest <= current``, or in an
        automated context without the override; True otherwise.
    """
    try:
        newer = is_newer(current, latest)
    except InvalidVersionError:
        return False

    if not newer:
        return False

    if is_automated_context and not notify_in_automated_context:
        return False

    return True

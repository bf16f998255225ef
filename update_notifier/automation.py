"""Detect whether the process runs as a package-manager script.

npm, yarn and pnpm export ``npm_config_user_agent`` (for example
``npm/10.2.4 node/v20.11.0 linux x64``) to lifecycle scripts; npm 7+ also
exports ``npm_package_json`` with the path of the manifest being run.

Usage:
    from update_notifier.automation import detect_automated_context

    notifier = UpdateNotifier(..., is_automated_context=detect_automated_context())
"""

import os
from typing import Mapping, Optional

PACKAGE_MANAGERS = ("npm", "yarn", "pnpm")


def _environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def detect_package_manager(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return ``npm``, ``yarn`` or ``pnpm`` when running under one, else None."""
    env = _environ(environ)
    user_agent = (env.get("npm_config_user_agent") or "").strip().lower()
    for manager in PACKAGE_MANAGERS:
        if user_agent.startswith(manager):
            return manager

    package_json = env.get("npm_package_json") or ""
    if package_json.endswith("package.json"):
        return "npm"

    return None


def detect_automated_context(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when invoked from an npm/yarn/pnpm script."""
    return detect_package_manager(environ) is not None

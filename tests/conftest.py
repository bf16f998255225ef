import pytest

from update_notifier import config
from update_notifier.logging_config import reset_logging


@pytest.fixture(autouse=True)
def _isolate_notifier(monkeypatch):
    """Keep the host environment from switching notices off or on."""
    monkeypatch.setattr(config, "DISABLED", False)
    monkeypatch.setattr(config, "NOTIFY_IN_SCRIPT", False)
    for name in ("npm_config_user_agent", "npm_package_json", "NO_UPDATE_NOTIFIER"):
        monkeypatch.delenv(name, raising=False)
    yield
    reset_logging()

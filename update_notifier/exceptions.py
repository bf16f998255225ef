"""Exception hierarchy for update-notifier."""


class UpdateNotifierError(Exception):
    """Base class for all update-notifier errors."""


class InvalidVersionError(UpdateNotifierError, ValueError):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Invalid version string: {version!r}")


class UnknownBorderStyleError(UpdateNotifierError, ValueError):
    """Raised when a box border style name is not recognised."""

    def __init__(self, style: str, known):
        self.style = style
        self.known = sorted(known)
        super().__init__(f"Unknown border style {style!r}. " f"Expected one of: {', '.join(self.known)}")

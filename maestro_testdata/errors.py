"""Exceptions raised by maestro_testdata."""


class TestDataError(Exception):
    """Base class for test data errors."""

    __test__ = False


class UnknownModeError(TestDataError, ValueError):
    """Raised in strict mode when APP_MODE names a mode outside the catalog."""

    def __init__(self, mode: str, available: tuple[str, ...]):
        self.mode = mode
        self.available = tuple(available)
        super().__init__(
            f"Unknown app mode: {mode!r} (available: {', '.join(self.available)})"
        )

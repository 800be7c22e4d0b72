"""Errors raised while wiring the application, before any request is served."""


class StartupError(Exception):
    """The process cannot start with its current environment."""


class ConfigurationError(StartupError):
    """A setting holds a value that is unusable in this environment."""

    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        super().__init__(f"{setting}: {reason}")


class DependencyInjectionError(StartupError):
    """No provider implementation is registered for a component."""

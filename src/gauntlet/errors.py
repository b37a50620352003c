"""Harness error types."""


class GauntletError(Exception):
    """Base class for errors raised by the harness itself."""


class ConfigError(GauntletError):
    """Raised when the ``[tool.gauntlet]`` table is misconfigured."""


class ModuleLoadError(GauntletError):
    """Raised when a module holding test classes cannot be imported."""

    def __init__(self, module_name: str, cause: Exception | None = None) -> None:
        self.module_name = module_name
        self.cause = cause

        message = f"Could not import test module {module_name!r}"
        if cause:
            message += f": {cause}"

        super().__init__(message)

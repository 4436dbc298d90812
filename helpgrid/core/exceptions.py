# helpgrid/core/exceptions.py
# Custom exception hierarchy for helpgrid (pure - no I/O operations)

from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for helpgrid
class HelpgridError(Exception):
    pass


# * Configuration errors (unresolvable command name, bad settings)
class ConfigurationError(HelpgridError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * Requested theme not registered
class UnknownThemeError(ConfigurationError):
    def __init__(self, message: str, theme: str):
        super().__init__(message)
        self.theme = theme

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, theme={self.theme!r})"


# * JSON parsing errors
class JSONParsingError(HelpgridError):
    pass

from typing import Optional


class HatariException(Exception):
    """
    Base exception for errors raised synchronously by the Hatari SDK.

    Args:
        message (str): The error message.
    """
    def __init__(self, message: str = "An unexpected error occurred in the Hatari SDK."):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(HatariException):
    """
    Error raised when a client or the SDK settings cannot be built.

    Args:
        message (str): The error message template.
        setting (str): The name of the offending setting.
        value (Optional[str]): The rejected value.
    """
    def __init__(self, message: str = "Invalid {setting} specified: {value!r}",
                 setting: str = "setting", value: Optional[str] = None):
        self.setting = setting
        self.value = value
        super().__init__(message.format(setting=setting, value=value))


class InvalidCollectionError(HatariException):
    """
    Error raised when an event collection name breaks the naming rules.
    """
    def __init__(self, message: str = "Invalid event collection name."):
        super().__init__(message)


class InvalidEventError(HatariException):
    """
    Error raised when an event, or any property nested in it, is malformed.
    """
    def __init__(self, message: str = "Invalid event."):
        super().__init__(message)


class ClientNotInitializedError(HatariException):
    def __init__(self, message: str = "Please call hatari.registry.initialize() before requesting the shared client."):
        super().__init__(message)

from __future__ import annotations


class SettingsError(Exception):
    """Base class for failures while reading or writing site settings."""


class SettingsTimeout(SettingsError):
    pass


class SettingsPermissionError(SettingsError):
    """The credential used for the query is not allowed to read the row."""


class NetworkError(SettingsError):
    pass


class TransientStorageError(SettingsError):
    pass


TIMEOUT_MESSAGE = "Request timeout - please check your connection and try again"
NETWORK_MESSAGE = "Network error - please check your internet connection"
UNAUTHORIZED_MESSAGE = "Unauthorized: Super admin access required"


def describe_save_error(exc: BaseException) -> str:
    if isinstance(exc, SettingsTimeout) or "timeout" in str(exc).lower():
        return TIMEOUT_MESSAGE
    if isinstance(exc, NetworkError) or "network" in str(exc).lower():
        return NETWORK_MESSAGE
    return str(exc) or "Unknown error occurred"

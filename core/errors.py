"""
Platform errors raised across the service boundary.

Every recoverable failure of the platform layer is a PlatformError; the state
layer catches this family only and lets anything else propagate.
"""


class PlatformError(Exception):
    """A platform call failed. `reason` is the user-presentable message."""

    def __init__(self, reason: str, path: str = ""):
        super().__init__(reason)
        self.reason = reason
        self.path = path


class DirectoryListError(PlatformError):
    pass


class OpenEntryError(PlatformError):
    pass


class LocationStorageError(PlatformError):
    pass

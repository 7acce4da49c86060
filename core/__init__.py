from .types import Entry, CustomLocation, LoadState, LoadStatus, ViewMode
from .errors import PlatformError

__all__ = [
    'Entry',
    'CustomLocation',
    'LoadState',
    'LoadStatus',
    'ViewMode',
    'PlatformError'
]

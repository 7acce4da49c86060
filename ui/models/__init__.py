from .entry_list_model import EntryListModel
from .location_list_model import LocationListModel

__all__ = [
    'EntryListModel',
    'LocationListModel'
]

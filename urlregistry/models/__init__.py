from urlregistry.models.entry_model import ClickModel, EntryModel
from urlregistry.models.serialization import entries_from_json, entries_to_json, entry_from_dict, entry_to_dict


__all__ = [
    'ClickModel',
    'EntryModel',
    'entries_from_json',
    'entries_to_json',
    'entry_from_dict',
    'entry_to_dict',
]

from urlregistry.dao.base.entry_base_dao import EntryBaseDAO


__all__ = [
    'EntryBaseDAO',
]

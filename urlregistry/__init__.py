from urlregistry.models import ClickModel, EntryModel
from urlregistry.registry import Registry, RegistryStats
from urlregistry.resolver import Resolution, ResolutionState, resolve
from urlregistry.factory import build_registry


__all__ = [
    'ClickModel',
    'EntryModel',
    'Registry',
    'RegistryStats',
    'Resolution',
    'ResolutionState',
    'resolve',
    'build_registry',
]

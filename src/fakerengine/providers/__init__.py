"""Built-in providers and the default provider catalog."""

from fakerengine.runtime.providers import ProviderCatalog

from .football import EnglandFootball
from .name import Name
from .number import Number
from .options import Options

__all__ = [
    "EnglandFootball",
    "Name",
    "Number",
    "Options",
    "create_default_catalog",
]


def create_default_catalog() -> ProviderCatalog:
    """Create a catalog holding the built-in providers.

    Each call returns a fresh catalog; Faker copies it, so registering a
    provider on one Faker never affects another.

    Example:
        >>> catalog = create_default_catalog()
        >>> catalog.lookup("England_Football") is EnglandFootball
        True
    """
    catalog = ProviderCatalog()
    for provider_cls in (EnglandFootball, Name, Number, Options):
        catalog.register(provider_cls)
    return catalog

"""Providers, the provider catalog and the per-Faker provider cache.

A provider groups operations for one data category (football, names,
numbers). Directives reach providers by name through an explicit catalog:

    #{EnglandFootball.team}    -> catalog["englandfootball"] -> EnglandFootball
    #{Name.first_name}         -> catalog["name"] -> Name

No reflection or import-by-name is involved; a provider is callable from
directives only after it is registered in the catalog.

Components:
    Provider - Base class; operations marked with @provider_method
    ProviderCatalog - Normalized provider name -> Provider subclass
    ProviderRegistry - Provider type -> the single instance owned by a Faker

Thread Safety:
    ProviderRegistry.get_or_create() is safe to call from many threads:
    reads take no lock, factories run outside the lock, and the first
    instance stored wins, so every caller receives the same instance.
    Factories may obtain other providers from the same registry.
    ProviderCatalog is not synchronized; register providers before sharing
    the Faker.

Python 3.13+.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, ClassVar, TypeVar

from fakerengine.diagnostics import ConfigurationError, ErrorTemplate

if TYPE_CHECKING:
    from .faker import Faker

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base class and decorator
    "Provider",
    "provider_method",
    # Containers
    "ProviderCatalog",
    "ProviderRegistry",
    # Name helpers
    "normalize_method_key",
    "normalize_provider_name",
]

_PROVIDER_METHOD_ATTR = "_fakerengine_provider_method"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

F = TypeVar("F", bound=Callable[..., object])
P = TypeVar("P")


def normalize_provider_name(name: str) -> str:
    """Catalog key for a provider name.

    Example:
        >>> normalize_provider_name("England_Football")
        'englandfootball'
    """
    return name.replace("_", "").replace("-", "").lower()


def normalize_method_key(key: str) -> str:
    """Snake-case an operation key so firstName and first_name match.

    Example:
        >>> normalize_method_key("firstName")
        'first_name'
    """
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def provider_method(func: F) -> F:
    """Mark a Provider method as callable from directives.

    The directive key is the method name; #{Number.numberBetween '1','5'}
    and #{Number.number_between '1','5'} both reach number_between().
    """
    setattr(func, _PROVIDER_METHOD_ATTR, True)
    return func


class Provider:
    """Base class for providers.

    Subclasses set namespace (the data category their keys live under,
    default: normalized class name) and mark operations with
    @provider_method. A directive key that names no operation is resolved
    as data: #{Name.prefix} reads <namespace>.prefix.

    Example:
        >>> class Weather(Provider):
        ...     namespace = "weather"
        ...
        ...     @provider_method
        ...     def description(self) -> str:
        ...         return self.resolve("description")

    Attributes:
        faker: Owning Faker
    """

    __slots__ = ("faker",)

    namespace: ClassVar[str] = ""
    _operations: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if "namespace" not in cls.__dict__:
            cls.namespace = normalize_provider_name(cls.__name__)

        operations = dict(cls._operations)
        for attr_name, attr in cls.__dict__.items():
            if getattr(attr, _PROVIDER_METHOD_ATTR, False):
                operations[normalize_method_key(attr_name)] = attr_name
        cls._operations = operations

    def __init__(self, faker: Faker) -> None:
        self.faker = faker

    @classmethod
    def operations(cls) -> tuple[str, ...]:
        """Normalized keys of the operations callable from directives."""
        return tuple(cls._operations)

    def operation(self, key: str) -> Callable[..., object] | None:
        """Bound operation for a directive key, or None if the key is data."""
        attr_name = self._operations.get(normalize_method_key(key))
        if attr_name is None:
            return None
        method: Callable[..., object] = getattr(self, attr_name)
        return method

    def resolve(self, key: str) -> str:
        """Resolve a key inside this provider's namespace.

        Raises:
            KeyNotFoundError: If no locale in the chain has the key
        """
        return self.faker.resolve(f"{self.namespace}.{key}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r})"


class ProviderCatalog:
    """Explicit provider name -> Provider subclass mapping.

    Names are matched case-insensitively with '_' and '-' ignored, so
    EnglandFootball, englandFootball and england_football are one entry.

    Example:
        >>> catalog = ProviderCatalog()
        >>> catalog.register(Provider, name="Base")
        >>> catalog.lookup("BASE") is Provider
        True
    """

    __slots__ = ("_providers",)

    def __init__(self) -> None:
        """Initialize empty catalog."""
        self._providers: dict[str, type[Provider]] = {}

    def register(self, provider_cls: type[Provider], name: str | None = None) -> None:
        """Register a provider class.

        Args:
            provider_cls: Provider subclass
            name: Directive name (default: class name)

        Raises:
            ConfigurationError: If provider_cls is not a Provider subclass
        """
        if not (isinstance(provider_cls, type) and issubclass(provider_cls, Provider)):
            raise ConfigurationError(
                ErrorTemplate.config_invalid(
                    "provider", provider_cls, "must be a Provider subclass"
                )
            )
        key = normalize_provider_name(name or provider_cls.__name__)
        self._providers[key] = provider_cls

    def lookup(self, name: str) -> type[Provider] | None:
        """Provider class for a directive name, or None if unregistered."""
        return self._providers.get(normalize_provider_name(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_provider_name(name) in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

    def __repr__(self) -> str:
        return f"ProviderCatalog(providers={len(self._providers)})"

    def copy(self) -> ProviderCatalog:
        """Create a shallow copy.

        Registering on the copy leaves this catalog untouched.
        """
        new_catalog = ProviderCatalog()
        new_catalog._providers = self._providers.copy()
        return new_catalog


class ProviderRegistry:
    """Memoized provider instances, one per type.

    The fast path is a plain dict read. On a miss the factory runs without
    the lock held, then the lock is taken and the dict re-checked: if a
    concurrent caller stored an instance first, that one is returned and
    the new one discarded. Concurrent first callers all receive the same
    instance.
    """

    __slots__ = ("_instances", "_lock")

    def __init__(self) -> None:
        self._instances: dict[type, object] = {}
        self._lock = threading.RLock()

    def get_or_create(self, type_id: type[P], factory: Callable[[], P]) -> P:
        """Return the cached instance for type_id, creating it on first use.

        Args:
            type_id: Cache key, normally the provider class
            factory: Creates the instance. Concurrent first callers may each
                run it; only one result is kept

        Returns:
            The single instance for type_id
        """
        instance = self._instances.get(type_id)
        if instance is not None:
            return instance  # type: ignore[return-value]

        # Factory runs unlocked: provider constructors may request other providers
        created = factory()

        with self._lock:
            instance = self._instances.setdefault(type_id, created)
            return instance  # type: ignore[return-value]

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)

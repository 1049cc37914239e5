"""Personal names.

The name.name value composes other keys of the same category with relative
directives ("#{first_name} #{last_name}"), so locales decide the order.
"""

from fakerengine.runtime.providers import Provider, provider_method

__all__ = ["Name"]


class Name(Provider):
    """First names, last names, prefixes and full names."""

    __slots__ = ()

    namespace = "name"

    @provider_method
    def first_name(self) -> str:
        return self.resolve("first_name")

    @provider_method
    def last_name(self) -> str:
        return self.resolve("last_name")

    @provider_method
    def name(self) -> str:
        """Full name in the locale's preferred order."""
        return self.resolve("name")

    @provider_method
    def prefix(self) -> str:
        return self.resolve("prefix")

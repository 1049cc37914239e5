"""Uniform choice among caller-supplied values."""

from fakerengine.runtime.providers import Provider, provider_method

__all__ = ["Options"]


class Options(Provider):
    __slots__ = ()

    namespace = "options"

    @provider_method
    def option(self, *values: str) -> str:
        """One of values, uniformly.

        #{Options.option 'red','green','blue'}

        Raises:
            InvalidArgumentError: If no values are given
        """
        return self.faker.random.pick(values)

"""Random integers and digit strings.

Operations accept ints from Python and decimal strings from directives:

    faker.number.number_between(1, 6)
    #{Number.number_between '1','6'}
"""

from fakerengine.diagnostics import ErrorTemplate, InvalidArgumentError
from fakerengine.runtime.providers import Provider, provider_method

__all__ = ["Number"]


def _to_int(operation: str, value: int | str) -> int:
    if isinstance(value, int):
        return value
    try:
        return int(value.strip())
    except ValueError as e:
        raise InvalidArgumentError(
            ErrorTemplate.argument_invalid(operation, value, "a decimal integer")
        ) from e


class Number(Provider):
    """Integers drawn from the Faker's RandomService. Needs no locale data."""

    __slots__ = ()

    namespace = "number"

    @provider_method
    def number_between(self, low: int | str, high: int | str) -> int:
        """Uniform integer in [low, high], both inclusive.

        Raises:
            InvalidArgumentError: If a bound is not an integer or low > high
        """
        return self.faker.random.between(
            _to_int("number_between", low), _to_int("number_between", high)
        )

    @provider_method
    def digits(self, count: int | str) -> str:
        """String of count random digits; leading zeros are kept.

        Raises:
            InvalidArgumentError: If count is not a positive integer
        """
        length = _to_int("digits", count)
        if length <= 0:
            raise InvalidArgumentError(ErrorTemplate.bound_invalid(length))
        return self.faker.numerify("#" * length)

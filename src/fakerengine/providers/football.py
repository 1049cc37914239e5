"""English football leagues and teams."""

from fakerengine.runtime.providers import Provider, provider_method

__all__ = ["EnglandFootball"]


class EnglandFootball(Provider):
    """Reads englandfootball.leagues and englandfootball.teams."""

    __slots__ = ()

    namespace = "englandfootball"

    @provider_method
    def league(self) -> str:
        return self.resolve("leagues")

    @provider_method
    def team(self) -> str:
        return self.resolve("teams")

"""Registry mapping remote hosts to link providers."""

import structlog

from git_link.core.exceptions import UnsupportedHostError
from git_link.providers.base import LinkProvider
from git_link.providers.github import GitHubProvider

logger = structlog.get_logger(__name__)


class ProviderRegistry:
    """Looks up the provider for a remote host.

    Supporting a new hosting service means registering one more provider.
    """

    def __init__(self) -> None:
        self._by_host: dict[str, LinkProvider] = {}
        self._providers: list[LinkProvider] = []

    def register(self, provider: LinkProvider) -> None:
        """Register ``provider`` for each of its hosts."""
        for host in provider.hosts:
            self._by_host[host.lower()] = provider
        self._providers.append(provider)

    @property
    def providers(self) -> list[LinkProvider]:
        return list(self._providers)

    def get(self, host: str) -> LinkProvider:
        """Get the provider for ``host`` (case-insensitive)."""
        provider = self._by_host.get(host.lower())
        if provider is None:
            names = " and ".join(p.name for p in self._providers) or "no"
            raise UnsupportedHostError(
                f"Only {names} origins are supported right now",
                details={"host": host},
            )
        logger.debug("Selected provider", host=host, provider=provider.name)
        return provider


def default_registry() -> ProviderRegistry:
    """Create a registry with the built-in providers."""
    registry = ProviderRegistry()
    registry.register(GitHubProvider())
    return registry

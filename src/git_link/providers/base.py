"""Base class for hosting providers."""

from abc import ABC, abstractmethod

from git_link.core.models.link import LinkRequest


class LinkProvider(ABC):
    """Renders links for one hosting service."""

    #: Short provider name used in messages.
    name: str = ""

    #: Host names (lower case) served by this provider.
    hosts: tuple[str, ...] = ()

    @abstractmethod
    def build_url(self, request: LinkRequest) -> str:
        """Build the web URL for a resolved link request."""
        ...

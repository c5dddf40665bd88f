"""Link service: runs the resolution pipeline end to end."""

from pathlib import Path

import structlog

from git_link.core.models.link import HashFormat, LinkRequest, ReferenceMode
from git_link.git.locator import RepositoryLocator
from git_link.git.paths import ensure_exists, relative_to_workdir
from git_link.git.reference import ReferenceResolver
from git_link.git.remote import RemoteResolver
from git_link.providers.registry import ProviderRegistry, default_registry

logger = structlog.get_logger(__name__)


class LinkService:
    """Builds shareable links to files in the enclosing repository.

    Every stage either succeeds or raises a ``GitLinkError``; no partial
    result is ever returned.
    """

    def __init__(
        self,
        cwd: Path | None = None,
        registry: ProviderRegistry | None = None,
        hash_format: HashFormat | None = None,
    ) -> None:
        self._cwd = cwd
        self._registry = registry or default_registry()
        self._hash_format = hash_format or HashFormat()

    def create_link(
        self,
        file_path: Path | str,
        ref_type: ReferenceMode | str,
        line_number: int | None = None,
    ) -> str:
        """Create the URL for ``file_path`` at the given reference."""
        mode = ReferenceMode.parse(ref_type)
        cwd = self._cwd or Path.cwd()

        ensure_exists(file_path, cwd)

        repository = RepositoryLocator(cwd).discover()
        remote = RemoteResolver(repository).resolve()
        reference = ReferenceResolver(repository, self._hash_format).resolve(mode)
        relative_path = relative_to_workdir(file_path, repository.workdir, cwd)

        request = LinkRequest(
            repository_path=remote.repository_path,
            reference=reference,
            file_path=relative_path,
            line_number=line_number,
        )
        provider = self._registry.get(remote.host)
        url = provider.build_url(request)

        logger.debug(
            "Link created",
            mode=mode.value,
            reference=reference,
            file_path=str(relative_path),
            provider=provider.name,
        )
        return url

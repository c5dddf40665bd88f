"""Service layer for git-link."""

from git_link.services.linking import LinkService

__all__ = ["LinkService"]

"""GitHub link provider."""

from git_link.core.models.link import LinkRequest
from git_link.providers.base import LinkProvider


class GitHubProvider(LinkProvider):
    """Links of the form https://github.com/org/repo/blob/<ref>/<path>#L<n>."""

    name = "github"
    hosts = ("github", "github.com")

    def build_url(self, request: LinkRequest) -> str:
        url = (
            f"https://github.com/{request.repository_path}"
            f"/blob/{request.reference}/{request.file_path.as_posix()}"
        )
        if request.line_number is not None:
            url += f"#L{request.line_number}"
        return url

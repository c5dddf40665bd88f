"""Link request models."""

from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field

from git_link.core.exceptions import InvalidRefTypeError


class ReferenceMode(str, Enum):
    """How the link is anchored in the repository history."""

    BRANCH = "branch"
    COMMIT = "commit"

    @classmethod
    def parse(cls, value: "str | ReferenceMode") -> "ReferenceMode":
        """Parse a user-supplied ref type. There is no fallback value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidRefTypeError(
                'Unsupported ref type, acceptable values are "branch" and "commit"',
                details={"ref_type": value},
            ) from exc


class HashCase(str, Enum):
    """Letter case of rendered commit hashes."""

    UPPER = "upper"
    LOWER = "lower"


class HashFormat(BaseModel):
    """Rendering options for commit-mode references.

    The default renders the full hash in uppercase.
    """

    model_config = ConfigDict(frozen=True)

    case: HashCase = HashCase.UPPER
    length: int | None = Field(default=None, ge=1)

    def render(self, digest: bytes) -> str:
        """Render each byte of ``digest`` as two hex digits, in byte order."""
        text = "".join(f"{byte:02X}" for byte in digest)
        if self.case == HashCase.LOWER:
            text = text.lower()
        if self.length is not None:
            text = text[: self.length]
        return text


class LinkRequest(BaseModel):
    """Fully resolved input to URL construction."""

    model_config = ConfigDict(frozen=True)

    repository_path: str
    reference: str
    file_path: PurePosixPath
    line_number: int | None = Field(default=None, ge=1)

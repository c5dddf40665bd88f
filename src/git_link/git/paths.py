"""Normalization of user-supplied file paths."""

from pathlib import Path, PurePosixPath

from git_link.core.exceptions import (
    InvalidFilePathEncodingError,
    LinkedFileNotFoundError,
    PathOutsideRepositoryError,
)


def ensure_exists(file_path: Path | str, cwd: Path | None = None) -> Path:
    """Return the physical location of ``file_path``, which must exist on disk.

    Directories on the way are resolved the way the OS resolves them, so a
    ``..`` after a symlink leads where the symlink leads. The final component
    itself is not followed.
    """
    cwd = cwd or Path.cwd()
    absolute = cwd / file_path
    if not absolute.exists():
        raise LinkedFileNotFoundError(
            "The referenced file does not exist.",
            details={"file_path": str(file_path)},
        )
    if absolute.name in ("", ".."):
        return absolute.resolve()
    return absolute.parent.resolve() / absolute.name


def relative_to_workdir(
    file_path: Path | str,
    workdir: Path,
    cwd: Path | None = None,
) -> PurePosixPath:
    """Convert ``file_path`` into a path relative to the repository root.

    Relative paths are taken from ``cwd`` (the process directory by default).
    The result always uses forward slashes.
    """
    physical = ensure_exists(file_path, cwd)
    try:
        relative = physical.relative_to(workdir)
    except ValueError:
        try:
            relative = physical.relative_to(workdir.resolve())
        except ValueError as exc:
            raise PathOutsideRepositoryError(
                f"{physical} is not inside the repository working directory {workdir}",
                details={"file_path": str(physical), "workdir": str(workdir)},
            ) from exc

    rendered = relative.as_posix()
    try:
        rendered.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidFilePathEncodingError("File path is not valid UTF-8") from exc
    return PurePosixPath(rendered)

"""git-link: shareable hosting-provider links to files in a Git working copy."""

__version__ = "0.1.0"

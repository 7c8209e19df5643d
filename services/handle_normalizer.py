from __future__ import annotations

from typing import Optional, Tuple


GITHUB_PREFIXES = (
    "https://github.com/",
    "http://github.com/",
    "https://www.github.com/",
)
GITLAB_MARKER = "https://gitlab.com"
GITLAB_PREFIX = "https://gitlab.com/"


def _bare_handle(value: str) -> str:
    return value.lstrip("@").rstrip("/")


def normalize_handle(raw_value: Optional[str]) -> Tuple[str, str]:
    """Split the form's GitHub field into (github, gitlab) ``@handle`` values.

    Applicants sometimes paste a GitLab URL into the GitHub input, so at most
    one of the two is non-empty.
    """
    value = (raw_value or "").strip().lower()
    if not value:
        return "", ""

    github = value
    for prefix in GITHUB_PREFIXES:
        github = github.removeprefix(prefix)
    github = _bare_handle(github)

    if GITLAB_MARKER not in github:
        return (f"@{github}" if github else ""), ""

    gitlab = _bare_handle(value.removeprefix(GITLAB_PREFIX))
    return "", (f"@{gitlab}" if gitlab else "")

import logging
from dataclasses import dataclass
from typing import List

import git
from git.exc import BadName, BadObject, GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from botsniff.exceptions import CommitNotFoundError, RangeResolutionError, RepoOpenError

logger = logging.getLogger(__name__)

_UNRESOLVABLE = (BadName, BadObject, ValueError, GitCommandError)


@dataclass(frozen=True)
class Commit:
    hash: str
    author_email: str
    committer_email: str
    message: str


def _to_commit(commit: git.Commit) -> Commit:
    return Commit(
        hash=commit.hexsha,
        author_email=commit.author.email or "",
        committer_email=commit.committer.email or "",
        message=commit.message if isinstance(commit.message, str) else commit.message.decode("utf-8", "replace"),
    )


def open_repo(path: str = ".") -> git.Repo:
    try:
        return git.Repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepoOpenError(f"'{path}' is not a valid Git repository") from e


def _resolve(repo: git.Repo, name: str, side: str) -> git.Commit:
    # rev_parse understands full/short hashes and heads, tags and remotes by short name
    try:
        return repo.commit(name)
    except _UNRESOLVABLE as e:
        raise RangeResolutionError(f"resolving {side} {name!r}: cannot resolve to a commit") from e


def get_commit(repo_path: str, rev: str) -> Commit:
    repo = open_repo(repo_path)
    try:
        return _to_commit(repo.commit(rev))
    except _UNRESOLVABLE as e:
        raise CommitNotFoundError(f"reading commit {rev}: not found") from e


def split_range(commit_range: str):
    """'BASE..HEAD' -> ('BASE', 'HEAD'). Anything but exactly one '..' is malformed."""
    if commit_range.count("..") != 1:
        raise RangeResolutionError(f"invalid range format {commit_range!r}, expected BASE..HEAD")
    base, head = (part.strip() for part in commit_range.split(".."))
    if not base or not head:
        raise RangeResolutionError(f"invalid range format {commit_range!r}, expected BASE..HEAD")
    return base, head


def list_commits(repo_path: str, commit_range: str = "") -> List[Commit]:
    """
    Commits selected by commit_range, newest first.
    Empty range: everything reachable from HEAD.
    'BASE..HEAD': reachable from HEAD but not from BASE.
    """
    repo = open_repo(repo_path)

    if not commit_range.strip():
        try:
            head = repo.head.commit
        except ValueError as e:
            # unborn branch, no commits yet
            raise RangeResolutionError("getting HEAD: repository has no commits") from e
        rev = head.hexsha
    else:
        base_name, head_name = split_range(commit_range)
        base = _resolve(repo, base_name, "base")
        head = _resolve(repo, head_name, "head")
        rev = f"{base.hexsha}..{head.hexsha}"

    try:
        commits = [_to_commit(c) for c in repo.iter_commits(rev)]
    except GitCommandError as e:
        raise RangeResolutionError(f"iterating commits for {rev!r}: {e}") from e

    logger.debug("listed %d commits from %s (range=%r)", len(commits), repo_path, commit_range)
    return commits

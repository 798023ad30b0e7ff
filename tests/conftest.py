import pytest
from git import Actor, Repo

HUMAN = Actor("Test", "human@example.com")

HISTORY = [
    "initial commit",
    "fix: update handler\n\nCo-Authored-By: Claude Opus 4 <noreply@anthropic.com>",
    "aider: refactor auth module",
]


def make_repo(path, messages, committer=HUMAN):
    """Linear history, one file per commit. Returns (repo, hashes oldest first)."""
    repo = Repo.init(path)
    hashes = []
    for i, msg in enumerate(messages):
        filename = path / f"file{i}.txt"
        filename.write_text(msg)
        repo.index.add([filename.name])
        commit = repo.index.commit(msg, author=HUMAN, committer=committer)
        hashes.append(commit.hexsha)
    return repo, hashes


@pytest.fixture
def history_repo(tmp_path):
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    _, hashes = make_repo(repo_dir, HISTORY)
    return repo_dir, hashes

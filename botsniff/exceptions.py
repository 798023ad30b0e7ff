class BotSniffError(Exception):
    """Base class for every error botsniff reports to the user."""


class ConfigError(BotSniffError):
    """Unknown output format, unparseable confidence level and the like."""


class GitClientError(BotSniffError):
    pass


class RepoOpenError(GitClientError):
    pass


class RangeResolutionError(GitClientError):
    pass


class CommitNotFoundError(GitClientError):
    pass

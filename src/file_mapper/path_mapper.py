"""Translation of remote object keys into local relative paths."""


class PathMapper:
    """Maps object keys from the remote namespace into the sync folder.

    Remote keys are trusted input from the store's own namespace, so the
    only rewriting done is removing the configured prefix and a single
    leading separator.

    Example:
        >>> PathMapper("docs/").to_local_path("docs/sub/page.md")
        'sub/page.md'
        >>> PathMapper("docs/").to_local_path("other/page.md")
        'other/page.md'
    """

    def __init__(self, remote_prefix: str = ""):
        self.remote_prefix = remote_prefix

    def to_local_path(self, key: str) -> str:
        path = key
        if self.remote_prefix and path.startswith(self.remote_prefix):
            path = path[len(self.remote_prefix):]

        if path.startswith('/'):
            path = path[1:]

        return path

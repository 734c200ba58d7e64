"""Exceptions for treecopy."""


class TypeConflictError(NotADirectoryError):
    """Raised when a directory would overwrite an existing non-directory.

    Checked before any traversal, so nothing has been written when it is
    raised.  The offending paths are available as :attr:`source` and
    :attr:`destination`.
    """

    def __init__(self, source: str, destination: str):
        super().__init__(
            f"Cannot overwrite non-directory '{destination}' with directory '{source}'"
        )
        self.source = source
        self.destination = destination

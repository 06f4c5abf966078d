"""Exceptions raised by the minivcs core.

Errors fall into two families:
- FatalError: the repository itself is unusable, the command aborts
- RecoverableError: reported to the user, the command returns without side effects
"""


class VCSError(Exception):
    """Base class for all minivcs errors."""


class FatalError(VCSError):
    """Error that terminates the invocation."""


class RecoverableError(VCSError):
    """Error reported at the command boundary."""


class RepositoryNotFound(FatalError):
    """No initialized repository in scope."""

    def __init__(self, path=None):
        location = f" at {path}" if path else ""
        super().__init__(f"Not a minivcs repository{location} (run 'minivcs init' first)")


class CorruptedState(FatalError):
    """On-disk state is missing or malformed."""


class RefNotFound(RecoverableError):
    """A name or digest could not be resolved to a commit."""

    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f"Commit/ref not found: {ref}")


class ObjectNotFound(RecoverableError):
    """No object stored under the given digest."""

    def __init__(self, digest: str):
        self.digest = digest
        super().__init__(f"Object not found: {digest}")


class FileNotFound(RecoverableError):
    """A working file to be staged does not exist."""

    def __init__(self, path: str, reason: str = "File not found"):
        self.path = path
        super().__init__(f"{reason}: {path}")


class NothingStaged(RecoverableError):
    """Commit attempted with an empty index."""

    def __init__(self):
        super().__init__("Nothing staged to commit")


class AlreadyExists(RecoverableError):
    """Name collision (branch or repository)."""


class NoCommitsYet(RecoverableError):
    """Operation needs at least one commit."""

    def __init__(self, message: str = "No commits yet; create a commit first"):
        super().__init__(message)


class InvalidRefName(RecoverableError):
    """Branch name is not usable as a reference."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid branch name: '{name}'")

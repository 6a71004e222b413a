class RecetarioError(Exception):
    pass


class InvalidRequest(RecetarioError):
    """Rejected user input. The message is safe to send back as is."""


class CompletionError(RecetarioError):
    """The completion api could not give us any content."""

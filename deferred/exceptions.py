from concurrent.futures import CancelledError


class Error(Exception):
    """Base class for all deferred-related exceptions."""
    pass


class InvalidStateError(Error):
    """The operation is not allowed in this state."""
    pass


class TimeoutError(Error):
    """The operation exceeded the given deadline."""
    pass


class EmptyInputError(Error):
    """Combinator that needs a completion source got an empty sequence."""
    pass


class AllFailedError(Error):
    """Every deferred value passed to DeferredValue.any() was rejected.

    Individual errors are available in ``errors`` in the order they
    were observed.
    """

    def __init__(self, errors):
        Error.__init__(self, "all deferred values were rejected")
        self.errors = list(errors)

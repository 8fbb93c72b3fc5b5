from .deferred_value import DeferredValue


class Resolver(object):
    """Write side of a pending deferred value, settled by its owner
    with a value or an exception.
    """

    def __init__(self, clb_executor=None):
        """Initializes new Resolver instance.

        Args:
            clb_executor: Executor object to use when calling
                deferred value continuations.
        """
        self._deferred = DeferredValue(clb_executor)

    def fulfill(self, result):
        """Fulfills associated deferred value with provided value.

        Raises:
            InvalidStateError: If deferred value was already settled.
        """
        self._deferred._fulfill(result)

    def try_fulfill(self, result):
        """Fulfills associated deferred value with provided value.

        Returns:
            True if value was set and False if deferred value was already settled.
        """
        return self._deferred._try_fulfill(result)

    def reject(self, exception):
        """Rejects associated deferred value with provided exception.

        Raises:
            InvalidStateError: If deferred value was already settled.
        """
        self._deferred._reject(exception)

    def try_reject(self, exception):
        """Rejects associated deferred value with provided exception.

        Returns:
            True if exception was set and False if deferred value was already settled.
        """
        return self._deferred._try_reject(exception)

    def complete(self, fun, *vargs, **kwargs):
        """Executes provided function and settles deferred value with its
        result, or rejects it if function raises.

        Raises:
            InvalidStateError: If deferred value was already settled.
        """
        self._deferred._complete(fun, *vargs, **kwargs)

    def try_complete(self, fun, *vargs, **kwargs):
        return self._deferred._try_complete(fun, *vargs, **kwargs)

    @property
    def is_settled(self):
        return self._deferred.is_settled

    @property
    def deferred(self):
        """Returns associated deferred value."""
        return self._deferred

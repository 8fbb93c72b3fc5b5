class Outcome(object):
    """Settled result of a single deferred value, as reported by
    DeferredValue.all_settled(). Either Success or Failure.
    """

    __slots__ = ()

    is_success = False
    is_failure = False

    def get(self):
        """Returns wrapped value or raises wrapped error."""
        raise NotImplementedError()

    @staticmethod
    def of(deferred):
        """Builds outcome from already settled deferred value."""
        error = deferred.exception(timeout=0)
        if error is not None:
            return Failure(error)
        return Success(deferred.join(timeout=0))


class Success(Outcome):
    __slots__ = ('value',)

    is_success = True

    def __init__(self, value):
        self.value = value

    def get(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, Success) and self.value == other.value

    def __hash__(self):
        return hash((Success, self.value))

    def __repr__(self):
        return 'Success({!r})'.format(self.value)


class Failure(Outcome):
    __slots__ = ('error',)

    is_failure = True

    def __init__(self, error):
        self.error = error

    def get(self):
        raise self.error

    def __eq__(self, other):
        return isinstance(other, Failure) and self.error is other.error

    def __hash__(self):
        return hash((Failure, id(self.error)))

    def __repr__(self):
        return 'Failure({!r})'.format(self.error)

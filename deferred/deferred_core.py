from .exceptions import InvalidStateError, TimeoutError
from .synchronous_executor import Synchronous
from threading import Condition


class DeferredState(object):
    pending = 0
    fulfilled = 1
    rejected = -1


class DeferredBase(object):
    pass


class DeferredCore(DeferredBase):
    """One-shot outcome cell.

    State moves from pending to either fulfilled or rejected exactly once,
    later attempts to settle are ignored (``_try_*``) or raise
    InvalidStateError. Reads after settlement need no coordination since
    the cell never changes again.
    """

    def __init__(self):
        self._mutex = Condition()
        self._state = DeferredState.pending
        self._value = None

    def _fulfill(self, result):
        if not self._try_fulfill(result):
            raise InvalidStateError("result was already set")

    def _try_fulfill(self, result):
        return self._try_set_result(DeferredState.fulfilled, result)

    def _reject(self, exception):
        if not self._try_reject(exception):
            raise InvalidStateError("result was already set")

    def _try_reject(self, exception):
        assert isinstance(exception, BaseException), "DeferredValue.reject expects exception instance"
        return self._try_set_result(DeferredState.rejected, exception)

    def _complete(self, fun, *vargs, **kwargs):
        if not self._try_complete(fun, *vargs, **kwargs):
            raise InvalidStateError("result was already set")

    def _try_complete(self, fun, *vargs, **kwargs):
        try:
            result = fun(*vargs, **kwargs)
        except Exception as ex:
            return self._try_reject(ex)
        return self._try_fulfill(result)

    def _try_set_result(self, state, value):
        with self._mutex:
            if self._state:
                return False
            self._state = state
            self._value = value
            self._mutex.notify_all()
        self._on_result_set()
        return True

    #virtual
    def _on_result_set(self):
        pass

    @property
    def is_settled(self):
        """Returns True if deferred value is fulfilled or rejected."""
        with self._mutex:
            return self._state != DeferredState.pending

    @property
    def is_fulfilled(self):
        with self._mutex:
            return self._state == DeferredState.fulfilled

    @property
    def is_rejected(self):
        with self._mutex:
            return self._state == DeferredState.rejected

    def wait(self, timeout=None):
        """Blocking wait for deferred value to settle.

        Args:
            timeout: time in seconds to wait for settlement (default - infinite).

        Returns:
            True if deferred value settles within timeout.
        """
        self._run_queued_callbacks()
        with self._mutex:
            return self._mutex.wait_for(self._settled, timeout)

    def join(self, timeout=None):
        """Blocking wait for deferred value result.

        Args:
            timeout: time in seconds to wait for settlement (default - infinite).

        Returns:
            Fulfilled value.

        Raises:
            TimeoutError: if deferred value does not settle within timeout.
            Exception: the error deferred value was rejected with.
        """
        self._run_queued_callbacks()
        with self._mutex:
            if not self._mutex.wait_for(self._settled, timeout):
                raise TimeoutError("deferred value did not settle in time")
            if self._state == DeferredState.rejected:
                raise self._value
            return self._value

    def exception(self, timeout=None):
        """Blocking wait for deferred value error.

        Args:
            timeout: time in seconds to wait for settlement (default - infinite).

        Returns:
            Error deferred value was rejected with, or None if fulfilled.

        Raises:
            TimeoutError: if deferred value does not settle within timeout.
        """
        self._run_queued_callbacks()
        with self._mutex:
            if not self._mutex.wait_for(self._settled, timeout):
                raise TimeoutError("deferred value did not settle in time")
            if self._state == DeferredState.rejected:
                return self._value
            return None

    def _settled(self):
        return self._state != DeferredState.pending

    def _run_queued_callbacks(self):
        # Blocking inside a continuation: this value may be settled by
        # continuations queued behind the current one on this thread.
        with self._mutex:
            if self._settled():
                return
        Synchronous.run_pending()

    def __repr__(self):
        res = self.__class__.__name__
        with self._mutex:
            if self._state == DeferredState.fulfilled:
                return res + '<fulfilled={!r}>'.format(self._value)
            if self._state == DeferredState.rejected:
                return res + '<rejected={!r}>'.format(self._value)
        return res + '<pending>'

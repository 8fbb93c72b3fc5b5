from .deferred_core import DeferredCore
from .config import Default


class DeferredCallbacks(DeferredCore):
    """Maintains continuations of a deferred value.

    Continuations registered before settlement run in registration order
    on the settling thread, including ones that arrive while settlement is
    still running them. Ones registered afterwards run immediately on the
    registering thread. Either way they are handed to an executor,
    which is ``clb_executor`` unless overridden per call.
    """

    def __init__(self, clb_executor=None):
        DeferredCore.__init__(self)
        self._callbacks = []
        self._executor = clb_executor or Default.get_callback_executor()

    def add_done_callback(self, fun, executor=None):
        """Add a callback to be run when the deferred value settles.

        The callback is called with a single argument - the deferred value.

        Args:
            fun: callable accepting settled deferred value.
            executor: Executor to use when calling fun (default - the one
                this deferred value was created with).
        """
        assert callable(fun), "DeferredValue.add_done_callback expects callable"
        with self._mutex:
            # list stays in place until settlement has drained it
            if self._callbacks is not None:
                self._callbacks.append((fun, executor))
                return
        self._run_callback(fun, executor)

    #override
    def _on_result_set(self):
        while True:
            with self._mutex:
                callbacks = self._callbacks
                if not callbacks:
                    self._callbacks = None
                    return
                self._callbacks = []

            for clb, executor in callbacks:
                self._run_callback(clb, executor)

    def _run_callback(self, clb, executor):
        exc = executor or self._executor
        exc(clb, self)

    def _outcome(self):
        """Returns (state, value) pair of a settled deferred value."""
        with self._mutex:
            return self._state, self._value

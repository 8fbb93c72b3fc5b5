from .deferred_core import DeferredBase, DeferredState
from .deferred_callbacks import DeferredCallbacks
from .deferred_extensions import DeferredExtensions
from .config import Default
from .exceptions import CancelledError


class DeferredValue(DeferredCallbacks, DeferredExtensions):
    """Handle of a single eventual outcome - a value or an error.

    Chaining operators never modify the deferred value they are called on,
    they return a new one which settles from the outcome of the original.
    """

    @classmethod
    def _new(cls, clb_executor=None):
        return cls(clb_executor)

    @classmethod
    def create(cls, computation, *args, substrate=None, clb_executor=None, **kwargs):
        """Submits computation for asynchronous execution.

        Args:
            computation: function to run, called with remaining args and kwargs.
            substrate: substrate to run computation on (default - Default.get_substrate()).
            clb_executor: default executor to use when running new deferred
            value's callbacks (default - Synchronous).

        Returns:
            DeferredValue fulfilled with return value of computation or
            rejected with the error it raised.
        """
        assert callable(computation), "DeferredValue.create expects callable"
        substrate = substrate or Default.get_substrate()
        d = substrate.submit(computation, *args, **kwargs)
        if clb_executor is None:
            return d
        return cls._adopt(d, clb_executor)

    @classmethod
    def resolve(cls, value=None, clb_executor=None):
        """Returns fulfilled deferred value.
        Deferred values are returned as is.

        Args:
            value: value to fulfill deferred value with.
            clb_executor: default Executor to use for running callbacks (default - Synchronous).
        """
        if isinstance(value, DeferredBase):
            return value
        d = cls._new(clb_executor)
        d._fulfill(value)
        return d

    @classmethod
    def reject(cls, exception, clb_executor=None):
        """Returns rejected deferred value.

        Args:
            exception: Exception to reject deferred value with.
            clb_executor: default Executor to use for running callbacks (default - Synchronous).
        """
        d = cls._new(clb_executor)
        d._reject(exception)
        return d

    @classmethod
    def from_concurrent_future(cls, cf, clb_executor=None):
        """Wraps concurrent.futures.Future, cancellation becomes rejection
        with CancelledError."""
        d = cls._new(clb_executor)

        def done(cf):
            if cf.cancelled():
                d._try_reject(CancelledError("computation was cancelled"))
                return
            exception = cf.exception()
            if exception is not None:
                d._try_reject(exception)
            else:
                d._try_fulfill(cf.result())

        cf.add_done_callback(done)
        return d

    @classmethod
    def _adopt(cls, other, clb_executor=None):
        d = cls._new(clb_executor)
        other.add_done_callback(d._try_settle_from)
        return d

    def on_success(self, fun_res, executor=None):
        """Returns deferred value which will be fulfilled with result of
        applying provided function to the value of the original.
        Rejection of the original and errors raised by function are propagated.

        Args:
            fun_res: function that accepts original value and returns new one.
            executor: Executor to use when performing call to function (default - Synchronous).
        """
        assert callable(fun_res), "DeferredValue.on_success expects callable"
        d = self._new(self._executor)

        def on_done_success(src):
            state, value = src._outcome()
            if state == DeferredState.fulfilled:
                d._complete(fun_res, value)
            else:
                d._reject(value)

        self.add_done_callback(on_done_success, executor=executor)
        return d

    def on_success_do(self, fun_res, executor=None):
        """Same as on_success but discards result of function, new deferred
        value is fulfilled with None once function returns."""
        assert callable(fun_res), "DeferredValue.on_success_do expects callable"
        return self.on_success(_discarding(fun_res), executor=executor)

    def on_failure(self, fun_ex, executor=None):
        """Returns deferred value that will be fulfilled with value of
        original if it succeeds, or with result of provided function in
        case of failure. Rejection is thereby converted into success, only
        an error raised by the function itself rejects the new value.

        Args:
            fun_ex: function that accepts exception and returns a value.
            executor: Executor to use when performing call to function (default - Synchronous).
        """
        assert callable(fun_ex), "DeferredValue.on_failure expects callable"
        d = self._new(self._executor)

        def on_done_recover(src):
            state, value = src._outcome()
            if state == DeferredState.rejected:
                d._complete(fun_ex, value)
            else:
                d._fulfill(value)

        self.add_done_callback(on_done_recover, executor=executor)
        return d

    def on_failure_do(self, fun_ex, executor=None):
        """Calls provided function with the error if original is rejected.
        New deferred value is fulfilled with None either way, unless the
        function raises."""
        assert callable(fun_ex), "DeferredValue.on_failure_do expects callable"
        return self.on_settle(lambda _, ex: fun_ex(ex) if ex is not None else None,
                              executor=executor)

    def on_settle(self, fun, executor=None):
        """Returns deferred value fulfilled with result of calling provided
        function with (value, None) on success or (None, exception) on
        failure. Runs regardless of outcome; an error raised by the function
        rejects the new value.

        Args:
            fun: function that accepts value and exception.
            executor: Executor to use when performing call to function (default - Synchronous).
        """
        assert callable(fun), "DeferredValue.on_settle expects callable"
        d = self._new(self._executor)

        def on_done_settle(src):
            state, value = src._outcome()
            if state == DeferredState.fulfilled:
                d._complete(fun, value, None)
            else:
                d._complete(fun, None, value)

        self.add_done_callback(on_done_settle, executor=executor)
        return d

    def on_settle_do(self, fun, executor=None):
        """Same as on_settle but new deferred value is fulfilled with None."""
        assert callable(fun), "DeferredValue.on_settle_do expects callable"
        return self.on_settle(_discarding(fun), executor=executor)

    def on_settle_run(self, fun, executor=None):
        """Returns deferred value fulfilled with result of calling provided
        function without arguments once original settles, either way."""
        assert callable(fun), "DeferredValue.on_settle_run expects callable"
        return self.on_settle(lambda _, __: fun(), executor=executor)

    def then(self, deferred_fun, executor=None):
        """Returns deferred value which represents two computations chained
        one after another. Function is called with the value of original and
        must return a deferred value (plain values are resolved).
        Rejections are propagated from the first value, from the second one
        and from the function.

        Args:
            deferred_fun: function that returns deferred value to be chained
            after successful completion of the original.
            executor: Executor to use when performing call to function (default - Synchronous).
        """
        assert callable(deferred_fun), "DeferredValue.then expects callable"
        d = self._new(self._executor)

        def on_done_start_next(src):
            state, value = src._outcome()
            if state == DeferredState.rejected:
                d._reject(value)
                return
            try:
                d2 = self.resolve(deferred_fun(value))
            except Exception as ex:
                d._reject(ex)
                return
            d2.add_done_callback(d._try_settle_from)

        self.add_done_callback(on_done_start_next, executor=executor)
        return d

    def _try_settle_from(self, other):
        state, value = other._outcome()
        if state == DeferredState.fulfilled:
            return self._try_fulfill(value)
        return self._try_reject(value)


def _discarding(fun):
    def call(*args):
        fun(*args)
    return call

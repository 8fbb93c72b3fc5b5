from .deferred_core import DeferredState
from .exceptions import EmptyInputError, AllFailedError
from .outcome import Outcome
from threading import Lock
import functools


class DeferredExtensions(object):
    """Mixin class for DeferredValue aggregate operators."""

    class comb_ctx(object):
        def __init__(self, size):
            self.lock = Lock()
            self.results = [None] * size
            self.left = size

    @classmethod
    def _members(cls, deferreds):
        return [cls.resolve(d) for d in deferreds]

    @classmethod
    def all(cls, deferreds, clb_executor=None):
        """Transforms sequence of deferred values into one that will contain
        list of their values in input order.
        In case of any rejection result is rejected with first error to occur.

        Args:
            deferreds: iterable of deferred values (plain values are resolved).
            clb_executor: default executor to use when running new deferred
            value's callbacks (default - Synchronous).
        """
        members = cls._members(deferreds)
        if not members:
            return cls.resolve([], clb_executor=clb_executor)

        d = cls._new(clb_executor)
        ctx = cls.comb_ctx(len(members))

        def done(i, member):
            state, value = member._outcome()
            if state == DeferredState.rejected:
                d._try_reject(value)
                return
            with ctx.lock:
                ctx.results[i] = value
                ctx.left -= 1
                if ctx.left:
                    return
            d._try_fulfill(ctx.results)

        for i, member in enumerate(members):
            member.add_done_callback(functools.partial(done, i))

        return d

    @classmethod
    def all_settled(cls, deferreds, clb_executor=None):
        """Transforms sequence of deferred values into one that will contain
        list of Outcome objects in input order, once every input settles.
        Never rejects, individual failures are reported as Failure outcomes.

        Args:
            deferreds: iterable of deferred values (plain values are resolved).
            clb_executor: default executor to use when running new deferred
            value's callbacks (default - Synchronous).
        """
        members = cls._members(deferreds)
        if not members:
            return cls.resolve([], clb_executor=clb_executor)

        d = cls._new(clb_executor)
        ctx = cls.comb_ctx(len(members))

        def done(i, member):
            with ctx.lock:
                ctx.results[i] = Outcome.of(member)
                ctx.left -= 1
                if ctx.left:
                    return
            d._fulfill(ctx.results)

        for i, member in enumerate(members):
            member.add_done_callback(functools.partial(done, i))

        return d

    @classmethod
    def race(cls, deferreds, clb_executor=None):
        """Returns deferred value which settles the same way as the first
        of provided ones to settle, both successfully or with failure.

        Empty input produces value rejected with EmptyInputError.

        Args:
            deferreds: iterable of deferred values (plain values are resolved).
            clb_executor: default executor to use when running new deferred
            value's callbacks (default - Synchronous).
        """
        members = cls._members(deferreds)
        if not members:
            return cls.reject(EmptyInputError("DeferredValue.race() got empty sequence"),
                              clb_executor=clb_executor)

        d = cls._new(clb_executor)
        for member in members:
            member.add_done_callback(d._try_settle_from)
        return d

    @classmethod
    def any(cls, deferreds, clb_executor=None):
        """Returns deferred value which will be fulfilled with value of the
        first of provided ones to succeed. Rejections never win: when every
        input is rejected, result is rejected with AllFailedError.

        Empty input produces value rejected with EmptyInputError.

        Args:
            deferreds: iterable of deferred values (plain values are resolved).
            clb_executor: default executor to use when running new deferred
            value's callbacks (default - Synchronous).
        """
        pool = cls._members(deferreds)
        if not pool:
            return cls.reject(EmptyInputError("DeferredValue.any() got empty sequence"),
                              clb_executor=clb_executor)

        d = cls._new(clb_executor)
        ctx = cls.comb_ctx(len(pool))
        errors = []

        # Each member leaves the pool exactly once, when it settles. A
        # rejected member is dropped and the rest keep racing.
        def done(member):
            state, value = member._outcome()
            if state == DeferredState.fulfilled:
                d._try_fulfill(value)
                return
            with ctx.lock:
                errors.append(value)
                ctx.left -= 1
                if ctx.left:
                    return
            d._try_reject(AllFailedError(errors))

        for member in pool:
            member.add_done_callback(done)

        return d

    @classmethod
    def reduce(cls, deferreds, fun, *vargs, executor=None, clb_executor=None):
        """Returns deferred value which will be set with reduced result of all provided ones.
        In case of any rejection result is rejected with first error to occur.

        Args:
            deferreds: iterable of deferred values.
            fun: reduce-compatible function.
            vargs: optional initial value.
            executor: Executor to use when performing call to function (default - Synchronous).
            clb_executor: default executor to use when running new deferred
            value's callbacks (default - Synchronous).
        """
        return cls \
            .all(deferreds, clb_executor=clb_executor) \
            .on_success(lambda results: functools.reduce(fun, results, *vargs), executor=executor)

from .substrate_base import SubstrateBase
from ..deferred_value import DeferredValue
from ..config import Default
from concurrent.futures import ThreadPoolExecutor
import logging

logger = logging.getLogger(__name__)


class ThreadPoolSubstrate(SubstrateBase):
    """Runs computations on a shared pool of worker threads."""

    def __init__(self, max_workers=None, thread_name_prefix='deferred'):
        self.pool = ThreadPoolExecutor(max_workers=max_workers,
                                       thread_name_prefix=thread_name_prefix)

    def shutdown(self, wait=True):
        logger.debug('Shutting down %r', self)
        self.pool.shutdown(wait)

    def __call__(self, fn, *args, **kwargs):
        cff = self.pool.submit(fn, *args, **kwargs)
        cff.add_done_callback(_report_unhandled)

    def submit(self, fn, *args, **kwargs):
        cff = self.pool.submit(fn, *args, **kwargs)
        return DeferredValue.from_concurrent_future(cff)


class ThreadPerTaskSubstrate(SubstrateBase):
    """Runs every computation on its own short-lived worker thread.

    Each submission gets a single-worker executor which is shut down as
    soon as the computation is handed over, so the thread exits right
    after the computation finishes.
    """

    def __init__(self, thread_name_prefix='deferred-task'):
        self._thread_name_prefix = thread_name_prefix

    def shutdown(self, wait=True):
        pass

    def __call__(self, fn, *args, **kwargs):
        self._submit(fn, *args, **kwargs).add_done_callback(_report_unhandled)

    def submit(self, fn, *args, **kwargs):
        return DeferredValue.from_concurrent_future(self._submit(fn, *args, **kwargs))

    def _submit(self, fn, *args, **kwargs):
        pool = ThreadPoolExecutor(max_workers=1,
                                  thread_name_prefix=self._thread_name_prefix)
        try:
            return pool.submit(fn, *args, **kwargs)
        finally:
            pool.shutdown(wait=False)


def _report_unhandled(cff):
    if cff.cancelled():
        return
    exc = cff.exception()
    if exc is not None:
        Default.on_unhandled_error(exc)

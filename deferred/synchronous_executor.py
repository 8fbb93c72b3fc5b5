from .config import Default
from collections import deque
import threading


class SynchronousExecutor(object):
    """Runs continuations on the calling thread.

    A continuation submitted while another one is running on the same
    thread is queued and runs after it returns, so settling a long chain
    of deferred values takes constant stack depth.
    """

    def __init__(self):
        self._local = threading.local()

    def __call__(self, fn, *args, **kwargs):
        pending = getattr(self._local, 'pending', None)
        if pending is not None:
            pending.append((fn, args, kwargs))
            return

        self._local.pending = pending = deque([(fn, args, kwargs)])
        try:
            self._drain(pending)
        finally:
            self._local.pending = None

    def run_pending(self):
        """Runs continuations queued on this thread, if called from within one."""
        pending = getattr(self._local, 'pending', None)
        if pending:
            self._drain(pending)

    @staticmethod
    def _drain(pending):
        while pending:
            fn, args, kwargs = pending.popleft()
            try:
                fn(*args, **kwargs)
            except Exception as ex:
                Default.on_unhandled_error(ex)


# alias
Synchronous = SynchronousExecutor()

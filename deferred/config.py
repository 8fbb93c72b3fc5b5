import traceback
import logging

logger = logging.getLogger(__package__)


def log_error_handler(cls, tb):
    try:
        logger.error('Deferred continuation raised unhandled %s:\n%s',
                     cls.__name__, ''.join(tb))
    except Exception:
        pass


class Default(object):
    # Called when a continuation raises outside of a chaining handler,
    # i.e. an error that no DeferredValue can carry
    UNHANDLED_FAILURE_CALLBACK = staticmethod(log_error_handler)

    # Default executor for deferred continuations
    CALLBACK_EXECUTOR = None

    # Default substrate for DeferredValue.create()
    SUBSTRATE = None
    MAX_WORKERS = None

    @staticmethod
    def get_callback_executor():
        if not Default.CALLBACK_EXECUTOR:
            from .synchronous_executor import Synchronous

            Default.CALLBACK_EXECUTOR = Synchronous
        return Default.CALLBACK_EXECUTOR

    @staticmethod
    def get_substrate():
        if not Default.SUBSTRATE:
            from .substrate import ThreadPoolSubstrate

            Default.SUBSTRATE = ThreadPoolSubstrate(max_workers=Default.MAX_WORKERS)
            logger.debug('Created default substrate %r', Default.SUBSTRATE)
        return Default.SUBSTRATE

    @staticmethod
    def reset_substrate(wait=True):
        """Shuts down default substrate, next create() starts a new one."""
        substrate, Default.SUBSTRATE = Default.SUBSTRATE, None
        if substrate is not None:
            substrate.shutdown(wait)

    @staticmethod
    def on_unhandled_error(exc):
        tb = traceback.format_exception(exc.__class__, exc,
                                        exc.__traceback__)
        Default.UNHANDLED_FAILURE_CALLBACK(exc.__class__, tb)

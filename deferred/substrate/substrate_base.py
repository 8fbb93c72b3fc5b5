import abc


class SubstrateBase(metaclass=abc.ABCMeta):
    """Runs computations off the caller's thread."""

    @abc.abstractmethod
    def __call__(self, fn, *args, **kwargs):
        """Same as submit but does not produce deferred value in
        response. This method is intended to allow using
        substrates as executors for deferred value callbacks"""

    @abc.abstractmethod
    def submit(self, fn, *args, **kwargs):
        """Schedule execution of specified function, returns DeferredValue"""

    @abc.abstractmethod
    def shutdown(self, wait=True):
        """Stop substrate"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False

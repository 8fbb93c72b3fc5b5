from deferred import DeferredValue, ThreadPoolSubstrate
import unittest
import time


class DeferredTestBase(unittest.TestCase):
    def setUp(self):
        self.substrate = ThreadPoolSubstrate(max_workers=4)

    def tearDown(self):
        self.substrate.shutdown()

    def success_after(self, timeout, value):
        def do():
            time.sleep(timeout)
            return value

        return DeferredValue.create(do, substrate=self.substrate)

    def raise_after(self, timeout, exception):
        def do():
            time.sleep(timeout)
            raise exception

        return DeferredValue.create(do, substrate=self.substrate)

    def after(self, timeout, fun, *args):
        def do():
            time.sleep(timeout)
            fun(*args)

        self.substrate(do)

    def _raise(self, t, *_):
        raise t

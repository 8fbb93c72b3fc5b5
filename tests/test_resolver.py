from deferred import *
import unittest


class ResolverTest(unittest.TestCase):
    def test_fulfilled(self):
        p = Resolver()
        self.assertFalse(p.is_settled)

        p.fulfill(10)
        self.assertTrue(p.is_settled)
        self.assertFalse(p.try_fulfill(15))
        self.assertEqual(10, p.deferred.join())

    def test_rejected(self):
        p = Resolver()

        p.reject(TypeError())
        self.assertTrue(p.is_settled)
        self.assertFalse(p.try_reject(KeyError()))
        self.assertRaises(TypeError, p.deferred.join)

    def test_already_settled(self):
        p = Resolver()
        p.fulfill(123)
        self.assertRaises(InvalidStateError, lambda: p.fulfill(321))
        self.assertRaises(InvalidStateError, lambda: p.reject(TypeError()))
        self.assertRaises(InvalidStateError, lambda: p.complete(lambda: 1))

    def test_complete_success(self):
        p = Resolver()
        p.complete(lambda x: x + 1, 122)
        self.assertEqual(123, p.deferred.join())

    def test_complete_failure(self):
        def f():
            raise ArithmeticError()

        p = Resolver()
        p.complete(f)
        self.assertRaises(ArithmeticError, p.deferred.join)

    def test_try_complete(self):
        p = Resolver()
        self.assertTrue(p.try_complete(lambda: 1))
        self.assertFalse(p.try_complete(lambda: 2))
        self.assertEqual(1, p.deferred.join())

    def test_settles_chains(self):
        p = Resolver()
        seen = []
        p.deferred.on_success_do(seen.append)
        p.deferred.on_failure_do(lambda ex: self.fail('failure handler called on success'))

        self.assertEqual([], seen)
        p.fulfill(123)
        self.assertEqual([123], seen)


if __name__ == '__main__':
    unittest.main()

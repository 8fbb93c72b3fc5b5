from deferred import *
import unittest


class OutcomeTest(unittest.TestCase):
    def test_success(self):
        o = Success(5)
        self.assertTrue(o.is_success)
        self.assertFalse(o.is_failure)
        self.assertEqual(5, o.get())
        self.assertEqual(Success(5), o)
        self.assertNotEqual(Success(6), o)
        self.assertEqual('Success(5)', repr(o))

    def test_failure(self):
        ex = TypeError()
        o = Failure(ex)
        self.assertTrue(o.is_failure)
        self.assertFalse(o.is_success)
        self.assertRaises(TypeError, o.get)
        self.assertEqual(Failure(ex), o)
        self.assertNotEqual(Failure(TypeError()), o)
        self.assertNotEqual(Success(ex), o)

    def test_of(self):
        ex = KeyError()
        self.assertEqual(Success(1), Outcome.of(DeferredValue.resolve(1)))
        self.assertEqual(Failure(ex), Outcome.of(DeferredValue.reject(ex)))


if __name__ == '__main__':
    unittest.main()

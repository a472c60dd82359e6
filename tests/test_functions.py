import unittest

from optionpy import Option, Some, Nothing, flatten, unzip


class TestFlatten(unittest.TestCase):
    def test_some_of_some(self):
        self.assertEqual(flatten(Some(Some(1))).unwrap(), 1)

    def test_one_level_per_call(self):
        flat = flatten(Some(Some(Some(1))))
        self.assertEqual(flat.unwrap().unwrap(), 1)
        self.assertEqual(flatten(flat).unwrap(), 1)

    def test_inner_none(self):
        flat = flatten(Some(Some(Nothing())))
        self.assertTrue(flat.unwrap().is_none())
        self.assertTrue(flatten(Some(Nothing())).is_none())
        self.assertTrue(flatten(Nothing()).is_none())

    def test_non_nested_matches_method(self):
        self.assertEqual(flatten(Some(5)).unwrap(), 5)


class TestUnzip(unittest.TestCase):
    def test_some(self):
        a, b = unzip(Some((10, "foo")))
        self.assertTrue(a.equals(Some(10)))
        self.assertTrue(b.equals(Some("foo")))

    def test_some_list_pair(self):
        a, b = unzip(Some([123, "foo"]))
        self.assertEqual((a.unwrap(), b.unwrap()), (123, "foo"))

    def test_none(self):
        pair = unzip(Nothing())
        self.assertEqual(len(pair), 2)
        self.assertTrue(all(isinstance(o, Option) and o.is_none() for o in pair))

    def test_inverse_of_zip(self):
        a, b = unzip(Some(1).zip(Some("x")))
        self.assertEqual((a.unwrap(), b.unwrap()), (1, "x"))

    def test_bad_pair(self):
        with self.assertRaises(ValueError):
            unzip(Some((1, 2, 3)))
        with self.assertRaises(TypeError):
            unzip(Some(5))

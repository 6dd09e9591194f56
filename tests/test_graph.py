# tests/test_graph.py
# Run: python -m pytest tests/test_graph.py -v

import io
import os
import sys
import unittest
from contextlib import redirect_stdout

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from amgraph.core.exceptions import ErrorKind, OutOfBoundsError
from amgraph.core.graph import AMGraph


class TestAMGraph(unittest.TestCase):

    def setUp(self):
        self.G = AMGraph(3, dtype=int)

    def test_new_graph_is_all_zero(self):
        self.assertEqual(self.G.size, 3)
        self.assertEqual(len(self.G), 3)
        self.assertEqual(self.G.get_size(), 3)
        for i in range(3):
            for j in range(3):
                self.assertEqual(self.G.get(i, j), 0)

    def test_empty_graph(self):
        G = AMGraph()
        self.assertEqual(G.size, 0)
        self.assertEqual(G.to_numpy().shape, (0, 0))

    def test_set_edge_is_directed(self):
        self.G.set_edge(0, 2, 7)
        self.assertEqual(self.G.get(0, 2), 7)
        self.assertEqual(self.G.get(2, 0), 0)
        # no other cell changed
        expected = np.zeros((3, 3), dtype=int)
        expected[0, 2] = 7
        self.assertTrue(np.array_equal(self.G.to_numpy(), expected))

    def test_get_returns_python_scalar(self):
        self.G.set_edge(1, 1, 4)
        self.assertIs(type(self.G.get(1, 1)), int)
        F = AMGraph(2)
        self.assertIs(type(F.get(0, 0)), float)

    def test_set_edge_out_of_bounds_leaves_graph_unchanged(self):
        with self.assertRaises(OutOfBoundsError) as ctx:
            self.G.set_edge(5, 0, 1)
        err = ctx.exception
        self.assertEqual((err.i, err.j, err.size), (5, 0, 3))
        self.assertIs(err.kind, ErrorKind.OUT_OF_BOUNDS)
        self.assertIsInstance(err, IndexError)
        self.assertFalse(self.G.to_numpy().any())

    def test_negative_index_is_out_of_bounds(self):
        with self.assertRaises(OutOfBoundsError):
            self.G.set_edge(-1, 0, 1)
        with self.assertRaises(OutOfBoundsError):
            self.G.get(0, -1)

    def test_get_out_of_bounds(self):
        with self.assertRaises(OutOfBoundsError):
            self.G.get(0, 3)

    def test_boolean_index_rejected(self):
        # a boolean scalar would act as a numpy row mask
        with self.assertRaises(TypeError):
            self.G.set_edge(True, 0, 5)
        with self.assertRaises(TypeError):
            self.G.set_edge(0, np.bool_(False), 5)
        with self.assertRaises(TypeError):
            self.G.get(True, 0)
        self.assertFalse(self.G.to_numpy().any())

    def test_float_index_rejected(self):
        with self.assertRaises(TypeError):
            self.G.set_edge(1.5, 0, 5)
        with self.assertRaises(TypeError):
            self.G.get(0, 1.0)
        self.assertFalse(self.G.to_numpy().any())

    def test_numpy_integer_index_accepted(self):
        self.G.set_edge(np.int64(2), np.uint8(1), 6)
        self.assertEqual(self.G.get(np.int32(2), 1), 6)
        with self.assertRaises(OutOfBoundsError):
            self.G.get(np.int64(3), 0)

    def test_resize_discards_content(self):
        self.G.set_edge(0, 0, 9)
        self.G.set_edge(1, 2, 3)
        self.G.resize(4)
        self.assertEqual(self.G.size, 4)
        for i in range(4):
            for j in range(4):
                self.assertEqual(self.G.get(i, j), 0)

    def test_resize_smaller_and_to_zero(self):
        self.G.set_edge(0, 1, 2)
        self.G.resize(1)
        self.assertEqual(self.G.get(0, 0), 0)
        with self.assertRaises(OutOfBoundsError):
            self.G.get(0, 1)
        self.G.resize(0)
        self.assertEqual(self.G.size, 0)

    def test_non_integral_size_rejected(self):
        with self.assertRaises(TypeError):
            AMGraph(2.7)
        with self.assertRaises(TypeError):
            self.G.resize(1.0)
        self.assertEqual(self.G.size, 3)
        self.G.resize(np.int64(2))
        self.assertEqual(self.G.size, 2)

    def test_negative_size_rejected(self):
        with self.assertRaises(ValueError):
            AMGraph(-1)
        with self.assertRaises(ValueError):
            self.G.resize(-2)

    def test_non_numeric_dtype_rejected(self):
        for dtype in (object, str, complex, "datetime64[s]"):
            with self.assertRaises(TypeError):
                AMGraph(2, dtype=dtype)

    def test_bool_dtype_defaults_to_false(self):
        B = AMGraph(2, dtype=bool)
        self.assertIs(B.get(1, 0), False)
        B.set_edge(1, 0, True)
        self.assertIs(B.get(1, 0), True)

    def test_from_numpy_copies(self):
        data = np.array([[0, 1], [2, 3]])
        G = AMGraph.from_numpy(data)
        data[0, 1] = 100
        self.assertEqual(G.get(0, 1), 1)
        self.assertEqual(G.get(1, 0), 2)

        out = G.to_numpy()
        out[1, 1] = -5
        self.assertEqual(G.get(1, 1), 3)

    def test_from_numpy_rejects_non_square(self):
        with self.assertRaises(ValueError):
            AMGraph.from_numpy([[1, 2, 3], [4, 5, 6]])
        with self.assertRaises(ValueError):
            AMGraph.from_numpy([1, 2, 3])

    def test_from_numpy_dtype_override(self):
        G = AMGraph.from_numpy([[1, 0], [0, 1]], dtype=np.float32)
        self.assertEqual(G.dtype, np.dtype(np.float32))

    def test_equality(self):
        H = AMGraph(3, dtype=float)
        self.assertEqual(self.G, H)
        H.set_edge(0, 1, 1.0)
        self.assertNotEqual(self.G, H)
        self.assertNotEqual(self.G, AMGraph(2, dtype=int))
        with self.assertRaises(TypeError):
            hash(self.G)

    def test_render_table(self):
        self.G.set_edge(0, 1, 4)
        lines = self.G.render().splitlines()
        self.assertEqual(len(lines), 3 + 3 + 1)
        self.assertEqual(lines[0], "-" * 21)
        self.assertEqual(lines[1], "|  v  |  0  |  1  |  2  |  ")
        self.assertEqual(lines[3], "|  0  |  0  |  4  |  0  |  ")
        self.assertEqual(str(self.G), self.G.render())
        self.assertEqual(repr(self.G), f"AMGraph(size=3, dtype={np.dtype(int)})")

    def test_print_graph(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            self.G.print_graph()
        self.assertEqual(buf.getvalue(), self.G.render() + "\n")


if __name__ == "__main__":
    unittest.main()

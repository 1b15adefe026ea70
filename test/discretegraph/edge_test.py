import unittest

from discretegraph import Constants, Edge, SelfLoop, Vertex

class EdgeTest(unittest.TestCase):
    def setUp(self):
        self.a, self.b, self.c = Vertex("a"), Vertex("b"), Vertex("c")

    def test_build_with_default_weight(self):
        e = Edge(self.a, self.b)
        self.assertEqual(e.weight, Constants.DEFAULT_WEIGHT)
        self.assertEqual(e.labels, frozenset({"a", "b"}))
        self.assertEqual(e.vertices, (self.a, self.b))

    def test_self_loop_raises(self):
        with self.assertRaises(SelfLoop):
            Edge(self.a, Vertex("a"))

    def test_non_vertex_endpoint_raises(self):
        with self.assertRaises(TypeError):
            Edge(self.a, "b")

    def test_equality_is_unordered_and_ignores_weight(self):
        self.assertEqual(Edge(self.a, self.b), Edge(self.b, self.a))
        self.assertEqual(Edge(self.a, self.b, 3), Edge(self.a, self.b, 5))
        self.assertEqual(hash(Edge(self.a, self.b, 3)), hash(Edge(self.b, self.a)))
        self.assertNotEqual(Edge(self.a, self.b), Edge(self.a, self.c))
        self.assertNotEqual(Edge(self.a, self.b), "ab")

    def test_equality_with_non_edge_is_false(self):
        e = Edge(self.a, self.b)
        self.assertFalse(e == self.a)
        self.assertTrue(e != self.a)
        self.assertFalse(e == "ab")

    def test_build_many(self):
        edges = Edge.build_many((self.a, self.b), (self.b, self.c, 4), (self.b, self.a))
        self.assertIsInstance(edges, set)
        self.assertEqual(len(edges), 2)
        self.assertIn(Edge(self.c, self.b), edges)

    def test_other(self):
        e = Edge(self.a, self.b)
        self.assertEqual(e.other(self.a), self.b)
        self.assertEqual(e.other(self.b), self.a)
        with self.assertRaises(ValueError):
            e.other(self.c)

    def test_str(self):
        self.assertEqual(str(Edge(self.a, self.b)), "a ------- b")
        self.assertEqual(str(Edge(self.a, self.b, 2)), "a --[2]-- b")

if __name__ == "__main__":
    unittest.main()

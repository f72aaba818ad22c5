from unittest import TestCase

from .._core import Graph, UnknownState
from .._values import UnsupportedValue


class GraphTests(TestCase):
    """
    Tests for L{Graph}, the store of states and transitions.
    """

    def test_addState(self):
        """
        L{Graph.addState} returns a new state carrying the value, and the
        graph then contains it.
        """
        g = Graph()
        state = g.addState("locked")
        self.assertEqual(state.value, "locked")
        self.assertEqual(str(state), "locked")
        self.assertTrue(g.hasState(state))
        self.assertEqual(g.states(), [state])

    def test_stateIDs(self):
        """
        State ids start at zero and are never reused.
        """
        g = Graph()
        states = [g.addState(n) for n in range(5)]
        self.assertEqual([s.id for s in states], [0, 1, 2, 3, 4])

    def test_transitionIDs(self):
        """
        Transition ids start at one and are pairwise distinct.
        """
        g = Graph()
        a = g.addState("a")
        b = g.addState("b")
        ids = [g.addTransition(a, b, {"eq": "x"}),
               g.addTransition(b, a, {"eq": "y"}),
               g.addTransition(a, a, {"eq": "z"})]
        self.assertEqual(ids, [1, 2, 3])
        self.assertEqual([t.id for t in g.allTransitions()], ids)

    def test_countersArePerGraph(self):
        """
        Each graph allocates its own ids.
        """
        first = Graph()
        second = Graph()
        first.addState("a")
        first.addState("b")
        self.assertEqual(second.addState("c").id, 0)

    def test_statesCompareByIdentity(self):
        g = Graph()
        self.assertNotEqual(g.addState("a"), g.addState("a"))

    def test_unsupportedValue(self):
        g = Graph()
        self.assertRaises(UnsupportedValue, g.addState, None)
        self.assertEqual(g.states(), [])

    def test_outgoingTransitionsInOrder(self):
        """
        L{Graph.outgoingTransitions} lists only edges leaving the state, in
        the order they were added.
        """
        g = Graph()
        a = g.addState("a")
        b = g.addState("b")
        c = g.addState("c")
        g.addTransition(a, c, {"eq": "1"})
        g.addTransition(b, a, {"eq": "2"})
        g.addTransition(a, b, {"eq": "3"})
        g.addTransition(a, a, {"eq": "4"})
        self.assertEqual(
            [(t.destination, t.rules) for t in g.outgoingTransitions(a)],
            [(c, {"eq": "1"}), (b, {"eq": "3"}), (a, {"eq": "4"})],
        )
        self.assertEqual(g.outgoingTransitions(c), [])

    def test_outgoingTransitionsIsACopy(self):
        """
        Mutating the returned list does not touch the graph.
        """
        g = Graph()
        a = g.addState("a")
        g.addTransition(a, a, {"eq": "x"})
        g.outgoingTransitions(a).clear()
        self.assertEqual(len(g.outgoingTransitions(a)), 1)

    def test_rulesAreCopied(self):
        g = Graph()
        a = g.addState("a")
        rules = {"eq": "x"}
        g.addTransition(a, a, rules)
        rules["eq"] = "y"
        [transition] = g.outgoingTransitions(a)
        self.assertEqual(transition.rules, {"eq": "x"})

    def test_unknownState(self):
        """
        L{Graph.addTransition} refuses states from another graph, even when
        their ids coincide, and adds nothing.
        """
        g = Graph()
        other = Graph()
        mine = g.addState("a")
        theirs = other.addState("a")
        self.assertEqual(mine.id, theirs.id)
        with self.assertRaises(UnknownState) as cm:
            g.addTransition(mine, theirs, {"eq": "x"})
        self.assertIs(cm.exception.state, theirs)
        self.assertRaises(UnknownState, g.addTransition, theirs, mine,
                          {"eq": "x"})
        self.assertRaises(UnknownState, g.addTransition, "a", mine,
                          {"eq": "x"})
        self.assertEqual(g.allTransitions(), [])

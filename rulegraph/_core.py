# -*- test-case-name: rulegraph._test.test_core -*-

"""
The graph store: states are nodes, transitions are directed edges.

Edges may be parallel and may loop back to their source.
"""

from collections import defaultdict
from itertools import count

import attr

from ._values import checkValue, renderValue


class UnknownState(ValueError):
    """
    A L{Graph} was asked to link a C{state} it does not own.

    @param state: the state that was not created by this graph.
    """

    def __init__(self, state):
        self.state = state
        super(UnknownState, self).__init__(
            "{!r} does not belong to this graph".format(state)
        )


@attr.s(frozen=True, eq=False)
class State(object):
    """
    A node.  States compare by identity.
    """
    id = attr.ib()
    value = attr.ib()

    def __str__(self):
        return renderValue(self.value)


@attr.s(frozen=True, eq=False)
class Transition(object):
    """
    A directed edge from C{source} to C{destination}, guarded by C{rules}.

    :ivar dict rules: comparison operator name mapped to the expected event.
    """
    id = attr.ib()
    source = attr.ib()
    destination = attr.ib()
    rules = attr.ib(converter=dict)


@attr.s
class Graph(object):
    """
    Owns every state and transition of one machine.

    Ids are allocated per graph, so two graphs never share a counter.
    """
    _states = attr.ib(init=False, default=attr.Factory(dict))
    _transitions = attr.ib(init=False, default=attr.Factory(list))
    _outgoing = attr.ib(init=False, default=attr.Factory(
        lambda: defaultdict(list)))
    _stateIDs = attr.ib(init=False, default=attr.Factory(count))
    _transitionIDs = attr.ib(init=False, default=attr.Factory(
        lambda: count(1)))

    def addState(self, value):
        """
        Create a state holding C{value} and add it to the graph.

        :raises UnsupportedValue: if C{value} cannot be rendered.
        :rtype: State
        """
        state = State(id=next(self._stateIDs), value=checkValue(value))
        self._states[state.id] = state
        return state

    def hasState(self, state):
        """
        Was C{state} created by this graph?
        """
        return (isinstance(state, State)
                and self._states.get(state.id) is state)

    def addTransition(self, source, destination, rules):
        """
        Add an edge from C{source} to C{destination}.

        :param State source:
        :param State destination:
        :param Mapping[str, str] rules: copied; later changes to the
            caller's mapping are not seen.
        :raises UnknownState: if either state is not part of this graph.
        :return: the new transition's id.
        :rtype: int
        """
        for state in (source, destination):
            if not self.hasState(state):
                raise UnknownState(state)
        transition = Transition(id=next(self._transitionIDs),
                                source=source,
                                destination=destination,
                                rules=rules)
        self._transitions.append(transition)
        self._outgoing[source.id].append(transition)
        return transition.id

    def outgoingTransitions(self, state):
        """
        Transitions leaving C{state}, oldest first.

        A fresh list is built on every call.

        :rtype: List[Transition]
        """
        return list(self._outgoing.get(state.id, ()))

    def states(self):
        """
        All states, in creation order.
        """
        return list(self._states.values())

    def allTransitions(self):
        """
        All transitions, in creation order.
        """
        return list(self._transitions)

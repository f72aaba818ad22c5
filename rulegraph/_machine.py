# -*- test-case-name: rulegraph._test.test_machine -*-

"""
The event-driven controller: a L{Graph} plus a current state.
"""

import logging

import attr

from ._core import Graph
from ._resolve import resolveTransition
from ._rules import UnsupportedOperator

log = logging.getLogger(__name__)


@attr.s(frozen=True)
class Step(object):
    """
    The outcome of feeding one event to a L{StateMachine}.

    :ivar str event: the event.
    :ivar State state: the current state after the event.
    :ivar Optional[UnsupportedOperator] error: set when evaluating the
        event failed, in which case C{state} is unchanged.
    """
    event = attr.ib()
    state = attr.ib()
    error = attr.ib(default=None)


@attr.s
class StateMachine(object):
    """
    Moves between the states of a L{Graph} as events are fired at it.
    """

    _graph = attr.ib(default=attr.Factory(Graph))
    _state = attr.ib(init=False, default=None)
    _tracer = attr.ib(init=False, default=None, repr=False)

    @property
    def graph(self):
        return self._graph

    @property
    def currentState(self):
        """
        The state the machine is in, or L{None} before L{initialize}.
        """
        return self._state

    def initialize(self, value):
        """
        Create the initial state and make it current.

        Calling this again creates another state and moves to it; the old
        current state is forgotten but stays in the graph.

        :rtype: State
        """
        self._state = self._graph.addState(value)
        return self._state

    def newState(self, value):
        """
        Create a state without moving to it.

        :rtype: State
        """
        return self._graph.addState(value)

    def linkStates(self, source, destination, rules):
        """
        Connect C{source} to C{destination} with a transition guarded by
        C{rules}.

        :return: the transition id.
        """
        return self._graph.addTransition(source, destination, rules)

    def setTrace(self, tracer):
        """
        Call C{tracer(oldState, event, newState)} after every transition.

        Pass L{None} to stop tracing.
        """
        self._tracer = tracer

    def fireEvent(self, event):
        """
        Move along the first transition out of the current state whose
        rules match C{event}.  Nothing happens if none match.

        :raises UnsupportedOperator: if a rule uses an unknown operator; the
            current state is left alone.
        :raises RuntimeError: if the machine was never initialized.
        """
        oldState = self._state
        if oldState is None:
            raise RuntimeError(
                "fireEvent({!r}) on a machine that was never initialized"
                .format(event))
        transition = resolveTransition(self._graph, oldState, event)
        if transition is None:
            log.debug("no transition for %r from %s", event, oldState)
            return
        self._state = transition.destination
        log.debug("%s --%s--> %s", oldState, event, self._state)
        if self._tracer is not None:
            self._tracer(oldState, event, self._state)

    def feed(self, events):
        """
        Fire each of C{events} in turn, yielding a L{Step} for each.

        An L{UnsupportedOperator} is recorded on its step and processing
        continues with the next event.

        :rtype: Iterator[Step]
        """
        for event in events:
            try:
                self.fireEvent(event)
            except UnsupportedOperator as e:
                yield Step(event=event, state=self._state, error=e)
            else:
                yield Step(event=event, state=self._state)

    def compute(self, events, emitTrace=False, _print=print):
        """
        Fire all of C{events} and return the final state.

        Unsupported operators are logged and skipped over.  With
        C{emitTrace}, the current state is printed after every event.

        :rtype: State
        """
        for step in self.feed(events):
            if step.error is not None:
                log.warning("event %r ignored in state %s: %s",
                            step.event, step.state, step.error)
            if emitTrace:
                _print(str(step.state))
        return self._state

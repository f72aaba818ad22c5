# -*- test-case-name: rulegraph._test.test_resolve -*-
from __future__ import annotations

from typing import Optional

from ._core import Graph, State, Transition
from ._rules import matches


def resolveTransition(graph: Graph, state: State,
                      event: str) -> Optional[Transition]:
    """
    Find the transition C{event} takes out of C{state}.

    Outgoing transitions are scanned in insertion order; the first whose
    rules match is returned.  An L{UnsupportedOperator} stops the scan and
    propagates.

    @return: the matching transition, or L{None} if nothing matched.
    """
    for transition in graph.outgoingTransitions(state):
        if matches(transition.rules, event):
            return transition
    return None

# -*- test-case-name: rulegraph -*-
from ._values import Float32, UnsupportedValue, renderValue
from ._core import Graph, State, Transition, UnknownState
from ._rules import EQUALITY, UnsupportedOperator, matches, newRule
from ._resolve import resolveTransition
from ._machine import StateMachine, Step

__all__ = [
    'StateMachine',
    'Step',
    'Graph',
    'State',
    'Transition',
    'Float32',
    'EQUALITY',
    'newRule',
    'matches',
    'resolveTransition',
    'renderValue',
    'UnsupportedOperator',
    'UnknownState',
    'UnsupportedValue',
]

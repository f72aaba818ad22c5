# -*- test-case-name: rulegraph._test.test_rules -*-

"""
Rule sets guard transitions.

A rule set maps a comparison operator name to the event it expects.  Only
equality is implemented.
"""

EQUALITY = "eq"


class UnsupportedOperator(Exception):
    """
    A rule set uses a comparison C{operator} other than L{EQUALITY}.

    @param operator: the operator name found in the rule set.
    """

    def __init__(self, operator):
        self.operator = operator
        super(UnsupportedOperator, self).__init__(
            "comparison operator {!r} is not supported".format(operator)
        )


def newRule(operator, event):
    """
    Build a rule set with a single entry.

    Operators are not checked here; an unsupported one fails when an event
    is evaluated against it.
    """
    return {operator: event}


def matches(rules, event):
    """
    Does C{event} satisfy C{rules}?

    Entries are tried in order and the first satisfied one wins.  An empty
    rule set matches nothing.

    :param Mapping[str, str] rules:
    :param str event:
    :rtype: bool
    :raises UnsupportedOperator: on reaching an unknown operator before any
        entry matched.
    """
    for operator, expected in rules.items():
        if operator != EQUALITY:
            raise UnsupportedOperator(operator)
        if expected == event:
            return True
    return False

# -*- test-case-name: rulegraph._test.test_turnstile -*-

import argparse
import logging
import sys

from ._machine import StateMachine
from ._rules import EQUALITY, newRule


def buildTurnstile():
    """
    Build the coin-operated turnstile.

    @return: the machine, its locked (initial) state and its unlocked state.
    """
    machine = StateMachine()
    locked = machine.initialize("locked")
    unlocked = machine.newState("unlocked")

    coin = newRule(EQUALITY, "coin")
    push = newRule(EQUALITY, "push")

    machine.linkStates(locked, unlocked, coin)
    machine.linkStates(unlocked, locked, push)
    machine.linkStates(locked, locked, push)
    machine.linkStates(unlocked, unlocked, coin)
    return machine, locked, unlocked


def tool(_progname=sys.argv[0],
         _argv=sys.argv[1:],
         _print=print):
    """
    Entry point for command line utility.
    """

    DESCRIPTION = """
    Drive the demo turnstile with a sequence of events.
    """
    argumentParser = argparse.ArgumentParser(
        prog=_progname,
        description=DESCRIPTION)
    argumentParser.add_argument('events',
                                nargs='*',
                                default=['coin', 'push'],
                                help="Events to fire, in order"
                                " (default: coin push).")
    argumentParser.add_argument('--quiet', '-q',
                                help="don't print the state after each event",
                                default=False,
                                action="store_true")
    argumentParser.add_argument('--verbose', '-v',
                                help="log every transition",
                                default=False,
                                action="store_true")
    args = argumentParser.parse_args(_argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    machine, _, _ = buildTurnstile()
    _print("Initial state is --------- {}".format(machine.currentState))
    final = machine.compute(args.events, emitTrace=not args.quiet,
                            _print=_print)
    _print("------------- Final state is {}".format(final))

"""
States need not be strings: any int, float, Float32, bool or str will do.
"""
from rulegraph import EQUALITY, Float32, StateMachine, newRule

machine = StateMachine()

off = machine.initialize(False)
low = machine.newState(Float32(18.5))
high = machine.newState(22.0)

machine.linkStates(off, low, newRule(EQUALITY, "on"))
machine.linkStates(low, high, newRule(EQUALITY, "warmer"))
machine.linkStates(high, low, newRule(EQUALITY, "cooler"))
for state in (low, high):
    machine.linkStates(state, off, newRule(EQUALITY, "off"))


def announce(oldState, event, newState):
    print("{} --{}--> {}".format(oldState, event, newState))


machine.setTrace(announce)
for step in machine.feed(["on", "warmer", "warmer", "cooler", "off"]):
    if step.error is not None:
        print("{}: {}".format(step.event, step.error))
print("Final state is", machine.currentState)

from rulegraph import EQUALITY, StateMachine, newRule

machine = StateMachine()

locked = machine.initialize("locked")
unlocked = machine.newState("unlocked")

coin = newRule(EQUALITY, "coin")
push = newRule(EQUALITY, "push")

machine.linkStates(locked, unlocked, coin)
machine.linkStates(unlocked, locked, push)
machine.linkStates(locked, locked, push)
machine.linkStates(unlocked, unlocked, coin)

print("Initial state is", machine.currentState)
machine.compute(["coin", "push", "push", "coin"], emitTrace=True)
print("Final state is", machine.currentState)

# src/dfa/engine.py
"""
Login sequence DFA = (Q, Sigma, delta, q0, F)

  Q     = {Q0, Q1, Q2, Q3, QE}
  Sigma = {'u', 'p', 's'} plus any other character
  q0    = Q0
  F     = {Q3}

Every function here is pure: no logging, no I/O.
"""
from collections import namedtuple

from dfa.states import State, USERNAME, PASSWORD, SUBMIT

Step = namedtuple("Step", ["source", "symbol", "target"])

# (current, input, next); input None means "anything else"
TRANSITION_TABLE = (
    (State.START, USERNAME, State.USERNAME_ENTERED),
    (State.START, None, State.ERROR),
    (State.USERNAME_ENTERED, PASSWORD, State.PASSWORD_ENTERED),
    (State.USERNAME_ENTERED, None, State.ERROR),
    (State.PASSWORD_ENTERED, SUBMIT, State.SUCCESS),
    (State.PASSWORD_ENTERED, None, State.ERROR),
    (State.SUCCESS, None, State.SUCCESS),
    (State.ERROR, None, State.ERROR),
)

STATE_NAMES = {
    State.START: "Q0 (Idle)",
    State.USERNAME_ENTERED: "Q1 (Username Entered)",
    State.PASSWORD_ENTERED: "Q2 (Password Entered)",
    State.SUCCESS: "Q3 (Login Successful)",
    State.ERROR: "QE (Error)",
}


def transition(current, symbol):
    """delta(current, symbol) -> next state. Total: never raises."""
    if current is State.START:
        return State.USERNAME_ENTERED if symbol == USERNAME else State.ERROR
    if current is State.USERNAME_ENTERED:
        return State.PASSWORD_ENTERED if symbol == PASSWORD else State.ERROR
    if current is State.PASSWORD_ENTERED:
        return State.SUCCESS if symbol == SUBMIT else State.ERROR
    if current is State.SUCCESS:
        return State.SUCCESS
    # State.ERROR and anything outside the enumeration: dead state
    return State.ERROR


def is_final(state):
    return state is State.SUCCESS


def is_error(state):
    return state is State.ERROR


def state_name(state):
    if not isinstance(state, State):
        return "Unknown"
    return STATE_NAMES.get(state, "Unknown")


def reset_dfa():
    return State.START


def trace(symbols, start=None):
    """Feed symbols one at a time; return a Step per consumed symbol."""
    current = reset_dfa() if start is None else start
    steps = []
    for sym in symbols:
        nxt = transition(current, sym)
        steps.append(Step(current, sym, nxt))
        current = nxt
    return steps


def run(symbols, start=None):
    current = reset_dfa() if start is None else start
    for sym in symbols:
        current = transition(current, sym)
    return current


def accepts(symbols):
    return is_final(run(symbols))

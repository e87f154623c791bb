from dfa.engine import (transition, is_final, is_error, state_name, reset_dfa,
                        run, trace, accepts, TRANSITION_TABLE)
from dfa.states import State, ALPHABET

SYMBOLS = list(ALPHABET) + ['z', 'U', '1', ' ', '\n']


def test_transition_is_total():
    for state in State:
        for sym in SYMBOLS:
            assert transition(state, sym) in set(State)


def test_success_and_error_absorb():
    for sym in SYMBOLS:
        assert transition(State.SUCCESS, sym) is State.SUCCESS
        assert transition(State.ERROR, sym) is State.ERROR


def test_happy_path():
    s = transition(transition(transition(State.START, 'u'), 'p'), 's')
    assert s is State.SUCCESS
    assert is_final(s)
    assert not is_error(s)


def test_early_divergence_stays_in_error():
    s = transition(State.START, 'p')
    assert s is State.ERROR
    for sym in ['u', 's', 'p', 'x', 'q']:
        s = transition(s, sym)
        assert is_error(s)


def test_submit_before_password_rejected():
    assert transition(transition(State.START, 'u'), 's') is State.ERROR


def test_repeated_username_rejected():
    assert run("uu") is State.ERROR


def test_any_wrong_symbol_behaves_like_x():
    for state in (State.START, State.USERNAME_ENTERED, State.PASSWORD_ENTERED):
        assert transition(state, 'x') is transition(state, 'z') is State.ERROR


def test_reset_is_idempotent():
    assert reset_dfa() is reset_dfa() is State.START
    assert not is_final(reset_dfa())
    assert not is_error(reset_dfa())


def test_state_names_distinct():
    names = [state_name(s) for s in State]
    assert all(names)
    assert len(set(names)) == len(State)
    assert state_name(State.SUCCESS) == "Q3 (Login Successful)"


def test_state_name_unknown():
    assert state_name("Q9") == "Unknown"
    assert state_name(None) == "Unknown"


def test_final_and_error_exclusive():
    for s in State:
        assert not (is_final(s) and is_error(s))
    for s in (State.START, State.USERNAME_ENTERED, State.PASSWORD_ENTERED):
        assert not is_final(s) and not is_error(s)


def test_run_and_accepts():
    assert accepts("ups")
    assert accepts("upsxx")
    assert not accepts("up")
    assert not accepts("")
    assert run("up", start=State.USERNAME_ENTERED) is State.ERROR


def test_trace_records_each_step():
    steps = trace("upx")
    assert [(s.source, s.symbol, s.target) for s in steps] == [
        (State.START, 'u', State.USERNAME_ENTERED),
        (State.USERNAME_ENTERED, 'p', State.PASSWORD_ENTERED),
        (State.PASSWORD_ENTERED, 'x', State.ERROR),
    ]
    assert trace("") == []


def test_table_matches_transition():
    for src, sym, dst in TRANSITION_TABLE:
        if sym is not None:
            assert transition(src, sym) is dst
        else:
            assert transition(src, 'x') is dst


def test_transition_table_is_immutable():
    assert isinstance(TRANSITION_TABLE, tuple)
    assert all(isinstance(row, tuple) for row in TRANSITION_TABLE)

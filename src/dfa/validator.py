# src/dfa/validator.py
import threading

from dfa.engine import transition, is_final, is_error, state_name, reset_dfa, Step
from dfa.fsm_login import LoginModel
from utils.logger import get_logger
from utils.persistence import save_attempt_jsonl

_logger = get_logger()

CONTINUE = "Continue"
SUCCESS = "Login Successful"
INVALID = "Invalid Sequence"


class LoginValidator:
    """
    Single login session driven one symbol at a time, the way the
    access point firmware drives the DFA between HTTP requests.

    ``engine.transition`` decides every step; the ``LoginModel`` state
    machine is advanced alongside it and resynced if the two disagree.
    """

    def __init__(self, session_name="portal", log_dir=None, record_attempts=True):
        self.session = session_name
        self.log_dir = log_dir
        self.record_attempts = record_attempts
        self.model = LoginModel()
        self._lock = threading.Lock()
        self._state = reset_dfa()
        self._history = []

    @property
    def state(self):
        with self._lock:
            return self._state

    @property
    def history(self):
        with self._lock:
            return list(self._history)

    def feed(self, symbol):
        self._check_symbol(symbol)
        with self._lock:
            current, nxt, ended = self._step_locked(symbol)
            steps = list(self._history) if ended else None
        _logger.info(f"[DFA] {self.session}: {current} --{symbol}--> {nxt}")

        if ended:
            self._record_attempt(nxt, steps)
        return self.response(nxt)

    @staticmethod
    def response(state):
        if is_final(state):
            return SUCCESS
        if is_error(state):
            return INVALID
        return CONTINUE

    def reset(self):
        with self._lock:
            state = self._reset_locked()
        _logger.info(f"[DFA] {self.session}: reset to {state}")
        return state

    def validate(self, symbols):
        """Reset, feed every symbol and report acceptance, as one atomic run."""
        symbols = list(symbols)
        for sym in symbols:
            self._check_symbol(sym)
        ended_steps = None
        with self._lock:
            self._reset_locked()
            for sym in symbols:
                _, nxt, ended = self._step_locked(sym)
                if ended:
                    ended_steps = list(self._history)
            final = self._state
        _logger.info(f"[DFA] {self.session}: validated {''.join(symbols)!r} -> {final}")

        if ended_steps is not None:
            self._record_attempt(ended_steps[-1].target, ended_steps)
        return is_final(final)

    def status(self):
        with self._lock:
            state = self._state
            steps = len(self._history)
        return {
            "state": state.value,
            "name": state_name(state),
            "final": is_final(state),
            "error": is_error(state),
            "steps": steps,
        }

    @staticmethod
    def _check_symbol(symbol):
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"symbol must be a single character, got {symbol!r}")

    def _reset_locked(self):
        self._state = reset_dfa()
        self._history = []
        self.model.reset()
        return self._state

    def _step_locked(self, symbol):
        current = self._state
        nxt = transition(current, symbol)
        fsm_state = self.model.feed(symbol)
        if fsm_state is not nxt:
            _logger.error(f"[DFA] {self.session}: state machine at {fsm_state}, expected {nxt}; resyncing")
            self.model.machine.set_state(nxt)
        self._state = nxt
        self._history.append(Step(current, symbol, nxt))
        # only the step that enters Q3/QE ends an attempt
        ended = nxt is not current and (is_final(nxt) or is_error(nxt))
        return current, nxt, ended

    def _record_attempt(self, state, steps):
        if not self.record_attempts:
            return
        record = {
            "session": self.session,
            "result": "success" if is_final(state) else "error",
            "sequence": "".join(s.symbol for s in steps),
            "final_state": state.value,
        }
        try:
            path = save_attempt_jsonl(record, log_dir=self.log_dir)
            _logger.info(f"[DFA] Recorded {record['result']} attempt to {path}")
        except OSError as e:
            _logger.error(f"[DFA] Failed to record attempt: {e}")

# src/dfa/fsm_login.py
from transitions import Machine

from dfa.states import State, USERNAME, PASSWORD, SUBMIT

TRIGGERS = {
    USERNAME: 'username',
    PASSWORD: 'password',
    SUBMIT: 'submit',
}

IN_PROGRESS = [State.START, State.USERNAME_ENTERED, State.PASSWORD_ENTERED]


class LoginModel:
    states = list(State)

    def __init__(self):
        self.machine = Machine(model=self, states=LoginModel.states, initial=State.START,
                               auto_transitions=False)
        self.machine.add_transition('username', State.START, State.USERNAME_ENTERED)
        self.machine.add_transition('password', State.USERNAME_ENTERED, State.PASSWORD_ENTERED)
        self.machine.add_transition('submit', State.PASSWORD_ENTERED, State.SUCCESS)

        # out-of-order or unknown input goes straight to the dead state
        self.machine.add_transition('username', [State.USERNAME_ENTERED, State.PASSWORD_ENTERED], State.ERROR)
        self.machine.add_transition('password', [State.START, State.PASSWORD_ENTERED], State.ERROR)
        self.machine.add_transition('submit', [State.START, State.USERNAME_ENTERED], State.ERROR)
        self.machine.add_transition('invalid', IN_PROGRESS, State.ERROR)

        # Q3 and QE absorb everything except reset
        for trigger in ('username', 'password', 'submit', 'invalid'):
            self.machine.add_transition(trigger, State.SUCCESS, State.SUCCESS)
            self.machine.add_transition(trigger, State.ERROR, State.ERROR)

        self.machine.add_transition('reset', '*', State.START)

    def feed(self, symbol):
        self.trigger(TRIGGERS.get(symbol, 'invalid'))
        return self.state

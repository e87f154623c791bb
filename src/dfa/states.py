# src/dfa/states.py
from enum import Enum

# Alphabet: 'u' (username), 'p' (password), 's' (submit), 'x' (invalid)
USERNAME = 'u'
PASSWORD = 'p'
SUBMIT = 's'
INVALID = 'x'

ALPHABET = (USERNAME, PASSWORD, SUBMIT, INVALID)


class State(Enum):
    START = "Q0"
    USERNAME_ENTERED = "Q1"
    PASSWORD_ENTERED = "Q2"
    SUCCESS = "Q3"
    ERROR = "QE"

    def __str__(self):
        return self.value

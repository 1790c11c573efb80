"""
Turn raw console lines into the integers the stack works with.

Only plain ASCII decimal integers are accepted. `int()` on its own is too
forgiving here (it takes '1_000', '٣' and surrounding whitespace), so every
token is matched first.
"""
import re

from bstack.errors import InvalidCapacity, InvalidNumber

CAPACITY = re.compile(r'\+?[0-9]+')
NUMBER = re.compile(r'[+-]?[0-9]+')

INT_MIN = -2**31
INT_MAX = 2**31 - 1

def parse_capacity(line: str) -> int:
    text = line.strip()
    if not CAPACITY.fullmatch(text):
        raise InvalidCapacity(f"'{text}' is not a non-negative integer")
    return int(text)

def parse_number(token: str) -> int:
    if not NUMBER.fullmatch(token):
        raise InvalidNumber(token)
    val = int(token)
    if not INT_MIN <= val <= INT_MAX:
        raise InvalidNumber(token, 'out of range')
    return val

def parse_numbers(line: str) -> list[int]:
    return [parse_number(tok) for tok in line.split()]

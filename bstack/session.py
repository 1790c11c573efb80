"""
The fixed console dialogue: read a capacity, push one line of numbers,
show the top, pop twice and list what is left.

I/O goes through two callables so the dialogue can be driven from tests:

    read(prompt) -> str      blocking read of one line
    write(text)  -> None     one line of output
"""
import logging
from typing import Callable

from bstack.errors import InputFailure, StackEmpty, StackFull
from bstack.reader import parse_capacity, parse_numbers
from bstack.stack import BoundedStack

log = logging.getLogger(__name__)

CAPACITY_PROMPT = "Enter the maximum capacity for the stack:"
NUMBERS_PROMPT = "Enter the numbers to push into the stack separated by space"

FULL = "Stack is full. Cannot push more elements."
TOP = "Top of the stack contains {}"
REMOVED = "The removed element from the stack is {}"
ALL_REMOVED = "All elements have been removed from the stack"
ELEMENTS = "The elements in the stack are:"
EMPTY = "The stack is empty"

Reader = Callable[[str], str]
Writer = Callable[[str], None]

def readline(read: Reader, prompt: str) -> str:
    try:
        return read(prompt)
    except EOFError:
        raise InputFailure()

def push_line(stack: BoundedStack, line: str, write: Writer) -> None:
    # The whole line is parsed before anything is pushed
    values = parse_numbers(line)
    try:
        stack.push(values)
    except StackFull:
        write(FULL)

def show_top(stack: BoundedStack, write: Writer) -> None:
    value = stack.top()
    if value is None:
        write(EMPTY)
    else:
        write(TOP.format(value))

def pop_one(stack: BoundedStack, write: Writer) -> None:
    try:
        write(REMOVED.format(stack.pop()))
    except StackEmpty:
        write(ALL_REMOVED)

def show_all(stack: BoundedStack, write: Writer) -> None:
    try:
        elements = stack.display()
    except StackEmpty:
        write(EMPTY)
        return
    write(ELEMENTS)
    for value in elements:
        write(str(value))

def open_stack(read: Reader) -> BoundedStack:
    capacity = parse_capacity(readline(read, CAPACITY_PROMPT))
    log.debug('capacity %d', capacity)
    return BoundedStack(capacity)

def run(read: Reader, write: Writer = print) -> BoundedStack:
    stack = open_stack(read)
    push_line(stack, readline(read, NUMBERS_PROMPT), write)
    show_top(stack, write)
    pop_one(stack, write)
    pop_one(stack, write)
    show_all(stack, write)
    return stack

from typing import Callable

from bstack.errors import InvalidInput
from bstack.reader import parse_capacity
from bstack import session
from bstack.stack import BoundedStack

HELP = """\
push N...   push numbers, stopping when the stack is full
pop [k]     remove the top element (k times)
top         show the top element
show        list the elements, top first
size        occupied/capacity
clear       remove every element
help        this text"""

class Shell:
    """
    Line-at-a-time interpreter over one BoundedStack. Each command returns
    its output lines; bad input is reported and the shell carries on.
    """
    def __init__(self, stack: BoundedStack) -> None:
        self.stack = stack
        self.verbs: dict[str, Callable[[str], None]] = {
            'push':  self.push,
            'pop':   self.pop,
            'top':   self.top,
            'show':  self.show,
            'size':  self.size,
            'clear': self.clear,
            'help':  self.help,
        }
        self.out: list[str] = []

    def execute(self, line: str) -> list[str]:
        self.out = []
        parts = line.strip().split(maxsplit=1)
        if not parts: # User hit return only
            return self.out
        verb = parts[0].lower()
        args = parts[1] if len(parts) == 2 else ''
        if verb not in self.verbs:
            self.out.append(f"Unknown command '{parts[0]}' (try help)")
            return self.out
        try:
            self.verbs[verb](args)
        except InvalidInput as inst:
            self.out.append(f"Invalid input: {inst}")
        return self.out

    def push(self, args: str) -> None:
        session.push_line(self.stack, args, self.out.append)

    def pop(self, args: str) -> None:
        times = parse_capacity(args) if args.strip() else 1
        # One empty message is enough once the stack runs dry
        for _ in range(min(times, self.stack.head + 1)):
            session.pop_one(self.stack, self.out.append)

    def top(self, args: str) -> None:
        session.show_top(self.stack, self.out.append)

    def show(self, args: str) -> None:
        session.show_all(self.stack, self.out.append)

    def size(self, args: str) -> None:
        self.out.append(f"{self.stack.head}/{self.stack.capacity}")

    def clear(self, args: str) -> None:
        self.stack.clear()
        self.out.append('Stack cleared')

    def help(self, args: str) -> None:
        self.out.extend(HELP.splitlines())

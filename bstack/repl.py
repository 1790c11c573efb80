import logging
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.lexers import PygmentsLexer

from bstack.commands import Shell
from bstack.errors import InputFailure, InvalidInput
from bstack.lexer import BStackLexer
from bstack import session

log = logging.getLogger(__name__)

PROMPT = 'bstack> '

def prompter(ps: PromptSession) -> session.Reader:
    # The dialogue prints each prompt on its own line before reading
    def read(prompt: str) -> str:
        print(prompt)
        return ps.prompt('')
    return read

def abort(inst: InvalidInput) -> int:
    log.debug('session aborted: %s', inst)
    if isinstance(inst, InputFailure):
        print(inst, file=sys.stderr)
    else:
        print(f"Invalid input: {inst}", file=sys.stderr)
    return 1

def main() -> int:
    logging.basicConfig(level=logging.WARNING)
    ps = PromptSession()
    try:
        session.run(prompter(ps))
    except InvalidInput as inst:
        return abort(inst)
    except KeyboardInterrupt:
        return 130
    return 0

def shell() -> int:
    logging.basicConfig(level=logging.WARNING)
    ps = PromptSession()
    try:
        stack = session.open_stack(prompter(ps))
    except InvalidInput as inst:
        return abort(inst)
    except KeyboardInterrupt:
        return 130

    interp = Shell(stack)
    print(f'Stack of capacity {stack.capacity}. help for commands, C-d to quit')
    while True:
        try:
            src = ps.prompt(PROMPT, lexer=PygmentsLexer(BStackLexer))
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        for line in interp.execute(src):
            print(line)
    return 0

if __name__=="__main__":
    sys.exit(main())

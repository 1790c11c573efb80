class BStackError(Exception):
    pass

class InvalidInput(BStackError):
    """Malformed console input. Fatal to the scripted session."""
    pass

class InvalidCapacity(InvalidInput):
    pass

class InvalidNumber(InvalidInput):
    def __init__(self, token: str, reason: str = 'not an integer') -> None:
        super().__init__(f"'{token}' is {reason}")
        self.token = token

class InputFailure(InvalidInput):
    def __init__(self, message: str = 'Failed to read input') -> None:
        super().__init__(message)

class StackError(BStackError):
    pass

class StackFull(StackError):
    def __init__(self, accepted: int, dropped: int) -> None:
        super().__init__(f"Stack is full: accepted {accepted}, dropped {dropped}")
        self.accepted = accepted
        self.dropped = dropped

class StackEmpty(StackError):
    def __init__(self, message: str = 'Stack is empty') -> None:
        super().__init__(message)

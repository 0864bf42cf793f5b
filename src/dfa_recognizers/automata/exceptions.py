class ConstructionError(ValueError):
    """Raised when raw automaton data violates a structural invariant. No
    object is created when this is raised."""

class InvalidStateError(ValueError):
    """Raised when a state that does not belong to the automaton is used."""

    def __init__(self, state, message=None):
        self.state = state
        if message is None:
            message = f'invalid state: {state!r}'
        super().__init__(message)

class InvalidSymbolError(ValueError):
    """Raised when a symbol that is not in the alphabet is used."""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f'invalid symbol: {symbol!r}')

class EmptyStateIdentifierError(ConstructionError, InvalidStateError):

    def __init__(self):
        super().__init__('', 'state identifiers must be non-empty strings')

class DuplicateStateError(ConstructionError):

    def __init__(self, state):
        self.state = state
        super().__init__(f'duplicate state: {state!r}')

class EmptyAlphabetError(ConstructionError):

    def __init__(self):
        super().__init__('the alphabet must contain at least one symbol')

class EmptySymbolError(ConstructionError):

    def __init__(self):
        super().__init__('symbols must be non-empty strings')

class DuplicateSymbolError(ConstructionError):

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f'duplicate symbol: {symbol!r}')

class IncompleteTransitionError(ConstructionError):
    """The transition table is not defined for exactly the states, or a
    state's transitions are not defined for exactly the alphabet."""

    def __init__(self, message, state=None, missing=(), extra=()):
        self.state = state
        self.missing = tuple(missing)
        self.extra = tuple(extra)
        super().__init__(message)

class InvalidTransitionTargetError(ConstructionError):

    def __init__(self, state, symbol, target):
        self.state = state
        self.symbol = symbol
        self.target = target
        super().__init__(
            f'transition from {state!r} on {symbol!r} leads to unknown '
            f'state {target!r}'
        )

class InvalidInitialStateError(ConstructionError):

    def __init__(self, state):
        self.state = state
        super().__init__(f'initial state {state!r} is not a valid state')

class InvalidFinalStateError(ConstructionError):

    def __init__(self, state):
        self.state = state
        super().__init__(f'final state {state!r} is not a valid state')

class DelimiterInSymbolError(ConstructionError):
    """A symbol contains the delimiter of the textual word encoding, so words
    using it could not be decoded unambiguously."""

    def __init__(self, symbol, delimiter):
        self.symbol = symbol
        self.delimiter = delimiter
        super().__init__(
            f'symbol {symbol!r} contains the word delimiter {delimiter!r}'
        )

import dataclasses
from collections.abc import Iterable, Mapping
from typing import NewType

from frozendict import frozendict

from .alphabet import Alphabet, Symbol
from .exceptions import (
    DuplicateStateError,
    EmptyStateIdentifierError,
    IncompleteTransitionError,
    InvalidFinalStateError,
    InvalidInitialStateError,
    InvalidStateError,
    InvalidSymbolError,
    InvalidTransitionTargetError
)
from .runner import Accepted, Rejected, Runner

State = NewType('State', str)
TransitionTable = Mapping[State, Mapping[Symbol, State | None]]

@dataclasses.dataclass(frozen=True)
class Transition:
    state_from: State
    symbol: Symbol
    state_to: State

def _describe(items: Iterable[str]) -> str:
    return ', '.join(repr(x) for x in sorted(items))

class DFA:
    """A deterministic finite automaton over an alphabet of string symbols.

    All of the structural invariants are checked once, in the constructor, in
    this order:

    1. every state identifier is a non-empty string;
    2. no state identifier is repeated;
    3. the alphabet is non-empty and has no empty or repeated symbols, and no
       symbol contains the word delimiter;
    4. the transition table is defined for exactly the set of states;
    5. for each state, in sorted order, the transitions are defined for
       exactly the symbols of the alphabet;
    6. every transition target that is not ``None`` is a state;
    7. the initial state is a state;
    8. every final state is a state.

    The first violated rule determines the error that is raised. ``None`` in
    the transition table is an explicit dead transition, which is legal,
    whereas a missing entry is a structural error.

    The automaton cannot be changed after it is constructed."""

    _states: frozenset[State]
    _alphabet: Alphabet
    _delta: TransitionTable
    _initial_state: State
    _final_states: frozenset[State]

    def __init__(self,
        states: Iterable[str],
        alphabet: Alphabet | Iterable[str],
        delta: Mapping[str, Mapping[str, str | None]],
        initial_state: str,
        final_states: Iterable[str]
    ):
        super().__init__()

        state_set = set()
        for state in states:
            if not isinstance(state, str) or not state:
                raise EmptyStateIdentifierError
            if state in state_set:
                raise DuplicateStateError(state)
            state_set.add(state)

        if not isinstance(alphabet, Alphabet):
            alphabet = Alphabet(alphabet)
        symbol_set = alphabet.symbols()

        delta_states = set(delta.keys())
        if delta_states != state_set:
            missing = state_set - delta_states
            extra = delta_states - state_set
            raise IncompleteTransitionError(
                'transitions are not defined for exactly the given states '
                f'(missing: [{_describe(missing)}]; extra: [{_describe(extra)}])',
                missing=sorted(missing),
                extra=sorted(extra)
            )
        sorted_states = sorted(state_set)
        for state in sorted_states:
            delta_symbols = set(delta[state].keys())
            if delta_symbols != symbol_set:
                missing = symbol_set - delta_symbols
                extra = delta_symbols - symbol_set
                raise IncompleteTransitionError(
                    f'transitions from state {state!r} are not defined for '
                    f'exactly the symbols in the alphabet (missing: '
                    f'[{_describe(missing)}]; extra: [{_describe(extra)}])',
                    state=state,
                    missing=sorted(missing),
                    extra=sorted(extra)
                )
        for state in sorted_states:
            for symbol in sorted(symbol_set):
                target = delta[state][symbol]
                if target is not None and target not in state_set:
                    raise InvalidTransitionTargetError(state, symbol, target)

        if initial_state not in state_set:
            raise InvalidInitialStateError(initial_state)

        final_state_set = set(final_states)
        for state in sorted(final_state_set, key=repr):
            if state not in state_set:
                raise InvalidFinalStateError(state)

        # Copy everything so that later changes to the arguments are not
        # visible here.
        self._states = frozenset(state_set)
        self._alphabet = alphabet
        self._delta = frozendict(
            (state, frozendict(delta[state])) for state in sorted_states
        )
        self._initial_state = State(initial_state)
        self._final_states = frozenset(final_state_set)

    def states(self) -> frozenset[State]:
        return self._states

    def num_states(self) -> int:
        return len(self._states)

    def alphabet(self) -> Alphabet:
        return self._alphabet

    def alphabet_size(self) -> int:
        return len(self._alphabet)

    def initial_state(self) -> State:
        return self._initial_state

    def final_states(self) -> frozenset[State]:
        return self._final_states

    def is_final_state(self, state: str) -> bool:
        return state in self._final_states

    def transition_table(self) -> TransitionTable:
        return self._delta

    def transitions(self) -> Iterable[Transition]:
        """All transitions except the dead ones, ordered by source state and
        then by symbol."""
        for state, row in sorted(self._delta.items()):
            for symbol, target in sorted(row.items()):
                if target is not None:
                    yield Transition(state, symbol, target)

    def next_state(self, state: str, symbol: str) -> State | None:
        """Look up the transition from ``state`` on ``symbol``.

        Returns ``None`` if the transition is dead. Raises
        :py:class:`InvalidStateError` or :py:class:`InvalidSymbolError` if
        the state or the symbol does not belong to this automaton."""
        if state not in self._states:
            raise InvalidStateError(state)
        if not self._alphabet.is_valid_symbol(symbol):
            raise InvalidSymbolError(symbol)
        return self._delta[state][symbol] # type: ignore

    def runner(self, word: str | Iterable[str]) -> Runner:
        """Start a step-by-step run of ``word``, which is either a sequence of
        symbols or a comma-separated string."""
        return Runner(self, word)

    def run(self, word: str | Iterable[str]) -> Accepted | Rejected:
        return self.runner(word).run()

    def accepts(self, word: str | Iterable[str]) -> bool:
        return isinstance(self.run(word), Accepted)

    def __repr__(self) -> str:
        return (
            f'DFA(num_states={self.num_states()}, '
            f'alphabet={self._alphabet!r}, '
            f'initial_state={self._initial_state!r})'
        )

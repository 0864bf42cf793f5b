import dataclasses
import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .alphabet import Word, as_word

if TYPE_CHECKING:
    from .automaton import DFA, State

class RejectionReason(enum.Enum):
    INVALID_SYMBOL = 'invalid-symbol'
    """The word contains a symbol that is not in the alphabet."""
    DEAD_TRANSITION = 'dead-transition'
    """The run reached a transition that is explicitly undefined."""
    NOT_ACCEPTING = 'not-accepting'
    """The whole word was read, but the run ended in a non-final state."""

@dataclasses.dataclass(frozen=True)
class Running:
    state: 'State'
    position: int
    """The index of the next symbol to be read."""

@dataclasses.dataclass(frozen=True)
class Accepted:
    state: 'State'

@dataclasses.dataclass(frozen=True)
class Rejected:
    reason: RejectionReason
    state: 'State'
    """The last state the run was in."""
    position: int
    """The index of the symbol that caused the rejection, or the length of
    the word if the rejection happened at the end of the input."""
    symbol: str | None = None

    @property
    def invalid_word(self) -> bool:
        return self.reason is RejectionReason.INVALID_SYMBOL

Configuration = Running | Accepted | Rejected

class Runner:
    """Runs a word through a DFA one symbol at a time.

    The runner starts in ``Running(initial_state, 0)``. Once no symbols are
    left to read, it halts in :py:class:`Accepted` if the current state is
    final and :py:class:`Rejected` otherwise. It also halts in
    :py:class:`Rejected` as soon as it reads a symbol that is not in the
    alphabet or follows a dead transition. Halting at the end of the input
    happens immediately, so a runner in a :py:class:`Running` configuration
    always has at least one symbol left, and the number of steps is never
    more than the length of the word."""

    def __init__(self, automaton: 'DFA', word: str | Iterable[str]):
        super().__init__()
        self._automaton = automaton
        self._word: Word = as_word(word)
        initial_state = automaton.initial_state()
        self._path = [initial_state]
        self._configuration = self._settle(Running(initial_state, 0))

    @property
    def word(self) -> Word:
        return self._word

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def is_halted(self) -> bool:
        return not isinstance(self._configuration, Running)

    def path(self) -> tuple['State', ...]:
        """The states visited so far, starting with the initial state."""
        return tuple(self._path)

    def step(self) -> Configuration:
        """Read the next symbol. Has no effect if the run has halted."""
        configuration = self._configuration
        if not isinstance(configuration, Running):
            return configuration
        state = configuration.state
        position = configuration.position
        symbol = self._word[position]
        if not self._automaton.alphabet().is_valid_symbol(symbol):
            configuration = Rejected(
                RejectionReason.INVALID_SYMBOL,
                state,
                position,
                symbol
            )
        else:
            next_state = self._automaton.next_state(state, symbol)
            if next_state is None:
                configuration = Rejected(
                    RejectionReason.DEAD_TRANSITION,
                    state,
                    position,
                    symbol
                )
            else:
                self._path.append(next_state)
                configuration = self._settle(Running(next_state, position + 1))
        self._configuration = configuration
        return configuration

    def run(self) -> Accepted | Rejected:
        while not self.is_halted():
            self.step()
        return self._configuration # type: ignore

    def _settle(self, configuration: Running) -> Configuration:
        if configuration.position < len(self._word):
            return configuration
        if self._automaton.is_final_state(configuration.state):
            return Accepted(configuration.state)
        return Rejected(
            RejectionReason.NOT_ACCEPTING,
            configuration.state,
            configuration.position
        )

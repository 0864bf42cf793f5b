import dataclasses
from collections.abc import Iterable, Sequence

import torch

from .alphabet import Symbol, as_word
from .automaton import DFA, State

@dataclasses.dataclass(frozen=True)
class TensorAutomaton:
    """A DFA encoded as integer tensors, for labeling many words at once.

    States and symbols are numbered in sorted order. The transition table has
    an extra row for a sink state, which is absorbing and not accepting. Dead
    transitions lead to the sink. The extra column is used for symbols that
    are not in the alphabet, and it also leads to the sink."""

    states: tuple[State, ...]
    symbols: tuple[Symbol, ...]
    transition_table: torch.Tensor
    """Next state indexes, of size ``(num_states + 1, num_symbols + 1)``."""
    accept_mask: torch.Tensor
    """Of size ``(num_states + 1,)``."""
    initial_state: int

    @staticmethod
    def from_automaton(
        automaton: DFA,
        device: torch.device | None=None
    ) -> 'TensorAutomaton':
        states = tuple(sorted(automaton.states()))
        symbols = tuple(automaton.alphabet())
        state_to_int = { q : i for i, q in enumerate(states) }
        symbol_to_int = { a : i for i, a in enumerate(symbols) }
        sink = len(states)
        transition_table = torch.full(
            (len(states) + 1, len(symbols) + 1),
            sink,
            dtype=torch.long,
            device=device
        )
        for t in automaton.transitions():
            transition_table[state_to_int[t.state_from], symbol_to_int[t.symbol]] = state_to_int[t.state_to]
        accept_mask = torch.zeros(len(states) + 1, dtype=torch.bool, device=device)
        for q in automaton.final_states():
            accept_mask[state_to_int[q]] = True
        return TensorAutomaton(
            states=states,
            symbols=symbols,
            transition_table=transition_table,
            accept_mask=accept_mask,
            initial_state=state_to_int[automaton.initial_state()]
        )

    @property
    def device(self) -> torch.device:
        return self.transition_table.device

    @property
    def invalid_symbol_index(self) -> int:
        return len(self.symbols)

    def encode_words(self,
        words: Iterable[str | Sequence[str]]
    ) -> tuple[torch.Tensor, torch.Tensor]:
        """Convert words to a padded tensor of symbol indexes of size
        ``(batch_size, max_length)`` and a tensor of lengths of size
        ``(batch_size,)``. Symbols outside the alphabet are mapped to
        :py:attr:`invalid_symbol_index`."""
        symbol_to_int = { a : i for i, a in enumerate(self.symbols) }
        invalid = self.invalid_symbol_index
        encoded = [
            [symbol_to_int.get(a, invalid) for a in as_word(word)]
            for word in words
        ]
        lengths = torch.tensor([len(w) for w in encoded], dtype=torch.long, device=self.device)
        max_length = max((len(w) for w in encoded), default=0)
        padded = torch.zeros((len(encoded), max_length), dtype=torch.long, device=self.device)
        for i, w in enumerate(encoded):
            if w:
                padded[i, :len(w)] = torch.tensor(w, dtype=torch.long, device=self.device)
        return padded, lengths

    def run_encoded(self, padded: torch.Tensor, lengths: torch.Tensor) -> torch.Tensor:
        """Return the index of the state each word ends in. Words that are
        rejected early end in the sink state."""
        batch_size, max_length = padded.size()
        current = torch.full(
            (batch_size,),
            self.initial_state,
            dtype=torch.long,
            device=self.device
        )
        for i in range(max_length):
            next_state = self.transition_table[current, padded[:, i]]
            # Words that have already ended keep their state.
            current = torch.where(i < lengths, next_state, current)
        return current

    def accepts(self, words: Iterable[str | Sequence[str]]) -> torch.Tensor:
        """Return a boolean tensor of size ``(batch_size,)`` saying whether
        each word is accepted."""
        padded, lengths = self.encode_words(words)
        return self.accept_mask[self.run_encoded(padded, lengths)]

import dataclasses
import json
import pathlib
from collections.abc import Mapping
from typing import Any, TextIO

from dfa_recognizers.automata.automaton import DFA

class CandidateFormatError(ValueError):
    """Raised when serialized automaton data does not have the expected
    shape."""

FIELDS = ('states', 'alphabet', 'delta', 'initialState', 'finalStates')

@dataclasses.dataclass(frozen=True)
class AutomatonCandidate:
    """The raw, unvalidated parts of a DFA, as read from some external
    format."""

    states: list[str]
    alphabet: list[str]
    delta: dict[str, dict[str, str | None]]
    initial_state: str
    final_states: list[str]

    @staticmethod
    def from_dict(data: Any) -> 'AutomatonCandidate':
        """Read a candidate from a JSON-like object with the keys ``states``,
        ``alphabet``, ``delta``, ``initialState``, and ``finalStates``.
        ``None`` (JSON ``null``) in ``delta`` marks a dead transition.

        Only the shapes and types are checked here; the automaton's own
        invariants are checked by :py:meth:`build`."""
        if not isinstance(data, Mapping):
            raise CandidateFormatError(
                f'expected an object, got {type(data).__name__}'
            )
        missing = [k for k in FIELDS if k not in data]
        if missing:
            raise CandidateFormatError(f'missing fields: {", ".join(missing)}')
        extra = sorted(k for k in data if k not in FIELDS)
        if extra:
            raise CandidateFormatError(f'unknown fields: {", ".join(extra)}')
        delta = data['delta']
        if not isinstance(delta, Mapping):
            raise CandidateFormatError('delta must be an object')
        for state, row in delta.items():
            if not isinstance(row, Mapping):
                raise CandidateFormatError(
                    f'delta for state {state!r} must be an object'
                )
            for symbol, target in row.items():
                if target is not None and not isinstance(target, str):
                    raise CandidateFormatError(
                        f'delta for state {state!r} and symbol {symbol!r} '
                        f'must be a string or null'
                    )
        if not isinstance(data['initialState'], str):
            raise CandidateFormatError('initialState must be a string')
        return AutomatonCandidate(
            states=_string_list(data, 'states'),
            alphabet=_string_list(data, 'alphabet'),
            delta={ q : dict(row) for q, row in delta.items() },
            initial_state=data['initialState'],
            final_states=_string_list(data, 'finalStates')
        )

    @staticmethod
    def from_automaton(automaton: DFA) -> 'AutomatonCandidate':
        return AutomatonCandidate(
            states=sorted(automaton.states()),
            alphabet=list(automaton.alphabet()),
            delta={
                q : dict(sorted(row.items()))
                for q, row in sorted(automaton.transition_table().items())
            },
            initial_state=automaton.initial_state(),
            final_states=sorted(automaton.final_states())
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'states' : list(self.states),
            'alphabet' : list(self.alphabet),
            'delta' : { q : dict(row) for q, row in self.delta.items() },
            'initialState' : self.initial_state,
            'finalStates' : list(self.final_states)
        }

    def build(self) -> DFA:
        return DFA(
            states=self.states,
            alphabet=self.alphabet,
            delta=self.delta,
            initial_state=self.initial_state,
            final_states=self.final_states
        )

def _string_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise CandidateFormatError(f'{key} must be a list of strings')
    return list(value)

def read_automaton(fin: TextIO) -> DFA:
    try:
        data = json.load(fin)
    except json.JSONDecodeError as e:
        raise CandidateFormatError(f'invalid JSON: {e}') from e
    return AutomatonCandidate.from_dict(data).build()

def load_automaton(path: pathlib.Path) -> DFA:
    with path.open() as fin:
        return read_automaton(fin)

def write_automaton(automaton: DFA, fout: TextIO) -> None:
    json.dump(AutomatonCandidate.from_automaton(automaton).to_dict(), fout, indent=2)
    print(file=fout)

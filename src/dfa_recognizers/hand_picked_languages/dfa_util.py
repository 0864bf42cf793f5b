from collections.abc import Iterable

from dfa_recognizers.automata.automaton import DFA

def dfa_from_arcs(
    states: Iterable[str],
    alphabet: Iterable[str],
    arcs: Iterable[tuple[str, str, str]],
    initial_state: str,
    final_states: Iterable[str]
) -> DFA:
    """Build a DFA from a list of ``(state_from, symbol, state_to)`` arcs. Every
    (state, symbol) pair without an arc becomes a dead transition."""
    states = list(states)
    alphabet = list(alphabet)
    delta = { q : dict.fromkeys(alphabet) for q in states }
    for q, a, r in arcs:
        if delta[q][a] is not None:
            raise ValueError(f'more than one transition from {q!r} on {a!r}')
        delta[q][a] = r
    return DFA(
        states=states,
        alphabet=alphabet,
        delta=delta,
        initial_state=initial_state,
        final_states=final_states
    )

from itertools import product

from dfa_recognizers.automata.automaton import DFA
from .dfa_util import dfa_from_arcs

def stack_state(stack: tuple[int, ...]) -> str:
    if not stack:
        return '<bottom>'
    return ' '.join(f'({a}' for a in stack)

def dyck_k_m_dfa(k: int, m: int) -> DFA:
    """Balanced strings over ``k`` kinds of brackets with nesting depth at most
    ``m``."""
    if k < 1 or m < 0:
        raise ValueError(f'invalid Dyck parameters: k={k}, m={m}')
    stacks = [
        stack
        for depth in range(m + 1)
        for stack in product(range(k), repeat=depth)
    ]
    arcs = []
    for stack in stacks:
        if len(stack) < m:
            for a in range(k):
                arcs.append((stack_state(stack), f'({a}', stack_state(stack + (a,))))
        if stack:
            arcs.append((stack_state(stack), f'){stack[-1]}', stack_state(stack[:-1])))
    return dfa_from_arcs(
        states=[stack_state(stack) for stack in stacks],
        alphabet=[b for a in range(k) for b in (f'({a}', f'){a}')],
        arcs=arcs,
        initial_state=stack_state(()),
        final_states=[stack_state(())]
    )

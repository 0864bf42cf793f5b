import io
import itertools
import logging

import pytest

from dfa_recognizers.hand_picked_languages.save_automaton import (
    LANGUAGE_NAMES,
    get_automaton,
    main
)
from dfa_recognizers.loading.candidate import load_automaton
from dfa_recognizers.tools.jsonl import load_jsonl_file

def test_writes_loadable_automaton(tmp_path) -> None:
    output_path = tmp_path / 'sub' / 'x.json'
    main(['--name', 'dyck-2-2', '--output', str(output_path)])
    assert output_path.exists()
    saved = load_automaton(output_path)
    expected = get_automaton('dyck-2-2')
    assert saved.states() == expected.states()
    assert saved.alphabet() == expected.alphabet()
    assert saved.initial_state() == expected.initial_state()
    assert saved.final_states() == expected.final_states()
    symbols = sorted(expected.alphabet().symbols())
    for length in range(5):
        for word in itertools.product(symbols, repeat=length):
            assert saved.accepts(word) == expected.accepts(word)

def test_invalid_name(tmp_path) -> None:
    with pytest.raises(ValueError):
        main(['--name', 'no-such-language', '--output', str(tmp_path / 'x.json')])
    assert not (tmp_path / 'x.json').exists()

def test_missing_arguments() -> None:
    with pytest.raises(SystemExit):
        main(['--name', 'parity'])

def test_language_names() -> None:
    assert 'parity' in LANGUAGE_NAMES
    assert 'dyck-<k>-<m>' in LANGUAGE_NAMES

def test_logger_handlers_do_not_accumulate(tmp_path) -> None:
    for i in range(3):
        main(['--name', 'parity', '--output', str(tmp_path / f'{i}.json')])
    assert len(logging.getLogger('main').handlers) == 1

def test_load_jsonl_file_skips_blank_lines() -> None:
    fin = io.StringIO('{"a":1}\n\n[2]\n')
    assert list(load_jsonl_file(fin)) == [{ 'a' : 1 }, [2]]
    with pytest.raises(ValueError, match='line 1'):
        list(load_jsonl_file(io.StringIO('{\n')))

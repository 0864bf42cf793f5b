import io
import logging

import pytest

from dfa_recognizers.loading.candidate import write_automaton
from dfa_recognizers.hand_picked_languages.save_automaton import get_automaton
from dfa_recognizers.recognition.recognize import main, recognize
from dfa_recognizers.tools.jsonl import load_jsonl_file

WORDS = ['1', '', '1,1', '0,2', '0,1,0']

def write_words(path) -> None:
    path.write_text(''.join(f'{w}\n' for w in WORDS))

def read_results(path) -> list[dict]:
    with path.open() as fin:
        return list(load_jsonl_file(fin))

def test_recognize_language(tmp_path) -> None:
    input_path = tmp_path / 'words.txt'
    output_path = tmp_path / 'results.jsonl'
    write_words(input_path)
    main([
        '--language', 'parity',
        '--input', str(input_path),
        '--output', str(output_path)
    ])
    results = read_results(output_path)
    assert [r['word'] for r in results] == WORDS
    assert [r['accepted'] for r in results] == [True, False, False, False, True]
    assert results[0]['outcome'] == 'accepted'
    assert results[1]['reason'] == 'not-accepting'
    assert results[3]['outcome'] == 'invalid-word'
    assert results[3]['reason'] == 'invalid-symbol'
    assert results[3]['position'] == 1

def test_recognize_automaton_file_batched(tmp_path) -> None:
    automaton_path = tmp_path / 'parity.json'
    with automaton_path.open('w') as fout:
        write_automaton(get_automaton('parity'), fout)
    input_path = tmp_path / 'words.txt'
    output_path = tmp_path / 'results.jsonl'
    write_words(input_path)
    main([
        '--automaton', str(automaton_path),
        '--input', str(input_path),
        '--output', str(output_path),
        '--batched',
        '--batch-size', '2'
    ])
    results = read_results(output_path)
    assert results == [
        { 'word' : '1', 'accepted' : True },
        { 'word' : '', 'accepted' : False },
        { 'word' : '1,1', 'accepted' : False },
        { 'word' : '0,2', 'accepted' : False },
        { 'word' : '0,1,0', 'accepted' : True }
    ]

def test_recognize_delimiter(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr('sys.stdin', io.StringIO('1 0 0\n0 0\n'))
    output_path = tmp_path / 'results.jsonl'
    main([
        '--language', 'first',
        '--delimiter', ' ',
        '--output', str(output_path)
    ])
    assert [r['accepted'] for r in read_results(output_path)] == [True, False]

def test_invalid_batch_size_leaves_output_untouched(tmp_path) -> None:
    output_path = tmp_path / 'results.jsonl'
    output_path.write_text('previous\n')
    with pytest.raises(SystemExit):
        main([
            '--language', 'parity',
            '--output', str(output_path),
            '--batched',
            '--batch-size', '0'
        ])
    assert output_path.read_text() == 'previous\n'

def test_recognize_rejects_invalid_batch_size_eagerly() -> None:
    with pytest.raises(ValueError):
        recognize(get_automaton('parity'), iter(['1']), ',', True, 0, None)

def test_logger_handlers_do_not_accumulate(tmp_path) -> None:
    input_path = tmp_path / 'words.txt'
    write_words(input_path)
    for _ in range(3):
        main([
            '--language', 'parity',
            '--input', str(input_path),
            '--output', str(tmp_path / 'results.jsonl')
        ])
    assert len(logging.getLogger('main').handlers) == 1

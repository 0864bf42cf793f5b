import json
from collections.abc import Iterable
from typing import Any, TextIO

def write_json_line(data: Any, fout: TextIO) -> None:
    """Write ``data`` as one compact JSON object followed by a newline."""
    fout.write(json.dumps(data, separators=(',', ':')))
    fout.write('\n')

def load_jsonl_file(fin: TextIO) -> Iterable[Any]:
    """Yield one JSON value per non-blank line."""
    for line_no, line in enumerate(fin, 1):
        if not line.strip():
            continue
        try:
            yield json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f'line {line_no}: invalid JSON: {e}') from e

def read_lines(fin: TextIO) -> Iterable[str]:
    """Yield lines without their trailing newline. Blank lines are kept,
    since a blank line is the encoding of the empty word."""
    for line in fin:
        yield line.rstrip('\r\n')

# scores.py
"""
Score tally for "name:score" records.

Each input line is either `name:score` (an attended test) or a bare `name`
(a missed test). Lines are folded into one ScoreRecord per name.

API highlights:
    lines = read_data("scores.txt")      # List[ScoreLine], or raise ScoreError
    table = process_scores(lines)        # name -> ScoreRecord, first-seen order
    table["alice"].average_score()       # float, or None if nothing attended
"""

import argparse
import re
import sys
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

U32_MAX = 0xFFFFFFFF
_UNSIGNED = re.compile(r'\+?[0-9]+')


class ScoreError(Exception):
    def __init__(self, message, line=None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


@dataclass(frozen=True)
class ScoreLine:
    name: str
    score: Optional[int] = None   # None -> name only, the test was missed

    @property
    def attended(self) -> bool:
        return self.score is not None


@dataclass
class ScoreRecord:
    total_score: int = 0
    attended_tests: int = 0
    missed_tests: int = 0

    def add_score(self, score: int) -> None:
        self.total_score += score
        self.attended_tests += 1

    def missed_a_test(self) -> None:
        self.missed_tests += 1

    def average_score(self) -> Optional[float]:
        if self.attended_tests == 0:
            return None
        return self.total_score / self.attended_tests


# ---------- parsing ----------
def _lines(text: str) -> List[str]:
    # same boundary as lexer.split_lines, kept local so the tally has no lexer import
    # '\n' or '\r\n' terminated; no empty line after a final terminator
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return [ln[:-1] if ln.endswith('\r') else ln for ln in lines]


def _parse_u32(text: str, lineno: Optional[int]) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ScoreError(f"invalid score {text!r}", lineno)
    value = int(text)
    if value > U32_MAX:
        raise ScoreError(f"score {text!r} is out of range", lineno)
    return value


def parse_line(line: str, lineno: Optional[int] = None) -> ScoreLine:
    fields = line.split(':')
    name = fields[0]
    if len(fields) == 1:
        return ScoreLine(name)
    # anything after a second ':' is ignored
    return ScoreLine(name, _parse_u32(fields[1], lineno))


def read_data(path: str) -> List[ScoreLine]:
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ScoreError(f"cannot read {path}: {e}") from e

    return [parse_line(line, lineno)
            for lineno, line in enumerate(_lines(text), start=1)]


def process_scores(lines: Iterable[ScoreLine]) -> Dict[str, ScoreRecord]:
    table: Dict[str, ScoreRecord] = {}
    for entry in lines:
        record = table.setdefault(entry.name, ScoreRecord())
        if entry.attended:
            record.add_score(entry.score)
        else:
            record.missed_a_test()
    return table


# ---------- output ----------
def format_record(name: str, record: ScoreRecord) -> str:
    avg = record.average_score()
    avg_str = f"{avg:.2f}" if avg is not None else "n/a"
    return (f"{name!r}: total_score={record.total_score}, "
            f"attended_tests={record.attended_tests}, "
            f"missed_tests={record.missed_tests}, average_score={avg_str}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Tally name:score records per name')
    parser.add_argument('file', help='file of name[:score] lines')
    args = parser.parse_args(argv)

    try:
        lines = read_data(args.file)
    except ScoreError as e:
        print(f"An error occurred while reading the data: {e}")
        sys.exit(2)

    for name, record in process_scores(lines).items():
        print(format_record(name, record))
    return 0


if __name__ == '__main__':
    sys.exit(main())

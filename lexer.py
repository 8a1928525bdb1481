# lexer.py
"""
Single-pass instruction scanner for the eight-character tape language.

Every character of the input is classified on its own. The eight instruction
characters become Token(instruction, line, column); everything else
(whitespace, letters, digits, other punctuation) is dropped without a trace,
so arbitrary commentary may surround the program text.

    lex = Lexer()
    for tok in lex.tokenize_file("hello.b"):
        print(format_token(tok, "hello.b"))
"""

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional


class Instruction(Enum):
    INCREMENT_POINTER = '>'
    DECREMENT_POINTER = '<'
    INCREMENT_BYTE = '+'
    DECREMENT_BYTE = '-'
    OUTPUT_BYTE = '.'
    INPUT_BYTE = ','
    CONDITIONAL_FORWARD = '['
    CONDITIONAL_BACKWARD = ']'

    @property
    def char(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display label, e.g. 'Increment Pointer (>)'."""
        words = self.name.replace('_', ' ').title()
        return f"{words} ({self.value})"

    def __str__(self):
        return self.label


@dataclass(frozen=True)
class Token:
    instruction: Instruction
    line: int
    column: int

    def __repr__(self):
        return f"Token({self.instruction.name}, line={self.line}, col={self.column})"


class LexerError(Exception):
    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


_CHAR_TABLE: Dict[str, Instruction] = {ins.value: ins for ins in Instruction}


def classify(ch: str) -> Optional[Instruction]:
    """Return the Instruction for `ch`, or None if it is not part of the language."""
    return _CHAR_TABLE.get(ch)


def split_lines(text: str) -> List[str]:
    """
    Split on '\\n' and drop one trailing '\\r' per line.
    A final line terminator does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return [ln[:-1] if ln.endswith('\r') else ln for ln in lines]


def format_token(token: Token, source: str) -> str:
    return f"[{source}:{token.line}:{token.column}] {token.instruction.label}"


class Lexer:
    """Character classifier driven over lines; never fails on content."""

    # ---------- scanning ----------
    def tokenize(self, lines: Iterable[str]) -> List[Token]:
        tokens: List[Token] = []
        for lineno, line in enumerate(lines, start=1):
            for col, ch in enumerate(line, start=1):
                ins = classify(ch)
                if ins is not None:
                    tokens.append(Token(ins, lineno, col))
        return tokens

    def tokenize_text(self, text: str) -> List[Token]:
        return self.tokenize(split_lines(text))

    def tokenize_file(self, path: str) -> List[Token]:
        try:
            # newline='' keeps '\r' so split_lines owns the line boundary
            with open(path, 'r', encoding='utf-8', newline='') as f:
                text = f.read()
        except FileNotFoundError as e:
            raise LexerError(f"File not found: {path}", path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise LexerError(f"Error reading file {path}: {e}", path) from e
        return self.tokenize_text(text)

    # ---------- diagnostics ----------
    def print_instruction_set(self) -> None:
        print("Instruction set:")
        for ins in Instruction:
            print(f"  {ins.char}  {ins.name:<22} {ins.label}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Instruction scanner for the eight-character tape language')
    parser.add_argument('file', nargs='?', help='source file (if omitted, read stdin)')
    parser.add_argument('--source-name', help='identifier shown in each token (defaults to the file name)')
    parser.add_argument('--list-instructions', action='store_true',
                        help='print the recognized characters and exit')
    args = parser.parse_args(argv)

    lex = Lexer()
    if args.list_instructions:
        lex.print_instruction_set()
        return 0

    try:
        if args.file:
            tokens = lex.tokenize_file(args.file)
        else:
            tokens = lex.tokenize_text(sys.stdin.read())
    except LexerError as e:
        print("Lexical error:", e)
        sys.exit(2)

    source = args.source_name or args.file or "<stdin>"
    for tok in tokens:
        print(format_token(tok, source))
    return 0


if __name__ == '__main__':
    sys.exit(main())

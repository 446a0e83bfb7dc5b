from dataclasses import dataclass
from typing import Iterator, TextIO

from .shared import printf
from .table import StringSet


ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class Correct:
    word: str


@dataclass(frozen=True)
class Misspelled:
    word: str
    suggestions: tuple[str, ...]


CheckResult = Correct | Misspelled


def read_words(fp: TextIO) -> Iterator[str]:
    for line in fp:
        yield from line.split()


def load_dictionary(table: StringSet, fp: TextIO) -> int:
    n = 0
    for word in read_words(fp):
        table.insert(word)
        n += 1
    return n


def suggest(table: StringSet, word: str) -> Iterator[str]:
    # left to right, then alphabet order; the unchanged letter is tried too
    for i in range(len(word)):
        prefix, suffix = word[:i], word[i + 1 :]
        for letter in ALPHABET:
            candidate = prefix + letter + suffix
            if table.find(candidate):
                yield candidate


def check_word(table: StringSet, word: str) -> CheckResult:
    if table.find(word):
        return Correct(word)
    return Misspelled(word, tuple(suggest(table, word)))


def report(result: CheckResult):
    match result:
        case Correct(word):
            printf("{0:s} is correct.\n", word)
        case Misspelled(_, suggestions):
            printf("Suggesting alternatives ...\n")
            for suggestion in suggestions:
                printf("{0:s}\n", suggestion)

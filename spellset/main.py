import os
import sys

from .debug import dump_table
from .shared import printf, printf_err
from .spell import check_word, load_dictionary, read_words, report
from .table import StringSet, set_debug_trace_resize


DEFAULT_DICTIONARY = "dictionary"

USAGE = "Usage: spellcheck [--trace] [--dump] [dictionary]\n"


def load(path: str) -> StringSet:
    table = StringSet()
    try:
        with open(path, encoding="utf-8") as fp:
            load_dictionary(table, fp)
    except (OSError, UnicodeDecodeError) as e:
        printf_err("Cannot open file {0:s}\n", os.path.abspath(path))
        printf_err("{0}\n", e)
        sys.exit(66)
    return table


def repl(table: StringSet):
    for word in read_words(sys.stdin):
        report(check_word(table, word))


def main():
    args = sys.argv[1:]

    if "--trace" in args:
        args.remove("--trace")
        set_debug_trace_resize(True)

    dump = "--dump" in args
    if dump:
        args.remove("--dump")

    if len(args) > 1 or any(arg.startswith("-") for arg in args):
        printf_err(USAGE)
        sys.exit(64)

    path = args[0] if args else DEFAULT_DICTIONARY
    table = load(path)
    if dump:
        dump_table(table, path)
    printf("Dictionary loaded...\n")
    repl(table)


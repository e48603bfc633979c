#!/usr/bin/env python3
"""
find_compound_words.py

Reads a word list (one word per line), builds a trie from it, and finds every word that
is a concatenation of two or more other words of the same list.  Prints the longest such
word together with the sub-words it splits into, and optionally writes every compound
word to an output file.

Usage:
    python find_compound_words.py /path/to/words.txt [/path/to/compound_words.txt] \
                                  [--wordfreq en] [--verbose]

Lines are case-folded and every character outside A–Z/a–z is dropped.  Empty lines are
skipped.  Debug information goes to stderr (prefix "DEBUG:") when --verbose is given;
the report goes to stdout.
"""

import argparse
import os
import re
import sys
import time

from compound import longest_compound
from trie import TrieNode

# Longest word kept from the input; longer lines are skipped with a warning.
MAX_WORD_LENGTH = 127

_NON_LETTERS_RE = re.compile(r"[^A-Za-z]+")

VERBOSE = False


class WordListError(RuntimeError):
    """Raised when a word source cannot be read."""


def debug(msg):
    """Print debug message to stderr with a DEBUG prefix, if --verbose was given."""
    if VERBOSE:
        print(f"DEBUG: {msg}", file=sys.stderr)


def is_pure_alpha(word):
    """Return True if `word` consists of only lowercase a–z."""
    return bool(re.fullmatch(r"[a-z]+", word))


def sanitize_line(line: str) -> str:
    """Drop every character that is not an ASCII letter and lowercase the rest."""
    return _NON_LETTERS_RE.sub("", line).lower()


################################################################################
# WORD SOURCES
################################################################################

def load_words(input_path: str):
    """
    Read each line from input_path, sanitise it, and return the sorted list of words.
    Duplicates are kept.  Raises WordListError if the file cannot be opened.
    """
    debug(f"load_words: Starting with input_path='{input_path}'")
    words = []
    try:
        with open(input_path, "r", encoding="utf-8", errors="ignore") as f:
            for lineno, line in enumerate(f, start=1):
                w = sanitize_line(line)
                if not w:
                    debug(f"load_words: Line {lineno} is empty after cleaning, skipping")
                    continue
                if len(w) > MAX_WORD_LENGTH:
                    print(f"Warning: skipping word longer than {MAX_WORD_LENGTH} letters on line {lineno}",
                          file=sys.stderr)
                    continue
                words.append(w)
    except OSError as e:
        debug(f"load_words: Caught {type(e).__name__}: {e}")
        raise WordListError(f"could not open word file at '{input_path}'") from e

    words.sort()
    debug(f"load_words: Collected {len(words)} words from file")
    return words


def load_wordfreq_words(lang: str):
    """
    Use wordfreq.iter_wordlist(lang) to retrieve every word of that language,
    keep the a–z ones, and return them as a set.  Raises WordListError on failure.
    """
    debug(f"load_wordfreq_words: Loading wordfreq list for '{lang}'")
    # Imported here so plain file runs do not pay for loading wordfreq.
    from wordfreq import iter_wordlist

    words = set()
    try:
        for w in iter_wordlist(lang):
            w_lower = w.lower()
            if is_pure_alpha(w_lower) and len(w_lower) <= MAX_WORD_LENGTH:
                words.add(w_lower)
    except Exception as e:
        raise WordListError(f"wordfreq loader error for '{lang}': {e}") from e

    if not words:
        raise WordListError(f"wordfreq loader error: no words retrieved for '{lang}'")
    debug(f"load_wordfreq_words: {len(words)} entries loaded from wordfreq")
    return words


def open_output(output_path: str):
    """
    Open output_path for writing.  Returns None if it cannot be opened: the run then
    continues without writing compound words to a file.
    """
    try:
        return open(output_path, "w", encoding="utf-8")
    except OSError as e:
        debug(f"open_output: Could not open '{output_path}' ({e}); file output disabled")
        return None


################################################################################
# REPORT
################################################################################

def print_report(match, prepare_ms, process_ms):
    if match is None:
        print("\nNo compound words found\n")
    else:
        print(f"\nThe longest compound word is '{match.word}'\n")
        print(f"Sub-words of '{match.word}':")
        print("    " + " ".join(sorted(match.sub_words)))

    print()
    print(f"Preparation time: {prepare_ms} ms")
    print(f" Processing time: {process_ms} ms")


def _elapsed_ms(start):
    return int((time.perf_counter() - start) * 1000)


################################################################################
# MAIN
################################################################################

class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # wrong usage exits with status 1, like a missing input file
        self.print_usage(sys.stderr)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


def build_parser():
    parser = _ArgumentParser(
        prog="find-compound-words",
        description="Find the words of a word list that are made up of other words of the same list.",
    )
    parser.add_argument(
        "input",
        help="File containing the words, one per line. Only ASCII letters are kept.",
    )
    parser.add_argument(
        "output", nargs="?", default=None,
        help="(Optional) File where every compound word found is written, one per line.",
    )
    parser.add_argument(
        "--wordfreq", "-w", metavar="LANG", default=None,
        help="(Optional) Also load every a–z word of wordfreq's list for LANG (e.g. 'en').",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Print debug information to stderr.",
    )
    return parser


def main(argv=None):
    global VERBOSE

    args = build_parser().parse_args(argv)
    VERBOSE = args.verbose

    input_path = os.path.abspath(os.path.expanduser(args.input))
    debug(f"main: Resolved input to '{input_path}'")

    prepare_start = time.perf_counter()

    # 1) Load the words
    try:
        words = load_words(input_path)
        if args.wordfreq:
            extra = load_wordfreq_words(args.wordfreq)
            words = sorted(words + list(extra.difference(words)))
    except WordListError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Loaded {len(words)} words\n")

    prepare_ms = _elapsed_ms(prepare_start)
    process_start = time.perf_counter()

    # 2) Build the trie
    root = TrieNode.from_words(words)
    debug(f"main: Trie holds {root.count_words()} distinct words in {root.count_nodes()} nodes")

    # 3) Find the compound words
    output = None
    if args.output:
        output_path = os.path.abspath(os.path.expanduser(args.output))
        debug(f"main: Resolved output to '{output_path}'")
        output = open_output(output_path)

    on_match = None
    if output is not None:
        on_match = lambda w: output.write(w + "\n")  # noqa: E731
    try:
        match = longest_compound(root, words, on_match=on_match)
    finally:
        if output is not None:
            output.close()

    process_ms = _elapsed_ms(process_start)

    # 4) Report
    print_report(match, prepare_ms, process_ms)
    debug("main: Exiting normally")


if __name__ == "__main__":
    main()

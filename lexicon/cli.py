"""Command-line front end for the lexicon trie."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterable

from lexicon.errors import LexiconError, WordListError
from lexicon.loader import load_default
from lexicon.trie import LexiconTrie
from lexicon.validation import validate_pattern, validate_word

log = logging.getLogger("lexicon")

SHELL_HELP = """\
Commands:
  add WORD              -- add a word
  remove WORD           -- remove a word
  has WORD              -- is WORD in the lexicon?
  prefix PREFIX         -- does any word start with PREFIX?
  suggest WORD [N]      -- words within N substitutions of WORD (default 1)
  match PATTERN         -- words matching PATTERN (* ? _ wildcards)
  list [PREFIX]         -- list words, optionally only those starting with PREFIX
  count                 -- number of words
  help                  -- show this message
  quit                  -- leave the shell"""


def _sorted_lines(words: Iterable[str]) -> str:
    words = sorted(words)
    if not words:
        return "  (no matches)"
    return "\n".join(words)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def handle_command(lexicon: LexiconTrie, line: str) -> str | None:
    """Run one shell command and return its output; None means quit.

    Raises LexiconError for invalid words or patterns.
    """
    parts = line.split()
    if not parts:
        return ""
    cmd, args = parts[0].lower(), parts[1:]

    if cmd in ("quit", "exit", "q"):
        return None
    if cmd == "help":
        return SHELL_HELP
    if cmd == "count":
        return str(lexicon.num_words())
    if cmd == "list":
        prefix = validate_word(args[0]) if args else ""
        return _sorted_lines(lexicon.words_with_prefix(prefix))

    if not args:
        return f"  Usage: {cmd} ARGUMENT   (type 'help' for commands)"

    if cmd == "add":
        word = validate_word(args[0])
        return f"  Added '{word}'" if lexicon.add_word(word) else f"  '{word}' already present"
    if cmd == "remove":
        word = validate_word(args[0])
        return f"  Removed '{word}'" if lexicon.remove_word(word) else f"  '{word}' not found"
    if cmd == "has":
        return _yes_no(lexicon.contains_word(validate_word(args[0])))
    if cmd == "prefix":
        return _yes_no(lexicon.contains_prefix(validate_word(args[0])))
    if cmd == "suggest":
        word = validate_word(args[0])
        try:
            distance = int(args[1]) if len(args) > 1 else 1
        except ValueError:
            return "  Usage: suggest WORD [N]   (N is a whole number)"
        return _sorted_lines(lexicon.suggest_corrections(word, distance))
    if cmd == "match":
        return _sorted_lines(lexicon.match_pattern(validate_pattern(args[0])))

    return f"  Unknown command '{cmd}'   (type 'help' for commands)"


def run_shell(lexicon: LexiconTrie, read: Callable[[str], str] = input) -> None:
    """Interactive loop until ``quit`` or end of input."""
    print("\n" + "=" * 60)
    print(f"  LEXICON SHELL -- {lexicon.num_words():,} words loaded")
    print("=" * 60)
    print()
    print(SHELL_HELP)
    print()

    while True:
        try:
            line = read("  lexicon> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        try:
            out = handle_command(lexicon, line)
        except LexiconError as exc:
            print(f"  Invalid: {exc}")
            continue
        if out is None:
            break
        if out:
            print(out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexicon",
        description="Lexicon -- look up, complete and correct words from a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("count", help="Print the number of words")

    p = sub.add_parser("list", help="List words in alphabetical order")
    p.add_argument("--prefix", default="", help="Only words starting with PREFIX")

    p = sub.add_parser("contains", help="Check whether words are present")
    p.add_argument("words", nargs="+")

    p = sub.add_parser("prefix", help="Check whether any word starts with a prefix")
    p.add_argument("prefixes", nargs="+")

    p = sub.add_parser("suggest", help="Same-length spelling corrections")
    p.add_argument("word")
    p.add_argument("--distance", "-d", type=int, default=1,
                   help="Maximum number of differing letters (default 1)")

    p = sub.add_parser("match", help="Words matching a wildcard pattern")
    p.add_argument("pattern", help="Letters plus * (any run), ? or _ (one letter)")

    sub.add_parser("shell", help="Interactive shell (default)")
    return parser


def _run_command(lexicon: LexiconTrie, args: argparse.Namespace) -> None:
    if args.command == "count":
        print(lexicon.num_words())
    elif args.command == "list":
        for word in lexicon.words_with_prefix(validate_word(args.prefix) if args.prefix else ""):
            print(word)
    elif args.command == "contains":
        for word in args.words:
            print(f"{word}: {_yes_no(lexicon.contains_word(validate_word(word)))}")
    elif args.command == "prefix":
        for prefix in args.prefixes:
            print(f"{prefix}: {_yes_no(lexicon.contains_prefix(validate_word(prefix)))}")
    elif args.command == "suggest":
        print(_sorted_lines(lexicon.suggest_corrections(validate_word(args.word), args.distance)))
    elif args.command == "match":
        print(_sorted_lines(lexicon.match_pattern(validate_pattern(args.pattern))))
    else:
        run_shell(lexicon)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    lexicon = LexiconTrie()
    try:
        load_default(lexicon, args.dict)
    except WordListError as exc:
        log.error("%s", exc)
        return 1

    try:
        _run_command(lexicon, args)
    except LexiconError as exc:
        print(f"lexicon: error: {exc}", file=sys.stderr)
        return 2
    return 0

# varnam/cli.py
"""
Command line access to the libvarnam binding.

Usage:
    varnam schemes [--json]
    varnam transliterate <scheme> <text> [--json]
    varnam reverse <scheme> <text>
    varnam learn <scheme> <word> [<word> ...]
    varnam learn-file <scheme> <path> [--json]
    varnam corpus <scheme> [--json]

Example:
    varnam transliterate ml namaskaaram
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from varnam.core.domain.exceptions import VarnamError
from varnam.shared.container import container
from varnam.shared.logging_config import configure_logging


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def cmd_schemes(args: argparse.Namespace) -> int:
    schemes = container.list_schemes().execute()
    if args.json:
        _print_json([s.model_dump() for s in schemes])
        return 0

    if not schemes:
        print("No schemes found.")
        return 0
    for s in schemes:
        stability = "stable" if s.is_stable else "unstable"
        print(f"{s.identifier:<12} {s.lang_code:<6} {s.display_name} ({stability}, by {s.author}, {s.compiled_date})")
    return 0


def cmd_transliterate(args: argparse.Namespace) -> int:
    with container.open_session().execute(args.scheme) as session:
        suggestions = session.transliterate(args.text)
    if args.json:
        _print_json(suggestions)
    else:
        for word in suggestions:
            print(word)
    return 0


def cmd_reverse(args: argparse.Namespace) -> int:
    with container.open_session().execute(args.scheme) as session:
        print(session.reverse_transliterate(args.text))
    return 0


def cmd_learn(args: argparse.Namespace) -> int:
    with container.open_session().execute(args.scheme) as session:
        for word in args.words:
            session.learn(word)
    print(f"Learned {len(args.words)} word(s) into '{args.scheme}'.")
    return 0


def cmd_learn_file(args: argparse.Namespace) -> int:
    with container.open_session().execute(args.scheme) as session:
        status = session.learn_from_file(args.path)
    if args.json:
        _print_json(status.model_dump())
    else:
        print(f"Total words: {status.total_words}, failed: {status.failed_words}")
    return 0


def cmd_corpus(args: argparse.Namespace) -> int:
    with container.open_session().execute(args.scheme) as session:
        details = session.get_corpus_details()
        path = session.get_suggestions_file_path()
    if args.json:
        _print_json({**details.model_dump(by_alias=True), "suggestionsFile": path})
    else:
        print(f"Suggestions file: {path}")
        print(f"Words: {details.words_count}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="varnam", description="libvarnam transliteration from the command line.")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("schemes", help="List installed schemes")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_schemes)

    p = sub.add_parser("transliterate", help="Transliterate text into suggestions")
    p.add_argument("scheme")
    p.add_argument("text")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_transliterate)

    p = sub.add_parser("reverse", help="Reverse transliterate text")
    p.add_argument("scheme")
    p.add_argument("text")
    p.set_defaults(func=cmd_reverse)

    p = sub.add_parser("learn", help="Learn one or more words")
    p.add_argument("scheme")
    p.add_argument("words", nargs="+")
    p.set_defaults(func=cmd_learn)

    p = sub.add_parser("learn-file", help="Learn every word in a file")
    p.add_argument("scheme")
    p.add_argument("path")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_learn_file)

    p = sub.add_parser("corpus", help="Show corpus details")
    p.add_argument("scheme")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_corpus)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(log_level=args.log_level)

    try:
        return args.func(args)
    except VarnamError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

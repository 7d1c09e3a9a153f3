from __future__ import annotations
import argparse, os, sys, json
import logging
from dataclasses import asdict

from .engine import Engine
from . import config as CFG


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word-in-context search over one text file")
    p.add_argument("--file", required=True, help="Text file to index")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("-c", "--context", type=int, default=CFG.DEFAULT_CONTEXT_WORDS,
                   help="Words of context on each side")
    p.add_argument("--pattern", default=CFG.WORD_PATTERN, help="Regex defining a word")
    p.add_argument("--repl", action="store_true", help="Interactive loop after indexing")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.context < 0:
        p.error("--context must be >= 0")

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["TEXTSEARCH_VERBOSE"] = "1"
        CFG.VERBOSE = True

    eng = Engine(pattern=args.pattern)
    try:
        try:
            eng.build_from_file(args.file)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            p.error(str(exc))

        def run_query(q: str):
            rows = eng.hits(q, args.context)
            if args.json:
                print(json.dumps([asdict(r) for r in rows], ensure_ascii=False, indent=2))
            else:
                if not rows:
                    print("(no matches)"); return
                print("#  Position  Context")
                for i, r in enumerate(rows, 1):
                    print(f"{i:<2} {r.position:<9} {r.context}")

        if args.q:
            run_query(args.q)

        if args.repl:
            print("Type a word (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())

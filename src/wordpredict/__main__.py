from __future__ import annotations
import argparse
import json
import sys
from dataclasses import asdict

from .engine import PredictionModel
from .errors import InitializationError

def _print_words(words, as_json: bool) -> None:
    if as_json:
        print(json.dumps(words, ensure_ascii=False)); return
    if not words:
        print("(no matches)"); return
    for i, w in enumerate(words, 1):
        print(f"{i:<2} {w}")

def _print_scored(rows, as_json: bool) -> None:
    if as_json:
        out = [r.to_json() if hasattr(r, "to_json") else asdict(r) for r in rows]
        print(json.dumps(out, ensure_ascii=False, indent=2)); return
    if not rows:
        print("(no matches)"); return
    print("#  Conf   Word")
    for i, r in enumerate(rows, 1):
        print(f"{i:<2} {r.confidence:<6} {r.word}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word prediction CLI (next word + completion)")
    p.add_argument("--root", default=None, help="Directory containing language-pack/<lang>/")
    p.add_argument("--language", default=None, help="Language pack identifier (default: en)")
    p.add_argument("--predict", default=None, help="Predict the word following TEXT")
    p.add_argument("--complete", default=None, help="Complete the partial word PREFIX")
    p.add_argument("--confidence", action="store_true", help="Include confidence scores")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--metrics", action="store_true", help="Print model metrics after init")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--verbose", action="store_true", help="Debug logging and memory estimates")
    args = p.parse_args(argv)

    model = PredictionModel(root=args.root, debug=args.verbose or None)
    try:
        model.initialize(args.language)
    except InitializationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    def run_predict(text: str) -> None:
        if args.confidence:
            _print_scored(model.predict_next_with_confidence(text), args.json)
        else:
            _print_words(model.predict_next(text), args.json)

    def run_complete(prefix: str) -> None:
        if args.confidence:
            _print_scored(model.complete_with_confidence(prefix), args.json)
        else:
            _print_words(model.complete(prefix), args.json)

    if args.metrics:
        print(json.dumps(asdict(model.get_metrics()), indent=2))
    if args.predict is not None:
        run_predict(args.predict)
    if args.complete is not None:
        run_complete(args.complete)

    if args.repl:
        print("Type text and press Enter (empty line to exit).")
        print("Ending a line with a space predicts the next word; otherwise the last word is completed.")
        print("Commands: :reset, :metrics")
        while True:
            try:
                raw = input("> ")
            except (EOFError, KeyboardInterrupt):
                print(); break
            if raw == "":
                break
            cmd = raw.strip().lower()
            if cmd == ":reset":
                model.reset()
                model.initialize()
                print("(reloaded)"); continue
            if cmd == ":metrics":
                print(json.dumps(asdict(model.get_metrics()), indent=2)); continue
            words = raw.split()
            if not words:
                continue
            if raw.endswith(" "):
                run_predict(words[-1])
            else:
                run_complete(words[-1])
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

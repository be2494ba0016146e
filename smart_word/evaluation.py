#!/usr/bin/env python3
"""
evaluation.py - keystroke replay harness

- Builds a SmartWord engine from a dictionary and old-message files.
- Replays new messages letter by letter through guess()/feedback().
- Reports how many words were guessed and how many keystrokes that saved.
- Writes a JSON summary report.

Usage:
smart-word-eval new_messages.txt --words words.txt --old old_messages.txt --out results.json
"""
from __future__ import annotations

import argparse
import json
import logging
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from smart_word.context import tokenize_line
from smart_word.core.smart_word import SmartWord
from smart_word.utils.logger_utils import Log, configure_logging

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    words: int = 0
    guessed: int = 0
    keystrokes: int = 0  # letters actually typed
    letters: int = 0  # letters in all words (typing without help)
    guesses: int = 0
    elapsed: float = 0.0

    @property
    def accuracy(self) -> float:
        return self.guessed / self.words if self.words else 0.0

    @property
    def saved(self) -> int:
        return self.letters - self.keystrokes

    @property
    def savings(self) -> float:
        return self.saved / self.letters if self.letters else 0.0

    def as_dict(self) -> dict:
        d = asdict(self)
        d.update(accuracy=self.accuracy, saved=self.saved, savings=self.savings)
        return d


def replay_word(engine: SmartWord, word: str, word_index: int, result: EvaluationResult) -> bool:
    """
    Type `word` one letter at a time until it shows up among the guesses.
    Sends feedback either way; returns whether it was guessed.
    """
    result.words += 1
    result.letters += len(word)
    for pos, ch in enumerate(word):
        result.keystrokes += 1
        result.guesses += 1
        if word in engine.guess(ch, pos, word_index):
            result.guessed += 1
            engine.feedback(True, word)
            return True
    engine.feedback(False, word)
    return False


def evaluate_lines(engine: SmartWord, lines: Iterable[str]) -> EvaluationResult:
    """
    Replay every line as one message; a space keystroke closes each message
    so the next one starts without a bigram anchor.
    """
    result = EvaluationResult()
    t0 = time.perf_counter()
    for line in lines:
        toks = tokenize_line(line)
        if not toks:
            continue
        for i, w in enumerate(toks):
            replay_word(engine, w, i, result)
        engine.guess(" ", 0, len(toks))
    result.elapsed = time.perf_counter() - t0
    logger.debug("replayed %d words in %.3fs", result.words, result.elapsed)
    return result


def evaluate_text(engine: SmartWord, text: str) -> EvaluationResult:
    return evaluate_lines(engine, text.splitlines())


def build_engine(words: Optional[Path] = None, old: Iterable[Path] = ()) -> SmartWord:
    engine = SmartWord(words)
    for p in old:
        engine.process_old_messages(p)
    return engine


def write_report(result: EvaluationResult, out_path: Path) -> None:
    """Write JSON summary."""
    with Path(out_path).open("w", encoding="utf-8") as fh:
        json.dump(result.as_dict(), fh, indent=2)


def format_summary(result: EvaluationResult) -> List[str]:
    return [
        "=== Evaluation Summary ===",
        f"words guessed : {result.guessed}/{result.words} ({100.0 * result.accuracy:.2f}%)",
        f"keystrokes    : {result.keystrokes}/{result.letters} "
        f"(saved {result.saved}, {100.0 * result.savings:.2f}%)",
        f"guess calls   : {result.guesses}",
        f"time          : {result.elapsed:.3f}s",
        "==========================",
    ]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replay messages through SmartWord")
    parser.add_argument("messages", type=str, help="Messages to replay (one per line)")
    parser.add_argument("--words", type=str, default=None, help="Dictionary file")
    parser.add_argument("--old", type=str, action="append", default=[], help="Old messages file (repeatable)")
    parser.add_argument("--out", type=str, default=None, help="Output JSON file")
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    msg_path = Path(args.messages)
    if not msg_path.exists():
        print(f"Messages not found: {msg_path}")
        return 1

    with Log.time_block("build engine"):
        engine = build_engine(Path(args.words) if args.words else None, [Path(p) for p in args.old])

    lines = msg_path.read_text(encoding="utf-8", errors="replace").splitlines()
    result = evaluate_lines(engine, lines)
    for line in format_summary(result):
        print(line)
    if args.out:
        write_report(result, Path(args.out))
        print(f"Full JSON written to: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
cli.py - command line interface for SmartWord
Features:
- Loads a dictionary and message corpora at start-up
- Keystroke-by-keystroke replay of typed text with the three live suggestions
- Feedback commands that reinforce words and set the next-word anchor
- Keystroke-savings evaluation on a message file
- Uses Rich for tables and formatting
"""

import argparse
import shlex
import time
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from smart_word.core.smart_word import SmartWord
from smart_word.evaluation import evaluate_text, format_summary
from smart_word.utils.config_manager import Config
from smart_word.utils.logger_utils import configure_logging
from smart_word.utils.metrics_tracker import Metrics

BANNER = "SmartWord predictive text (type /help for cmds)"

HELP = [
    ("/type <text>", "feed text keystroke by keystroke"),
    ("/key <char> <pos> [idx]", "single guess() call"),
    ("/accept <word>", "feedback: guess was right"),
    ("/reject <word>", "feedback: guess was wrong, <word> was meant"),
    ("/suggest <prefix>", "top words for a prefix with frequencies"),
    ("/dict <file>", "load a dictionary file"),
    ("/load <file>", "load a message file (learns bigrams)"),
    ("/eval <file>", "replay a message file and report savings"),
    ("/reset", "clear the typing session"),
    ("/config [key val]", "show or change settings"),
    ("/stats", "lexicon and timing stats"),
    ("/quit", "exit"),
]


class CLI:
    """Interactive shell around one SmartWord engine."""

    def __init__(self, engine: Optional[SmartWord] = None, cfg: Optional[Config] = None,
                 console: Optional[Console] = None):
        self.cfg = cfg or Config(path=None)
        self.engine = engine or SmartWord(config=self.cfg)
        self.console = console or Console()
        self.metrics = Metrics()
        self.running = True

    def start(self):
        self.console.print(Panel(BANNER, box=box.ROUNDED))
        while self.running:
            try:
                line = Prompt.ask(">>", console=self.console).strip()
            except (EOFError, KeyboardInterrupt):
                self.console.print("\nbye.")
                break
            if not line:
                continue
            if line.startswith("/"):
                self.cmd(line)
            else:
                self.type_text(line)

    def cmd(self, line):
        try:
            p = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]bad input:[/red] {e}")
            return
        if not p:
            return
        c = p[0].lower()

        if c in ("/q", "/quit", "/exit"):
            self.running = False
            self.console.print("bye.")

        elif c == "/help":
            t = Table(box=box.SIMPLE, show_header=False)
            for name, desc in HELP:
                t.add_row(name, desc)
            self.console.print(t)

        elif c == "/type" and len(p) > 1:
            self.type_text(line.split(None, 1)[1])

        elif c == "/key" and len(p) > 2:
            try:
                pos = int(p[2])
                idx = int(p[3]) if len(p) > 3 else 0
            except ValueError:
                self.console.print("usage: /key <char> <pos> [idx]")
                return
            self.show_guess(p[1][:1] or " ", pos, idx)

        elif c in ("/accept", "/reject") and len(p) > 1:
            self.engine.feedback(c == "/accept", p[1])
            self.console.print(f"anchor -> [bold]{p[1]}[/bold]")

        elif c == "/suggest" and len(p) > 1:
            self.suggest(p[1])

        elif c in ("/dict", "/load") and len(p) > 1:
            self.load_file(p[1], is_dictionary=(c == "/dict"))

        elif c == "/eval" and len(p) > 1:
            self.eval_file(p[1])

        elif c == "/reset":
            self.engine.reset()
            self.console.print("session reset")

        elif c == "/config":
            self.config_cmd(p[1:])

        elif c == "/stats":
            self.show_stats()

        else:
            self.console.print("unknown cmd")

    # typing ------------------------------------------------------------
    def show_guess(self, ch: str, pos: int, idx: int) -> List[str]:
        t0 = time.perf_counter()
        out = self.engine.guess(ch, pos, idx)
        self.metrics.record("guess_time", time.perf_counter() - t0)
        self.console.print(f"{ch!r} -> " + " | ".join(out))
        return out

    def type_text(self, text: str):
        """Replay `text`; every word boundary becomes a space keystroke."""
        t = Table(title="suggestions", box=box.SIMPLE_HEAVY)
        t.add_column("key")
        t.add_column("pos", justify="right")
        for i in range(1, 4):
            t.add_column(f"#{i}")
        pos = 0
        idx = 0
        for ch in text:
            t0 = time.perf_counter()
            out = self.engine.guess(ch, pos, idx)
            self.metrics.record("guess_time", time.perf_counter() - t0)
            t.add_row(repr(ch), str(pos), *out)
            if ch.isspace():
                pos = 0
                idx += 1
            else:
                pos += 1
        self.console.print(t)

    def suggest(self, prefix: str):
        lex = self.engine.lexicon
        words = lex.prefix_search(prefix, 10)
        if not words:
            self.console.print("no matches")
            return
        t = Table(box=box.SIMPLE)
        t.add_column("word")
        t.add_column("freq", justify="right")
        t.add_column("followed by")
        for w in words:
            nxt = ", ".join(f"{k}:{v}" for k, v in lex.following(w).items())
            t.add_row(w, str(lex.frequency(w)), nxt)
        self.console.print(t)

    # files -------------------------------------------------------------
    def load_file(self, path: str, is_dictionary: bool = False):
        try:
            t0 = time.perf_counter()
            if is_dictionary:
                n = self.engine.load_dictionary(path)
            else:
                n = self.engine.process_old_messages(path)
            dt = time.perf_counter() - t0
        except OSError as e:
            self.console.print(f"[red]err:[/red] {e}")
            return
        self.metrics.record("load_time", dt)
        self.console.print(f"loaded {n} tokens from {path} in {dt:.2f}s")

    def eval_file(self, path: str):
        try:
            with open(path, "r", encoding="utf8", errors="replace") as f:
                text = f.read()
        except OSError as e:
            self.console.print(f"[red]err:[/red] {e}")
            return
        result = evaluate_text(self.engine, text)
        self.metrics.record("eval_time", result.elapsed)
        for line in format_summary(result):
            self.console.print(line)

    # settings/stats ----------------------------------------------------
    def config_cmd(self, args):
        if not args:
            t = Table(box=box.SIMPLE, show_header=False)
            for k, v in self.cfg.data.items():
                t.add_row(k, str(v))
            self.console.print(t)
        elif len(args) == 2:
            try:
                self.cfg.set(args[0], args[1])
            except ValueError as e:
                self.console.print(f"[red]{e}[/red]")
                return
            self.console.print("saved; applies to engines built from now on")
        else:
            self.console.print("usage: /config [key val]")

    def show_stats(self):
        st = self.engine.stats()
        t = Table(title="stats", box=box.SIMPLE)
        t.add_column("key")
        t.add_column("value", justify="right")
        for k, v in st.items():
            t.add_row(k, str(v))
        for k in ("guess_time", "load_time", "eval_time"):
            if self.metrics.count(k):
                t.add_row(f"avg {k}", f"{self.metrics.avg(k) * 1000:.3f} ms")
        self.console.print(t)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="smart-word", description=BANNER)
    ap.add_argument("--words", help="dictionary file")
    ap.add_argument("--old", action="append", default=[], help="old messages file (repeatable)")
    ap.add_argument("--new", action="append", default=[], help="new messages file (repeatable)")
    ap.add_argument("--config", default=None, help="JSON config file")
    ap.add_argument("--log-level", default=None)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(path=args.config)
    configure_logging(args.log_level or cfg.get("log_level"))
    console = Console()
    try:
        engine = SmartWord(args.words, config=cfg)
        for p in args.old:
            engine.process_old_messages(p)
        for p in args.new:
            engine.process_new_messages(p)
    except OSError as e:
        console.print(f"[red]err:[/red] {e}")
        return 1
    CLI(engine, cfg, console).start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""Run every grid puzzle that has an input file and tabulate the answers."""

from __future__ import annotations

import argparse
import contextlib
import io
import json
import time
from datetime import datetime
from pathlib import Path

from puzzles.day06 import solution as day06
from puzzles.day10 import solution as day10
from puzzles.day12 import solution as day12
from puzzles.day16 import solution as day16
from puzzles.day18 import solution as day18
from puzzles.day20 import solution as day20
from shared.config import DEFAULT_CONFIG

DAYS = {
    "day06": day06,
    "day10": day10,
    "day12": day12,
    "day16": day16,
    "day18": day18,
    "day20": day20,
}


def run_day(name: str, module, inputs_dir: Path | None, config: str) -> dict:
    """Invoke the day's CLI in-process and capture its `<label>: <value>` lines."""
    src = (inputs_dir / f"{name}.txt") if inputs_dir else Path(module.__file__).with_name("input.txt")
    if not src.exists():
        return {"day": name, "status": "skipped", "input": str(src), "answers": {}}
    buf = io.StringIO()
    t0 = time.perf_counter()
    with contextlib.redirect_stdout(buf):
        rc = module.main([str(src), "--config", config])
    elapsed = time.perf_counter() - t0
    answers = {}
    for line in buf.getvalue().splitlines():
        label, sep, value = line.partition(": ")
        if sep:
            answers[label] = value
    return {
        "day": name,
        "status": "ok" if rc == 0 else "error",
        "input": str(src),
        "seconds": round(elapsed, 3),
        "answers": answers,
    }


def fmt_row(r: dict) -> str:
    answers = "; ".join(f"{k}: {v}" for k, v in r["answers"].items()) or "-"
    secs = f"{r['seconds']:.2f}" if "seconds" in r else "-"
    return f"| {r['day']} | {r['status']} | {secs} | {answers} |"


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Solve all grid puzzles and write a summary.")
    ap.add_argument("--inputs", default=None, help="directory with dayNN.txt files (default: per-day input.txt)")
    ap.add_argument("--days", nargs="*", choices=sorted(DAYS), default=sorted(DAYS))
    ap.add_argument("--config", default=str(DEFAULT_CONFIG))
    ap.add_argument("--out", default="artifacts/answers.md")
    args = ap.parse_args(argv)

    inputs_dir = Path(args.inputs) if args.inputs else None
    results = [run_day(d, DAYS[d], inputs_dir, args.config) for d in args.days]

    lines = []
    ts = datetime.now().isoformat(timespec="seconds")
    lines.append(f"# Grid Puzzle Answers ({ts})\n")
    lines.append("| Day | status | time[s] | answers |")
    lines.append("|:---:|:------:|--------:|:--------|")
    lines.extend(fmt_row(r) for r in results)
    lines.append("")

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text("\n".join(lines))
    out_path.with_suffix(".json").write_text(json.dumps(results, indent=2))
    print(f"Wrote: {out_path}")
    print("\n".join(lines))
    return 0 if all(r["status"] != "error" for r in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())

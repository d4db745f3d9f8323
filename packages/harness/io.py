"""
Replay reports.

A batch replay produces two files sharing one UTC run id:

  replay_<run_id>.csv            one row per answer: outcome, whether the
                                 answer survived every row, and per turn the
                                 guess, its pattern and the candidates left
  replay_<run_id>_manifest.json  run config, word-list report, git commit and
                                 the solved / unsound tallies

An answer is "unsound" if it ever dropped out of its own candidate list,
i.e. the deduction engine produced a restriction the answer violates.

Patterns are written with a leading apostrophe so spreadsheet apps keep
"-GYY-" as text instead of parsing it as a formula.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List, Tuple


def answer_kept(result: Dict) -> bool:
    return all(kept for *_, kept in result.get("history", []))


def unsound_answers(results: List[Dict]) -> List[str]:
    return [r["answer"] for r in results if not answer_kept(r)]


def write_csv(results: List[Dict], path: str, num_rows: int, N: int) -> str:
    """
    Columns: N, answer, solved, guesses, time_ms, answer_kept, then
    guess_i / patt_i / left_i for i in 1..num_rows (blank past the last turn).
    """
    turn_fields = [f"{col}_{i}" for i in range(1, num_rows + 1)
                   for col in ("guess", "patt", "left")]
    fields = ["N", "answer", "solved", "guesses", "time_ms", "answer_kept"] + turn_fields

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields, restval="")
        w.writeheader()
        for r in results:
            row = {
                "N": N,
                "answer": r["answer"],
                "solved": r["solved"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "answer_kept": answer_kept(r),
            }
            for i, (g, patt, left, _) in enumerate(r.get("history", [])[:num_rows], start=1):
                row[f"guess_{i}"] = g
                row[f"patt_{i}"] = "'" + patt
                row[f"left_{i}"] = left
            w.writerow(row)

    return str(p)


def build_manifest(results: List[Dict], *, run_id: str, wordlist: Dict, config: Dict) -> Dict:
    """Summarize a replay batch for the JSON manifest."""
    unsound = unsound_answers(results)
    return {
        "run_id": run_id,
        "git_commit": _git_commit(),
        "config": config,
        "wordlist": wordlist,
        "num_cases": len(results),
        "num_solved": sum(1 for r in results if r["solved"]),
        "num_unsound": len(unsound),
        "unsound": unsound[:20],
    }


def write_replay_outputs(
        results: List[Dict],
        outdir: str | Path,
        *,
        wordlist: Dict,
        config: Dict,
        num_rows: int,
        N: int,
) -> Tuple[str, str]:
    """Write the CSV and manifest for one batch; return both paths."""
    run_id = dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    out = Path(outdir)
    out.mkdir(parents=True, exist_ok=True)

    csv_path = write_csv(results, str(out / f"replay_{run_id}.csv"), num_rows=num_rows, N=N)

    manifest_path = out / f"replay_{run_id}_manifest.json"
    manifest = build_manifest(results, run_id=run_id, wordlist=wordlist, config=config)
    manifest_path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return csv_path, str(manifest_path)


def _git_commit() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout."""
    try:
        proc = subprocess.run(["git", "rev-parse", "--short", "HEAD"],
                              capture_output=True, text=True, check=False)
    except OSError:
        return "unknown"
    return proc.stdout.strip() if proc.returncode == 0 else "unknown"

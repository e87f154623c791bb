#!/usr/bin/env python3
"""
generate_html.py
Render the login DFA transition table to a simple HTML page,
optionally highlighting the rows taken by a given sequence.
Usage:
  python3 tools/generate_html.py -o reports/dfa.html --sequence ups
"""

from pathlib import Path
import argparse
import html

from dfa.engine import TRANSITION_TABLE, trace, state_name

def rows_taken(sequence):
    taken = set()
    for step in trace(sequence or ""):
        for i, (src, sym, dst) in enumerate(TRANSITION_TABLE):
            if src is step.source and dst is step.target and sym in (step.symbol, None):
                taken.add(i)
                break
    return taken

def generate(out_html, sequence=None):
    taken = rows_taken(sequence)
    html_lines = [
        "<!doctype html>",
        "<html><head><meta charset='utf-8'><title>Login DFA</title>",
        "<style>table{border-collapse:collapse}td,th{border:1px solid #ccc;padding:6px}tr.taken{background:#ffe9a8}</style>",
        "</head><body>",
        "<h1>Login DFA transition table</h1>",
    ]
    if sequence is not None:
        html_lines.append(f"<p>Sequence: <code>{html.escape(sequence)}</code></p>")
    html_lines.append("<table><thead><tr><th>Current</th><th>Input</th><th>Next</th></tr></thead><tbody>")
    for i, (src, sym, dst) in enumerate(TRANSITION_TABLE):
        cls = " class='taken'" if i in taken else ""
        label = html.escape(sym) if sym is not None else "anything else"
        html_lines.append(f"<tr{cls}><td>{html.escape(state_name(src))}</td>"
                          f"<td>{label}</td><td>{html.escape(state_name(dst))}</td></tr>")
    html_lines.append("</tbody></table></body></html>")
    out = Path(out_html)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(html_lines), encoding="utf-8")
    print("Saved HTML table to:", out_html)
    return out

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("-o", "--out", default="reports/dfa.html", help="output HTML path")
    ap.add_argument("-s", "--sequence", default=None, help="symbols whose path to highlight")
    args = ap.parse_args()
    generate(args.out, args.sequence)

#!/usr/bin/env python3
"""
run_sequence.py
Feed a symbol string through the login DFA and print every step.
Usage:
  python3 tools/run_sequence.py ups
  python3 tools/run_sequence.py uxs --quiet
"""

import argparse
import sys

from dfa.engine import trace, reset_dfa, is_final, state_name

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("sequence", help="symbols to feed, e.g. 'ups'")
    ap.add_argument("-q", "--quiet", action="store_true", help="only print the verdict")
    args = ap.parse_args(argv)

    steps = trace(args.sequence)
    final = steps[-1].target if steps else reset_dfa()
    if not args.quiet:
        for s in steps:
            print(f"{state_name(s.source):<24} --{s.symbol}--> {state_name(s.target)}")
    print("ACCEPTED" if is_final(final) else f"REJECTED in {state_name(final)}")
    return 0 if is_final(final) else 1

if __name__ == "__main__":
    sys.exit(main())

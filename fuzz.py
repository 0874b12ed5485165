#!/usr/bin/env python3
"""
Random fuzzer for turboescape.
Generates random and malformed text and checks the escape/unescape round-trip laws.
"""

import argparse
import random
import string
import sys
import time
import traceback

from turboescape import (
    MalformedEscapeError,
    escape_html,
    escape_java,
    escape_javascript,
    escape_xml,
    unescape_html,
    unescape_java,
    unescape_javascript,
    unescape_xml,
)

CONTROL_CHARS = [chr(code) for code in range(0x20)] + ["\x7f"]

SPECIAL_CHARS = [
    "'", '"', "\\", "&", "<", ">", ";", "#",
    "\u00a0",  # Non-breaking space
    "\u00e9", "\u00ff", "\u0100", "\u0fff", "\u1000",  # Escape width boundaries
    "\u2028", "\u2029",  # Line/paragraph separators
    "\u20ac",  # Euro sign (named in HTML 4.0)
    "\ufeff", "\uffff",
    "\U0001f600", "\U0010ffff",  # Astral characters
]

ENTITY_FRAGMENTS = [
    "&amp;", "&lt;", "&gt;", "&quot;", "&apos;", "&nbsp;", "&notin;", "&not",
    "&", "&amp", "&ampamp;", "&am", "&#", "&#x", "&#123", "&#x1f;",
    "&#xdeadbeef;", "&#99999999;", "&#-1;", "&#x;", "&unknown;",
    "&AMP;", "&#0000000060;", "&#00000000060;", "&#x110000;",
]

BACKSLASH_FRAGMENTS = [
    "\\", "\\\\", "\\n", "\\t", "\\'", '\\"', "\\q", "\\u", "\\u0", "\\u00e9",
    "\\uD83D\\uDE00", "\\uD83D", "\\uZZZZ", "\\u12",
]


def random_string(min_len=0, max_len=20):
    length = random.randint(min_len, max_len)
    return "".join(random.choice(string.printable) for _ in range(length))


def random_bmp_char():
    code = random.randint(0x80, 0xFFFF)
    # Lone surrogates do not survive the literal round trip (pairs are joined)
    if 0xD800 <= code <= 0xDFFF:
        code = 0xFFFD
    return chr(code)


def fuzz_text(max_parts=30):
    """Random mix of printable, control, special and non-ASCII characters."""
    parts = []
    for _ in range(random.randint(0, max_parts)):
        choice = random.random()
        if choice < 0.4:
            parts.append(random_string(0, 10))
        elif choice < 0.55:
            parts.append(random.choice(CONTROL_CHARS))
        elif choice < 0.8:
            parts.append(random.choice(SPECIAL_CHARS))
        else:
            parts.append(random_bmp_char())
    return "".join(parts)


def fuzz_escaped_text(max_parts=20):
    """Text that looks like already escaped input: entity and backslash fragments."""
    parts = []
    for _ in range(random.randint(0, max_parts)):
        choice = random.random()
        if choice < 0.35:
            parts.append(random.choice(ENTITY_FRAGMENTS))
        elif choice < 0.7:
            parts.append(random.choice(BACKSLASH_FRAGMENTS))
        else:
            parts.append(random_string(0, 5))
    return "".join(parts)


ROUND_TRIPS = [
    ("java", escape_java, unescape_java),
    ("javascript", escape_javascript, unescape_javascript),
    ("html", escape_html, unescape_html),
    ("xml", escape_xml, unescape_xml),
]


def check_round_trips(text):
    """Return a list of (dialect, escaped, result) for every broken round trip."""
    failures = []
    for name, escape, unescape in ROUND_TRIPS:
        escaped = escape(text)
        result = unescape(escaped)
        if result != text:
            failures.append((name, escaped, result))
    return failures


def check_unescape_robustness(text):
    """Unescaping arbitrary text may only fail with MalformedEscapeError."""
    unescape_html(text)
    unescape_xml(text)
    try:
        unescape_java(text)
    except MalformedEscapeError:
        return False
    return True


def run_fuzzer(num_tests, seed=None, verbose=False, save_failures=False):
    if seed is None:
        seed = int(time.time())
    random.seed(seed)
    print(f"Fuzzing turboescape with {num_tests} test cases (seed={seed})")

    mismatches = []
    crashes = []
    rejected = 0
    start = time.perf_counter()

    for test_num in range(num_tests):
        text = fuzz_text()
        escaped_like = fuzz_escaped_text()
        try:
            for name, escaped, result in check_round_trips(text):
                mismatches.append({
                    "test_num": test_num,
                    "dialect": name,
                    "text": text,
                    "escaped": escaped,
                    "result": result,
                })
            if not check_unescape_robustness(escaped_like):
                rejected += 1
        except Exception as e:  # noqa: BLE001
            crashes.append({
                "test_num": test_num,
                "text": text,
                "escaped_like": escaped_like,
                "error": f"{type(e).__name__}: {e}",
                "traceback": traceback.format_exc(),
            })
        if verbose and (test_num + 1) % 100 == 0:
            print(f"  {test_num + 1}/{num_tests} done")

    elapsed = time.perf_counter() - start
    print(f"\nRan {num_tests} tests in {elapsed:.2f}s")
    print(f"  Round-trip mismatches: {len(mismatches)}")
    print(f"  Crashes: {len(crashes)}")
    print(f"  Malformed literal escapes rejected: {rejected}")

    for mismatch in mismatches[:10]:
        print(f"\nMismatch #{mismatch['test_num']} ({mismatch['dialect']}):")
        print(f"  Text:    {mismatch['text']!r}")
        print(f"  Escaped: {mismatch['escaped']!r}")
        print(f"  Result:  {mismatch['result']!r}")

    for crash in crashes[:10]:
        print(f"\nCrash #{crash['test_num']}: {crash['error']}")
        print(f"  Text: {crash['escaped_like']!r}")
        if verbose:
            print(crash["traceback"])

    if save_failures and (mismatches or crashes):
        filename = f"fuzz_failures_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8") as f:
            f.write(f"Seed: {seed}\n\n")
            for mismatch in mismatches:
                f.write(f"=== MISMATCH #{mismatch['test_num']} ({mismatch['dialect']}) ===\n")
                f.write(f"Text: {mismatch['text']!r}\n")
                f.write(f"Escaped: {mismatch['escaped']!r}\n")
                f.write(f"Result: {mismatch['result']!r}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"Text: {crash['escaped_like']!r}\n")
                f.write(f"Error: {crash['error']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
        print(f"\nFailures saved to {filename}")

    return not mismatches and not crashes


def main():
    parser = argparse.ArgumentParser(description="Fuzz turboescape round trips with random input")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed strings (no checks)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i+1} ===")
            print(repr(fuzz_text()))
            print(repr(fuzz_escaped_text()))
        return

    success = run_fuzzer(
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()

"""
Download a plain-text dictionary and write a clean candidate list.

What it does:
- Downloads a newline-separated word list (default: dwyl/english-words).
- Keeps ASCII-alphabetic words of exactly --length letters.
- Optionally lowercases, then de-duplicates while preserving order.
- Writes one word per line, ready to be combined with clue lines:

Usage:
    python -m script.fetch_wordlist --length 5 --lower --out words_5.txt
    cat words_5.txt clues.txt | wordmatch
"""

import argparse
import re

import requests

from wordmatch.datasets.io import write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"[A-Za-z]+")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(lines, length: int, lower: bool = False) -> list[str]:
    words = []
    for ln in lines:
        w = ln.strip()
        if len(w) != length or not WORD_RE.fullmatch(w):
            continue
        words.append(w.lower() if lower else w)
    return unique_preserve_order(words)


def fetch_words(url: str, length: int, lower: bool = False) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return clean_words(r.text.splitlines(), length, lower=lower)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list of one word length")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--length", type=int, default=5, help="word length to keep")
    ap.add_argument("--lower", action="store_true", help="lowercase every word")
    ap.add_argument("--out", default="words_5.txt")
    args = ap.parse_args()

    words = fetch_words(args.url, args.length, lower=args.lower)
    path = write_lines(words, args.out)
    print(f"Wrote {len(words)} {args.length}-letter words -> {path}")


if __name__ == "__main__":
    main()

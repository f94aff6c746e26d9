import argparse
import logging
import sys
from pathlib import Path

# Ensure we import the repo-local htmltokendiff (not a pip-installed one).
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

import htmltokendiff  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Print the HTML diff of two files.")
    parser.add_argument("before", type=Path)
    parser.add_argument("after", type=Path)
    parser.add_argument("--wrap", action="store_true",
                        help="re-parse the result into a well-formed <div class=\"diff\">")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    before = args.before.read_text(encoding="utf-8")
    after = args.after.read_text(encoding="utf-8")
    if args.wrap:
        out = htmltokendiff.render_html_diff(before, after)
    else:
        out = htmltokendiff.html_diff(before, after)
    print(out)


if __name__ == "__main__":
    main()

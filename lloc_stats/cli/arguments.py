import argparse

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lloc-stats",
        description="Summarize logical lines of code from a pDepend summary XML report"
    )
    # both optional so a missing source is reported as a report error line
    parser.add_argument("source", nargs="?", help="Path to the pDepend summary XML")
    parser.add_argument(
        "dest",
        nargs="?",
        help="Switch to CSV output (the report is still printed to stdout)"
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")

    return parser

import logging
import sys
from .arguments import build_parser
from .runner import error_report, run_and_render
from lloc_stats.core.config import ReportConfiguration, configure_logging
from lloc_stats.core.errors import LlocStatsError
from lloc_stats.report.renderer import render_text

logger = logging.getLogger("lloc_stats.cli")

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = ReportConfiguration.from_args(args)
        output = run_and_render(config)
    except LlocStatsError as exc:
        logger.error("Report failed: %s", exc)
        # no partial report: the whole output is the error line
        print(render_text(error_report(exc)))
        return 1

    print(output)
    return 0

def run() -> None:
    sys.exit(main(sys.argv[1:]))

if __name__ == "__main__":
    run()

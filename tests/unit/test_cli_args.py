from lloc_stats.cli.arguments import build_parser

def test_parses_source_only():
    parser = build_parser()
    args = parser.parse_args(["/tmp/summary.xml"])
    assert args.source == "/tmp/summary.xml"
    assert args.dest is None
    assert args.verbose is False

def test_parses_source_and_dest():
    parser = build_parser()
    args = parser.parse_args(["/tmp/summary.xml", "out.csv", "--verbose"])
    assert args.dest == "out.csv"
    assert args.verbose is True

def test_source_is_optional_for_parser():
    args = build_parser().parse_args([])
    assert args.source is None

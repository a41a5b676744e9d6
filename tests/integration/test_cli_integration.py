import subprocess
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]

def _run(*args):
    cmd = [sys.executable, "-m", "lloc_stats.cli.main", *args]
    return subprocess.run(cmd, capture_output=True, text=True, cwd=PROJECT_ROOT)

def test_cli_report_runs():
    with tempfile.TemporaryDirectory() as d:
        report = Path(d) / "summary.xml"
        report.write_text(
            '<metrics><files><file name="a.php" lloc="10"/><file name="b.php" lloc="30"/></files>'
            '<package name="+global"><function name="f" lloc="5"/></package></metrics>',
            encoding="utf-8",
        )

        result = _run(str(report))
        assert result.returncode == 0
        assert "Max logical lines of code per file:\n30" in result.stdout
        assert "file with the most lines of code:\nb.php" in result.stdout

def test_cli_missing_source_fails():
    result = _run()
    assert result.returncode == 1
    assert "Expected arguments were not present" in result.stdout

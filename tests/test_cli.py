#!filepath: tests/test_cli.py
from typer.testing import CliRunner

from timestamper import __version__
from timestamper.cli import app
from timestamper.io.reader import TimestampsFileReader
from timestamper.utils.errors import CorruptTimestampsError

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_format_default_precision(write_timestamps, elapsed_millis):
    path = write_timestamps("1", elapsed_millis)

    result = runner.invoke(app, ["format", str(path)])

    assert result.exit_code == 0
    assert result.stdout == "0.000\n0.001\n0.010\n0.100\n1.000\n10.000\n"


def test_format_with_query(write_timestamps, elapsed_millis):
    path = write_timestamps("1", elapsed_millis)

    result = runner.invoke(app, ["format", str(path), "--query", "precision=2"])

    assert result.exit_code == 0
    assert result.stdout == "0.00\n0.00\n0.01\n0.10\n1.00\n10.00\n"


def test_format_uses_config_default_query(write_timestamps, tmp_path):
    path = write_timestamps("1", [1500])
    cfg = tmp_path / "cfg.yml"
    cfg.write_text("output:\n  default_query: precision=seconds\n", encoding="utf-8")

    result = runner.invoke(app, ["format", str(path), "--config", str(cfg)])

    assert result.exit_code == 0
    assert result.stdout == "1\n"


def test_format_missing_file(tmp_path):
    result = runner.invoke(app, ["format", str(tmp_path / "nope")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_record_then_format(tmp_path):
    path = tmp_path / "b" / "timestamps"

    result = runner.invoke(app, ["record", str(path), "0", "250", "1250"])
    assert result.exit_code == 0
    assert "Recorded 3 timestamps" in result.output

    with TimestampsFileReader(path) as reader:
        assert [t.elapsed_millis for t in reader] == [0, 250, 1250]

    result = runner.invoke(app, ["format", str(path), "-q", "precision=1"])
    assert result.stdout == "0.0\n0.2\n1.2\n"


def test_record_rejects_backwards(tmp_path):
    path = tmp_path / "timestamps"

    result = runner.invoke(app, ["record", str(path), "500", "100"])

    assert result.exit_code == 1
    assert "backwards" in result.output


def test_record_rejected_leaves_new_file_empty(tmp_path):
    path = tmp_path / "timestamps"

    result = runner.invoke(app, ["record", str(path), "500", "100"])

    assert result.exit_code == 1
    assert not path.exists() or path.read_bytes() == b""


def test_record_rejected_leaves_existing_file_unchanged(tmp_path):
    path = tmp_path / "timestamps"
    runner.invoke(app, ["record", str(path), "100", "200"])
    before = path.read_bytes()

    result = runner.invoke(app, ["record", str(path), "300", "150"])

    assert result.exit_code == 1
    assert path.read_bytes() == before


def test_format_corrupt_file(tmp_path):
    path = tmp_path / "timestamps"
    path.write_bytes(b"\x80")

    result = runner.invoke(app, ["format", str(path)])

    assert result.exit_code == 1
    assert "corrupt timestamps file" in result.output
    assert not isinstance(result.exception, CorruptTimestampsError)

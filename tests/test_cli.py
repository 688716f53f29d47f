"""Tests for the command-line interface.

WHY: The CLI is how people actually look at saves. It must print the
summary, write files without clobbering earlier runs, and report failures
with a non-zero exit code while still showing what was decoded.

HOW: Calls cli.main() with explicit argv and inspects stdout/stderr via
capsys and the exit code via SystemExit. Save files are built with the
save_bytes fixture and live in tmp_path.

RULES:
- Every test passes --formats explicitly unless it tests the default
- main() always exits via SystemExit
"""

import pytest

from bls_decoder import cli
from bls_decoder.cli import build_parser, decode_save, main

def _run(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestParser:
    """build_parser exposes the documented flags."""

    def test_defaults(self):
        args = build_parser().parse_args(["House.bls"])
        assert args.input_file == "House.bls"
        assert args.formats is None
        assert args.output_dir is None

    def test_log_level_normalized(self):
        args = build_parser().parse_args(["House.bls", "--log-level", "debug"])
        assert args.log_level == "DEBUG"


class TestDecodeSave:
    """decode_save drives the reader to the end."""

    def test_counts_without_keeping_records(self, sample_save_path):
        save = decode_save(sample_save_path)
        assert save.record_count == 3
        assert save.records == []
        assert save.error is None

    def test_trailing_count_is_final(self, tmp_path, save_bytes):
        path = tmp_path / "Trail.bls"
        path.write_bytes(save_bytes(count_line=None, body=['A" 0', "Linecount 42"]))
        save = decode_save(path)
        assert save.declared_count == 42
        assert save.record_count == 1

    def test_mid_stream_error_recorded(self, tmp_path, save_bytes):
        path = tmp_path / "Broken.bls"
        path.write_bytes(save_bytes(body=['A" 0', "oops"]))
        save = decode_save(path, keep_records=True)
        assert save.record_count == 1
        assert len(save.records) == 1
        assert "Invalid brick line" in save.error


class TestMain:
    """End-to-end runs of main()."""

    def test_summary_to_stdout(self, sample_save_path, capsys):
        assert _run([str(sample_save_path), "--formats", "summary"]) == 0
        out = capsys.readouterr().out
        assert "Expected brick count: 3" in out
        assert "Actual brick count: 3" in out

    def test_default_formats_from_config(self, sample_save_path, capsys, monkeypatch):
        monkeypatch.setattr(cli, "DEFAULT_FORMATS", "description")
        assert _run([str(sample_save_path)]) == 0
        assert capsys.readouterr().out == "My House\nBuilt by \x01Alice\x02 in 2012\n"

    def test_missing_file(self, tmp_path, capsys):
        assert _run([str(tmp_path / "nope.bls"), "--formats", "summary"]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_unknown_format(self, sample_save_path, capsys):
        assert _run([str(sample_save_path), "--formats", "summary,xml"]) == 1
        assert "Unknown format 'xml'" in capsys.readouterr().err

    def test_bad_json_indent(self, sample_save_path, capsys, monkeypatch):
        monkeypatch.setenv("BLS_JSON_INDENT", "wide")
        assert _run([str(sample_save_path), "--formats", "json"]) == 1
        captured = capsys.readouterr()
        assert "Error: BLS_JSON_INDENT must be a whole number" in captured.err
        assert captured.out == ""

    def test_header_error(self, tmp_path, capsys, save_bytes):
        path = tmp_path / "Long.bls"
        path.write_bytes(save_bytes(description_count="5000"))
        assert _run([str(path), "--formats", "summary"]) == 1
        assert "unreasonably long" in capsys.readouterr().err

    def test_mid_stream_error_still_reports(self, tmp_path, capsys, save_bytes):
        path = tmp_path / "Broken.bls"
        path.write_bytes(save_bytes(body=['A" 0', 'B" 0', "oops"]))
        assert _run([str(path), "--formats", "summary"]) == 1
        captured = capsys.readouterr()
        assert "Actual brick count: 2" in captured.out
        assert "Error: Invalid brick line" in captured.err

    def test_output_dir_with_conflict_avoidance(self, sample_save_path, tmp_path, capsys):
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        argv = [str(sample_save_path), "--formats", "summary,json", "--output-dir", str(out_dir)]
        assert _run(argv) == 0
        assert _run(argv) == 0
        names = sorted(p.name for p in out_dir.iterdir())
        assert names == ["House-2.json", "House-summary-2.txt", "House-summary.txt", "House.json"]
        assert capsys.readouterr().out == ""

    def test_missing_output_dir(self, sample_save_path, tmp_path, capsys):
        argv = [str(sample_save_path), "--output-dir", str(tmp_path / "missing")]
        assert _run(argv) == 1
        assert "Output directory does not exist" in capsys.readouterr().err

    def test_non_bls_extension_still_decoded(self, tmp_path, capsys, caplog, save_bytes):
        path = tmp_path / "House.txt"
        path.write_bytes(save_bytes())
        assert _run([str(path), "--formats", "summary"]) == 0
        assert "Actual brick count: 3" in capsys.readouterr().out
        assert "does not have a .bls extension" in caplog.text

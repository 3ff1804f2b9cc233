"""Tests for the file reader API and the command-line interface."""

import json

import pytest

from bankocr.api import AccountNumberReader, InvalidOcrFileError, normalize_line_endings
from bankocr.cli import main
from bankocr.models import AccountStatus
from bankocr.parsing.validator import BAD_ROW_LENGTH, EMPTY_FILE, ILLEGAL_CHARACTERS
from bankocr.rendering import render_account_number

ILLEGIBLE_ROW = (
    " _  _  _  _  _  _  _       \n"
    "| || || || || || || | _   |\n"
    "|_||_||_||_||_||_||_| _|  |\n"
    "\n"
)

NUMBERS = ["000000000", "888888888", "222222222", "111111111"]


@pytest.fixture
def reader():
    return AccountNumberReader()


@pytest.fixture
def ocr_file(tmp_path):
    path = tmp_path / "accounts.txt"
    contents = "".join(render_account_number(n) for n in NUMBERS) + ILLEGIBLE_ROW
    path.write_text(contents, encoding="utf-8")
    return path


class TestNormalizeLineEndings:
    def test_windows(self):
        assert normalize_line_endings("a\r\nb\r\n") == "a\nb\n"

    def test_old_mac(self):
        assert normalize_line_endings("a\rb\r") == "a\nb\n"

    def test_unix_untouched(self):
        assert normalize_line_endings("a\nb\n") == "a\nb\n"


class TestAccountNumberReader:
    def test_read_file(self, reader, ocr_file):
        rows = reader.read(ocr_file)
        assert [r.data.number for r in rows] == [
            "000000000",
            "888888888",
            "222222222",
            "711111111",
            "0000000?1",
        ]
        assert [r.data.status for r in rows] == [
            AccountStatus.OK,
            AccountStatus.AMBIGUOUS,
            AccountStatus.ERROR,
            AccountStatus.OK,
            AccountStatus.ILLEGIBLE,
        ]

    def test_read_accepts_str_path(self, reader, ocr_file):
        assert len(reader.read(str(ocr_file))) == 5

    def test_read_windows_line_endings(self, reader, tmp_path):
        path = tmp_path / "windows.txt"
        contents = render_account_number("123456789").replace("\n", "\r\n")
        path.write_bytes(contents.encode("utf-8"))
        rows = reader.read(path)
        assert rows[0].data.number == "123456789"

    def test_file_not_found(self, reader, tmp_path):
        with pytest.raises(FileNotFoundError):
            reader.read(tmp_path / "missing.txt")

    def test_invalid_layout(self, reader, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("123", encoding="utf-8")
        with pytest.raises(InvalidOcrFileError) as excinfo:
            reader.read(path)
        assert excinfo.value.validation.failure_reason == ILLEGAL_CHARACTERS
        assert str(excinfo.value) == ILLEGAL_CHARACTERS

    def test_invalid_layout_is_value_error(self, reader):
        with pytest.raises(ValueError):
            reader.read_contents(render_account_number("123456789")[:-1])

    @pytest.mark.parametrize("contents", ["", None])
    def test_read_empty_contents(self, reader, contents):
        with pytest.raises(InvalidOcrFileError) as excinfo:
            reader.read_contents(contents)
        assert excinfo.value.validation.failure_reason == EMPTY_FILE

    def test_decode_skips_validation(self, reader):
        assert reader.decode("") == []
        assert reader.decode(None) == []

    def test_workers_must_be_positive(self):
        with pytest.raises(ValueError):
            AccountNumberReader(workers=0)

    def test_parallel_matches_serial(self, ocr_file):
        serial = AccountNumberReader().read(ocr_file)
        parallel = AccountNumberReader(workers=2).read(ocr_file)
        assert parallel == serial

    def test_parallel_single_row_warns(self):
        reader = AccountNumberReader(workers=4)
        with pytest.warns(UserWarning):
            rows = reader.decode(render_account_number("490867715"))
        assert rows[0].data.number == "490867715"


class TestCLI:
    def test_text_output(self, ocr_file, capsys):
        main([str(ocr_file)])
        out = capsys.readouterr().out
        assert "Account number" in out
        assert "888888888" in out
        assert "AMB" in out
        assert "888886888, 888888988, 888888880" in out
        assert "0000000?1        ILL" in out
        assert "5 account numbers: OK=2  ERR=1  ILL=1  AMB=1" in out

    def test_json_output(self, ocr_file, capsys):
        main([str(ocr_file), "--format", "json"])
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 5
        assert data[0] == {
            "number": "000000000",
            "status": "OK",
            "possible_matches": [],
        }
        assert data[1]["status"] == "AMB"
        assert sorted(data[1]["possible_matches"]) == [
            "888886888",
            "888888880",
            "888888988",
        ]

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "missing.txt")])
        assert excinfo.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "short.txt"
        path.write_text(render_account_number("123456789")[:-1], encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main([str(path)])
        assert excinfo.value.code == 1
        assert BAD_ROW_LENGTH in capsys.readouterr().err

    def test_file_required(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_render(self, capsys):
        main(["--render", "123456789"])
        assert capsys.readouterr().out == render_account_number("123456789")

    def test_render_invalid_number(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--render", "12345"])
        assert excinfo.value.code == 1
        assert "Error" in capsys.readouterr().err

"""
Tests for the command line entry point.
"""

from pathlib import Path

import pytest

from run import main


class TestMain:
    """run.py ADVERTISERS_FILE PEOPLE_FILE [OUTPUT_NAME]"""

    def test_prints_matching(self, input_files, capsys):
        adv_path, people_path = input_files(["Cat", "Dog"], ["Anna", "Bob"])

        assert main(["run.py", str(adv_path), str(people_path)]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "<advertiser,person>:<Dog,Anna>",
            "<advertiser,person>:<Cat,Bob>",
            "Max CTR: 5.0",
        ]

    def test_empty_people(self, input_files, capsys):
        adv_path, people_path = input_files(["Cat"], [])

        assert main(["run.py", str(adv_path), str(people_path)]) == 0
        assert capsys.readouterr().out.splitlines() == ["Max CTR: 0.0"]

    @pytest.mark.parametrize("argv", [["run.py"], ["run.py", "a"], ["run.py", "a", "b", "c", "d"]])
    def test_usage(self, argv, capsys):
        assert main(argv) == 2
        assert "Usage" in capsys.readouterr().err

    def test_missing_file(self, input_files, tmp_path, capsys):
        adv_path, _ = input_files(["Cat"], ["Anna"])
        missing = tmp_path / "nobody.txt"

        assert main(["run.py", str(adv_path), str(missing)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "nobody.txt" in captured.err

    def test_invalid_utf8(self, input_files, capsys):
        adv_path, people_path = input_files(["Cat"], [])
        people_path.write_bytes(b"Ren\xe9e\n")

        assert main(["run.py", str(adv_path), str(people_path)]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "people.txt" in captured.err

    def test_writes_output_files(self, input_files, tmp_path, capsys):
        adv_path, people_path = input_files(["Cat", "Dog"], ["Anna", "Bob"])
        name = str(tmp_path / "out")

        assert main(["run.py", str(adv_path), str(people_path), name]) == 0

        for ext in (".csv", ".json", ".pdf"):
            assert Path(name + ext).stat().st_size > 0
        assert "Max CTR: 5.0" in capsys.readouterr().out

    def test_log_level_from_environment(self, input_files, monkeypatch, capsys):
        adv_path, people_path = input_files(["Cat"], ["Anna"])
        monkeypatch.setenv("ADMATCH_LOG_LEVEL", "DEBUG")

        assert main(["run.py", str(adv_path), str(people_path)]) == 0
        assert "pass 1" in capsys.readouterr().err

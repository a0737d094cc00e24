"""
Tests for the command line entry point (local storage only)
"""

import json

import pytest

from sign_library.main import main
from tests.helpers import GREEN, RED, make_png


@pytest.fixture
def upload_dir(tmp_path):
    source = tmp_path / "incoming"
    source.mkdir()
    (source / "a_stop.png").write_bytes(make_png(RED))
    (source / "b_exit.png").write_bytes(make_png(GREEN))
    (source / "c_readme.txt").write_text("not an image")
    return source


class TestUploadCommand:

    def test_upload_with_yes(self, tmp_path, upload_dir, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        bucket = tmp_path / "bucket"

        code = main(["--local-dir", str(bucket), "upload", str(upload_dir), "--yes", "--report", "run.json"])

        assert code == 0
        assert (bucket / "library" / "R001.png").exists()
        assert (bucket / "library" / "G001.png").exists()

        report = json.loads((tmp_path / "data" / "reports" / "run.json").read_text())
        assert report["succeeded_count"] == 2

        out = capsys.readouterr().out
        assert "Not an image:   1" in out

    def test_declined_confirmation_uploads_nothing(self, tmp_path, upload_dir, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("builtins.input", lambda prompt: "n")
        bucket = tmp_path / "bucket"

        code = main(["--local-dir", str(bucket), "upload", str(upload_dir)])

        assert code == 0
        assert not (bucket / "library").exists()

    def test_nothing_to_upload(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        text = tmp_path / "notes.txt"
        text.write_text("hello")

        assert main(["--local-dir", str(tmp_path / "bucket"), "upload", str(text), "--yes"]) == 1


class TestOtherCommands:

    def test_library_listing(self, tmp_path, upload_dir, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        bucket = str(tmp_path / "bucket")
        main(["--local-dir", bucket, "upload", str(upload_dir), "--yes"])
        capsys.readouterr()

        assert main(["--local-dir", bucket, "library", "--color", "G"]) == 0

        out = capsys.readouterr().out
        assert "G001.png" in out
        assert "R001.png" not in out

    def test_classify(self, upload_dir, capsys):
        assert main(["classify", str(upload_dir)]) == 0

        out = capsys.readouterr().out
        assert "→ R (Red)" in out
        assert "→ G (Green)" in out
        assert "c_readme.txt: Not an image" in out


class TestArgumentHandling:

    def test_local_dir_after_subcommand(self, tmp_path, upload_dir, monkeypatch):
        monkeypatch.chdir(tmp_path)
        bucket = tmp_path / "bucket"

        code = main(["upload", str(upload_dir), "--local-dir", str(bucket), "--yes"])

        assert code == 0
        assert (bucket / "library" / "R001.png").exists()

    def test_local_dir_after_library_subcommand(self, tmp_path, upload_dir, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        bucket = str(tmp_path / "bucket")
        main(["--local-dir", bucket, "upload", str(upload_dir), "--yes"])
        capsys.readouterr()

        assert main(["library", "--local-dir", bucket, "--color", "R"]) == 0
        assert "R001.png" in capsys.readouterr().out

    def test_missing_path_is_reported_and_skipped(self, tmp_path, upload_dir, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        bucket = tmp_path / "bucket"
        missing = str(tmp_path / "nope.png")

        code = main(["--local-dir", str(bucket), "upload", missing, str(upload_dir), "--yes"])

        assert code == 0
        assert "Cannot read" in capsys.readouterr().out
        assert (bucket / "library" / "G001.png").exists()

    def test_only_missing_paths_exit_cleanly(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)

        code = main(["--local-dir", str(tmp_path / "bucket"), "upload", str(tmp_path / "nope.png"), "--yes"])

        assert code == 1
        out = capsys.readouterr().out
        assert "Cannot read" in out
        assert "Nothing to upload" in out

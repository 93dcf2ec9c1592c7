"""Unit tests for the credential source and the resume-file locator."""

from __future__ import annotations

import pytest

from resumerefresh import config
from resumerefresh.core.errors import MissingCredentialsError, PreconditionError
from resumerefresh.core.types import Credentials
from resumerefresh.inputs.credentials import load_credentials
from resumerefresh.inputs.resume import find_resume_file, resume_locator


class TestLoadCredentials:
    def test_reads_both_values(self):
        creds = load_credentials({config.USERNAME_ENV: "alice", config.PASSWORD_ENV: "pw"})
        assert creds == Credentials("alice", "pw")
        assert creds.complete

    @pytest.mark.parametrize(
        "environ, missing",
        [
            ({}, [config.USERNAME_ENV, config.PASSWORD_ENV]),
            ({config.USERNAME_ENV: "alice"}, [config.PASSWORD_ENV]),
            ({config.USERNAME_ENV: "  ", config.PASSWORD_ENV: "pw"}, [config.USERNAME_ENV]),
        ],
    )
    def test_missing_values_raise(self, environ, missing):
        with pytest.raises(MissingCredentialsError) as info:
            load_credentials(environ)
        for name in missing:
            assert name in str(info.value)
        assert isinstance(info.value, PreconditionError)

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv(config.USERNAME_ENV, "bob")
        monkeypatch.setenv(config.PASSWORD_ENV, "hunter2")
        assert load_credentials().username == "bob"

    def test_repr_hides_secret(self):
        assert "hunter2" not in repr(Credentials("bob", "hunter2"))


class TestFindResumeFile:
    def test_first_supported_file_by_name(self, tmp_path):
        (tmp_path / "a-notes.txt").write_text("x")
        (tmp_path / "b-resume.PDF").write_bytes(b"%PDF")
        (tmp_path / "c-resume.docx").write_bytes(b"doc")
        assert find_resume_file(tmp_path) == tmp_path / "b-resume.PDF"

    def test_all_supported_extensions(self, tmp_path):
        for ext in config.SUPPORTED_RESUME_EXTENSIONS:
            target = tmp_path / ext.strip(".")
            target.mkdir()
            (target / f"resume{ext}").write_bytes(b"x")
            assert find_resume_file(target) == target / f"resume{ext}"

    def test_no_supported_file(self, tmp_path):
        (tmp_path / "resume.txt").write_text("x")
        assert find_resume_file(tmp_path) is None

    def test_directories_are_skipped(self, tmp_path):
        (tmp_path / "folder.pdf").mkdir()
        assert find_resume_file(tmp_path) is None

    def test_missing_directory(self, tmp_path):
        assert find_resume_file(tmp_path / "nope") is None

    def test_locator_scans_lazily(self, tmp_path):
        locate = resume_locator(tmp_path)
        assert locate() is None
        (tmp_path / "resume.rtf").write_text("{\\rtf1}")
        assert locate() == tmp_path / "resume.rtf"

"""Tests for local document discovery."""

import os

import pytest

from mdsect_mcp.discovery import discover_doc_files, is_sensitive_filename, is_within


class TestSensitiveFilename:
    def test_env_files(self):
        assert is_sensitive_filename(".env") is True
        assert is_sensitive_filename("config/.env.local") is True

    def test_key_files(self):
        assert is_sensitive_filename("server.pem") is True
        assert is_sensitive_filename("id_rsa.pub") is True
        assert is_sensitive_filename("secrets.md") is True

    def test_normal_files_pass(self):
        assert is_sensitive_filename("README.md") is False
        assert is_sensitive_filename("docs/guide.md") is False

    def test_case_insensitive(self):
        assert is_sensitive_filename(".ENV") is True
        assert is_sensitive_filename("Credentials.md") is True


class TestIsWithin:
    def test_inside(self, tmp_path):
        assert is_within(tmp_path / "a" / "b.md", tmp_path) is True

    def test_outside(self, tmp_path):
        assert is_within(tmp_path.parent, tmp_path) is False


class TestDiscoverDocFiles:
    def test_finds_docs(self, sample_doc_dir):
        files = discover_doc_files(str(sample_doc_dir))
        assert files == ["README.md", "docs/api.md", "docs/guide.md"]

    def test_gitignore(self, sample_doc_dir):
        files = discover_doc_files(str(sample_doc_dir))
        assert not any(f.startswith("drafts/") for f in files)

    def test_extra_ignore_patterns(self, sample_doc_dir):
        files = discover_doc_files(str(sample_doc_dir), extra_ignore_patterns=["docs/api.md"])
        assert "docs/api.md" not in files
        assert "docs/guide.md" in files

    def test_skips_sensitive_docs(self, tmp_path):
        (tmp_path / "README.md").write_text("# Readme\n")
        (tmp_path / "secrets.md").write_text("# Keys\n")
        assert discover_doc_files(str(tmp_path)) == ["README.md"]

    def test_hidden_directories(self, tmp_path):
        hidden = tmp_path / ".notes"
        hidden.mkdir()
        (hidden / "todo.md").write_text("# Todo\n")
        assert discover_doc_files(str(tmp_path)) == []
        assert discover_doc_files(str(tmp_path), include_hidden=True) == [".notes/todo.md"]

    def test_max_depth(self, tmp_path):
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        (deep / "deep.md").write_text("# Deep\n")
        (tmp_path / "top.md").write_text("# Top\n")
        assert discover_doc_files(str(tmp_path), max_depth=1) == ["top.md"]
        assert discover_doc_files(str(tmp_path), max_depth=2) == ["a/b/deep.md", "top.md"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinks_skipped_by_default(self, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "secret.md").write_text("# Outside\n")
        base = tmp_path / "base"
        base.mkdir()
        (base / "README.md").write_text("# Readme\n")
        (base / "link").symlink_to(outside, target_is_directory=True)

        assert discover_doc_files(str(base)) == ["README.md"]
        # Even when following symlinks, targets outside the base are rejected
        assert discover_doc_files(str(base), follow_symlinks=True) == ["README.md"]

    def test_nonexistent_path(self, tmp_path):
        with pytest.raises(ValueError):
            discover_doc_files(str(tmp_path / "nope"))

    def test_not_a_directory(self, tmp_path):
        path = tmp_path / "file.md"
        path.write_text("# File\n")
        with pytest.raises(ValueError):
            discover_doc_files(str(path))

"""Tests for README finder utilities."""

import pytest

from pattern_hub.mcp_types import DiscoveryError
from pattern_hub.utils.readme_finder import find_readme_files, is_readme_file, readme_slug


class TestReadmeFinder:
    """Test README finder utilities."""

    def test_find_readmes_sorted(self, tmp_path):
        """Should find README-*.md files sorted by filename."""
        (tmp_path / "README-vitracoat.md").write_text("# V")
        (tmp_path / "README-laboratory.md").write_text("# L")

        paths = find_readme_files(tmp_path)

        assert [p.name for p in paths] == ["README-laboratory.md", "README-vitracoat.md"]

    def test_only_top_level(self, tmp_path):
        """Should not descend into subdirectories."""
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "README-hidden.md").write_text("# Hidden")

        assert find_readme_files(tmp_path) == []

    def test_ignores_directories_named_like_readmes(self, tmp_path):
        """Should only return files."""
        (tmp_path / "README-dir.md").mkdir()

        assert find_readme_files(tmp_path) == []

    def test_accepts_string_path(self, tmp_path):
        """Should accept a string directory."""
        (tmp_path / "README-sales.md").write_text("# S")

        assert len(find_readme_files(str(tmp_path))) == 1

    def test_missing_directory(self, tmp_path):
        """Should raise DiscoveryError when the directory does not exist."""
        with pytest.raises(DiscoveryError):
            find_readme_files(tmp_path / "missing")

    def test_is_readme_file(self, tmp_path):
        """Should require a non-empty name between prefix and suffix."""
        assert is_readme_file(tmp_path / "README-x.md")
        assert not is_readme_file(tmp_path / "README-.md")
        assert not is_readme_file(tmp_path / "README.md")
        assert not is_readme_file(tmp_path / "README-x.txt")

    def test_readme_slug_lowercases(self, tmp_path):
        """Should derive a lowercase slug."""
        assert readme_slug(tmp_path / "README-Vitracoat.md") == "vitracoat"

"""Unit tests for the repository list reader."""

from pathlib import Path

import pytest

from repomigrate.repo_list import InputMalformed, InputUnreadable, read_repository_file


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "repos.csv"
    path.write_text(content)
    return path


@pytest.mark.unit
class TestReadRepositoryFile:
    """Tests for read_repository_file."""

    def test_returns_first_field_in_order(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "repoA,x\nrepoB,y\n")

        assert read_repository_file(path) == ["repoA", "repoB"]

    def test_single_column_rows(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "repoA\nrepoB\nrepoC")

        assert read_repository_file(path) == ["repoA", "repoB", "repoC"]

    def test_first_row_is_not_a_header(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "repository,owner\nrepoA,team\n")

        assert read_repository_file(path) == ["repository", "repoA"]

    def test_empty_first_field_preserved(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "repoA,x\n,y\nrepoB,z\n")

        assert read_repository_file(path) == ["repoA", "", "repoB"]

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "repoA\n\nrepoB,y\n\n")

        assert read_repository_file(path) == ["repoA", "repoB"]

    def test_rows_with_different_field_counts_accepted(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "repoA\nrepoB,x,y\n")

        assert read_repository_file(path) == ["repoA", "repoB"]

    def test_quoted_field_with_comma(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '"git@example.com:org/a,b.git",x\n')

        assert read_repository_file(path) == ["git@example.com:org/a,b.git"]

    def test_windows_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "repos.csv"
        path.write_bytes(b"repoA,x\r\nrepoB,y\r\n")

        assert read_repository_file(path) == ["repoA", "repoB"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "")

        assert read_repository_file(path) == []

    def test_missing_file_raises_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(InputUnreadable) as exc_info:
            read_repository_file(tmp_path / "missing.csv")

        assert "missing.csv" in str(exc_info.value)

    def test_directory_raises_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(InputUnreadable):
            read_repository_file(tmp_path)

    def test_undecodable_file_raises_unreadable(self, tmp_path: Path) -> None:
        path = tmp_path / "repos.csv"
        path.write_bytes(b"\xff\xfe\xfa,x\n")

        with pytest.raises(InputUnreadable):
            read_repository_file(path)

    def test_unterminated_quote_raises_malformed(self, tmp_path: Path) -> None:
        path = _write(tmp_path, 'repoA,x\n"repoB,y\n')

        with pytest.raises(InputMalformed):
            read_repository_file(path)

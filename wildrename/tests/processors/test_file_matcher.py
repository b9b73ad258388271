"""Unit tests for command-line argument resolution."""

import pytest

from wildrename.errors import NoMatchingFilesError
from wildrename.processors.file_matcher import find_candidates, matches, resolve_arguments


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory with test files."""
    for filename in ["b.htm", "a.htm", "c.txt", "file?.txt", "a.html"]:
        (tmp_path / filename).touch()
    # Directories never count as candidates
    (tmp_path / "d.htm").mkdir()

    return tmp_path


class TestMatches:
    """Tests for single-wildcard filename matching."""

    @pytest.mark.parametrize(
        "pattern,filename,expected",
        [
            ("*.htm", "a.htm", True),
            ("*.htm", "a.html", False),
            ("img*", "img007.png", True),
            ("a*b", "axxb", True),
            ("a*b", "ab", True),
            ("file1.htm", "file1.htm", True),
            ("file1.htm", "file2.htm", False),
            ("*", "anything", True),
        ],
    )
    def test_wildcard_matching(self, pattern, filename, expected):
        assert matches(pattern, filename) is expected

    def test_question_mark_is_literal(self):
        assert matches("file?.txt*", "file?.txt") is True
        assert matches("file?.txt*", "file1.txt") is False

    def test_brackets_are_literal(self):
        assert matches("[ab]*", "[ab]1") is True
        assert matches("[ab]*", "a1") is False

    def test_matching_is_case_sensitive(self):
        assert matches("*.htm", "A.HTM") is False


class TestFindCandidates:
    """Tests for directory scanning."""

    def test_lexical_order_and_files_only(self, temp_dir):
        assert find_candidates("*.htm", temp_dir) == ["a.htm", "b.htm"]

    def test_no_matches(self, temp_dir):
        assert find_candidates("*.xyz", temp_dir) == []


class TestResolveArguments:
    """Tests for resolve_arguments."""

    def test_single_wildcard_argument_scans_directory(self, temp_dir):
        search_pattern, candidates = resolve_arguments(["*.htm"], temp_dir)

        assert search_pattern == "*.htm"
        assert candidates == ["a.htm", "b.htm"]

    def test_expanded_arguments_keep_input_order(self, temp_dir):
        """Filenames already expanded by the shell are used as given."""
        search_pattern, candidates = resolve_arguments(["b.htm", "a.htm"], temp_dir)

        assert search_pattern == "b.htm a.htm"
        assert candidates == ["b.htm", "a.htm"]

    def test_single_literal_argument(self, temp_dir):
        search_pattern, candidates = resolve_arguments(["c.txt"], temp_dir)

        assert search_pattern == "c.txt"
        assert candidates == ["c.txt"]

    def test_no_matching_files_raises(self, temp_dir):
        with pytest.raises(NoMatchingFilesError, match="No files matching"):
            resolve_arguments(["*.xyz"], temp_dir)

    def test_no_matching_files_is_file_not_found(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            resolve_arguments(["*.xyz"], temp_dir)

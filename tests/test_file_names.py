"""Tests for turning listed object keys into file names."""

from s3_browser.objectstorage.browser import extract_file_names


class TestExtractFileNames:
    """Test filtering, prefix stripping and ordering of listed keys."""

    def test_folder_marker_and_subfolders_dropped(self):
        """Test the folder itself and subfolder markers are excluded."""
        keys = ["reports/2024/", "reports/2024/a.pdf", "reports/2024/sub/"]

        assert extract_file_names(keys, "reports/2024/") == ["a.pdf"]

    def test_sorted_not_insertion_order(self):
        """Test names come back sorted regardless of listing order."""
        keys = ["x/b.txt", "x/a.txt"]

        assert extract_file_names(keys, "x/") == ["a.txt", "b.txt"]

    def test_sort_is_codepoint_order(self):
        """Test sorting is plain string ordering, not numeric or locale aware."""
        keys = ["x/2.txt", "x/10.txt", "x/b.txt", "x/B.txt"]

        assert extract_file_names(keys, "x/") == ["10.txt", "2.txt", "B.txt", "b.txt"]

    def test_empty_listing(self):
        """Test no keys yields no names."""
        assert extract_file_names([], "x/") == []

    def test_only_markers(self):
        """Test a folder holding only markers yields no names."""
        assert extract_file_names(["x/", "x/sub/"], "x/") == []

    def test_root_folder(self):
        """Test listing the bucket root keeps keys as they are."""
        keys = ["readme.md", "data/", "a.csv"]

        assert extract_file_names(keys, "") == ["a.csv", "readme.md"]

    def test_custom_delimiter(self):
        """Test markers are recognised by the configured delimiter."""
        keys = ["x|", "x|a", "x|sub|", "x|b/"]

        assert extract_file_names(keys, "x|", delimiter="|") == ["a", "b/"]

    def test_every_other_key_appears_once(self):
        """Test all non-marker keys appear exactly once with prefix stripped."""
        folder = "data/"
        keys = [f"data/file{i:03d}.bin" for i in range(50)] + ["data/", "data/s/"]

        names = extract_file_names(keys, folder)

        assert len(names) == 50
        assert set(names) == {f"file{i:03d}.bin" for i in range(50)}
        assert all(a < b for a, b in zip(names, names[1:]))

    def test_accepts_any_iterable(self):
        """Test keys may be supplied lazily."""
        keys = (k for k in ["x/c", "x/a"])

        assert extract_file_names(keys, "x/") == ["a", "c"]

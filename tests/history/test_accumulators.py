"""Tests for contributor and activity accumulators."""

from repo_pulse.history.accumulators import (
    ActivityAccumulator,
    ContributorAccumulator,
    iter_numstat_body,
    parse_numstat_line,
)


class TestParseNumstatLine:
    def test_valid_line(self):
        assert parse_numstat_line("10\t2\tsrc/app.py") == (10, 2, "src/app.py")

    def test_binary_marker_rejected(self):
        assert parse_numstat_line("-\t-\tlogo.png") is None

    def test_wrong_field_count(self):
        assert parse_numstat_line("10\t2") is None
        assert parse_numstat_line("10\t2\ta\tb") is None

    def test_non_numeric(self):
        assert parse_numstat_line("ten\t2\tREADME.md") is None

    def test_negative_counts_rejected(self):
        assert parse_numstat_line("-1\t2\tREADME.md") is None

    def test_path_with_spaces(self):
        assert parse_numstat_line("1\t0\tdocs/my notes.md") == (1, 0, "docs/my notes.md")


class TestIterNumstatBody:
    def test_blank_lines_ignored(self):
        body = "\n1\t1\ta.py\n\n2\t0\tb.py\n"
        assert list(iter_numstat_body(body)) == [(1, 1, "a.py"), (2, 0, "b.py")]

    def test_malformed_yields_none(self):
        assert list(iter_numstat_body("Merge branch 'main'\n3\t1\tc.py")) == [None, (3, 1, "c.py")]

    def test_crlf_line_endings(self):
        assert list(iter_numstat_body("1\t2\ta.py\r\n")) == [(1, 2, "a.py")]


class TestContributorAccumulator:
    def test_first_commit_initializes_author(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", []))
        stats = acc.finalize()["Alice"]
        assert (stats.commits, stats.lines_added, stats.lines_deleted, stats.files_changed) == (
            1,
            0,
            0,
            0,
        )

    def test_sums_structured_changes(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", [("a.py", 10, 2), ("b.py", 1, 1)]))
        stats = acc.finalize()["Alice"]
        assert stats.lines_added == 11
        assert stats.lines_deleted == 3
        assert stats.files_changed == 2

    def test_files_unique_across_commits(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", [("a.py", 1, 0)]))
        acc.add(make_commit("Alice", "2024-01-02", [("a.py", 2, 1), ("b.py", 1, 0)]))
        stats = acc.finalize()["Alice"]
        assert stats.commits == 2
        assert stats.files_changed == 2

    def test_same_file_counted_per_author(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", [("a.py", 1, 0)]))
        acc.add(make_commit("Bob", "2024-01-01", [("a.py", 1, 0)]))
        result = acc.finalize()
        assert result["Alice"].files_changed == 1
        assert result["Bob"].files_changed == 1

    def test_binary_entries_excluded(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", [("logo.png", None, None), ("a.py", 3, 1)]))
        stats = acc.finalize()["Alice"]
        assert stats.lines_added == 3
        assert stats.lines_deleted == 1
        assert stats.files_changed == 1

    def test_fallback_body_parsed(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", body="4\t1\ta.py\n2\t2\tb.py"))
        stats = acc.finalize()["Alice"]
        assert stats.lines_added == 6
        assert stats.lines_deleted == 3
        assert stats.files_changed == 2

    def test_fallback_skips_malformed_and_binary(self, make_commit):
        acc = ContributorAccumulator()
        body = "-\t-\tlogo.png\nnot numstat\n5\tx\tc.py\n1\t0\td.py"
        acc.add(make_commit("Alice", "2024-01-01", body=body))
        stats = acc.finalize()["Alice"]
        assert stats.lines_added == 1
        assert stats.lines_deleted == 0
        assert stats.files_changed == 1
        assert acc.skipped_lines == 3

    def test_structured_changes_take_precedence_over_body(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", [], body="100\t100\tignored.py"))
        stats = acc.finalize()["Alice"]
        assert stats.lines_added == 0
        assert stats.files_changed == 0

    def test_no_changes_no_body_counts_commit_only(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01"))
        stats = acc.finalize()["Alice"]
        assert stats.commits == 1
        assert stats.lines_added == 0

    def test_finalize_exposes_counts_not_sets(self, make_commit):
        acc = ContributorAccumulator()
        acc.add(make_commit("Alice", "2024-01-01", [("a.py", 1, 0)]))
        assert isinstance(acc.finalize()["Alice"].files_changed, int)


class TestActivityAccumulator:
    def test_counts_per_day(self, make_commit):
        acc = ActivityAccumulator()
        acc.add(make_commit("Alice", "2024-01-01T01:00:00"))
        acc.add(make_commit("Bob", "2024-01-01T23:00:00"))
        acc.add(make_commit("Alice", "2024-01-05T12:00:00"))
        assert dict(acc.counts) == {"2024-01-01": 2, "2024-01-05": 1}

    def test_uses_timestamp_prefix_without_tz_conversion(self, make_commit):
        acc = ActivityAccumulator()
        acc.add(make_commit("Alice", "2024-01-01T23:30:00-05:00"))
        assert dict(acc.counts) == {"2024-01-01": 1}

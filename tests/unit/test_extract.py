# SPDX-FileCopyrightText: 2026 The BlogRunner Authors
# SPDX-License-Identifier: AGPL-3.0-or-later

from blogrunner.probes.extract import extract_between_markers, extract_text_between_markers, iter_text_runs


def test_extract_between_markers_returns_inner_text():
    assert extract_between_markers("...m1HELLOm2...", "m1", "m2") == "HELLO"


def test_extract_between_markers_missing_close_marker():
    assert extract_between_markers("...m1HELLO...", "m1", "m2") is None
    assert extract_between_markers("no markers here", "m1", "m2") is None


def test_extract_between_markers_is_non_greedy_and_line_bound():
    assert extract_between_markers("m1a m2 b m2", "m1", "m2") == "a "
    assert extract_between_markers("m1a\nbm2", "m1", "m2") is None


def test_extract_between_markers_escapes_regex_characters():
    assert extract_between_markers("x[a]+yz(b)", "[a]+", "(b)") == "yz"


def test_iter_text_runs_keeps_entities_and_skips_scripts():
    page = "<p>one &amp; two</p><script>var x = 'm1';</script><!-- m1 --><b>three</b>"
    runs = iter_text_runs(page)
    assert "one &amp; two" in runs
    assert "three" in runs
    assert not any("m1" in run for run in runs)


def test_extract_text_between_markers_only_matches_within_a_text_run():
    page = "<h2>m1&lt;b&gt;m2</h2><h2>n1<b>x</b>n2</h2>"
    assert extract_text_between_markers(page, "m1", "m2") == "&lt;b&gt;"
    assert extract_text_between_markers(page, "n1", "n2") is None


def test_extract_text_between_markers_ignores_attribute_values():
    page = '<a title="m1x m2">link</a>'
    assert extract_text_between_markers(page, "m1", "m2") is None
    assert extract_between_markers(page, "m1", "m2") == "x "

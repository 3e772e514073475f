# tests/50_core/test_trackers.py
"""Tests for the per-file BraceDepth and DebugRegion trackers."""

import oxify.classify as mod_classify


def test_brace_depth_peek_does_not_commit() -> None:
    depth = mod_classify.BraceDepth()
    assert depth.peek("namespace N {") == 1
    assert depth.depth == 0
    assert depth.at_top_level


def test_brace_depth_commit() -> None:
    depth = mod_classify.BraceDepth()
    depth.commit(depth.peek("class A { {"))
    assert depth.depth == 2  # noqa: PLR2004
    assert not depth.at_top_level


def test_brace_depth_tolerates_negative() -> None:
    depth = mod_classify.BraceDepth()
    depth.commit(depth.peek("}}"))
    assert depth.depth == -2  # noqa: PLR2004
    assert not depth.at_top_level


def test_debug_region_start_applies_to_own_line() -> None:
    region = mod_classify.DebugRegion()
    region.enter("//OX.DEBUGSTART")
    assert region.inside
    assert not region.retains(debug_enabled=False)
    assert region.retains(debug_enabled=True)


def test_debug_region_end_applies_after_own_line() -> None:
    region = mod_classify.DebugRegion(inside=True)
    line = "//OX.DEBUGEND"
    region.enter(line)
    assert not region.retains(debug_enabled=False)
    region.leave(line)
    assert not region.inside
    assert region.retains(debug_enabled=False)


def test_debug_region_ignores_plain_lines() -> None:
    region = mod_classify.DebugRegion()
    region.enter("int x;")
    region.leave("int x;")
    assert not region.inside

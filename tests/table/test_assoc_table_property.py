# topmark:header:start
#
#   project      : FileAssoc
#   file         : test_assoc_table_property.py
#   file_relpath : tests/table/test_assoc_table_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for association-table invariants.

Random operation sequences (add / remove / remove_all over a small pool of
rules and file types) are applied to fresh tables and the following are
asserted:

1) extension bindings are single-valued and last write wins,
2) generic rules always take precedence over extension rules,
3) ``remove_all`` is complete and idempotent,
4) copies are fully independent in both directions,
5) dumping associations and re-adding them reproduces every classification.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fileassoc.labels import FileTypeLabel
from fileassoc.matchers import (
    ExactNameMatcher,
    ExtensionMatcher,
    FileNameMatcher,
    WildcardMatcher,
)
from fileassoc.table import FileTypeAssocTable
from tests.strategies_fileassoc import (
    BASE_NAMES,
    EXTENSIONS,
    FILE_NAMES,
    LABELS,
    Op,
    build_table,
    classify_all,
    s_extension_matcher,
    s_generic_matcher,
    s_label,
    s_op,
    s_ops,
)

Table = FileTypeAssocTable[FileTypeLabel]


@given(ops=s_ops(), ext=st.sampled_from(EXTENSIONS), a=s_label(), b=s_label())
def test_extension_last_write_wins(
    ops: list[Op], ext: str, a: FileTypeLabel, b: FileTypeLabel
) -> None:
    """After two writes to one extension only the second binding remains."""
    table: Table = build_table(ops)
    table.add(ExtensionMatcher(ext), a)
    table.add(ExtensionMatcher(ext.upper()), b)

    assert table.find_by_matcher(ExtensionMatcher(ext)) is b
    assert table.is_associated_with(b, ExtensionMatcher(ext))
    if a is not b:
        assert not table.is_associated_with(a, ExtensionMatcher(ext))


@given(ext_matcher=s_extension_matcher(), generic=s_generic_matcher(), a=s_label(), b=s_label())
def test_generic_precedence(
    ext_matcher: FileNameMatcher, generic: FileNameMatcher, a: FileTypeLabel, b: FileTypeLabel
) -> None:
    """Any name a generic rule accepts is classified by that rule."""
    for order in ((ext_matcher, a, generic, b), (generic, b, ext_matcher, a)):
        table: Table = FileTypeAssocTable()
        table.add(order[0], order[1])  # type: ignore[arg-type]
        table.add(order[2], order[3])  # type: ignore[arg-type]
        for name in FILE_NAMES:
            if generic.accept(name):
                assert table.find(name) is b
            elif ext_matcher.accept(name):
                assert table.find(name) is a
            else:
                assert table.find(name) is None


@given(ops=s_ops(), victim=s_label())
def test_remove_all_is_complete_and_idempotent(ops: list[Op], victim: FileTypeLabel) -> None:
    """remove_all leaves no trace of the victim and touches nothing else."""
    table: Table = build_table(ops)
    others = {id(ft): table.associations_for(ft) for ft in LABELS if ft is not victim}
    had_any: bool = table.has_associations(victim)

    assert table.remove_all(victim) is had_any
    assert not table.has_associations(victim)
    assert table.associations_for(victim) == []
    assert table.remove_all(victim) is False
    assert all(table.find(name) is not victim for name in FILE_NAMES)
    for ft in LABELS:
        if ft is not victim:
            assert table.associations_for(ft) == others[id(ft)]


@given(ops=s_ops(), before=s_ops(max_size=10), after=s_ops(max_size=10))
def test_copy_independence(ops: list[Op], before: list[Op], after: list[Op]) -> None:
    """Mutating either side of a copy never changes the other's answers."""
    original: Table = build_table(ops)
    clone: Table = original.copy()
    expected = classify_all(original)

    for op in before:
        op.apply(original)
    assert classify_all(clone) == expected

    frozen = classify_all(original)
    for op in after:
        op.apply(clone)
    assert classify_all(original) == frozen


@given(ops=s_ops())
def test_round_trip_preserves_order(ops: list[Op]) -> None:
    """Re-adding iter_associations() into a fresh table reproduces every answer."""
    table: Table = build_table(ops)
    rebuilt: Table = FileTypeAssocTable()
    for assoc in table.iter_associations():
        rebuilt.add(assoc.matcher, assoc.file_type)

    assert classify_all(rebuilt) == classify_all(table)
    assert len(rebuilt) == len(table)


@given(
    exts=st.dictionaries(st.sampled_from(EXTENSIONS), s_label()),
    names=st.dictionaries(st.sampled_from(BASE_NAMES), s_label()),
)
def test_round_trip_via_associations_for(
    exts: dict[str, FileTypeLabel], names: dict[str, FileTypeLabel]
) -> None:
    """Dumping per file type with associations_for() and re-adding is loss-free."""
    table: Table = FileTypeAssocTable()
    for ext, ft in exts.items():
        table.add(ExtensionMatcher(ext), ft)
    for base, ft in names.items():
        table.add(ExactNameMatcher(base), ft)

    rebuilt: Table = FileTypeAssocTable()
    for ft in LABELS:
        for matcher in table.associations_for(ft):
            rebuilt.add(matcher, ft)

    assert classify_all(rebuilt) == classify_all(table)
    for ft in LABELS:
        assert set(rebuilt.associations_for(ft)) == set(table.associations_for(ft))


def test_round_trip_via_associations_for_regroups_overlapping_rules() -> None:
    """Rebuilding per file type regroups generic rules, so overlaps can flip."""
    setup_cfg = FileTypeLabel("setup-cfg")
    ini = FileTypeLabel("ini")
    table: Table = FileTypeAssocTable()
    table.add(ExactNameMatcher("setup.cfg"), setup_cfg)
    table.add(WildcardMatcher("*.cfg"), ini)

    rebuilt: Table = FileTypeAssocTable()
    for ft in (ini, setup_cfg):
        for matcher in table.associations_for(ft):
            rebuilt.add(matcher, ft)

    # The pairs survive...
    for ft in (ini, setup_cfg):
        assert rebuilt.associations_for(ft) == table.associations_for(ft)
    # ...but the earlier rule now belongs to the other type.
    assert table.find("setup.cfg") is setup_cfg
    assert rebuilt.find("setup.cfg") is ini
    assert rebuilt.find("tox.cfg") is table.find("tox.cfg") is ini


@given(op=s_op(), ops=s_ops())
def test_has_associations_agrees_with_associations_for(op: Op, ops: list[Op]) -> None:
    """has_associations(x) is True exactly when associations_for(x) is non-empty."""
    table: Table = build_table([*ops, op])
    for ft in LABELS:
        assert table.has_associations(ft) is bool(table.associations_for(ft))


@pytest.mark.hypothesis_slow
@settings(max_examples=500, deadline=None)
@given(ops=s_ops(max_size=80))
def test_len_matches_enumeration(ops: list[Op]) -> None:
    """len() equals the number of associations reported per file type."""
    table: Table = build_table(ops)
    assert len(table) == sum(len(table.associations_for(ft)) for ft in LABELS)

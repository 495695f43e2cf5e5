"""
Tests for the tree comparator.

Tests:
- Identical documents
- Missing / extra keys and their symmetry
- Type and array-length mismatches
- Path rendering
- Inputs are never modified
"""
import copy

import pytest

from docsync.comparator import compare
from docsync.document_model import DiffKind, DocumentPath


RESUME = {
    "name": "山田太郎",
    "summary": "バックエンドエンジニア",
    "experience": [
        {"company": "株式会社Hacobu", "title": "エンジニア", "tech": ["Go", "AWS"]},
        {"company": "フリーランス", "title": "リードエンジニア", "tech": []},
    ],
    "certifications": [{"name": "基本情報技術者", "date": "2015-04"}],
    "gpa": 3.5,
    "active": True,
    "notes": None,
}


def kinds(diffs):
    return [d.kind for d in diffs]


# ============================================================================
# IDENTICAL INPUTS
# ============================================================================


class TestIdentical:

    @pytest.mark.parametrize("doc", [
        RESUME, {}, [], "テキスト", 0, 1.5, True, None, [[1, [2]], {"a": []}],
    ])
    def test_compare_with_itself_is_empty(self, doc):
        assert compare(doc, copy.deepcopy(doc)) == []


# ============================================================================
# SCENARIOS
# ============================================================================


class TestScenarios:

    def test_differing_title(self):
        diffs = compare({"title": "エンジニア"}, {"title": "Engineer"})
        assert len(diffs) == 1
        diff = diffs[0]
        assert diff.kind == DiffKind.VALUE_MISMATCH
        assert str(diff.path) == "title"
        assert diff.source_value == "エンジニア"
        assert diff.target_value == "Engineer"

    def test_missing_subtree_is_not_descended(self):
        diffs = compare({"a": {"b": 1}}, {})
        assert len(diffs) == 1
        assert diffs[0].kind == DiffKind.MISSING
        assert str(diffs[0].path) == "a"
        assert diffs[0].source_value == {"b": 1}

    def test_shorter_target_array(self):
        diffs = compare({"list": [1, 2, 3]}, {"list": [1, 2]})
        assert len(diffs) == 1
        diff = diffs[0]
        assert diff.kind == DiffKind.ARRAY_LENGTH_MISMATCH
        assert diff.source_length == 3
        assert diff.target_length == 2
        assert str(diff.path) == "list"


# ============================================================================
# KEY COVERAGE
# ============================================================================


class TestMissingAndExtra:

    def test_extra_key_reported_after_source_keys(self):
        diffs = compare({"a": 1, "b": 2}, {"z": 0, "a": 9, "b": 2})
        assert kinds(diffs) == [DiffKind.VALUE_MISMATCH, DiffKind.EXTRA]
        assert str(diffs[1].path) == "z"
        assert diffs[1].target_value == 0

    def test_missing_and_extra_are_symmetric(self):
        source = {"a": 1, "nested": {"x": [1], "y": "y"}, "only_src": True}
        target = {"a": 1, "nested": {"x": [1], "z": "z"}, "only_tgt": None}

        forward = compare(source, target)
        backward = compare(target, source)

        missing = {str(d.path) for d in forward if d.kind == DiffKind.MISSING}
        extra_back = {str(d.path) for d in backward if d.kind == DiffKind.EXTRA}
        extra = {str(d.path) for d in forward if d.kind == DiffKind.EXTRA}
        missing_back = {str(d.path) for d in backward if d.kind == DiffKind.MISSING}

        assert missing == extra_back == {"nested.y", "only_src"}
        assert extra == missing_back == {"nested.z", "only_tgt"}

    def test_extra_value_taken_verbatim(self):
        diffs = compare({}, {"extra": {"deep": [1, 2]}})
        assert diffs[0].target_value == {"deep": [1, 2]}


# ============================================================================
# TYPE HANDLING
# ============================================================================


class TestTypes:

    def test_string_vs_number_is_type_mismatch(self):
        diffs = compare({"gpa": "3.5"}, {"gpa": 3.5})
        assert kinds(diffs) == [DiffKind.TYPE_MISMATCH]

    def test_array_vs_object_is_type_mismatch(self):
        diffs = compare({"tech": ["Go"]}, {"tech": {"0": "Go"}})
        assert kinds(diffs) == [DiffKind.TYPE_MISMATCH]

    def test_bool_is_not_a_number(self):
        diffs = compare({"flag": True}, {"flag": 1})
        assert kinds(diffs) == [DiffKind.TYPE_MISMATCH]

    def test_int_and_float_are_both_numbers(self):
        assert compare({"n": 1}, {"n": 1.0}) == []
        assert kinds(compare({"n": 1}, {"n": 2.5})) == [DiffKind.VALUE_MISMATCH]

    def test_null_on_either_side_is_value_mismatch(self):
        assert kinds(compare({"a": None}, {"a": {}})) == [DiffKind.VALUE_MISMATCH]
        assert kinds(compare({"a": "x"}, {"a": None})) == [DiffKind.VALUE_MISMATCH]
        assert compare({"a": None}, {"a": None}) == []

    def test_root_scalars_compare_by_equality(self):
        diffs = compare("a", 1)
        assert kinds(diffs) == [DiffKind.VALUE_MISMATCH]
        assert str(diffs[0].path) == "root"

    def test_root_scalar_against_object(self):
        assert kinds(compare({"a": 1}, "a")) == [DiffKind.VALUE_MISMATCH]

    def test_root_mapping_against_sequence(self):
        diffs = compare({"a": 1}, [1])
        assert kinds(diffs) == [DiffKind.TYPE_MISMATCH]
        assert str(diffs[0].path) == "root"


# ============================================================================
# ARRAYS
# ============================================================================


class TestArrays:

    def test_elements_compared_by_equality(self):
        diffs = compare({"tech": ["Go", "AWS"]}, {"tech": ["Go", "GCP"]})
        assert len(diffs) == 1
        assert str(diffs[0].path) == "tech[1]"
        assert diffs[0].source_value == "AWS"

    def test_scalar_element_kind_change_is_value_mismatch(self):
        diffs = compare({"ids": [1]}, {"ids": ["1"]})
        assert kinds(diffs) == [DiffKind.VALUE_MISMATCH]

    def test_length_mismatch_still_compares_prefix(self):
        diffs = compare({"xs": [1, 2, 3]}, {"xs": [9, 2, 3, 4]})
        assert kinds(diffs) == [DiffKind.ARRAY_LENGTH_MISMATCH, DiffKind.VALUE_MISMATCH]
        assert str(diffs[1].path) == "xs[0]"

    def test_nested_objects_in_arrays(self):
        source = {"experience": [{"company": "株式会社Hacobu", "title": "エンジニア"}]}
        target = {"experience": [{"company": "Hacobu, Inc."}]}
        diffs = compare(source, target)
        assert [(d.kind, str(d.path)) for d in diffs] == [
            (DiffKind.VALUE_MISMATCH, "experience[0].company"),
            (DiffKind.MISSING, "experience[0].title"),
        ]

    def test_nested_arrays(self):
        diffs = compare({"grid": [[1, 2], [3]]}, {"grid": [[1, 2], [3, 4]]})
        assert [(d.kind, str(d.path)) for d in diffs] == [
            (DiffKind.ARRAY_LENGTH_MISMATCH, "grid[1]"),
        ]

    def test_object_element_against_scalar(self):
        diffs = compare({"items": [{"a": 1}]}, {"items": ["a"]})
        assert kinds(diffs) == [DiffKind.VALUE_MISMATCH]
        assert str(diffs[0].path) == "items[0]"


# ============================================================================
# PATHS AND PURITY
# ============================================================================


class TestPaths:

    def test_sibling_paths_do_not_leak(self):
        source = {"a": {"x": 1}, "b": {"y": 2}}
        target = {"a": {"x": 0}, "b": {"y": 0}}
        assert [str(d.path) for d in compare(source, target)] == ["a.x", "b.y"]

    def test_path_rendering(self):
        path = DocumentPath().child("experience").index(0).child("tech").index(2)
        assert str(path) == "experience[0].tech[2]"
        assert str(DocumentPath()) == "root"
        assert str(DocumentPath().index(3)) == "[3]"

    def test_is_root(self):
        assert DocumentPath().is_root
        assert not DocumentPath().child("a").is_root
        assert not DocumentPath().index(0).is_root


class TestNonMutation:

    def test_inputs_unchanged(self):
        source = copy.deepcopy(RESUME)
        target = {"name": "Taro", "experience": [{"company": "Hacobu, Inc."}], "extra": [1]}
        target_before = copy.deepcopy(target)
        compare(source, target)
        assert source == RESUME
        assert target == target_before


class TestSerialization:

    def test_differences_are_not_hashable(self):
        diff = compare({"a": {"b": 1}}, {})[0]
        assert diff.source_value == {"b": 1}
        with pytest.raises(TypeError):
            hash(diff)


    def test_to_dict_fields_by_kind(self):
        diffs = compare({"a": 1, "xs": [1], "m": "x"}, {"a": 2, "xs": [], "z": 3})
        by_type = {d["type"]: d for d in (x.to_dict() for x in diffs)}
        assert by_type["value_mismatch"] == {
            "path": "a", "type": "value_mismatch", "sourceValue": 1, "targetValue": 2,
        }
        assert by_type["array_length_mismatch"] == {
            "path": "xs", "type": "array_length_mismatch", "sourceLength": 1, "targetLength": 0,
        }
        assert by_type["missing"] == {"path": "m", "type": "missing", "sourceValue": "x"}
        assert by_type["extra"] == {"path": "z", "type": "extra", "targetValue": 3}

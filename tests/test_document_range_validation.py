from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from treasury.services.document_range_validation import (
    NO_RANGES_MESSAGE,
    DocumentNumberRejected,
    DocumentOwner,
    InvalidRangeError,
    LexicographicBounds,
    LoadedRange,
    NumericBounds,
    check_submission,
    enforce_submission,
    ensure_range_ordered,
    is_duplicate,
    parse_int_prefix,
    resolve_bounds,
    validate_document_number,
)


@dataclass
class _Range:
    name: str
    start_number: str
    end_number: str
    is_active: bool = True


@dataclass
class _FixtureRepository:
    ranges: list = field(default_factory=list)
    documents: dict = field(default_factory=dict)

    def list_ranges(self):
        return [LoadedRange.from_record(r) for r in self.ranges]

    def existing_document_numbers(self, *, exclude=None):
        return [
            number
            for owner, number in self.documents.items()
            if exclude is None or owner != exclude
        ]


def test_parse_int_prefix_reads_leading_integer_only():
    assert parse_int_prefix("500") == 500
    assert parse_int_prefix("  042") == 42
    assert parse_int_prefix("12abc") == 12
    assert parse_int_prefix("-7") == -7
    assert parse_int_prefix("NF-001") is None
    assert parse_int_prefix("") is None


def test_non_ascii_digits_are_not_integers():
    assert parse_int_prefix("５００") is None
    assert parse_int_prefix("١٢") is None
    assert isinstance(resolve_bounds("001", "999"), NumericBounds)

    ranges = [_Range("A", "001", "999")]
    # compared as text, "５" sorts after "9"
    assert validate_document_number("５００", ranges).is_valid is False
    assert validate_document_number("500", ranges).is_valid is True


def test_bounds_resolve_once_per_range():
    assert isinstance(resolve_bounds("001", "999"), NumericBounds)
    assert isinstance(resolve_bounds("NF-001", "NF-999"), LexicographicBounds)
    # one non-integer bound is enough to make the range textual
    assert isinstance(resolve_bounds("001", "ZZZ"), LexicographicBounds)


def test_numeric_range_compares_as_integers():
    ranges = [_Range("Talões", "001", "999")]
    assert validate_document_number("500", ranges).is_valid is True
    assert validate_document_number("1000", ranges).is_valid is False
    assert validate_document_number("0999", ranges).is_valid is True


def test_lexicographic_range_uses_stored_casing():
    ranges = [_Range("Notas", "NF-001", "NF-999")]
    assert validate_document_number("NF-500", ranges).is_valid is True
    assert validate_document_number("nf-500", ranges).is_valid is False


def test_no_active_ranges_accepts_everything():
    result = validate_document_number("anything at all", [_Range("Old", "1", "10", is_active=False)])
    assert result.is_valid is True
    assert result.message == NO_RANGES_MESSAGE

    assert validate_document_number("X-1", []).is_valid is True


def test_miss_lists_every_active_range():
    ranges = [
        _Range("A", "001", "100"),
        _Range("B", "NF-001", "NF-050"),
        _Range("Inactive", "500", "600", is_active=False),
    ]
    result = validate_document_number("150", ranges)
    assert result.is_valid is False
    assert "A (001–100)" in result.message
    assert "B (NF-001–NF-050)" in result.message
    assert "Inactive" not in result.message


def test_hit_names_the_matching_range():
    result = validate_document_number("075", [_Range("A", "001", "100")])
    assert result.is_valid is True
    assert result.message == "valid, in range: A"


@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_candidates_are_always_valid(blank):
    assert validate_document_number(blank, [_Range("A", "001", "100")]).is_valid is True
    assert is_duplicate(blank, ["", "  "]) is False

    repo = _FixtureRepository(ranges=[_Range("A", "001", "100")], documents={"t1": "050"})
    decision = check_submission(blank, repo)
    assert decision.accepted is True
    assert decision.is_duplicate is False


def test_duplicate_ignores_case_and_surrounding_whitespace():
    variants = ["abc-1", "ABC-1", " abc-1 "]
    for candidate in variants:
        for existing in variants:
            assert is_duplicate(candidate, [existing]) is True
    assert is_duplicate("abc-2", variants) is False


def test_submission_scenario_duplicate_then_range():
    repo = _FixtureRepository(
        ranges=[_Range("A", "001", "100")],
        documents={DocumentOwner("transaction", "t1"): "050"},
    )

    duplicate = check_submission("050", repo)
    assert duplicate.accepted is False
    assert duplicate.is_duplicate is True
    assert duplicate.reason == "duplicate"

    out_of_range = check_submission("150", repo)
    assert out_of_range.accepted is False
    assert out_of_range.is_duplicate is False
    assert out_of_range.reason == "out_of_range"

    accepted = check_submission("075", repo)
    assert accepted.accepted is True


def test_duplicate_is_reported_even_when_out_of_range():
    repo = _FixtureRepository(
        ranges=[_Range("A", "001", "100")],
        documents={DocumentOwner("prebenda", "p1"): "500"},
    )
    decision = check_submission("500", repo)
    assert decision.is_duplicate is True
    assert decision.reason == "duplicate"


def test_own_number_is_not_a_duplicate_when_editing():
    owner = DocumentOwner("transaction", "t1")
    repo = _FixtureRepository(ranges=[_Range("A", "001", "100")], documents={owner: "050"})
    assert check_submission("050", repo, exclude=owner).accepted is True
    assert check_submission("050", repo, exclude=DocumentOwner("prebenda", "t1")).accepted is False


def test_enforce_submission_raises_with_code():
    repo = _FixtureRepository(ranges=[_Range("A", "001", "100")])
    with pytest.raises(DocumentNumberRejected) as exc_info:
        enforce_submission("150", repo)
    assert exc_info.value.code == "OUT_OF_RANGE"
    assert exc_info.value.status_code == 422
    assert exc_info.value.to_detail()["message"].startswith("out of permitted ranges")

    enforce_submission("075", repo)


def test_range_bounds_must_be_ordered():
    ensure_range_ordered("001", "100")
    ensure_range_ordered("NF-001", "NF-100")
    with pytest.raises(InvalidRangeError):
        ensure_range_ordered("100", "001")
    with pytest.raises(InvalidRangeError):
        ensure_range_ordered("050", "50")

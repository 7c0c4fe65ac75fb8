"""
Document number validation.

A document number is acceptable when it is blank, or when it is not already
used by any transaction or prebenda (case- and surrounding-whitespace
insensitive) and falls inside at least one active `DocumentRange`.

Range membership dispatches per comparison: when the candidate and both
bounds parse as integers the comparison is numeric, otherwise it is a plain
code-point string comparison on the raw values. A range such as
("001", "999") therefore accepts "500" as 500, while ("NF-001", "NF-999")
compares "NF-500" as text.

Integers are read the way the legacy client did: optional leading
whitespace and sign followed by at least one digit; trailing content is
ignored ("12abc" -> 12, "NF-001" -> no integer).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol, Union

from treasury.core.flow_logging import flow_info

logger = logging.getLogger(__name__)

# ASCII digits only; full-width and other Unicode digits do not read as integers
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")

NO_RANGES_MESSAGE = "no ranges configured — all numbers accepted"

REASON_DUPLICATE = "duplicate"
REASON_OUT_OF_RANGE = "out_of_range"


def parse_int_prefix(value: str | None) -> int | None:
    match = _INT_PREFIX.match(value or "")
    if not match:
        return None
    return int(match.group(1))


def normalize_document_number(value: str | None) -> str:
    return (value or "").strip().lower()


@dataclass(frozen=True)
class NumericBounds:
    start: int
    end: int
    raw_start: str
    raw_end: str

    def contains(self, candidate: str) -> bool:
        value = parse_int_prefix(candidate)
        if value is None:
            # candidate is not an integer: the whole comparison becomes textual
            return self.raw_start <= candidate <= self.raw_end
        return self.start <= value <= self.end

    def is_ordered(self) -> bool:
        return self.start < self.end


@dataclass(frozen=True)
class LexicographicBounds:
    start: str
    end: str

    def contains(self, candidate: str) -> bool:
        return self.start <= candidate <= self.end

    def is_ordered(self) -> bool:
        return self.start < self.end


RangeBounds = Union[NumericBounds, LexicographicBounds]


def resolve_bounds(start_number: str, end_number: str) -> RangeBounds:
    start_value = parse_int_prefix(start_number)
    end_value = parse_int_prefix(end_number)
    if start_value is None or end_value is None:
        return LexicographicBounds(start=start_number, end=end_number)
    return NumericBounds(
        start=start_value,
        end=end_value,
        raw_start=start_number,
        raw_end=end_number,
    )


@dataclass(frozen=True)
class LoadedRange:
    name: str
    start_number: str
    end_number: str
    is_active: bool
    bounds: RangeBounds

    @classmethod
    def from_record(cls, record) -> "LoadedRange":
        if isinstance(record, cls):
            return record
        return cls(
            name=record.name,
            start_number=record.start_number,
            end_number=record.end_number,
            is_active=bool(record.is_active),
            bounds=resolve_bounds(record.start_number, record.end_number),
        )

    def label(self) -> str:
        return f"{self.name} ({self.start_number}–{self.end_number})"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str


class InvalidRangeError(ValueError):
    """Raised when a range's start does not sort strictly before its end."""


def ensure_range_ordered(start_number: str, end_number: str) -> None:
    bounds = resolve_bounds(start_number, end_number)
    if not bounds.is_ordered():
        raise InvalidRangeError(
            f"Start number '{start_number}' must come before end number '{end_number}'."
        )


def validate_document_number(
    candidate: str | None,
    ranges: Iterable,
) -> ValidationResult:
    document_number = (candidate or "").strip()
    if not document_number:
        return ValidationResult(True, "")

    active = [
        loaded
        for loaded in (LoadedRange.from_record(r) for r in ranges)
        if loaded.is_active
    ]
    if not active:
        return ValidationResult(True, NO_RANGES_MESSAGE)

    for loaded in active:
        if loaded.bounds.contains(document_number):
            return ValidationResult(True, f"valid, in range: {loaded.name}")

    listing = ", ".join(loaded.label() for loaded in active)
    return ValidationResult(
        False,
        f"out of permitted ranges. Active ranges: {listing}",
    )


def is_duplicate(candidate: str | None, existing_document_numbers: Iterable[str | None]) -> bool:
    key = normalize_document_number(candidate)
    if not key:
        return False
    return any(normalize_document_number(existing) == key for existing in existing_document_numbers)


@dataclass(frozen=True)
class DocumentOwner:
    owner_type: str
    owner_id: str


class DocumentNumberRepository(Protocol):
    def list_ranges(self) -> Sequence[LoadedRange]:
        ...

    def existing_document_numbers(
        self,
        *,
        exclude: DocumentOwner | None = None,
    ) -> list[str]:
        ...


@dataclass(frozen=True)
class SubmissionDecision:
    accepted: bool
    is_duplicate: bool
    message: str
    reason: str | None = None


@dataclass(eq=False)
class DocumentNumberRejected(Exception):
    code: str
    message: str
    status_code: int = 422

    def to_detail(self) -> dict:
        return {"code": self.code, "message": self.message}


def check_submission(
    candidate: str | None,
    repository: DocumentNumberRepository,
    *,
    exclude: DocumentOwner | None = None,
) -> SubmissionDecision:
    """
    Gate applied before a document-bearing record is persisted.

    Duplicates are reported on their own, ahead of range membership, so an
    operator re-typing an existing in-range number sees "duplicate" rather
    than a range message.
    """
    document_number = (candidate or "").strip()
    if not document_number:
        return SubmissionDecision(accepted=True, is_duplicate=False, message="")

    if is_duplicate(document_number, repository.existing_document_numbers(exclude=exclude)):
        flow_info(
            logger,
            "document_number_rejected reason=duplicate number=%s",
            document_number,
            category="document_validation",
        )
        return SubmissionDecision(
            accepted=False,
            is_duplicate=True,
            message=f"document number '{document_number}' is already in use",
            reason=REASON_DUPLICATE,
        )

    result = validate_document_number(document_number, repository.list_ranges())
    if not result.is_valid:
        flow_info(
            logger,
            "document_number_rejected reason=out_of_range number=%s",
            document_number,
            category="document_validation",
        )
        return SubmissionDecision(
            accepted=False,
            is_duplicate=False,
            message=result.message,
            reason=REASON_OUT_OF_RANGE,
        )

    return SubmissionDecision(accepted=True, is_duplicate=False, message=result.message)


def enforce_submission(
    candidate: str | None,
    repository: DocumentNumberRepository,
    *,
    exclude: DocumentOwner | None = None,
) -> None:
    decision = check_submission(candidate, repository, exclude=exclude)
    if not decision.accepted:
        raise DocumentNumberRejected(
            code=(decision.reason or "invalid").upper(),
            message=decision.message,
        )

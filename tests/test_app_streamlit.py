import altair as alt

from palcheck.app_streamlit import outcome_label, size_chart
from palcheck.records import ValidatedCandidate
from palcheck.reporting import to_frame


def test_outcome_label() -> None:
    assert outcome_label(ValidatedCandidate(25, 4, "1", True)) == "validated"
    assert outcome_label(ValidatedCandidate(25, 4, "1", False)) == "mismatch"
    assert outcome_label(ValidatedCandidate(25, 4, "1", False, error="HTTP 503")) == "unavailable"


def test_size_chart_encodes_outcome() -> None:
    candidates = [ValidatedCandidate(25, 4, "1", True), ValidatedCandidate(19, 9, "3", False)]
    frame = to_frame(candidates)
    frame["outcome"] = [outcome_label(c) for c in candidates]

    spec = size_chart(frame).to_dict()

    mark = spec["mark"]
    assert (mark if isinstance(mark, str) else mark["type"]) == "bar"
    assert spec["encoding"]["color"]["field"] == "outcome"

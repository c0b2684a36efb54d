"""Unit tests for selecting accepted submissions from user.status."""

import pytest

from domain.models import Submission
from infrastructure.parsers import ParsingError, SubmissionListParser


def entry(submission_id, contest_id, index, verdict="OK", language="GNU C++17 (64)"):
    return {
        "id": submission_id,
        "contestId": contest_id,
        "problem": {"contestId": contest_id, "index": index, "name": f"Problem {index}"},
        "programmingLanguage": language,
        "verdict": verdict,
    }


@pytest.fixture
def parser():
    return SubmissionListParser()


def test_only_first_ok_per_problem_is_kept(parser):
    payload = {
        "status": "OK",
        "result": [
            entry(4, 1325, "A", "OK"),
            entry(3, 1325, "B", "WRONG_ANSWER"),
            entry(2, 1325, "A", "OK"),
            entry(1, 1325, "C", "COMPILATION_ERROR"),
        ],
    }

    result = parser.parse(payload)

    assert [s.problem_key for s in result] == ["1325A"]
    assert result[0].submission_id == 4


def test_dedup_keeps_one_per_problem_in_api_order(parser):
    payload = {
        "result": [
            entry(10, 1091, "B"),
            entry(9, 1091, "A"),
            entry(8, 1091, "B"),
            entry(7, 4, "A"),
            entry(6, 1091, "A"),
        ]
    }

    result = parser.parse(payload)

    assert result == [
        Submission(submission_id=10, contest_id=1091, problem_index="B", language="GNU C++17 (64)"),
        Submission(submission_id=9, contest_id=1091, problem_index="A", language="GNU C++17 (64)"),
        Submission(submission_id=7, contest_id=4, problem_index="A", language="GNU C++17 (64)"),
    ]


def test_same_index_in_different_contests_are_distinct(parser):
    result = parser.parse({"result": [entry(2, 100, "A"), entry(1, 1000, "A")]})

    assert [s.problem_key for s in result] == ["100A", "1000A"]


@pytest.mark.parametrize("verdict", ["TIME_LIMIT_EXCEEDED", "TESTING", "PARTIAL", None])
def test_non_accepted_verdicts_are_dropped(parser, verdict):
    assert parser.parse({"result": [entry(1, 1, "A", verdict)]}) == []


def test_entry_without_verdict_is_dropped(parser):
    in_queue = entry(1, 1, "A")
    del in_queue["verdict"]

    assert parser.parse({"result": [in_queue]}) == []


def test_empty_history(parser):
    assert parser.parse({"status": "OK", "result": []}) == []


@pytest.mark.parametrize("payload", [{}, {"result": None}, {"result": {"id": 1}}])
def test_missing_result_array_raises(parser, payload):
    with pytest.raises(ParsingError):
        parser.parse(payload)


def test_malformed_accepted_entry_raises(parser):
    broken = entry(1, 1, "A")
    del broken["problem"]

    with pytest.raises(ParsingError):
        parser.parse({"result": [broken]})


def test_malformed_rejected_entry_is_ignored(parser):
    broken = {"id": 1, "verdict": "WRONG_ANSWER"}

    assert parser.parse({"result": [broken, entry(2, 5, "D")]})[0].problem_key == "5D"

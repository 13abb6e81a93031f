from __future__ import annotations

import pytest

from daia_test.adapters.case_source import (
    InputSourceError,
    load_test_cases,
    parse_test_cases,
    read_source,
)

CSV = "isil;ppn\nDE-7;123\nDE-84, 456\nDE-Hil2\t789\n"


def test_header_is_skipped_and_each_line_is_a_case():
    cases = list(parse_test_cases(CSV))

    assert len(cases) == 3
    assert [(c.isil, c.ppn) for c in cases] == [
        ("DE-7", "123"),
        ("DE-84", "456"),
        ("DE-Hil2", "789"),
    ]


def test_header_only_gives_no_cases():
    assert list(parse_test_cases("isil ppn\n")) == []


def test_blank_lines_and_single_fields_are_tolerated():
    cases = list(parse_test_cases("header\n\n   \nopac-de-7:ppn:1\nDE-7 2 extra\n"))

    assert len(cases) == 2
    assert cases[0].full_id == "opac-de-7:ppn:1"
    assert (cases[1].isil, cases[1].ppn) == ("DE-7", "2")


def test_local_file_takes_precedence(tmp_path, make_client, run):
    path = tmp_path / "cases.csv"
    path.write_text(CSV, encoding="utf-8")

    with make_client({}) as client:
        assert read_source(str(path), client, run) == CSV
    assert run.total == 0


def test_remote_source_is_fetched(make_client, run):
    url = "https://example.org/cases.csv"
    with make_client({url: CSV}) as client:
        cases = list(load_test_cases(url, client, run))

    assert len(cases) == 3


def test_remote_source_failure_counts_and_yields_nothing(make_client, run):
    url = "https://example.org/missing.csv"
    with make_client({url: 404}) as client:
        assert list(load_test_cases(url, client, run)) == []
    assert run.failed == 1


def test_missing_local_file_is_fatal(make_client, run):
    with make_client({}) as client:
        with pytest.raises(InputSourceError):
            read_source("no-such-file.csv", client, run)

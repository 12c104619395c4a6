import json

from token_stats.frequencies import build_distribution
from token_stats.models import Report
from token_stats.reporting import build_report, format_report, report_to_json


def test_build_report_derives_token_and_type_counts():
    distribution = build_distribution(["a", "b", "a", "c", "b", "a"])
    report = build_report(1, 2, distribution)

    assert report.paragraph_count == 1
    assert report.sentence_count == 2
    assert report.token_count == 6
    assert report.type_count == 3
    assert report.sorted_entries == (("a", 3), ("b", 2), ("c", 1))


def test_format_report_layout():
    report = build_report(1, 1, build_distribution(["a", "b", "a", "c", "b", "a"]))

    assert format_report(report) == (
        "# of paragraphs = 1\n"
        "# of sentences = 1\n"
        "# of tokens = 6\n"
        "# of types = 3\n"
        "\n"
        "================================\n"
        "a 3\n"
        "b 2\n"
        "c 1\n"
    )


def test_format_report_without_tokens():
    report = Report(
        paragraph_count=1,
        sentence_count=0,
        token_count=0,
        type_count=0,
        sorted_entries=(),
    )

    assert format_report(report) == (
        "# of paragraphs = 1\n"
        "# of sentences = 0\n"
        "# of tokens = 0\n"
        "# of types = 0\n"
        "\n"
        "================================\n"
    )


def test_report_to_json():
    report = build_report(2, 3, build_distribution(["x", "y", "x"]))
    payload = json.loads(report_to_json(report))

    assert payload["paragraphs"] == 2
    assert payload["sentences"] == 3
    assert payload["tokens"] == 3
    assert payload["types"] == 2
    assert payload["distribution"] == [
        {"token": "x", "count": 2},
        {"token": "y", "count": 1},
    ]

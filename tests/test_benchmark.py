import csv

import pytest

from zsdist.benchmark import (
    CSV_HEADER,
    DEFAULT_CASES,
    BenchmarkResult,
    benchmark_pair,
    main,
    run_benchmark,
    write_csv,
)


def test_benchmark_pair_reports_sizes_and_matching_distances():
    result = benchmark_pair("f(d(a,c(b)),e)", "f(c(d(a,b)),e)", repetitions=2)
    assert (result.tree1_size, result.tree2_size) == (6, 6)
    assert result.zs_distance == result.naive_distance == 2
    assert result.zs_time_ms >= 0
    assert result.naive_time_ms >= 0


def test_space_is_table_of_four_byte_ints():
    result = benchmark_pair("a(b)", "a", repetitions=1)
    assert result.zs_space_bytes == 24
    assert result.naive_space_bytes == result.zs_space_bytes


def test_invalid_repetitions_rejected():
    with pytest.raises(ValueError, match="repetitions"):
        benchmark_pair("a", "b", repetitions=0)


def test_run_benchmark_skips_unparseable_pairs(capsys):
    results = run_benchmark([("()", "a"), ("a", "a(b)")], repetitions=1)
    assert len(results) == 1
    assert results[0].tree2_size == 2
    assert "empty node label" in capsys.readouterr().err


def test_write_csv_round_trip(tmp_path):
    path = tmp_path / "out.csv"
    result = BenchmarkResult(3, 2, 1, 0.5, 48, 1, 1.25, 48)
    write_csv([result], path)
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == CSV_HEADER
    assert rows[1] == ["3", "2", "1", "0.5", "48", "1", "1.25", "48"]


def test_main_writes_every_case(tmp_path, capsys):
    path = tmp_path / "results.csv"
    assert main(["--repetitions", "1", "--output", str(path)]) == 0
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert len(rows) == len(DEFAULT_CASES) + 1
    for row in rows[1:]:
        assert row[2] == row[5]
    assert str(path) in capsys.readouterr().out


def test_main_fails_when_output_cannot_be_written(tmp_path):
    missing = tmp_path / "missing" / "results.csv"
    assert main(["--repetitions", "1", "--output", str(missing)]) == 1
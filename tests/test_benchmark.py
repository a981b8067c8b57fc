import math
import random

import pytest

from algolab.benchmark import (
    DataSet,
    Measurement,
    format_report,
    generate_data,
    main,
    primes_up_to,
    run_benchmark,
    sweep_primes,
)
from algolab.hashtables import HashType


@pytest.fixture
def datasets():
    return generate_data(200, random.Random(7))


def test_generate_data_has_one_set_per_load_factor(datasets):
    assert len(datasets) == 6
    assert [d.load_factor_tenths for d in datasets] == list(range(4, 10))
    sizes = [len(d.words) for d in datasets]
    assert sizes == sorted(sizes)


def test_generate_data_words_are_distinct_and_sorted(datasets):
    for d in datasets:
        assert d.words == sorted(set(d.words))
        assert all(len(w) == 7 and w.islower() for w in d.words)


def test_generate_data_subsets(datasets):
    for d in datasets:
        words = set(d.words)
        assert set(d.search_before) <= words
        assert set(d.deleted) <= words
        assert len(set(d.deleted)) == len(d.deleted)
        assert len(d.search_before) == len(d.deleted)
        assert len(d.search_after) == len(d.search_before)


def test_generate_data_search_after_alternates(datasets):
    for d in datasets:
        deleted = set(d.deleted)
        for i, word in enumerate(d.search_after):
            assert (word in deleted) == (i % 2 == 1)


def test_generate_data_rejects_bad_size():
    with pytest.raises(ValueError):
        generate_data(0, random.Random(1))


def test_generate_data_is_reproducible():
    a = generate_data(100, random.Random(3))
    b = generate_data(100, random.Random(3))
    assert a == b


def test_run_benchmark_shape(datasets):
    results = run_benchmark(datasets, 200)
    assert set(results) == set(HashType)
    for measurements in results.values():
        assert len(measurements) == 6
        for m in measurements:
            assert m.time_before >= 0
            assert m.time_after >= 0
            assert m.probes_before >= 0
            assert m.probes_after >= 0


def test_run_benchmark_tree_chaining_counts_no_probes(datasets):
    results = run_benchmark(datasets, 200)
    assert all(m.probes_before == 0.0 for m in results[HashType.SEPARATE_CHAINING])


def test_run_benchmark_empty_searches_give_nan():
    data = generate_data(2, random.Random(1))
    results = run_benchmark(data, 2)
    measurements = results[HashType.LINEAR_PROBING]
    assert len(measurements) == 6
    nan_flags = [math.isnan(m.time_before) for m in measurements]
    assert nan_flags == [True] * 6
    probe_flags = [math.isnan(m.probes_after) for m in measurements]
    assert probe_flags == [True] * 6


def _sample_results():
    m = Measurement(1.5, 2.25, 3.5, 4.75)
    return {kind: [m] * 6 for kind in HashType}


def test_format_report_header_and_labels():
    text = format_report(_sample_results(), 50)
    lines = text.split("\n")
    assert lines[0] == "N = 50"
    for label in ("Separate Chaining", "Linear Probing", "Quadratic Probing", "Double Hashing"):
        assert label in text
    assert "N/A" in text
    assert "2.25" in text
    assert "Load factor:" in text


def test_format_report_rules_have_fixed_width():
    text = format_report(_sample_results(), 50)
    lines = [line for line in text.split("\n") if line]
    rules = [line for line in lines if set(line) <= {"_", "|"}]
    assert rules
    assert all(len(line) == 113 for line in rules)
    assert sum(line == "_" * 113 for line in rules) == 10


def test_format_report_table_lines_have_fixed_width():
    text = format_report(_sample_results(), 50)
    rows = [line for line in text.split("\n") if line.startswith("| ")]
    assert rows
    assert all(len(line) == 113 for line in rows)


def test_primes_up_to():
    assert primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert primes_up_to(1) == []
    assert primes_up_to(2) == [2]


def test_sweep_primes():
    runs = list(sweep_primes(5, random.Random(2)))
    assert [n for n, _ in runs] == [2, 3, 5]
    assert all(set(results) == set(HashType) for _, results in runs)


def test_main_prints_report(capsys):
    assert main(["20", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "H1 is" in out
    assert "H2 is" in out
    assert "N = 20" in out


def test_main_sweep(capsys):
    assert main(["--sweep", "5", "--seed", "1"]) == 0
    assert capsys.readouterr().out.split() == ["2", "3", "5"]


def test_dataset_load_factor():
    d = DataSet(5, [], [], [], [])
    assert d.load_factor == pytest.approx(0.5)
import pytest

from estruturas import benchmark
from estruturas.benchmark import BenchmarkError, growth, min_time_us, sort_report
from estruturas.sorting import bubble_sort, merge_sort


def test_min_time_calls_prepare_each_repeat():
    calls = []

    def prepare():
        calls.append(1)
        return [3, 2, 1]

    seen = []
    result = min_time_us(lambda data: seen.append(sorted(data)), prepare, repeats=4)
    assert len(calls) == 4
    assert seen == [[1, 2, 3]] * 4
    assert result >= 0


def test_min_time_without_prepare():
    counter = []
    result = min_time_us(lambda: counter.append(1), repeats=3)
    assert len(counter) == 3
    assert result >= 0


def test_min_time_rejects_zero_repeats():
    with pytest.raises(ValueError):
        min_time_us(lambda: None, repeats=0)


def test_growth_yields_sizes_in_order():
    results = list(
        growth(
            [5, 10, 15],
            lambda size: list(range(size, 0, -1)),
            bubble_sort,
            lambda data, _: data == sorted(data),
            repeats=2,
        )
    )
    assert [size for size, _ in results] == [5, 10, 15]
    assert all(elapsed >= 0 for _, elapsed in results)


def test_growth_raises_on_wrong_result():
    with pytest.raises(BenchmarkError):
        list(growth([4], lambda size: [size], lambda d: d[0], lambda d, r: False, 1))


def test_growth_rejects_zero_repeats():
    with pytest.raises(ValueError):
        list(growth([4], list, len, lambda d, r: True, 0))


def test_sort_report_correct_sort():
    report = sort_report(merge_sort, size=200, seed=1)
    assert [label for label, _ in report] == ["Ordenado", "Invertido", "Aleatório"]
    assert all(elapsed is not None and elapsed >= 0 for _, elapsed in report)


def test_sort_report_flags_unsorted_output():
    report = dict(sort_report(lambda data: None, size=200, seed=1))
    assert report["Ordenado"] is not None
    assert report["Invertido"] is None
    assert report["Aleatório"] is None


def test_main_growth(capsys):
    code = benchmark.main(
        ["growth", "bubble", "--start", "10", "--end", "30", "--step", "10", "--repeats", "2"]
    )
    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["10", "20", "30"]


@pytest.mark.parametrize("experiment", ["max-worst", "max-best", "linear-search", "bubble-full"])
def test_main_growth_checks_pass(experiment, capsys):
    code = benchmark.main(
        ["growth", experiment, "--start", "5", "--end", "20", "--step", "5", "--repeats", "1"]
    )
    assert code == 0
    assert len(capsys.readouterr().out.splitlines()) == 4


def test_main_sort(capsys):
    assert benchmark.main(["sort", "quick", "--size", "100", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("> Ordenado:  ")
    assert lines[1].startswith("> Invertido: ")
    assert all(line.endswith(" us") for line in lines)
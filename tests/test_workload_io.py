from pathlib import Path

import pytest

from schedsim.models import Process
from schedsim.workload_io import WorkloadError, load_workload, parse_csv_rows


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("1,5,0,2\n2, 3 ,1\n\n3,8,2,3\n")
    procs = load_workload(p)
    assert procs == [
        Process(1, arrival_time=0, burst_time=5, priority=2),
        Process(2, arrival_time=1, burst_time=3, priority=0),
        Process(3, arrival_time=2, burst_time=8, priority=3),
    ]


def test_load_csv_any_suffix(tmp_path: Path):
    p = tmp_path / "processes.txt"
    p.write_text("7,4,0\n")
    assert load_workload(p)[0].pid == 7


def test_load_csv_rejects_bad_integer(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("1,5,0\n2,three,1\n")
    with pytest.raises(WorkloadError, match="line 2: burst duration"):
        load_workload(p)


@pytest.mark.parametrize("row", [["1", "5"], ["1", "5", "0", "1", "9"]])
def test_parse_rejects_column_count(row):
    with pytest.raises(WorkloadError, match="expected 3 or 4 columns"):
        parse_csv_rows([row])


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(OSError):
        load_workload(tmp_path / "nope.csv")


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id": 1, "burst": 3, "arrival": 0, "priority": 1},'
                 ' {"id": 2, "burst": 2, "arrival": 1}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].priority == 1
    assert procs[1].priority == 0
    assert procs[1].arrival_time == 1


def test_load_json_errors(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"id": 1}')
    with pytest.raises(WorkloadError, match="must be a list"):
        load_workload(p)

    p.write_text('[{"id": 1, "burst": 2.5, "arrival": 0}]')
    with pytest.raises(WorkloadError, match="entry 1"):
        load_workload(p)

    p.write_text('[{"id": 1}')
    with pytest.raises(WorkloadError, match="invalid JSON"):
        load_workload(p)


@pytest.mark.parametrize("cell", ["1_000", "0x10", "1.0", "", "٣"])
def test_parse_rejects_non_decimal_integers(cell):
    with pytest.raises(WorkloadError, match="line 1: burst duration"):
        parse_csv_rows([["1", cell, "0"]])


def test_parse_accepts_signed_and_padded_integers():
    assert parse_csv_rows([[" 4 ", "+3", "-1"]]) == [Process(4, arrival_time=-1, burst_time=3)]


def test_load_json_rejects_non_utf8(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_bytes(b'[{"id": 1, "burst": "\xff", "arrival": 0}]')
    with pytest.raises(WorkloadError, match="not valid UTF-8"):
        load_workload(p)

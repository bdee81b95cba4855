import io

from sortbench.cli import main, run_config
from sortbench.config import ArrType, Config, SortType, VarType


def test_run_config_empty_only_header():
    out = io.StringIO()
    run_config(Config(), out)
    assert out.getvalue() == "\n=== RUN CONFIG ===\n"


def test_run_config_incomplete_int_section_skipped():
    out = io.StringIO()
    config = Config(array_sizes_int=[4], sort_types_int=[SortType.HEAP_SORT])
    run_config(config, out)
    assert out.getvalue() == "\n=== RUN CONFIG ===\n"


def test_run_config_runs_int_benchmark():
    out = io.StringIO()
    config = Config(
        array_types_int=[ArrType.ARR_SORT],
        array_sizes_int=[4],
        sort_types_int=[SortType.SHELL_SORT_KNUTH],
    )
    run_config(config, out)
    text = out.getvalue()
    assert "Shell Sort (Knuth)\ngen Sorted\nsize: 4\ntype: INT\n" in text


def test_run_config_file(tmp_path):
    data = tmp_path / "in.txt"
    data.write_text("4\n9 7 8 6\n")
    config = Config(
        file_in=str(data),
        file_type=VarType.INT,
        sort_types_file=[SortType.QUICK_SORT_RANDOM],
    )
    out = io.StringIO()
    run_config(config, out)
    assert "array after sorting:\n6 7 8 9 \n" in out.getvalue()


def test_run_config_missing_input_reports(tmp_path):
    config = Config(
        file_in=str(tmp_path / "nope.txt"),
        file_type=VarType.FLOAT,
        sort_types_file=[SortType.HEAP_SORT],
    )
    out = io.StringIO()
    run_config(config, out)
    assert "cannot read input file" in out.getvalue()


def test_main_runs_config(tmp_path, capsys):
    data = tmp_path / "in.txt"
    data.write_text("3 3 2 1")
    cfg = tmp_path / "config.txt"
    cfg.write_text(
        f".FILE_IN\n{data}\n.FILE_TYPE\nINT\n.SORT_FILE\nHEAP_SORT\n"
    )
    assert main([str(cfg)]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("=== CONFIG ===\n")
    assert "FileType: int" in captured
    assert "\n=== RUN CONFIG ===\n" in captured
    assert "Heap Sort\nsize: 3\n" in captured


def test_main_missing_config(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Cannot open config file" in capsys.readouterr().err
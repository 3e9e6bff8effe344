import matplotlib
matplotlib.use('Agg')

from generate_graphs import main, plot_fault_curves
from policies import Policy


def test_plot_fault_curves(tmp_path):
    output = tmp_path / "curves.png"
    curves = {
        Policy.FIFO: [(3, 9), (4, 10), (5, 5)],
        Policy.LRU: [(3, 10), (4, 8), (5, 5)],
    }
    assert plot_fault_curves(curves, str(output)) == str(output)
    assert output.stat().st_size > 0


def test_main_writes_graph(tmp_path, capsys):
    trace = tmp_path / "address.txt"
    trace.write_text("1 2 3 4 1 2 5 1 2 3 4 5\n")
    output = tmp_path / "out.png"
    assert main([str(trace), "--page-size", "1", "--max-frames", "5", "--output", str(output)]) == 0
    assert output.exists()
    assert "Graph saved as" in capsys.readouterr().out


def test_main_reports_bad_range(tmp_path, capsys):
    trace = tmp_path / "address.txt"
    trace.write_text("1 2 3\n")
    assert main([str(trace), "--min-frames", "4", "--max-frames", "2"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_main_reports_undecodable_trace(tmp_path, capsys):
    trace = tmp_path / "address.txt"
    trace.write_bytes(b"100\n\xff\n")
    assert main([str(trace), "--output", str(tmp_path / "out.png")]) == 1
    assert "Error:" in capsys.readouterr().err
    assert not (tmp_path / "out.png").exists()

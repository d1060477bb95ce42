import numpy as np

from ratapprox import CHECK_VALUES, run_checks
from ratapprox.__main__ import main


def test_run_checks():
    assert len(CHECK_VALUES) == 13
    assert run_checks(np.int32) == list()
    assert run_checks(np.int64) == list()
    # Eight bits cannot get within 1e-9 of most values.
    assert len(run_checks(np.int8)) > 0


def test_main_self_test(capsys):
    assert main(["--self-test"]) == 0
    assert "All tests passed!" in capsys.readouterr().out
    assert main(["--self-test", "--bits", "8"]) == 1
    assert "int8:" in capsys.readouterr().out


def test_main_value(capsys):
    assert main(["0.75"]) == 0
    assert capsys.readouterr().out.strip() == "3/4"
    assert main(["3.14159265358979", "--precision", "1e-2"]) == 0
    assert capsys.readouterr().out.strip() == "22/7"
    assert main(["3.14159265358979", "--precision", "1e-9", "--bits", "8"]) == 0
    assert capsys.readouterr().out.strip() == "22/7"
    assert main(["-0.1", "--max-iters", "0"]) == 0
    assert capsys.readouterr().out.strip() == "-1/1"


def test_main_errors(capsys):
    assert main(["200.0", "--bits", "8"]) == 2
    assert "error:" in capsys.readouterr().err

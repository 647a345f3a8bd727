import ndkernels
from ndkernels import core, factors, kernel
from ndkernels.__main__ import _diagnostics


def test_public_api():
    assert isinstance(ndkernels.__version__, str)
    assert ndkernels.CenteredArray is core.CenteredArray
    for name in kernel.__all__:
        assert hasattr(kernel, name)
    for name in factors.__all__:
        assert hasattr(factors, name)


def test_diagnostics_run(capsys):
    _diagnostics()
    out = capsys.readouterr().out
    assert "diff2 == diff1.T: True" in out
    assert "-4" in out

import json

import pytest

from dhatless._report import report_from_dict


def make_report_dict(pps=None, ftbl=None, **overrides):
    """Build a minimal, valid DHAT version 2 document."""
    doc = {
        "dhatFileVersion": 2,
        "mode": "heap",
        "verb": "Allocated",
        "bklt": True,
        "bkacc": False,
        "tu": "instrs",
        "mtu": "Minstr",
        "tuth": 500,
        "cmd": "./a.out",
        "pid": 1234,
        "te": 5678,
        "tg": 4000,
        "pps": [] if pps is None else pps,
        "ftbl": ["[root]"] if ftbl is None else ftbl,
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def report_dict():
    return make_report_dict


@pytest.fixture
def make_report():
    def _make(**kwargs):
        return report_from_dict(make_report_dict(**kwargs))

    return _make


@pytest.fixture
def report_file(tmp_path):
    """Factory writing a DHAT document to disk and returning its path."""

    def _write(doc=None, name="dhat.out.json", **kwargs):
        if doc is None:
            doc = make_report_dict(**kwargs)
        path = tmp_path / name
        path.write_text(doc if isinstance(doc, str) else json.dumps(doc))
        return path

    return _write


@pytest.fixture
def ignore_file(tmp_path):
    def _write(*lines, name="ignore.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines))
        return path

    return _write

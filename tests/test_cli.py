from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import tempfile
import unittest

from rampcurve.main import main


def _write(tmp: str, payload) -> str:
    path = Path(tmp) / "curve.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def _run(argv: list[str]) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(argv)
    return code, out.getvalue(), err.getvalue()


PIECEWISE = {
    "segments": [
        {"kind": "linear", "domain": [10, 20], "range": [30, 40]},
        {"kind": "nearest", "domain": [20, 30], "range": [40, 50]},
    ]
}


class TestCommandLine(unittest.TestCase):
    def test_eval(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, out, _ = _run(["eval", _write(tmp, PIECEWISE), "15", "20", "26", "30"])
        self.assertEqual(code, 0)
        self.assertEqual(
            out.splitlines(),
            ["15.0\t35.0\tfalse", "20.0\t40.0\tfalse", "26.0\t50.0\tfalse", "30.0\t50.0\ttrue"],
        )

    def test_sample(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, out, _ = _run(["sample", _write(tmp, PIECEWISE), "--start", "0", "--stop", "40", "--num", "5"])
        self.assertEqual(code, 0)
        rows = [tuple(float(v) for v in line.split("\t")) for line in out.splitlines()]
        self.assertEqual(rows, [(0.0, 30.0), (10.0, 30.0), (20.0, 40.0), (30.0, 50.0), (40.0, 50.0)])

    def test_check(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, out, _ = _run(["check", _write(tmp, PIECEWISE)])
        self.assertEqual(code, 0)
        diag = json.loads(out)
        self.assertTrue(diag["all_checks_pass"])
        self.assertEqual(diag["monotonic"], "increasing")

    def test_discontinuous_config_reports_error(self) -> None:
        payload = {
            "segments": [
                {"kind": "linear", "domain": [10, 20], "range": [30, 40]},
                {"kind": "linear", "domain": [21, 30], "range": [40, 50]},
            ]
        }
        with tempfile.TemporaryDirectory() as tmp:
            code, out, err = _run(["eval", _write(tmp, payload), "15"])
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("Combined domains are not closed", err)

    def test_empty_and_invalid_configs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, _, err = _run(["eval", _write(tmp, {"segments": []}), "1"])
            self.assertEqual(code, 2)
            self.assertIn("Need at least one interpolator.", err)

            bad = {"segments": [{"kind": "step", "domain": [5, 5], "range": [0, 1]}]}
            code, _, err = _run(["eval", _write(tmp, bad), "1"])
            self.assertEqual(code, 2)
            self.assertIn("Invalid interval", err)

            null_bound = {"segments": [{"kind": "linear", "domain": [None, 1], "range": [0, 1]}]}
            code, out, err = _run(["eval", _write(tmp, null_bound), "1"])
            self.assertEqual(code, 2)
            self.assertEqual(out, "")
            self.assertIn("domain must be a pair of numbers", err)

            code, out, err = _run(["eval", _write(tmp, {"segments": [5]}), "1"])
            self.assertEqual(code, 2)
            self.assertEqual(out, "")
            self.assertIn("segment must be an object", err)

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, _, err = _run(["eval", str(Path(tmp) / "absent.json"), "1"])
        self.assertEqual(code, 2)
        self.assertTrue(err.startswith("error: "))


if __name__ == "__main__":
    unittest.main()

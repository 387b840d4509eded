import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from alphaquiz import __version__
from alphaquiz.app import explain
from alphaquiz.app.cli import intro, main

RECORDS = {
    f"q{i}": {
        "description": f"question {i}",
        "correct": f"right {i}",
        "wrong1": f"w1 {i}",
        "wrong2": f"w2 {i}",
        "wrong3": f"w3 {i}",
    }
    for i in range(1, 4)
}


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.questions = self.dir / "question.json"
        self.questions.write_text(json.dumps(RECORDS), encoding="utf-8")

    def tearDown(self) -> None:
        explain.enable(False)
        self._tmp.cleanup()

    def _main(self, argv, inputs=()):
        out, err = io.StringIO(), io.StringIO()
        with mock.patch("builtins.input", side_effect=list(inputs)) as fake_input:
            with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
                code = main(argv)
        return code, out.getvalue(), err.getvalue(), fake_input

    def test_run_full_game_with_hedged_answers(self) -> None:
        inputs = ["", "A/B/C/D", "a/b/c/d", "D/C/B/A"]
        code, out, err, _ = self._main(["run", "--questions", str(self.questions), "--seed", "1"], inputs)
        self.assertEqual(code, 0, err)
        self.assertIn("Hello!", out)
        self.assertIn("Question: question 1", out)
        self.assertIn("Your score: 9", out)
        self.assertIn("Game over! Your score is: 9", out)
        self.assertIn("Score: 9/36", out)
        self.assertIn("q3: 3/12", out)

    def test_invalid_input_is_reprompted(self) -> None:
        inputs = ["", "E", "", "A/B/C/D", "A/B/C/D", "A/B/C/D"]
        code, out, _, fake_input = self._main(["run", "--questions", str(self.questions), "--no-intro"], inputs)
        self.assertEqual(code, 0)
        self.assertNotIn("Hello!", out)
        self.assertEqual(fake_input.call_count, 6)
        self.assertIn("Game over! Your score is: 9", out)

    def test_closed_input_exits_non_zero(self) -> None:
        code, out, err, _ = self._main(["run", "--questions", str(self.questions)], [EOFError()])
        self.assertEqual(code, 1)
        self.assertIn("ERROR:", err)
        self.assertNotIn("Game over", out)

    def test_malformed_record_aborts_before_play(self) -> None:
        records = dict(RECORDS)
        records["q2"] = {k: v for k, v in RECORDS["q2"].items() if k != "wrong2"}
        self.questions.write_text(json.dumps(records), encoding="utf-8")
        code, out, err, fake_input = self._main(["run", "--questions", str(self.questions)])
        self.assertEqual(code, 1)
        self.assertIn("invalid in question q2", err)
        self.assertIn("wrong2", err)
        self.assertEqual(fake_input.call_count, 0)
        self.assertNotIn("Question:", out)

    def test_missing_question_file(self) -> None:
        code, _, err, _ = self._main(["run", "--questions", str(self.dir / "missing.json")])
        self.assertEqual(code, 1)
        self.assertIn("cannot read question file", err)

    def test_unparseable_question_file(self) -> None:
        self.questions.write_text("{not json", encoding="utf-8")
        code, _, err, _ = self._main(["validate", "--questions", str(self.questions)])
        self.assertEqual(code, 1)
        self.assertIn("cannot parse question file", err)

    def test_validate_lists_questions_in_key_order(self) -> None:
        records = {"q3": RECORDS["q3"], "q1": RECORDS["q1"]}
        self.questions.write_text(json.dumps(records), encoding="utf-8")
        code, out, _, fake_input = self._main(["validate", "--questions", str(self.questions), "--order", "key"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[:2], ["q1: question 1", "q3: question 3"])
        self.assertIn("2 question(s) OK", out)
        self.assertEqual(fake_input.call_count, 0)

    def test_bad_config_exits_non_zero(self) -> None:
        cfg = self.dir / "bad.yml"
        cfg.write_text("scoring:\n  max_points: 0\n", encoding="utf-8")
        code, _, err, _ = self._main(["validate", "--config", str(cfg), "--questions", str(self.questions)])
        self.assertEqual(code, 1)
        self.assertIn("Invalid configuration", err)

    def test_explain_mode_traces_quiz_loaded(self) -> None:
        code, out, _, _ = self._main(["validate", "--questions", str(self.questions), "--explain"])
        self.assertEqual(code, 0)
        self.assertIn("[EXPLAIN] quiz_loaded", out)

    def test_version(self) -> None:
        out = io.StringIO()
        with contextlib.redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, out.getvalue())

    def test_intro_uses_separator(self) -> None:
        self.assertIn('"A/C"', intro())
        self.assertIn('"A,C"', intro(","))


if __name__ == "__main__":
    unittest.main()

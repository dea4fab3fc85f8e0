import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_feedback.core.scoring import DEFAULT_TABLES, load_scoring_tables  # noqa: E402
from resume_feedback.features import analyze_skills, normalize_text  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def _write(self, content: str) -> Path:
        path = Path(self._tmp.name) / "scoring.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_default_tables_match_documented_lists(self):
        self.assertEqual(len(DEFAULT_TABLES.action_verbs), 10)
        self.assertEqual(len(DEFAULT_TABLES.education_keywords), 8)
        self.assertEqual(len(DEFAULT_TABLES.degree_keywords), 5)
        self.assertEqual(len(DEFAULT_TABLES.technical_skills), 9)
        self.assertEqual(len(DEFAULT_TABLES.soft_skills), 5)

    def test_repo_config_matches_built_in_tables(self):
        tables = load_scoring_tables(PROJECT_ROOT / "config" / "scoring.yaml")
        self.assertEqual(tables, DEFAULT_TABLES)

    def test_loader_overrides_only_listed_tables(self):
        path = self._write("technical_skills:\n  - Rust\n  - Go\n")
        tables = load_scoring_tables(path)
        self.assertEqual(tables.technical_skills, ("rust", "go"))
        self.assertEqual(tables.soft_skills, DEFAULT_TABLES.soft_skills)

        result = analyze_skills(normalize_text("Rust and Go"), tables=tables)
        self.assertEqual(result.score, 20)

    def test_empty_file_keeps_defaults(self):
        self.assertEqual(load_scoring_tables(self._write("")), DEFAULT_TABLES)

    def test_invalid_configs_raise_runtime_error(self):
        invalid = [
            "technical_skills: [python",
            "- just\n- a list\n",
            "unknown_table:\n  - x\n",
            "soft_skills: leadership\n",
        ]
        for content in invalid:
            with self.subTest(content=content):
                with self.assertRaises(RuntimeError):
                    load_scoring_tables(self._write(content))

    def test_missing_file_raises_runtime_error(self):
        with self.assertRaises(RuntimeError):
            load_scoring_tables(Path(self._tmp.name) / "missing.yaml")


if __name__ == "__main__":
    unittest.main()

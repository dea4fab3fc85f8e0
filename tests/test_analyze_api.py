import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from resume_feedback.core.config import settings  # noqa: E402
from resume_feedback.core.rate_limit import limiter  # noqa: E402
from resume_feedback.main import app  # noqa: E402


class AnalyzeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.payload = {
            "resume_text": (
                "John Doe\n"
                "Email john@example.com\n"
                "Phone +1 555 222 1111\n"
                "Experience\n"
                "Developed APIs and improved response time by 35%.\n"
                "Education: Bachelor of Engineering\n"
                "Skills: Python, SQL, Docker, AWS, communication"
            ),
            "job_title": "Backend Engineer",
            "job_description": "Python backend engineer with SQL and Docker",
        }

    def setUp(self):
        limiter.reset()

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_configured_origin_receives_cors_header(self):
        origin = settings.cors_allowed_origins[0]
        response = self.client.get("/v1/health", headers={"Origin": origin})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers.get("access-control-allow-origin"), origin)

        blocked = self.client.get("/v1/health", headers={"Origin": "https://unknown.example"})
        self.assertNotIn("access-control-allow-origin", blocked.headers)

    def test_analyze_contract_shape(self):
        response = self.client.post("/v1/analyze", json=self.payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        feedback = body["feedback"]
        self.assertEqual(
            set(feedback),
            {"overallScore", "ats", "toneAndStyle", "content", "structure", "skills"},
        )
        self.assertTrue(0 <= feedback["overallScore"] <= 100)
        self.assertLessEqual(len(feedback["ats"]["tips"]), 5)
        self.assertIn(
            "Tailor your resume to match keywords from the Backend Engineer position",
            [tip["message"] for tip in feedback["ats"]["tips"]],
        )
        self.assertNotIn("explanation", feedback["ats"]["tips"][0])
        self.assertIsInstance(body["strengths"], list)
        self.assertIsInstance(body["areas_for_improvement"], list)

    def test_empty_resume_text_is_accepted(self):
        response = self.client.post("/v1/analyze", json={"resume_text": ""})
        self.assertEqual(response.status_code, 200)
        self.assertLess(response.json()["feedback"]["overallScore"], 50)

    def test_oversized_resume_text_is_rejected(self):
        response = self.client.post(
            "/v1/analyze",
            json={"resume_text": "a" * (settings.max_resume_chars + 1)},
        )
        self.assertEqual(response.status_code, 422)

    def test_rate_limit_returns_429(self):
        if not settings.rate_limit_enabled:
            self.skipTest("rate limiting disabled")
        status_codes = []
        for _ in range(40):
            response = self.client.post("/v1/analyze", json={"resume_text": "Skills: Python"})
            status_codes.append(response.status_code)
        self.assertIn(429, status_codes)


if __name__ == "__main__":
    unittest.main()

import json
import unittest

from jobhub.errors import MalformedResponse
from jobhub.models import JobDetail, JobSummary
from jobhub.presenter import detail_card, detail_lines, summary_card, summary_lines
from tests.fakes import detail_record, summary_record


class PresenterTests(unittest.TestCase):
    def test_summary_card(self):
        card = summary_card(JobSummary.from_api(summary_record("abc")))
        self.assertEqual(card["id"], "abc")
        self.assertEqual(card["location"], "Kochi, Kerala")
        self.assertEqual(card["salary"], "$50,000 - $70,000")
        self.assertEqual(card["posted"], "Mar 15, 2024")
        self.assertEqual(card["employment_type"], "FULLTIME")

    def test_summary_card_fallbacks(self):
        card = summary_card(JobSummary.from_api({"job_id": "x"}))
        self.assertEqual(card["title"], "Untitled role")
        self.assertEqual(card["salary"], "Not specified")
        self.assertEqual(card["posted"], "Unknown")
        self.assertEqual(card["location"], "Location not specified")

    def test_nan_salary_never_reaches_formatting(self):
        record = json.loads('{"job_id": "a", "job_salary_min": NaN, "job_salary_max": 70000}')
        with self.assertRaises(MalformedResponse):
            JobSummary.from_api(record)

    def test_huge_salary_card(self):
        card = summary_card(JobSummary.from_api(summary_record("a", job_salary_min=1e30, job_salary_max=None)))
        self.assertEqual(card["salary"], "$1,000,000,000,000,000,000,000,000,000,000")

    def test_long_description_is_shortened(self):
        card = summary_card(JobSummary.from_api(summary_record("a", job_description="word " * 200)))
        self.assertTrue(card["description"].endswith("…"))
        self.assertLessEqual(len(card["description"]), 301)

    def test_detail_card(self):
        card = detail_card(JobDetail.from_api(detail_record("abc")))
        self.assertEqual(card["experience"], "2 years")
        self.assertEqual(card["expires"], "Apr 15, 2024")
        self.assertEqual(list(card["highlights"]), ["Qualifications", "Responsibilities"])

    def test_text_rendering(self):
        job = JobSummary.from_api(summary_record("abc"))
        lines = summary_lines(1, job)
        self.assertEqual(lines[0], "1. Python Developer — Acme Labs")
        self.assertIn("id: abc", lines[2])

        text = "\n".join(detail_lines(JobDetail.from_api(detail_record("abc"))))
        self.assertIn("Experience: 2 years", text)
        self.assertIn("## Qualifications", text)
        self.assertNotIn("## Benefits", text)


if __name__ == "__main__":
    unittest.main()

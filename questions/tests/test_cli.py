import json
import unittest
from datetime import timedelta
from unittest.mock import patch

from click.testing import CliRunner

from questions.cli import cli
from questions.errors import FetchError
from questions.models import Question
from questions.tests.atom_samples import iso_ago


def _question(question_id: str, edited: bool = False) -> Question:
    published = iso_ago(timedelta(hours=60))
    return Question(
        id=question_id,
        title=f"Question {question_id}",
        published=published,
        updated=iso_ago(timedelta(hours=55)) if edited else published,
        link=f"https://in.mathworks.com/matlabcentral/answers/{question_id}",
    )


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    @patch("questions.cli.QueryService.search")
    def test_prints_json_lines(self, mock_search):
        mock_search.return_value = [_question("1"), _question("2", edited=True)]

        result = self.runner.invoke(cli, ["simulink"])

        self.assertEqual(result.exit_code, 0, result.output)
        lines = [json.loads(line) for line in result.output.splitlines()]
        self.assertEqual([line["id"] for line in lines], ["1", "2"])
        self.assertIsNone(lines[0]["author"])
        mock_search.assert_called_once_with("simulink")

    @patch("questions.cli.QueryService.search")
    def test_unedited_and_limit(self, mock_search):
        mock_search.return_value = [_question("1"), _question("2", edited=True), _question("3"), _question("4")]

        result = self.runner.invoke(cli, ["--unedited", "--limit", "2"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual([json.loads(line)["id"] for line in result.output.splitlines()], ["1", "3"])
        mock_search.assert_called_once_with("")

    @patch("questions.cli.QueryService.search", side_effect=FetchError("Timed out fetching feed"))
    def test_failure_exits_non_zero(self, _mock_search):
        result = self.runner.invoke(cli, ["fft"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Failed to fetch questions", result.output)


if __name__ == "__main__":
    unittest.main()

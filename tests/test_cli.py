"""Tests for the command-line interface."""

import json
import math
import pytest
from click.testing import CliRunner
from attribute_converter import __version__
from attribute_converter.cli import main


class TestCLI:
    """Tests for the click command group."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def _write(self, temp_dir, name, data):
        path = temp_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    def test_version(self):
        """Test the version option."""
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_marshall_to_stdout(self, temp_dir):
        """Test marshalling a native record."""
        path = self._write(temp_dir, "user.json", {
            "id": 575,
            "price": 19.99,
            "name": "Danny",
            "tags": ["a"],
            "note": "",
        })

        result = self.runner.invoke(main, ["marshall", str(path)])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "id": {"N": "575"},
            "price": {"N": "19.99"},
            "name": {"S": "Danny"},
            "tags": {"L": [{"S": "a"}]},
            "note": {"S": ""},
        }

    def test_marshall_convert_empty_values_to_file(self, temp_dir):
        """Test marshalling with options into an output file."""
        path = self._write(temp_dir, "in.json", {"note": ""})
        output = temp_dir / "out.json"

        result = self.runner.invoke(main, [
            "marshall", str(path), "--convert-empty-values", "-o", str(output)
        ])

        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8")) == {"note": {"NULL": True}}

    def test_unmarshall(self, temp_dir):
        """Test unmarshalling a tagged record with binary and sets."""
        path = self._write(temp_dir, "record.json", {
            "name": {"S": "Danny"},
            "pic": {"B": "AP8="},
            "colors": {"SS": ["red", "blue"]},
            "big": {"N": "12"},
        })

        result = self.runner.invoke(main, ["unmarshall", str(path), "--wrap-numbers"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "name": "Danny",
            "pic": "AP8=",
            "colors": ["red", "blue"],
            "big": 12,
        }

    def test_unmarshall_invalid_number_is_nan(self, temp_dir):
        """Test that non-numeric N text decodes leniently but fails validation."""
        path = self._write(temp_dir, "lenient.json", {"n": {"N": "twelve"}})

        result = self.runner.invoke(main, ["unmarshall", str(path)])
        checked = self.runner.invoke(main, ["validate", str(path)])

        assert result.exit_code == 0
        assert math.isnan(json.loads(result.output)["n"])
        assert checked.exit_code == 1
        assert "not numeric" in checked.output

    def test_unmarshall_conversion_error_reports_suggestion(self, temp_dir):
        """Test conversion failures exit non-zero with a suggestion."""
        path = self._write(temp_dir, "bad.json", {"pic": {"B": 5}})

        result = self.runner.invoke(main, ["unmarshall", str(path)])

        assert result.exit_code == 1
        assert "B payload must be binary" in result.output
        assert "Check the input shape" in result.output

    def test_invalid_json_input(self, temp_dir):
        """Test that syntax errors are reported before conversion."""
        path = temp_dir / "broken.json"
        path.write_text("{", encoding="utf-8")

        result = self.runner.invoke(main, ["marshall", str(path)])

        assert result.exit_code == 1
        assert "Invalid input" in result.output

    def test_validate(self, temp_dir):
        """Test the validate command on good and bad records."""
        good = self._write(temp_dir, "good.json", {"a": {"S": "x"}})
        bad = self._write(temp_dir, "bad.json", {"a": {"S": "x", "N": "1"}})

        good_result = self.runner.invoke(main, ["validate", str(good)])
        bad_result = self.runner.invoke(main, ["validate", str(bad)])

        assert good_result.exit_code == 0
        assert "valid attribute record" in good_result.output
        assert bad_result.exit_code == 1
        assert "multiple type keys" in bad_result.output

"""Unit tests for the Ok/Err result type."""

from structview.core.result import Err, Ok


class TestResult:
    def test_ok_keeps_value(self):
        assert Ok(3).unwrap_or(0) == 3

    def test_err_falls_back_to_default(self):
        result = Err("No root found")
        assert result.error == "No root found"
        assert result.unwrap_or(None) is None

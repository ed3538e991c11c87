"""
Unit tests for the 'pages' command.
"""

from unittest.mock import patch

from click.testing import CliRunner

from structview.cli.commands.pages import pages
from structview.loading.loader import LoadError
from structview.loading.site import SitePage


class TestPagesCommand:
    @patch("structview.cli.commands.pages.fetch_site_pages")
    def test_lists_pages(self, mock_fetch):
        mock_fetch.return_value = [
            SitePage(title="Home", page_id="c1dmp", json_url="https://pages.parastorage.com/sites/1.json"),
            SitePage(title="About", page_id="x9"),
        ]
        runner = CliRunner()
        result = runner.invoke(pages, ["https://site.test"])

        assert result.exit_code == 0
        assert "Pages (2)" in result.output
        assert "Home" in result.output
        assert "unavailable" in result.output
        assert mock_fetch.call_args[0][0] == "https://site.test"

    @patch("structview.cli.commands.pages.fetch_site_pages")
    def test_no_pages(self, mock_fetch):
        mock_fetch.return_value = []
        runner = CliRunner()
        result = runner.invoke(pages, ["https://site.test"])

        assert result.exit_code == 0
        assert "No pages found." in result.output

    @patch("structview.cli.commands.pages.fetch_site_pages")
    def test_fetch_failure(self, mock_fetch):
        mock_fetch.side_effect = LoadError("https://site.test", "Upstream error 500")
        runner = CliRunner()
        result = runner.invoke(pages, ["https://site.test"])

        assert result.exit_code == 1
        assert "Upstream error 500" in result.output

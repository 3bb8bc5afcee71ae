"""
Tests for the command line interface.
"""

import json
import logging

from gs1_dl_parser.__main__ import main


URI = "https://id.gs1.org/01/09520123456788/10/ABC1/21/12345?17=180426"


class TestCLI:
    """Tests for python -m gs1_dl_parser."""

    def test_all_renderings(self, capsys):
        assert main([URI]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 9
        assert lines[0].startswith("Provided Digital Link URI:")
        assert lines[0].endswith(URI)

        values = [line.split()[-1] for line in lines[1:]]
        assert values == [
            "^010952012345678810ABC1^2112345^17180426",
            "^0109520123456788^10ABC1^2112345^17180426",
            "^01095201234567881718042610ABC1^2112345",
            "^0109520123456788^17180426^10ABC1^2112345",
            "(01)09520123456788(10)ABC1(21)12345(17)180426",
            "(01)09520123456788(17)180426(10)ABC1(21)12345",
            '{"01":"09520123456788","10":"ABC1","21":"12345","17":"180426"}',
            '{"01":"09520123456788","17":"180426","10":"ABC1","21":"12345"}',
        ]

    def test_single_format(self, capsys):
        assert main([URI, "--format", "bracketed", "--fixed-first"]) == 0

        assert capsys.readouterr().out == \
            "(01)09520123456788(17)180426(10)ABC1(21)12345\n"

    def test_unbracketed_extra_fnc1(self, capsys):
        assert main([URI, "--format", "unbracketed", "--extra-fnc1"]) == 0

        assert capsys.readouterr().out == \
            "^0109520123456788^10ABC1^2112345^17180426\n"

    def test_json_format(self, capsys):
        assert main([URI, "--format", "json"]) == 0

        assert json.loads(capsys.readouterr().out) == {
            "01": "09520123456788",
            "10": "ABC1",
            "21": "12345",
            "17": "180426",
        }

    def test_error(self, capsys):
        assert main(["https://a/01/12312312312333?99="]) == 1

        assert capsys.readouterr().out == "Error: AI (99) value query element is empty\n"

    def test_details(self, capsys):
        assert main([URI, "--details"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["domain"] == "id.gs1.org"
        assert data["query"] == "17=180426"
        assert [e["ai"] for e in data["elements"]] == ["01", "10", "21", "17"]

    def test_details_on_error(self, capsys):
        assert main(["ftp://a", "--details"]) == 1

        data = json.loads(capsys.readouterr().out)
        assert data["success"] is False
        assert data["error"]["code"] == "BAD_SCHEME"

    def test_verbose_logs_trace(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="gs1_dl_parser"):
            assert main([URI, "--verbose", "--format", "json"]) == 0

        messages = [record.getMessage() for record in caplog.records]
        assert "Parsing DL data successful" in messages
        assert "  Extracted: (17) 180426" in messages

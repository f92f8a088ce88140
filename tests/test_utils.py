"""Tests for gridtables.utils."""

from gridtables.utils import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "gridtables.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("gridtables.parser").name == "gridtables.parser"
        assert get_logger("gridtables").name == "gridtables"

    def test_does_not_match_lookalike_prefix(self) -> None:
        assert get_logger("gridtablesx").name == "gridtables.gridtablesx"

    def test_module_loggers_share_package_root(self) -> None:
        from gridtables import document, parser

        assert parser.logger.name == "gridtables.parser"
        assert document.logger.name == "gridtables.document"

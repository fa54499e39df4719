import pytest

from echonova import DisplayError, DisplayType, Priority
from echonova.errors import error_hint, error_message, iter_causes
from echonova.heuristics import PlaceholderRule, choose_placeholder


class TestPriority:
    def test_ordering(self):
        assert Priority.DEBUG < Priority.LOW < Priority.MEDIUM < Priority.HIGH < Priority.SILENT

    @pytest.mark.parametrize("name, expected", [("debug", Priority.DEBUG), (" High ", Priority.HIGH)])
    def test_parse(self, name, expected):
        assert Priority.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Available: debug, low, medium, high, silent"):
            Priority.parse("loud")


def test_non_essential_types_follow_warning():
    essential = [t for t in DisplayType if t < DisplayType.WARNING]
    assert essential == [DisplayType.ERROR]


class TestErrors:
    def test_display_error_fields(self):
        cause = OSError("refused")
        error = DisplayError("Failed to connect", hint="Retry later", cause=cause)

        assert error_message(error) == "Failed to connect"
        assert error_hint(error) == "Retry later"
        assert list(iter_causes(error)) == [cause]

    def test_plain_exception(self):
        error = KeyError("missing")

        assert error_message(error) == "'missing'"
        assert error_hint(error) == ""
        assert list(iter_causes(error)) == []

    def test_empty_message_uses_type_name(self):
        assert error_message(ValueError()) == "ValueError"
        assert error_message(DisplayError("")) == "DisplayError"

    def test_cyclic_cause_chain_terminates(self):
        first = DisplayError("first")
        second = DisplayError("second", cause=first)
        first.__cause__ = second

        assert list(iter_causes(first)) == [second]


class TestPlaceholder:
    @pytest.mark.parametrize(
        "category, message, expected",
        [
            ("Executing", "nimble printPkgInfo", "Scanning"),
            ("Running", "printPkgInfo", "Working"),
            ("Executing", "git clone repo", "Updating"),
            ("Info", "cloning with git", "Working"),
            ("Info", "", "Working"),
        ],
    )
    def test_default_rules(self, category, message, expected):
        assert choose_placeholder(category, message) == expected

    def test_first_matching_rule_wins(self):
        rules = [
            PlaceholderRule("First", lambda c, m: "x" in m),
            PlaceholderRule("Second", lambda c, m: True),
        ]

        assert choose_placeholder("Info", "xyz", rules) == "First"
        assert choose_placeholder("Info", "abc", rules) == "Second"

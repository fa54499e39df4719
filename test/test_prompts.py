"""Tests for yes/no, free-text and list prompts."""

import pytest

from echonova import ForcePrompt, Priority
from echonova.renderer import align_category


class TestPrompt:
    """Tests for the yes/no prompt."""

    @pytest.mark.parametrize(
        "force, expected, label",
        [
            (ForcePrompt.FORCE_YES, True, "[forced yes]"),
            (ForcePrompt.FORCE_NO, False, "[forced no]"),
        ],
    )
    def test_forced_prompt_never_reads(self, make_session, force, expected, label):
        session, term = make_session(lines=["n"])

        assert session.prompt(force, "Overwrite?") is expected
        assert term.lines_read == 0
        assert term.output == align_category("Prompt:") + f"Overwrite? -> {label}\n"

    @pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES ", "Yes"])
    def test_yes_answers(self, make_session, answer):
        session, _ = make_session(lines=[answer])

        assert session.prompt(ForcePrompt.DONT_FORCE, "Continue?") is True

    @pytest.mark.parametrize("answer", ["", "n", "no", "yep", "sure"])
    def test_anything_else_is_no(self, make_session, answer):
        session, _ = make_session(lines=[answer])

        assert session.prompt(ForcePrompt.DONT_FORCE, "Continue?") is False

    def test_prompt_shows_question_and_answer_label(self, make_session):
        session, term = make_session(lines=["y"])

        session.prompt(ForcePrompt.DONT_FORCE, "Continue?")

        assert term.output == (
            align_category("Prompt:") + "Continue? [y/N]\n" + align_category("Answer:")
        )

    def test_silent_verbosity_answers_yes(self, make_session):
        session, term = make_session(lines=["n"], verbosity=Priority.SILENT)

        assert session.prompt(ForcePrompt.DONT_FORCE, "Continue?") is True
        assert term.lines_read == 0
        assert term.output == ""

    def test_closed_input_raises(self, make_session):
        session, _ = make_session()

        with pytest.raises(EOFError):
            session.prompt(ForcePrompt.DONT_FORCE, "Continue?")


class TestPromptCustom:
    """Tests for the free-text prompt."""

    def test_repeats_until_answer_is_given(self, make_session):
        session, term = make_session(lines=["", "", "Ada"])

        assert session.prompt_custom(ForcePrompt.DONT_FORCE, "Your name") == "Ada"
        assert term.lines_read == 3
        # The repeated question is a duplicate warning, only the answer label repeats
        assert term.output.count("Your name\n") == 1
        assert term.output.count("Answer:") == 3

    def test_empty_answer_selects_default(self, make_session):
        session, term = make_session(lines=[""])

        assert session.prompt_custom(ForcePrompt.DONT_FORCE, "Your name", "User") == "User"
        assert "Your name [User]\n" in term.output

    def test_typed_answer_overrides_default(self, make_session):
        session, _ = make_session(lines=["Grace"])

        assert session.prompt_custom(ForcePrompt.DONT_FORCE, "Your name", "User") == "Grace"

    @pytest.mark.parametrize("force", [ForcePrompt.FORCE_YES, ForcePrompt.FORCE_NO])
    def test_forced_returns_default(self, make_session, force):
        session, term = make_session(lines=["ignored"])

        assert session.prompt_custom(force, "Your name", "User") == "User"
        assert term.lines_read == 0
        assert "Your name -> [forced User]" in term.output


class TestPromptList:
    """Tests for list prompts on non-interactive terminals and forced modes."""

    def test_empty_options_rejected(self, make_session):
        session, _ = make_session()

        with pytest.raises(ValueError):
            session.prompt_list(ForcePrompt.FORCE_YES, "Pick", [])

    @pytest.mark.parametrize("force", [ForcePrompt.FORCE_YES, ForcePrompt.FORCE_NO])
    def test_forced_returns_first_option(self, make_session, force):
        session, term = make_session(keys="\t\r", interactive=True)

        assert session.prompt_list(force, "Pick", ["a", "b"]) == "a"
        assert term.keys_read == 0
        assert "Pick -> [forced a]" in term.output

    def test_fallback_matches_case_insensitively(self, make_session):
        session, term = make_session(lines=["  option 2 "])

        choice = session.prompt_list(
            ForcePrompt.DONT_FORCE, "Choose", ["Option 1", "Option 2", "Option 3"]
        )

        assert choice == "Option 2"
        assert "Choose [Option 1/Option 2/Option 3]\n" in term.output
        assert term.keys_read == 0

    def test_fallback_without_match_returns_none(self, make_session):
        session, _ = make_session(lines=["Option 9"])

        assert session.prompt_list(ForcePrompt.DONT_FORCE, "Choose", ["Option 1"]) is None

    def test_interactive_terminal_uses_selector(self, make_session):
        session, term = make_session(keys="\t\r", interactive=True)

        assert session.prompt_list(ForcePrompt.DONT_FORCE, "Choose", ["a", "b", "c"]) == "b"
        assert term.lines_read == 0

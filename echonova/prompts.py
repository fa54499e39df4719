"""Yes/no, free-text and list prompts."""

from typing import TYPE_CHECKING, Optional, Sequence

from utils import get_logger

from .selector import InteractiveSelector, fallback_select
from .types import DisplayType, ForcePrompt, Priority

if TYPE_CHECKING:
    from .session import DisplaySession

logger = get_logger(__name__)

YES_ANSWERS = ("y", "yes")


class PromptEngine:
    """Asks the user questions through a display session.

    Forced prompts answer themselves without reading input, so scripts and
    CI runs never block on a question.
    """

    def __init__(self, session: "DisplaySession"):
        self.session = session

    def _show(self, message: str) -> None:
        self.session.display("Prompt:", message, DisplayType.WARNING, Priority.HIGH)

    def _read_answer(self) -> str:
        self.session.display_category("Answer:", DisplayType.WARNING, Priority.HIGH)
        return self.session.terminal.read_line()

    def prompt(self, force: ForcePrompt, question: str) -> bool:
        """Ask a yes/no question. Anything but "y" or "yes" means no.

        Args:
            force: Answer yes or no without asking, or ask
            question: The question to show

        Returns:
            True for yes, False for no
        """
        if force is ForcePrompt.FORCE_YES:
            self._show(f"{question} -> [forced yes]")
            return True
        if force is ForcePrompt.FORCE_NO:
            self._show(f"{question} -> [forced no]")
            return False

        if self.session.verbosity == Priority.SILENT:
            # Just say "yes" to every prompt, since we need to be 100% silent
            logger.debug(f"Answering yes to silent prompt: {question}")
            return True

        self._show(f"{question} [y/N]")
        answer = self._read_answer().strip().lower()
        return answer in YES_ANSWERS

    def prompt_custom(self, force: ForcePrompt, question: str, default: str = "") -> str:
        """Ask for free text.

        With an empty default the answer is asked for again until something
        is typed; otherwise an empty answer selects the default. The question
        is a warning line, so warning dedup shows it only once while the
        "Answer:" label is repeated.

        Args:
            force: Any forced mode returns the default without asking
            question: The question to show
            default: Value used for an empty answer

        Returns:
            The typed answer or the default
        """
        if force is not ForcePrompt.DONT_FORCE:
            self._show(f"{question} -> [forced {default}]")
            return default

        if default:
            self._show(f"{question} [{default}]")
            answer = self._read_answer()
            return answer if answer else default

        while True:
            self._show(question)
            answer = self._read_answer()
            if answer:
                return answer

    def prompt_list(
        self, force: ForcePrompt, question: str, options: Sequence[str]
    ) -> Optional[str]:
        """Ask the user to pick one of ``options``.

        Args:
            force: Any forced mode picks the first option without asking
            question: The question to show
            options: Choices in display order, must not be empty

        Returns:
            The chosen option. The line-based fallback used on non-interactive
            terminals returns None when the answer matches no option.

        Raises:
            ValueError: If options is empty
            PromptCancelled: If the user cancels the interactive selector
        """
        if not options:
            raise ValueError("prompt_list needs at least one option")

        if force is not ForcePrompt.DONT_FORCE:
            choice = options[0]
            self._show(f"{question} -> [forced {choice}]")
            return choice

        if self.session.terminal.is_interactive():
            return InteractiveSelector(self.session, question, options).run()
        return fallback_select(self.session, question, options)

"""Main entry point for the echonova demo."""

import argparse
import importlib.metadata
import time

import echonova
from config import Config, ensure_config
from echonova import DisplayError, ForcePrompt, Priority
from utils import get_log_file_path, get_logger, setup_logger
from utils.runtime import ensure_runtime_dirs

logger = get_logger(__name__)


def run_demo(session: echonova.DisplaySession, force: ForcePrompt, delay: float = 0.5) -> None:
    """Walk through every kind of message and prompt.

    Args:
        session: Session to display with
        force: Prompt mode, forced modes never wait for input
        delay: Seconds to wait between progress updates
    """
    session.display("Status", "Processing files", echonova.DisplayType.MESSAGE)
    session.display_success("Files processed successfully")
    session.display_warning("Some files were skipped")

    # Progress lines redraw in place
    for i in range(1, 6):
        session.display_progress(f"Processing item {i}")
        time.sleep(delay)

    session.display_line_reset()
    session.display_success("All items processed")

    try:
        raise OSError("Could not open file")
    except OSError as e:
        session.display_error(e)

    err = DisplayError(
        "Failed to connect to server", hint="Check your network connection and try again"
    )
    session.display_error(err)

    if session.prompt(force, "Do you want to continue?"):
        session.display_info("Continuing...")
    else:
        session.display_info("Operation cancelled")

    name = session.prompt_custom(force, "Enter your name", "User")
    session.display_info(f"Hello, {name}")

    option = session.prompt_list(force, "Choose an option", ["Option 1", "Option 2", "Option 3"])
    session.display_info(f"You selected: {option}")

    session.display_debug("Demo finished")
    session.display_tip()


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Show echonova messages, spinners and prompts")

    try:
        version = importlib.metadata.version("echonova")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"echonova {version}")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug messages and log to .echonova/logs/",
    )
    parser.add_argument(
        "--verbosity",
        choices=[p.name.lower() for p in Priority],
        help="Minimum priority of messages to show (default: from config)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress Warning, Message and Success output",
    )
    force = parser.add_mutually_exclusive_group()
    force.add_argument("--yes", "-y", action="store_true", help="Answer every prompt with yes")
    force.add_argument("--no", "-n", action="store_true", help="Answer every prompt with no")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        help="Seconds between progress updates (default: 0.5)",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default .echonova/config and exit",
    )

    args = parser.parse_args()

    if args.init_config:
        path = ensure_config()
        echonova.DisplaySession().display_success(f"Config written to {path}")
        return

    ensure_runtime_dirs(create_logs=args.verbose)

    # Initialize logging only in verbose mode
    if args.verbose:
        setup_logger()

    try:
        Config.validate()
    except ValueError as e:
        # The global session reads the same config, so report through a default one
        echonova.DisplaySession().display_error(
            DisplayError(str(e), hint="Run with --init-config for a template")
        )
        return

    session = echonova.global_session()
    if args.verbose:
        session.set_verbosity(Priority.DEBUG)
    elif args.verbosity:
        session.set_verbosity(Priority.parse(args.verbosity))
    if args.no_color:
        session.set_show_color(False)
    if args.quiet:
        session.set_suppress_messages(True)

    if args.yes:
        force_mode = ForcePrompt.FORCE_YES
    elif args.no:
        force_mode = ForcePrompt.FORCE_NO
    else:
        force_mode = ForcePrompt.DONT_FORCE

    try:
        run_demo(session, force_mode, delay=args.delay)
    except echonova.PromptCancelled:
        session.display_line_reset()
        session.display_error("Cancelled by user")

    log_file = get_log_file_path()
    if log_file:
        logger.info("Demo complete")
        session.display_details(f"Detailed logs: {log_file}")


if __name__ == "__main__":
    main()

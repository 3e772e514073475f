# src/oxify/cli.py

import argparse
import platform
import sys
from difflib import get_close_matches

from apathetic_logging import LEVEL_ORDER, safeLog

from .actions import get_metadata
from .build import run_build
from .config import resolve_config
from .logs import getAppLogger
from .meta import PROGRAM_DISPLAY, PROGRAM_SCRIPT


USAGE_ERROR_EXIT_CODE = 1
POSITIONAL_NAMES = ("source", "target", "plugin_name", "plugin_version")


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # "unrecognized arguments: --verbos ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")

        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(USAGE_ERROR_EXIT_CODE, full + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        usage="%(prog)s [options] SOURCE TARGET PLUGIN_NAME VERSION",
        description="Merge a plugin source tree into a single file.",
    )

    # Counted by hand so a wrong count exits 1 instead of argparse's 2
    parser.add_argument(
        "positionals",
        nargs="*",
        metavar="ARG",
        help=(
            "SOURCE directory, TARGET file, PLUGIN_NAME and VERSION "
            "(all four required)."
        ),
    )

    parser.add_argument(
        "--disable-build-timestamp",
        action="store_true",
        help="Use a fixed placeholder instead of the build time in the header.",
    )

    # --- Color ---
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        "--no-color",
        dest="use_color",
        action="store_const",
        const=False,
        help="Disable ANSI color output.",
    )
    color.add_argument(
        "--color",
        dest="use_color",
        action="store_const",
        const=True,
        help="Force-enable ANSI color output (overrides auto-detect).",
    )
    color.set_defaults(use_color=None)

    # --- Version and verbosity ---
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )
    return parser


def _normalize_positional_args(
    args: argparse.Namespace,
    parser: argparse.ArgumentParser,
) -> bool:
    """Spread the four positionals onto named attributes.

    Returns False (after printing usage) if the count is wrong.
    """
    positionals: list[str] = getattr(args, "positionals", [])
    if len(positionals) != len(POSITIONAL_NAMES):
        parser.print_usage(sys.stderr)
        getAppLogger().error(
            "Expected %d arguments, got %d.", len(POSITIONAL_NAMES), len(positionals)
        )
        return False
    for name, value in zip(POSITIONAL_NAMES, positionals):
        setattr(args, name, value)
    return True


# --------------------------------------------------------------------------- #
# Main entry helpers
# --------------------------------------------------------------------------- #


def _initialize_logger(args: argparse.Namespace) -> None:
    """Initialize logger with CLI args, env vars, and defaults."""
    logger = getAppLogger()
    log_level = logger.determineLogLevel(args=args)
    logger.setLevel(log_level)
    if args.use_color is not None:
        logger.enable_color = args.use_color
    logger.trace("[BOOT] log-level initialized: %s", log_level)

    logger.debug(
        "Runtime: Python %s (%s)\n    %s",
        platform.python_version(),
        platform.python_implementation(),
        sys.version.replace("\n", " "),
    )


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    logger = getAppLogger()  # init (use env + defaults)

    try:
        parser = _setup_parser()
        try:
            # options may sit between positionals: SRC OUT -v NAME VERSION
            args = parser.parse_intermixed_args(argv)
        except SystemExit as e:
            # argparse exits on --help and on parse errors
            return e.code if isinstance(e.code, int) else USAGE_ERROR_EXIT_CODE

        _initialize_logger(args)

        if args.version:
            meta = get_metadata()
            logger.info("%s %s (%s)", PROGRAM_DISPLAY, meta.version, meta.commit)
            return 0

        if not _normalize_positional_args(args, parser):
            return USAGE_ERROR_EXIT_CODE

        resolved = resolve_config(args)
        run_build(resolved)

    except (OSError, ValueError) as e:
        # controlled termination: unreadable sources, unwritable target,
        # undecodable files, bad env values
        try:
            logger.errorIfNotDebug(str(e))
        except Exception:  # noqa: BLE001
            safeLog(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    except Exception as e:  # noqa: BLE001
        try:
            logger.criticalIfNotDebug("Unexpected internal error: %s", e)
        except Exception:  # noqa: BLE001
            safeLog(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    else:
        return 0

"""Command line front-end for the RPN calculator."""

import argparse
from datetime import datetime, timezone
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import BinaryIO, Iterable, List, TextIO, Tuple

from rpn.rpn import RPN
from rpn.rpn_error import RPNEvalError, RPNParseError


BANNER = "Reverse polish notation calculator"
PROMPT = "$ "

MAX_LOG_FILES = 50
MAX_LOG_BYTES = 1024 * 1024


def setup_logging(log_dir: str) -> Path:
    """
    Send all log output to a new timestamped file in log_dir.

    Returns:
        Path of the log file in use
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = log_path / f"{timestamp}.log"

    # Rotated backups count towards the same limit as session files
    handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_BYTES,
        backupCount=MAX_LOG_FILES - 1,
        encoding='utf-8'
    )

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )

    cleanup_old_logs(log_path, max_logs=MAX_LOG_FILES)
    return log_file


def cleanup_old_logs(log_dir: Path, max_logs: int) -> int:
    """
    Delete the least recently modified log files beyond max_logs.

    Returns:
        Number of files removed
    """
    log_files = sorted(log_dir.glob("*.log*"), key=lambda path: path.stat().st_mtime)
    excess = log_files[:max(len(log_files) - max_logs, 0)]

    removed = 0
    for log_file in excess:
        try:
            log_file.unlink()
            removed += 1

        except OSError:
            pass  # Another session may still hold the file

    return removed


def interpret_line(calculator: RPN, line: str, verbose: bool = False) -> Tuple[bool, str]:
    """
    Run one line through the calculator and describe the outcome.

    Args:
        calculator: Calculator to use
        line: Input line
        verbose: Show the parsed expression, in postfix form, and the result type alongside the result

    Returns:
        Tuple of (succeeded, text) where text is the formatted result or a description of the failure
    """
    logger = logging.getLogger("RPNFrontEnd")

    try:
        expr, result = calculator.parse_and_interpret(line)

    except RPNParseError as e:
        logger.warning("could not parse %r: %s", line, e.debug_repr())
        return False, f"Could not parse input: {e.debug_repr()}"

    except RPNEvalError as e:
        logger.warning("could not evaluate %r: %s", line, e.debug_repr())
        return False, f"Could not evaluate expression: {e.debug_repr()}"

    if verbose:
        return True, f"{expr.to_rpn()} => {result} ({result.type_name()})"

    return True, str(result)


def read_line(raw: bytes | str) -> Tuple[bool, str]:
    """
    Decode one line of input.

    Returns:
        Tuple of (succeeded, text) where text is the decoded line or a description of the failure
    """
    if isinstance(raw, str):
        return True, raw

    try:
        return True, raw.decode('utf-8')

    except UnicodeDecodeError as e:
        logging.getLogger("RPNFrontEnd").warning("could not decode %r: %s", raw, e)
        return False, f"Could not read line: {e}"


def run_batch(calculator: RPN, lines: Iterable[bytes | str], output: TextIO, verbose: bool = False) -> None:
    """Interpret each line and write one result per line, carrying on past lines that fail."""
    for raw in lines:
        decoded, text = read_line(raw)
        if decoded:
            _succeeded, text = interpret_line(calculator, text, verbose)

        output.write(text + "\n")


def run_interactive(
    calculator: RPN,
    input_stream: BinaryIO | TextIO,
    output: TextIO,
    verbose: bool = False
) -> None:
    """Prompt for lines until end of input, writing each result after '= '."""
    output.write(BANNER + "\n")
    output.flush()

    while True:
        output.write(PROMPT)
        output.flush()
        raw = input_stream.readline()
        if not raw:
            break

        succeeded, text = read_line(raw)
        if succeeded:
            succeeded, text = interpret_line(calculator, text, verbose)

        output.write((f"= {text}" if succeeded else text) + "\n")
        output.flush()


def main(argv: List[str] | None = None) -> int:
    """Main function to run the calculator."""
    parser = argparse.ArgumentParser(
        prog="rpn",
        description="Evaluate reverse polish notation arithmetic, one expression per line.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rpn "3 1 2 + -"           Evaluate a single expression
  echo "1.5 2 *" | rpn      Evaluate each line read from a pipe
  rpn                       Start an interactive session
        """
    )
    parser.add_argument(
        'expressions',
        nargs='*',
        help='Expressions to evaluate (reads from stdin if none are given)'
    )
    parser.add_argument(
        '--strict',
        action='store_true',
        help='Reject unrecognized input while parsing instead of during evaluation'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Show the parsed expression and result type alongside each result"
    )
    parser.add_argument(
        '--log-dir',
        default=str(Path.home() / ".rpn" / "logs"),
        help='Directory for log files (default: ~/.rpn/logs)'
    )
    parser.add_argument(
        '--no-log',
        action='store_true',
        help='Disable log files'
    )

    args = parser.parse_args(argv)

    logging_enabled = False
    if not args.no_log:
        try:
            setup_logging(args.log_dir)
            logging_enabled = True

        except OSError as e:
            print(f"Warning: cannot write logs to {args.log_dir}: {e}", file=sys.stderr)

    # Failed lines are logged as warnings; without a handler they would leak onto stderr
    if not logging_enabled:
        logging.getLogger().addHandler(logging.NullHandler())

    calculator = RPN(reject_unrecognized=args.strict)

    if args.expressions:
        run_batch(calculator, args.expressions, sys.stdout, args.verbose)
        return 0

    if sys.stdin.isatty():
        run_interactive(calculator, sys.stdin.buffer, sys.stdout, args.verbose)
        return 0

    run_batch(calculator, sys.stdin.buffer, sys.stdout, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())

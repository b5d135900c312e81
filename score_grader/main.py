"""Main execution script for the score grader."""

import sys

from dotenv import load_dotenv

# Load variables from .env before config reads the environment
load_dotenv()

from score_grader import config
from score_grader.utils.logger import get_logger
from score_grader.utils.error_handler import InvalidScoreError, UserCancelledError
from score_grader.core.grader import grade_of, parse_score
import score_grader.ui.cli as cli

EXIT_CODE_OK = 0
EXIT_CODE_USER_ERROR = 1
EXIT_CODE_INTERRUPTED = 130

def main() -> int:
    """Reads one score, prints its letter grade and returns the exit code."""
    logger = get_logger()
    logger.info("Starting score grader.")

    try:
        raw = cli.read_score_input(config.PROMPT_TEXT)
        score = parse_score(raw)
        label = grade_of(score)
        cli.display_grade(label)
        logger.info(f"Score {score} graded as {label}.")
        return EXIT_CODE_OK
    except InvalidScoreError as e:
        logger.warning(f"Rejected input {e.raw!r}: {e}")
        cli.display_error(str(e))
        return EXIT_CODE_USER_ERROR
    except UserCancelledError as e:
        logger.info(f"Operation cancelled by user: {e}")
        cli.display_warning(str(e))
        return EXIT_CODE_USER_ERROR
    except KeyboardInterrupt:
        logger.info("Operation interrupted by user (Ctrl+C).")
        cli.display_warning("Operation interrupted.")
        return EXIT_CODE_INTERRUPTED
    except Exception as e:
        logger.critical(f"An unexpected error occurred: {e}", exc_info=True)
        raise

def run():
    """Console script entry point."""
    sys.exit(main())

if __name__ == "__main__":
    run()

"""Console entry point for the projectile motion calculator."""

import logging

from .calculator import Calculator

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main() -> int:
    """Run the interactive calculator and return the process exit code."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    calc = Calculator()
    try:
        calc.run()
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted by user")
        return 130
    return 0

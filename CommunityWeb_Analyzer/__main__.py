"""
Command-line entry point for CommunityWeb.

Usage:
    python -m CommunityWeb_Analyzer --input edges.txt --analysis girvan_newman
"""

import logging
import sys
from typing import List, Optional

from .config import get_configuration_manager
from .core.exceptions import CommunityWebError
from .output.formatters import EmojiFormatter
from .pipeline import AnalysisPipeline


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set up logging configuration."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # basicConfig is a no-op once handlers exist; the level still applies
    logging.getLogger().setLevel(log_level)
    return logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (uses sys.argv if None)

    Returns:
        Process exit code: 0 on success, 1 on a handled failure
    """
    manager = get_configuration_manager()
    cli_args = manager.parse_cli_args(argv)
    config_file = cli_args.pop("config_file", None)
    logger = setup_logging(cli_args.get("output", {}).get("log_level", "INFO"))

    try:
        config = manager.load_configuration(config_file=config_file, cli_args=cli_args)
        setup_logging(config.output.log_level)
        AnalysisPipeline(config).execute()
    except (CommunityWebError, FileNotFoundError) as e:
        logger.error(EmojiFormatter.format("error", str(e)))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

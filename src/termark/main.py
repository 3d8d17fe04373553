"""Command line entry point for termark."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from .app import TermarkApp
from .config import Config

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


def main(argv: Optional[List[str]] = None) -> None:
    """Open the markdown file named in ``argv`` (default ``sys.argv[1:]``)."""
    args = sys.argv[1:] if argv is None else argv

    config = Config.load()
    config.configure_logging()

    file_path = args[0] if args else None
    if file_path is not None:
        path = Path(file_path)
        if not path.is_file():
            sys.exit(f"termark: no such file: {file_path}")
        if path.suffix.lower() not in MARKDOWN_SUFFIXES:
            logger.warning(f"{path.name} does not look like a markdown file")

    TermarkApp(file_path, config=config).run()


if __name__ == "__main__":
    main()

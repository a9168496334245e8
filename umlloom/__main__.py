import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .core.ast_parser import parse_directory
from .core.config import load_config
from .core.diagrams import DiagramOutputError, DiagramService
from .core.model import build_type_model


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


logger = logging.getLogger(__name__)

# Constants
DEFAULT_OUTPUT_DIR = "diagrams"


def main(argv=None) -> int:
    """Main entry point for umlloom."""
    load_dotenv()

    parser = argparse.ArgumentParser(description="umlloom - PlantUML class diagrams from Java sources")
    parser.add_argument(
        "source_dir",
        type=str,
        help="Root directory of the Java sources"
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help="Directory receiving the .puml files"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Diagram configuration file (YAML)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    source_dir = Path(args.source_dir)
    if not source_dir.is_dir():
        logger.error(f"Source directory not found: {source_dir}")
        return 1

    config = load_config(args.config)
    results = parse_directory(str(source_dir))
    type_model = build_type_model(results)
    logger.info(f"Discovered {len(type_model)} types in {len(results)} files")

    try:
        written = DiagramService(type_model, config).write_all(args.output_dir)
    except DiagramOutputError as e:
        logger.error(str(e))
        return 1

    print(f"Wrote {len(written)} diagrams to {args.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

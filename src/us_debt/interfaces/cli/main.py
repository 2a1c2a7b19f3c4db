import argparse
import logging
from pathlib import Path
from typing import Optional

import colorlog

from us_debt import __version__ as _PACKAGE_VERSION


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _resolve_report_path(option, input_path: Path, suffix: str) -> Path:
    """Resolve where a report goes.

    With no value the report is written next to the input. A value ending in
    the report's own suffix (``.md`` or ``.json``) is taken as the file path;
    any other value is a directory, created if needed.
    """
    name = f"{input_path.stem}_validation{suffix}"
    if option is True:
        return input_path.parent / name
    target = Path(option)
    if target.suffix.lower() == suffix:
        target.parent.mkdir(parents=True, exist_ok=True)
        return target
    target.mkdir(parents=True, exist_ok=True)
    return target / name


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a US debt dataset file and print the report.

    Returns:
        0 if validation passed (no errors; no warnings either under --strict)
        2 if validation errors were found, or arguments were invalid
        3 if the dataset or config could not be read
    """
    from us_debt.ingestion.loader import load_dataset
    from us_debt.validation import load_config, print_report, run_validation

    if not getattr(args, "input", None):
        logging.error("--input is required")
        return 2
    input_path = Path(args.input).resolve()

    config = None
    config_arg = getattr(args, "config", None)
    if config_arg:
        try:
            config = load_config(Path(config_arg).resolve())
        except (FileNotFoundError, ValueError) as e:
            logging.error("Failed to load validation config: %s", e)
            return 3

    try:
        entries = load_dataset(input_path)
    except (FileNotFoundError, ValueError) as e:
        logging.error("Failed to load dataset: %s", e)
        return 3

    logging.info("Validating %d entries from %s...", len(entries), input_path.name)
    report = run_validation(entries, config)

    strict = bool(getattr(args, "strict", False))
    if report.has_errors(strict=strict):
        logging.warning(
            "Validation failed for %s: %d errors, %d warnings",
            input_path.name,
            report.get_error_count(),
            report.get_warning_count(),
        )
    else:
        logging.info("Validation passed for %s", input_path.name)

    print_report(report)

    report_md = getattr(args, "report", False)
    if report_md:
        report_path = _resolve_report_path(report_md, input_path, ".md")
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report.to_markdown())
        logging.info("Markdown report saved: %s", report_path)

    report_json = getattr(args, "report_json", False)
    if report_json:
        report_path = _resolve_report_path(report_json, input_path, ".json")
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report.to_json())
        logging.info("JSON report saved: %s", report_path)

    return 2 if report.has_errors(strict=strict) else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="us-debt",
        description=f"US Debt Tools (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate a debt dataset file")
    p_validate.add_argument(
        "--input",
        required=True,
        help="Path to the dataset (.csv, .json, .yaml)",
    )
    p_validate.add_argument(
        "--config",
        default=None,
        help="YAML file overriding validation tolerances and thresholds",
    )
    p_validate.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as errors for the exit code",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help=(
            "Write the Markdown report next to the input file. "
            "Optionally specify a directory or a .md file path."
        ),
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help=(
            "Write the JSON report next to the input file. "
            "Optionally specify a directory or a .json file path."
        ),
    )
    p_validate.set_defaults(func=cmd_validate)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())

import argparse
import logging
from pathlib import Path
from typing import Optional

import colorlog

from business_id.core.enums import ReportFormat

# Report format choices for argparse
REPORT_FORMAT_CHOICES = [f.value for f in ReportFormat]

try:
    # Prefer package-defined version
    from business_id import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover
    from importlib.metadata import PackageNotFoundError, version as _pkg_version

    try:
        _PACKAGE_VERSION = _pkg_version("finnish-business-id")
    except PackageNotFoundError:
        _PACKAGE_VERSION = "unknown"


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


def _render(result, report_format: ReportFormat) -> str:
    if report_format == ReportFormat.MARKDOWN:
        return result.to_markdown()
    if report_format == ReportFormat.JSON:
        return result.to_json()
    return result.to_console_summary()


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a single business id and print the report.

    Returns:
        0 if the business id is valid
        1 if the report file could not be written
        2 if the business id is invalid
    """
    from business_id.validation import validate_business_id

    try:
        report_format = ReportFormat(getattr(args, "format", None) or ReportFormat.TEXT.value)
    except ValueError:
        logging.error(
            "Unknown report format: '%s'. Valid formats: %s",
            args.format,
            ", ".join(REPORT_FORMAT_CHOICES),
        )
        return 2

    result = validate_business_id(args.business_id)
    content = _render(result, report_format)
    print(content)

    if result.is_valid:
        logging.info("Business id %s is valid", args.business_id)
    else:
        logging.warning(
            "Business id %s is invalid: %d reasons",
            args.business_id,
            len(result.reasons),
        )

    report = getattr(args, "report", None)
    if report:
        report_path = Path(report)
        try:
            report_path.parent.mkdir(parents=True, exist_ok=True)
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(content)
                f.write("\n")
        except OSError as e:
            logging.error("Failed to write report %s: %s", report_path, e)
            return 1
        logging.info("%s report saved: %s", report_format.value.capitalize(), report_path)

    return 0 if result.is_valid else 2


def cmd_check_digit(args: argparse.Namespace) -> int:
    """Print the check digit and full business id for a 7-digit base.

    Returns:
        0 on success
        2 if the base is malformed or cannot form a valid business id
    """
    from business_id.validation import calculate_check_digit
    from business_id.validation.config import FORBIDDEN_CHECK_DIGIT, SEPARATOR

    try:
        check_digit = calculate_check_digit(args.base)
    except ValueError as e:
        logging.error("%s", e)
        return 2

    if check_digit > 9 or check_digit == FORBIDDEN_CHECK_DIGIT:
        logging.error(
            "Base %s yields check digit %d; no valid business id exists for it",
            args.base,
            check_digit,
        )
        return 2

    print(f"Check digit: {check_digit}")
    print(f"Business ID: {args.base}{SEPARATOR}{check_digit}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="business-id",
        description=f"Finnish Business ID tools (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_PACKAGE_VERSION}")
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

    p_validate = sub.add_parser("validate", help="Validate a business id (Y-tunnus)")
    p_validate.add_argument("business_id", help="Business id to validate, e.g. 0204819-8")
    p_validate.add_argument(
        "--format",
        type=str.lower,
        choices=REPORT_FORMAT_CHOICES,
        default=ReportFormat.TEXT.value,
        help="Report format (case insensitive). Defaults to text.",
    )
    p_validate.add_argument(
        "--report",
        default=None,
        help="Also write the report to this file",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_check_digit = sub.add_parser(
        "check-digit", help="Calculate the check digit for a 7-digit base"
    )
    p_check_digit.add_argument("base", help="The 7 digits before the separator, e.g. 0204819")
    p_check_digit.set_defaults(func=cmd_check_digit)

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

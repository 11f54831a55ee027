import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

import colorlog

from adif_tools import __version__ as _PACKAGE_VERSION


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


def _parse_assignments(items: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated FIELD=VALUE arguments into a dict."""
    result: Dict[str, str] = {}
    for item in items or []:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"Expected FIELD=VALUE, got {item!r}")
        result[name.strip().upper()] = value
    return result


def _write_report(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate one or more CSV logs.

    Unreadable files are logged and counted as failures; the remaining files
    are still validated.

    Returns:
        0 if every file validated without errors
        1 if no file was validated
        2 if any validation errors were found (warnings too with --strict)
          or any file could not be read
    """
    from adif_tools.core.errors import SpecConfigurationError
    from adif_tools.core.utils import get_report_paths
    from adif_tools.validation import registry

    strict = bool(getattr(args, "strict", False))
    validated = 0
    failed = False
    results: List[dict] = []

    for name in args.files:
        log_path = Path(name)
        logging.info("Validating %s...", log_path)
        try:
            records = registry.load_records(log_path)
            report = registry.run_validation(records, source_path=log_path)
        except FileNotFoundError as e:
            logging.error("Log not found: %s", e)
            results.append({"file": str(log_path), "status": "MISSING"})
            failed = True
            continue
        except SpecConfigurationError as e:
            logging.critical("Specification tables are invalid: %s", e)
            return 2
        except (ValueError, OSError) as e:
            logging.error("Error validating %s: %s", log_path, e)
            results.append({"file": str(log_path), "status": "ERROR"})
            failed = True
            continue

        validated += 1
        error_count = report.get_error_count()
        warning_count = report.get_warning_count()
        has_errors = report.has_errors(strict=strict)
        if has_errors:
            failed = True
            logging.warning(
                "Validation failed for %s: %d errors, %d warnings",
                log_path,
                error_count,
                warning_count,
            )
        else:
            logging.info("Validation passed for %s", log_path)

        registry.print_report(report)

        if args.report:
            report_dir = None if args.report is True else Path(args.report)
            md_path, _ = get_report_paths(log_path, report_dir)
            _write_report(md_path, report.to_markdown())
            logging.info("Markdown report saved: %s", md_path)

        if args.report_json:
            report_dir = None if args.report_json is True else Path(args.report_json)
            _, json_path = get_report_paths(log_path, report_dir)
            _write_report(json_path, report.to_json())
            logging.info("JSON report saved: %s", json_path)

        results.append(
            {
                "file": str(log_path),
                "status": "FAIL" if has_errors else "OK",
                "errors": error_count,
                "warnings": warning_count,
            }
        )

    if len(args.files) > 1 and results:
        logging.info("Validation Summary:")
        for entry in results:
            if entry["status"] in ("OK", "FAIL"):
                logging.info(
                    "%s: %s (%d errors, %d warnings)",
                    entry["file"],
                    "PASSED" if entry["status"] == "OK" else "FAILED",
                    entry["errors"],
                    entry["warnings"],
                )
            else:
                logging.info("%s: %s", entry["file"], entry["status"])

    if validated == 0:
        logging.error("No logs validated.")
        return 1
    return 2 if failed else 0


def cmd_check(args: argparse.Namespace) -> int:
    """Validate a single field value, printing its validity and message.

    Returns:
        0 if the value is valid, 2 otherwise (including unknown fields).
    """
    from adif_tools.core.errors import SpecConfigurationError
    from adif_tools.validation import mapping_context, validate_field

    try:
        ctx = mapping_context(_parse_assignments(args.context))
        result = validate_field(args.field, args.value, ctx)
    except SpecConfigurationError as e:
        logging.error("%s", e)
        return 2
    except ValueError as e:
        logging.error("Invalid --with argument: %s", e)
        return 2

    if result.is_valid:
        print(f"{args.field.upper()}: valid")
        return 0
    print(f"{args.field.upper()}: {result.validity.label}: {result.message}")
    return 2


def cmd_version(args: argparse.Namespace) -> int:
    from adif_tools.spec import default_registry

    tables = default_registry()
    print(f"adif-tools version {_PACKAGE_VERSION}")
    print(f"ADIF version {tables.adif_version} from {tables.spec_url}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="adif-tools",
        description=f"ADIF Validation Tools (v{_PACKAGE_VERSION})",
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

    p_validate = sub.add_parser("validate", help="Validate the fields of CSV logs")
    p_validate.add_argument(
        "files",
        nargs="+",
        help="CSV logs with one record per row and ADIF field names as column headers",
    )
    p_validate.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as errors for the exit status",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed Markdown report (one per file). Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed JSON report (one per file). Optionally specify custom directory path.",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_check = sub.add_parser("check", help="Validate a single field value")
    p_check.add_argument("field", help="ADIF field name (case insensitive)")
    p_check.add_argument("value", help="Raw field value")
    p_check.add_argument(
        "--with",
        dest="context",
        action="append",
        metavar="FIELD=VALUE",
        help="Other field of the same record, e.g. --with DXCC=291 (repeatable)",
    )
    p_check.set_defaults(func=cmd_check)

    p_version = sub.add_parser("version", help="Print program and ADIF table versions")
    p_version.set_defaults(func=cmd_version)

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

"""
CLI entry point for the decision criteria engine.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

import structlog

from decision_criteria.exceptions import DecisionCriteriaError

logger = structlog.get_logger(__name__)


def parse_matrix(text: str) -> List[List[float]]:
    """Parse "10,0;4,4" into [[10.0, 0.0], [4.0, 4.0]]."""
    rows = [row for row in text.split(";") if row.strip()]
    return [[float(cell) for cell in row.split(",")] for row in rows]


def parse_vector(text: str) -> List[float]:
    """Parse "0.5,0.5" into [0.5, 0.5]."""
    return [float(cell) for cell in text.split(",") if cell.strip()]


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i", "--input",
        help="JSON file with a 'matrix' (and 'probabilities' for risk)"
    )
    parser.add_argument(
        "-m", "--matrix",
        help="Inline matrix, rows separated by ';' and cells by ',' (e.g. '10,0;4,4')"
    )
    parser.add_argument(
        "--config",
        help="JSON file with analysis configuration"
    )
    parser.add_argument(
        "-f", "--format",
        choices=["text", "json", "markdown"],
        help="Report format (default: text, or inferred from --output)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file for report (format inferred from extension)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each criterion computation"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decision-criteria",
        description="Decision criteria engine - Choose among alternatives under uncertainty or risk"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Uncertainty command
    unc_parser = subparsers.add_parser(
        "uncertainty", help="Maximax, Minimax/Maximin, Hurwicz and Savage criteria"
    )
    _add_common_arguments(unc_parser)
    unc_parser.add_argument(
        "--alpha-optimistic",
        type=float,
        help="Optimistic Hurwicz coefficient (default: 0.8)"
    )
    unc_parser.add_argument(
        "--alpha-pessimistic",
        type=float,
        help="Pessimistic Hurwicz coefficient (default: 0.3)"
    )
    unc_parser.add_argument(
        "--view",
        choices=["minimax", "maximin"],
        help="Worst-case criterion to report (default: minimax)"
    )

    # Risk command
    risk_parser = subparsers.add_parser(
        "risk", help="Bayesian, minimum variance, threshold and modal criteria"
    )
    _add_common_arguments(risk_parser)
    risk_parser.add_argument(
        "-p", "--probabilities",
        help="Inline probabilities separated by ',' (e.g. '0.5,0.5')"
    )
    risk_parser.add_argument(
        "-t", "--threshold",
        type=float,
        help="Threshold for the probability-above-threshold criterion (default: 0)"
    )

    return parser


def load_inputs(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect matrix and probabilities from --input and inline flags."""
    data: Dict[str, Any] = {}
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            data = json.load(f)
    if args.matrix:
        data["matrix"] = parse_matrix(args.matrix)
    if getattr(args, "probabilities", None):
        data["probabilities"] = parse_vector(args.probabilities)
    return data


def load_config(args: argparse.Namespace):
    """Merge the config file with command-line overrides."""
    from decision_criteria.config import AnalysisConfig

    values: Dict[str, Any] = {}
    if args.config:
        values = AnalysisConfig.from_json_file(args.config).to_dict()

    overrides = {
        "alpha_optimistic": getattr(args, "alpha_optimistic", None),
        "alpha_pessimistic": getattr(args, "alpha_pessimistic", None),
        "worst_case_view": getattr(args, "view", None),
        "threshold": getattr(args, "threshold", None),
        "output_format": args.format,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return AnalysisConfig.from_dict(values)


def run_analysis(args: argparse.Namespace) -> str:
    """Run the requested analysis and return (or save) the report."""
    from decision_criteria.analysis import analyze_risk, analyze_uncertainty
    from decision_criteria.output.reporter import Reporter, ReportFormat

    config = load_config(args)
    data = load_inputs(args)

    if "matrix" not in data:
        raise DecisionCriteriaError("No payoff matrix given (use --input or --matrix)")

    if args.command == "risk":
        if "probabilities" not in data:
            raise DecisionCriteriaError(
                "No probabilities given (use --input or --probabilities)"
            )
        analysis = analyze_risk(data["matrix"], data["probabilities"], config)
    else:
        analysis = analyze_uncertainty(data["matrix"], config)

    reporter = Reporter(analysis)
    if args.output:
        fmt = ReportFormat.from_name(args.format) if args.format else None
        reporter.save(args.output, fmt)
        return f"Report saved to: {args.output}"
    return reporter.generate(ReportFormat.from_name(config.output_format))


def main(argv: Optional[List[str]] = None) -> int:
    from decision_criteria.logging_setup import configure_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose, json_logs=args.json_logs)

    try:
        output = run_analysis(args)
    except DecisionCriteriaError as e:
        logger.debug("analysis_rejected", **e.to_dict())
        print(f"error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        # Unparseable numbers in inline or file input
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        # Unreadable --input, --config or --output path
        print(f"error: {e.strerror or e}: {e.filename}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

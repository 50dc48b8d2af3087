"""
Command-line interface for SAX-VSM.
"""

import argparse
import json
import logging
import sys

from saxvsm import SAXParams, NumerosityReduction, SAXVSMError
from saxvsm.classification import evaluate, format_results
from saxvsm.utils import describe_dataset, load_dimensions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="saxvsm",
        description="SAX-VSM: symbolic multi-dimensional time series classifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Dimension i of a dataset is read from <prefix><i>.txt, "
            "one UCR-formatted series per line."
        ),
    )

    parser.add_argument("--train", required=True, help="Training data path prefix")
    parser.add_argument("--test", required=True, help="Test data path prefix")
    parser.add_argument(
        "--dimensions", type=int, default=1, help="Number of data dimensions"
    )
    parser.add_argument(
        "-w", "--window-size", type=int, default=30, help="SAX sliding window size"
    )
    parser.add_argument("-p", "--paa-size", type=int, default=6, help="SAX PAA size")
    parser.add_argument(
        "-a", "--alphabet-size", type=int, default=6, help="SAX alphabet size"
    )
    parser.add_argument(
        "--strategy",
        choices=[s.name for s in NumerosityReduction],
        default=NumerosityReduction.EXACT.name,
        help="SAX numerosity reduction strategy",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=0.01,
        help="SAX normalization threshold",
    )
    parser.add_argument(
        "--mindist-tolerance",
        type=int,
        default=1,
        help="Positions allowed to drift by one symbol under MINDIST",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose output"
    )
    return parser


def parameter_banner(args: argparse.Namespace) -> str:
    """Human-readable summary of the run parameters."""
    rows = [
        ("train data:", args.train),
        ("test data:", args.test),
        ("num dimensions:", args.dimensions),
        ("SAX sliding window size:", args.window_size),
        ("SAX PAA size:", args.paa_size),
        ("SAX alphabet size:", args.alphabet_size),
        ("SAX numerosity reduction:", args.strategy),
        ("SAX normalization threshold:", args.threshold),
    ]
    lines = ["SAX-VSM Classifier", "parameters:"]
    lines.extend(f"  {name:<29}{value}" for name, value in rows)
    return "\n".join(lines)


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    if argv is None and len(sys.argv) == 1:
        parser.print_usage(sys.stderr)
        return 2

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    try:
        params = SAXParams(
            window_size=args.window_size,
            paa_size=args.paa_size,
            alphabet_size=args.alphabet_size,
            norm_threshold=args.threshold,
            nr_strategy=NumerosityReduction.parse(args.strategy),
            mindist_tolerance=args.mindist_tolerance,
        )

        if not args.json:
            print(parameter_banner(args))

        train_data = load_dimensions(args.train, args.dimensions)
        test_data = load_dimensions(args.test, args.dimensions)
        describe_dataset(train_data, "train")
        describe_dataset(test_data, "test")

        result = evaluate(train_data, test_data, params)

        if args.json:
            print(json.dumps({"parameters": params.to_dict(), "results": result.to_dict()}, indent=2))
        else:
            print("classification results: " + format_results(params, result.accuracy, result.error))

        return 0

    except (SAXVSMError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())

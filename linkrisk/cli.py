"""linkrisk/cli.py - command line interface for linkrisk
"""
import argparse
import json
import logging
import sys

from . import config


class InputRejected(Exception):
    """Raised when strict mode refuses an input before analysis."""


# ---------------- SCAN COMMAND ----------------
def cmd_scan(args):
    from .scoring import analyze
    from .utils import verdict_badge
    from .validator import validate_url

    url = args.url.strip()
    if (args.strict or config.STRICT_INPUT) and not validate_url(url):
        raise InputRejected(f"not a valid http(s) URL: {url!r}")

    result = analyze(url)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    print("\n=== RESULT ===")
    print("URL:", url)
    print("Status:", verdict_badge(result.verdict), result.verdict.value)
    print("Safety Score:", f"{result.safe_percent}%")
    print("Risk Score:", result.score)
    if result.findings:
        print("Reasons:")
        for msg in result.messages:
            print(" -", msg)
    else:
        print("Reasons: none")
    print("================\n")


# ---------------- BATCH COMMAND ----------------
def cmd_batch(args):
    from .batch import score_file, verdict_summary, summary_markdown
    from .utils import sanitize_for_json

    scored = score_file(args.path, url_column=args.column, output=args.output)

    if args.json:
        records = sanitize_for_json(scored.to_dict(orient="records"))
        print(json.dumps(records, indent=2, ensure_ascii=False))
        return

    print(f"Scored {len(scored)} URLs from {args.path}")
    print(summary_markdown(verdict_summary(scored)))
    if args.output:
        print("Saved scored rows to:", args.output)


# ---------------- WEB COMMAND ----------------
def cmd_web(args):
    from .web import run
    run(host=args.host, port=args.port, debug=args.debug)


# ---------------- MAIN ----------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkrisk",
        description="linkrisk - heuristic URL risk scanner",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="Logging level (default: %(default)s)")

    sub = parser.add_subparsers(dest="command", required=True)

    # -------- scan --------
    p_scan = sub.add_parser("scan", help="Score a single URL")
    p_scan.add_argument("url", help="URL to analyze")
    p_scan.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    p_scan.add_argument(
        "--strict",
        action="store_true",
        help="Reject input that is not a well-formed http(s) URL",
    )
    p_scan.set_defaults(func=cmd_scan)

    # -------- batch --------
    p_batch = sub.add_parser("batch", help="Score every URL in a CSV or text file")
    p_batch.add_argument("path", help="CSV file with a url/link/location column, or one URL per line")
    p_batch.add_argument(
        "--column",
        type=str,
        default=None,
        help="Name of the URL column (default: auto-detect)",
    )
    p_batch.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write scored rows to this CSV",
    )
    p_batch.add_argument("--json", action="store_true", help="Print scored rows as JSON")
    p_batch.set_defaults(func=cmd_batch)

    # -------- web --------
    p_web = sub.add_parser("web", help="Run the web scanner")
    p_web.add_argument("--host", default=config.WEB_HOST)
    p_web.add_argument("--port", type=int, default=config.WEB_PORT)
    p_web.add_argument("--debug", action="store_true")
    p_web.set_defaults(func=cmd_web)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except InputRejected as e:
        print("[REJECTED]", e)
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n[ABORTED] Interrupted by user")
        sys.exit(130)
    except Exception as e:
        print("\n[ERROR]", e)
        sys.exit(1)


if __name__ == "__main__":
    main()

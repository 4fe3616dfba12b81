"""
VCF Collector — CLI Entry Point

Usage:
  # Serve the HTTP API
  python main.py serve --port 3000

  # Print progress and listing statistics
  python main.py stats

  # Write an export file (ignores the target gate with --force)
  python main.py export --format vcf --out contacts.vcf --force
"""

import argparse
import logging
import sys

from dotenv import load_dotenv
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("vcfcollector")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="VCF Collector — shared contact ledger with vCard export"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument(
        "--port", type=int, default=None, help="Listening port (default: $PORT or 3000)"
    )
    serve_parser.add_argument(
        "--host", type=str, default="0.0.0.0", help="Bind address (default: 0.0.0.0)"
    )

    # stats command
    subparsers.add_parser("stats", help="Print progress and listing statistics")

    # export command
    export_parser = subparsers.add_parser("export", help="Write an export file")
    export_parser.add_argument(
        "--format", type=str, choices=["vcf", "json"], default="vcf", help="Export format (default: vcf)"
    )
    export_parser.add_argument("--out", type=str, default=None, help="Output path (default: suggested filename)")
    export_parser.add_argument(
        "--force", action="store_true", help="Export even if the target has not been reached"
    )

    return parser.parse_args(argv)


def build_container():
    from vcfcollector.infrastructure.config import Config
    from vcfcollector.infrastructure.container import Container

    container = Container(Config.from_env())
    container.ledger.initialize()
    return container


def serve(host: str, port: int = None):
    import uvicorn
    from vcfcollector.infrastructure.config import Config

    config = Config.from_env()
    port = port or config.port
    logger.info(f"Starting server on {host}:{port} | contacts file={config.contacts_file}")
    uvicorn.run("main_api:app", host=host, port=port, log_level=config.log_level.lower())


def print_stats(container) -> None:
    progress = container.progress_use_case.execute()
    listing = container.list_use_case.execute()

    print("\n" + "=" * 50)
    print("CONTACT LEDGER")
    print("=" * 50)
    print(f"  Collected:        {progress.count} / {progress.target} ({progress.percent}%)")
    print(f"  Remaining:        {progress.remaining}")
    print(f"  Submitted today:  {listing.stats.submitted_today}")
    print(f"  With photo:       {listing.stats.with_photo}")
    print(f"  Distinct origins: {listing.stats.distinct_origins}")
    print("=" * 50)


def export(container, fmt: str, out: str = None, force: bool = False) -> int:
    if fmt == "json":
        result = container.export_json_use_case.execute()
    else:
        result = container.export_vcf_use_case.execute(force=force)

    if not result.success:
        logger.error(f"Export refused: {result.message}")
        return 1

    path = out or result.filename
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(result.content)
    logger.info(f"Exported {result.count} contacts to {path}")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.command == "serve":
        serve(args.host, args.port)
        return 0

    container = build_container()

    if args.command == "stats":
        print_stats(container)
        return 0

    if args.command == "export":
        return export(container, args.format, args.out, args.force)

    return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Quote site server CLI
"""
import argparse
import sys

import uvicorn

from quote_server.assets import optimize_assets
from quote_server.config.loader import load_settings
from quote_server.logging_config import setup_logging


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog="quote_server",
        description="HVAC & Appliance Repair quote site server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the server on the configured port (QUOTE_PORT, default 3031)
  python -m quote_server serve

  # Override host and port
  python -m quote_server serve --host 127.0.0.1 --port 8080

  # Minify site/assets/**/*.css and *.js into *.min.* files
  python -m quote_server optimize-assets --root site
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    serve_parser = subparsers.add_parser('serve', help='Run the HTTP server')
    serve_parser.add_argument('--host', help='Bind address (default: QUOTE_HOST)')
    serve_parser.add_argument('--port', type=int, help='Listen port (default: QUOTE_PORT)')

    assets_parser = subparsers.add_parser('optimize-assets', help='Minify CSS and JS assets')
    assets_parser.add_argument('--root', help='Site root containing assets/ (default: QUOTE_SITE_ROOT)')
    assets_parser.add_argument('--keep-console', action='store_true',
                               help='Keep console.* calls in minified JS')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'serve':
        return cmd_serve(args)
    elif args.command == 'optimize-assets':
        return cmd_optimize_assets(args)
    return 1


def cmd_serve(args):
    """Run uvicorn with the application factory"""
    settings = load_settings()
    setup_logging(log_level=settings.log_level, json_format=settings.log_json)
    uvicorn.run(
        "quote_server.main:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_config=None,
        server_header=False,
    )
    return 0


def cmd_optimize_assets(args):
    """Minify assets and print a size summary"""
    settings = load_settings()
    setup_logging(log_level=settings.log_level, json_format=False)
    results = optimize_assets(args.root or settings.site_root, strip_console=not args.keep_console)
    if not results:
        print("No assets found.")
        return 1

    total_before = sum(r.original_bytes for r in results)
    total_after = sum(r.minified_bytes for r in results)
    for result in results:
        print(f"  {result.source} -> {result.output.name} ({result.savings_percent}% smaller)")
    saved = (total_before - total_after) / total_before * 100 if total_before else 0.0
    print(f"\n{len(results)} files: {total_before / 1024:.2f} KB -> {total_after / 1024:.2f} KB ({saved:.1f}% saved)")
    return 0


if __name__ == '__main__':
    sys.exit(main())

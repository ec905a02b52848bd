"""
Command Line Interface for routescan
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .analyzers.base import ConfigurationError
from .analyzers.registry import AnalyzerRegistry
from .reporters import get_reporter
from .scanner import create_scanner
from .signatures import build_registry

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_FILE_ERRORS = 2
EXIT_INTERRUPTED = 130


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging"""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='routescan',
        description='routescan - Discover HTTP endpoints declared in Go services',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s ./service                          # Print the route table
  %(prog)s ./service -f json -o routes.json   # JSON output
  %(prog)s main.go -f csv                     # Single file, CSV output
  %(prog)s ./service --signatures extra.yaml  # Extra framework signatures
        """
    )

    parser.add_argument(
        'target',
        nargs='?',
        help='Path to the Go source directory or file to analyze'
    )

    # Output options
    output_group = parser.add_argument_group('Output Options')
    output_group.add_argument(
        '-o', '--output',
        help='Output file path (default: stdout)'
    )
    output_group.add_argument(
        '-f', '--format',
        choices=['console', 'csv', 'json'],
        default='console',
        help='Output format (default: console)'
    )
    output_group.add_argument(
        '--no-color',
        action='store_true',
        help='Disable colored output'
    )

    # Filtering options
    filter_group = parser.add_argument_group('Filtering Options')
    filter_group.add_argument(
        '--exclude',
        nargs='+',
        help='Exclude paths matching patterns. E.g., --exclude "*/internal/*" "gen_*.go"'
    )
    filter_group.add_argument(
        '--skip-test-files',
        action='store_true',
        help='Skip *_test.go files'
    )
    filter_group.add_argument(
        '--include-vendor',
        action='store_true',
        help='Include vendor/ and third_party/ trees (skipped by default)'
    )

    # Framework options
    framework_group = parser.add_argument_group('Framework Options')
    framework_group.add_argument(
        '--signatures',
        help='YAML file with extra import-path signatures'
    )
    framework_group.add_argument(
        '--list-frameworks',
        action='store_true',
        help='List framework signatures and adapters and exit'
    )

    # Other options
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Verbose output'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Debug mode (very verbose)'
    )
    parser.add_argument(
        '-j', '--jobs',
        type=int,
        default=4,
        help='Number of parallel jobs (default: 4)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser.parse_args(args)


def list_frameworks(signatures_file: Optional[str] = None) -> None:
    """List signatures and registered adapters"""
    registry = build_registry(signatures_file)

    print(f"\nFramework Signatures ({len(registry)} total):\n")
    print("-" * 60)
    for entry in registry.entries:
        marker = '*' if registry.is_fallback(entry.framework) else ' '
        print(f"  {marker} {entry.import_path:<40} {entry.framework.value}")
    print("\n* = fallback signature (used only when no other framework is imported)")

    print("\nAdapters:")
    for adapter in AnalyzerRegistry.get_all_adapters():
        print(f"  {adapter.framework.value:<12} {adapter.name}")


def run_scan(args: argparse.Namespace) -> int:
    """Run the endpoint scan"""
    scanner = create_scanner(
        signatures_file=args.signatures,
        max_workers=args.jobs,
        skip_test_files=args.skip_test_files,
        include_vendor=args.include_vendor,
    )

    result = scanner.scan(args.target, exclude_patterns=args.exclude)

    for file_result in result.failed():
        print(f"Warning: skipped {file_result.file_path}: {file_result.error}", file=sys.stderr)

    reporter_kwargs = {}
    if args.format == 'console':
        reporter_kwargs['use_colors'] = not args.no_color
        reporter_kwargs['verbose'] = args.verbose

    reporter = get_reporter(args.format, **reporter_kwargs)
    content = reporter.report(result, args.output)
    if args.format == 'csv' and not args.output:
        print(content, end='')

    if result.errors:
        return EXIT_FILE_ERRORS
    return EXIT_OK


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parsed_args = parse_args(args)

    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        if parsed_args.list_frameworks:
            list_frameworks(parsed_args.signatures)
            return EXIT_OK

        if not parsed_args.target:
            print("Error: a target path is required", file=sys.stderr)
            return EXIT_FATAL

        target = Path(parsed_args.target)
        if not target.exists():
            print(f"Error: Target path does not exist: {target}", file=sys.stderr)
            return EXIT_FATAL

        return run_scan(parsed_args)
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_FATAL
    except KeyboardInterrupt:
        print("\nScan interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(main())

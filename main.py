#!/usr/bin/env python3
"""
CSS to Tailwind Refactoring Tool
Main entry point for the command line interface.
"""

import argparse
import json
import logging
import sys

from comparator.report_builder import ReportBuilder
from core.exceptions import GenerationError, ParseError
from core.patch_generator import PatchGenerator
from core.style_extractor import extract_css
from core.tailwind_suggester import TailwindSuggester
from utils.config import load_config
from utils.file_utils import collect_style_files, file_kind, read_file_content

logger = logging.getLogger(__name__)


def load_css(path) -> str:
    content = read_file_content(path)
    return extract_css(content) if file_kind(path) == 'html' else content


def run_suggest(args, config) -> int:
    suggester = TailwindSuggester()
    files = []
    for target in args.paths:
        files.extend(collect_style_files(target))
    if not files:
        print("No CSS or HTML files found.", file=sys.stderr)
        return 1

    report = {}
    for path in files:
        css = load_css(path)
        suggestions = suggester.suggest(css, str(path))
        entry = {'suggestions': [s.to_dict() for s in suggestions]}
        if args.coverage:
            entry['coverage'] = suggester.coverage(css, str(path))
        report[str(path)] = entry

    if args.output:
        ReportBuilder().generate_json_report(report, args.output)
        print(f"Report written to {args.output}")
    elif args.json:
        print(json.dumps(report, indent=2))
    else:
        for path, entry in report.items():
            print(path)
            for suggestion in entry['suggestions']:
                selector = suggestion['originalCSS'].split('{', 1)[0].strip()
                print(f"  {selector}: {' '.join(suggestion['suggestedClasses'])} "
                      f"({suggestion['confidence']}%, {suggestion['category']})")
            if 'coverage' in entry:
                print(f"  coverage: {entry['coverage']['coverage']:.0%}")
    return 0


def run_diff(args, config) -> int:
    generator = PatchGenerator(algorithm=args.algorithm or config.diff_algorithm)
    before = read_file_content(args.before)
    after = read_file_content(args.after)
    context = args.context if args.context is not None else config.diff_context
    patch = generator.create_patch(args.path or args.before, before, after, context)
    validation = generator.validate(patch)
    if not validation.valid:
        for error in validation.errors:
            print(f"warning: {error}", file=sys.stderr)
    print(generator.format_for_review(patch) if args.review else patch.diff)
    return 0 if validation.valid else 2


def run_branch(args, config) -> int:
    print(PatchGenerator().branch_name(args.prefix or config.branch_prefix))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Suggest Tailwind utilities for CSS and build review patches")
    subparsers = parser.add_subparsers(dest='command', required=True)

    suggest = subparsers.add_parser('suggest', help='Suggest utility classes for CSS or HTML files')
    suggest.add_argument('paths', nargs='+', help='Files or directories to analyze')
    suggest.add_argument('--json', action='store_true', help='Print suggestions as JSON')
    suggest.add_argument('--coverage', action='store_true', help='Include a coverage report per file')
    suggest.add_argument('--output', help='Write the JSON report to this path')
    suggest.set_defaults(handler=run_suggest)

    diff = subparsers.add_parser('diff', help='Diff two versions of a file')
    diff.add_argument('before')
    diff.add_argument('after')
    diff.add_argument('--path', help='File path to show in the diff header')
    diff.add_argument('--context', type=int)
    diff.add_argument('--algorithm', choices=['positional', 'difflib'])
    diff.add_argument('--review', action='store_true', help='Print the Markdown review block')
    diff.set_defaults(handler=run_diff)

    branch = subparsers.add_parser('branch', help='Generate a refactor branch name')
    branch.add_argument('--prefix')
    branch.set_defaults(handler=run_branch)
    return parser


def main(argv=None) -> int:
    """Main execution function."""
    config = load_config()
    logging.basicConfig(level=getattr(logging, config.log_level))
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args, config)
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except GenerationError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

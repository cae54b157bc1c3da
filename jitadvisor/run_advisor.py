from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence
import yaml
from .config_manager import load_score_table
from .journal import load_journal, members_from_tasks
from .logging_utils import level_for_verbosity, setup_logging
from .model.errors import LogParseError, ScoreTableError
from .suggestion.report import ReportConfig, collect_suggestions, format_suggestion, suggestions_to_records
from .suggestion.suggestion import Suggestion
logger = logging.getLogger(__name__)

def parse_args(argv: Optional[Sequence[str]]=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='jitadvisor', description='Suggest JIT-friendly code changes from a HotSpot LogCompilation file')
    parser.add_argument('log', type=Path, help='HotSpot compilation log (-XX:+LogCompilation output)')
    parser.add_argument('--score-table', type=Path, default=None, help='YAML/JSON reason weights (defaults to $JITADVISOR_SCORE_TABLE or the bundled table)')
    parser.add_argument('--min-score', type=int, default=0, help='Drop suggestions scoring below this value')
    parser.add_argument('--limit', type=int, default=None, help='Show at most this many suggestions')
    parser.add_argument('--workers', type=int, default=1, help='Members analysed in parallel')
    parser.add_argument('--format', dest='output_format', choices=['text', 'json', 'yaml'], default='text', help='Output format')
    parser.add_argument('--output', type=Path, default=None, help='Write the report here instead of stdout')
    parser.add_argument('--log-file', type=Path, default=None, help='Also write debug logs to this file')
    parser.add_argument('--verbose', '-v', action='count', default=0, help='Log progress to stderr (-vv for debug detail)')
    return parser.parse_args(argv)

def render(suggestions: List[Suggestion], output_format: str) -> str:
    if output_format == 'json':
        return json.dumps(suggestions_to_records(suggestions), ensure_ascii=False, indent=2) + '\n'
    if output_format == 'yaml':
        return yaml.safe_dump(suggestions_to_records(suggestions), allow_unicode=True, sort_keys=False)
    if not suggestions:
        return 'No suggestions.\n'
    return '\n\n'.join((format_suggestion(s) for s in suggestions)) + '\n'

def main(argv: Optional[Sequence[str]]=None) -> int:
    args = parse_args(argv)
    setup_logging(console_level=level_for_verbosity(args.verbose), file_path=args.log_file)
    try:
        score_table = load_score_table(args.score_table)
    except ScoreTableError as exc:
        logger.error('Invalid score table: %s', exc)
        return 2
    try:
        tasks = load_journal(args.log)
    except LogParseError as exc:
        logger.error('Could not read compilation log: %s', exc)
        return 1
    members = members_from_tasks(tasks.values())
    logger.info('[Analyse] %d compiled members', len(members))
    config = ReportConfig(score_table=score_table, max_workers=max(1, int(args.workers)), min_score=int(args.min_score), limit=args.limit)
    suggestions = collect_suggestions(members, config)
    report = render(suggestions, args.output_format)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(report, encoding='utf-8')
        logger.info('  report: %s', args.output)
    else:
        sys.stdout.write(report)
    return 0
if __name__ == '__main__':
    raise SystemExit(main())

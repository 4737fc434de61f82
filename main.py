import sys
import json
import logging
import argparse

from core.app_context import AppContext
from core.config_loader import load_config
from core.exceptions import ServiceException
from database.database import configure_engine, init_db
from pipeline.runner import run_matching_pipeline, run_github_analysis

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def cmd_init_db(ctx: AppContext, args) -> int:
    init_db()
    return 0


def cmd_match(ctx: AppContext, args) -> int:
    result = run_matching_pipeline(
        ctx, args.job_id, limit=args.limit, use_cache=not args.no_cache
    )
    logger.info(
        f"Job '{result.job_title}': {result.matches_count} matches "
        f"({result.saved_count} cached) in {result.execution_time:.2f}s"
    )
    for rank, match in enumerate(result.matches, start=1):
        print(f"{rank:>3}. {match.match_score:>3}  [{match.confidence_level}]  "
              f"{match.candidate_name} <{match.candidate_email or '-'}>")
        print(f"       {match.reasoning}")
    return 0


def cmd_analyze(ctx: AppContext, args) -> int:
    analysis = run_github_analysis(ctx, args.candidate_id, access_token=args.token)
    print(json.dumps(analysis.to_blob(), indent=2, default=str))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Next-Hire Matching Driver")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML config file (default: config.yaml)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    init_parser = subparsers.add_parser('init-db', help='Create database tables')
    init_parser.set_defaults(handler=cmd_init_db)

    match_parser = subparsers.add_parser('match', help='Match candidates to a job posting')
    match_parser.add_argument('--job-id', required=True, help='Job posting ID')
    match_parser.add_argument('--limit', type=int, default=None,
                              help='Maximum matches to return (default from config)')
    match_parser.add_argument('--no-cache', action='store_true',
                              help='Do not replace the cached matches of the job')
    match_parser.set_defaults(handler=cmd_match)

    analyze_parser = subparsers.add_parser('analyze', help="Analyze a candidate's GitHub profile")
    analyze_parser.add_argument('--candidate-id', required=True, help='Candidate ID')
    analyze_parser.add_argument('--token', default=None,
                                help='GitHub access token (default: GITHUB_TOKEN / config)')
    analyze_parser.set_defaults(handler=cmd_analyze)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    configure_engine(config.database.url, pool_pre_ping=True)
    ctx = AppContext.build(config)

    logger.info(f"Main driver running '{args.command}'")
    try:
        return args.handler(ctx, args)
    except ServiceException as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

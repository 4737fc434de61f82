"""Pipeline execution modules for Next-Hire."""

from .runner import run_matching_pipeline, find_matches, MatchingPipelineResult

__all__ = ['run_matching_pipeline', 'find_matches', 'MatchingPipelineResult']

"""GitHub Module - repository work scoring and profile analysis."""
from core.github.analyzer import GitHubAnalyzerService
from core.github.client import GitHubClient
from core.github.models import GitHubAnalysis, Repository, ScoredRepository
from core.github.selector import select_top_projects, analyze_project_distribution
from core.github.work_score import calculate_work_score

__all__ = [
    'GitHubAnalyzerService', 'GitHubClient', 'GitHubAnalysis', 'Repository',
    'ScoredRepository', 'select_top_projects', 'analyze_project_distribution',
    'calculate_work_score'
]

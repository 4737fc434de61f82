from dataclasses import dataclass
from typing import Optional

from core.config_loader import AppConfig, LlmConfig
from core.github.analyzer import GitHubAnalyzerService
from core.llm.interfaces import LLMProvider
from core.llm.openai_service import OpenAIService
from core.matcher.service import MatcherService
from core.scorer.service import ScoringService


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    This eliminates duplicate wiring code and provides a single source
    of truth for service instantiation. DB access should be obtained
    via hiring_uow() inside each operation.
    """
    config: AppConfig
    matcher_service: MatcherService
    scoring_service: ScoringService
    github_analyzer: GitHubAnalyzerService
    ai_service: Optional[LLMProvider] = None

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance (no DB session attached)
        """
        ai_service = cls._build_ai_service(config.llm)

        return cls(
            config=config,
            matcher_service=MatcherService(config.matching.matcher),
            scoring_service=ScoringService(config.matching.scorer),
            github_analyzer=GitHubAnalyzerService(ai_service, config.github),
            ai_service=ai_service,
        )

    @staticmethod
    def _build_ai_service(llm_config: LlmConfig) -> Optional[OpenAIService]:
        """Build the OpenAI-SDK service; None when disabled or no key is configured."""
        if not llm_config.enabled or not llm_config.api_key:
            return None

        return OpenAIService(
            api_key=llm_config.api_key,
            base_url=llm_config.base_url,
            model=llm_config.model,
            temperature=llm_config.temperature,
        )

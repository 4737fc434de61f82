"""
LLM Provider Interface - Abstract base for text generation providers.

This module defines the interface for LLM services (Gemini via its
OpenAI-compatible endpoint, OpenAI, Ollama, etc.).
"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class LLMProvider(ABC):
    """
    Abstract Interface for AI Service Providers.
    """

    @abstractmethod
    def generate_json(self, system_prompt: str, prompt: str) -> Dict[str, Any]:
        """
        Generate a JSON object from a prompt.

        Args:
            system_prompt: Instructions describing the expected JSON shape
            prompt: The data to analyze

        Raises:
            LLMResponseError: The provider answered with something that is not
                a JSON object.
        """
        pass

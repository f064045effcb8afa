"""
Startup name generation with domain availability.
"""

import asyncio

from startup_namer.core.exceptions import (
    GeminiAPIError,
    GenerationError,
    NoValidNamesError,
    ValidationError,
)
from startup_namer.core.logging import get_logger
from startup_namer.models import BusinessProfile, NameCandidate, NameSuggestion
from startup_namer.services.ai import GeminiClient, build_name_prompt, parse_name_candidates
from startup_namer.services.availability import AvailabilityChecker

logger = get_logger(__name__)


class NameGenerator:
    """Generates name suggestions and checks their .com domains."""

    def __init__(self, client: GeminiClient, checker: AvailabilityChecker, name_count: int = 5):
        self._client = client
        self._checker = checker
        self._name_count = name_count

    async def generate(self, profile: BusinessProfile) -> list[NameSuggestion]:
        """
        Run one generation cycle.

        Args:
            profile: Business description from the form

        Returns:
            Suggestions in the order the model produced them

        Raises:
            ValidationError: If no keywords were given
            GenerationError: If the model call fails or its output is unusable
            NoValidNamesError: If no candidate survived validation
        """
        if not profile.has_keywords():
            raise ValidationError("at least one keyword required")

        prompt = build_name_prompt(profile, self._name_count)
        logger.info(f"Gemini Prompt:\n{prompt}")

        try:
            text = await self._client.generate(prompt)
        except GeminiAPIError as e:
            logger.error(f"Name generation failed: {e}")
            raise GenerationError(f"name generation failed: {e}") from e
        except Exception as e:
            logger.error(f"Unexpected error calling Gemini: {e}")
            raise GenerationError(f"name generation failed: {e}") from e

        logger.info(f"Gemini Raw Response: {text}")

        candidates = parse_name_candidates(text)
        suggestions = await asyncio.gather(*(self._check(c) for c in candidates))

        if not suggestions:
            raise NoValidNamesError("no valid names generated")

        return list(suggestions)

    async def _check(self, candidate: NameCandidate) -> NameSuggestion:
        domain = candidate.domain
        try:
            available = await self._checker.is_available(domain)
        except Exception as e:
            logger.error(f"Error checking domain {domain}: {e}")
            available = False

        return NameSuggestion(name=candidate.name, domain=domain, available=available)

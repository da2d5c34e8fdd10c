"""Persona classification backed by Gemini, with a rule-based fallback."""

import logging
from typing import Optional

from analytics.personas import RuleBasedPersonaClassifier
from models import PerformanceMetrics, Persona, PersonaSource
from llm.client import DEFAULT_MAX_RETRIES, GEMINI_MODEL, RETRY_DELAY_SECONDS, generate_text
from llm.parsing import parse_response
from llm.prompts import RawPersona, build_persona_prompt
from llm.strategies import PersonaClassifier

logger = logging.getLogger(__name__)


class GeminiPersonaClassifier:
    """Asks the model for a persona; any failure yields the fallback's persona."""

    def __init__(
        self,
        client,
        *,
        model: str = GEMINI_MODEL,
        fallback: Optional[PersonaClassifier] = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
    ):
        self._client = client
        self._model = model
        self._fallback = fallback or RuleBasedPersonaClassifier()
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    def classify(self, metrics: PerformanceMetrics, user_id: str) -> Persona:
        if self._client is None:
            logger.info("No Gemini client configured; using rule-based persona")
            return self._fallback.classify(metrics, user_id)

        try:
            text = generate_text(
                self._client,
                build_persona_prompt(metrics),
                model=self._model,
                max_retries=self._max_retries,
                retry_delay=self._retry_delay,
            )
        except Exception as e:
            logger.warning("Persona generation failed, using rule-based persona: %s", e)
            return self._fallback.classify(metrics, user_id)

        result = parse_response(text, RawPersona)
        if not result.ok:
            logger.warning("Unusable persona response (%s), using rule-based persona", result.error)
            return self._fallback.classify(metrics, user_id)

        raw = result.value
        return Persona(
            user_id=user_id,
            persona_name=raw.persona_name.strip(),
            strengths=raw.strengths,
            weaknesses=raw.weaknesses,
            recommendations=raw.recommendations,
            play_style=raw.play_style,
            mental_game=raw.mental_game,
            practice_focus=raw.practice_focus,
            source=PersonaSource.AI,
        )

from fastapi import Request

from analytics.narrative import PhraseSelector
from api.config import Settings
from database.db_manager import DatabaseManager
from llm.strategies import PersonaClassifier


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_client(request: Request):
    """The Gemini client, or None when no API key is configured."""
    return request.app.state.llm_client


def get_persona_classifier(request: Request) -> PersonaClassifier:
    return request.app.state.persona_classifier


def get_phrase_selector(request: Request) -> PhraseSelector:
    return request.app.state.phrase_selector

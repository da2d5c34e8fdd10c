from typing import Protocol

from models import PerformanceMetrics, Persona


class PersonaClassifier(Protocol):
    """Interface for turning aggregate metrics into a golfer persona.

    Any class with a matching ``classify`` satisfies this protocol. Callers
    rely on ``classify`` always returning a Persona: implementations that
    depend on an external service must degrade to a deterministic result
    instead of raising.
    """

    def classify(self, metrics: PerformanceMetrics, user_id: str) -> Persona:
        ...

"""Fixed-table classifiers built from the configured persona."""

from portfolio_twin.persona.detector import PersonalQueryDetector
from portfolio_twin.persona.profile import build_portfolio_profile
from portfolio_twin.persona.quick_questions import QuickQuestionResolver

__all__ = ["PersonalQueryDetector", "QuickQuestionResolver", "build_portfolio_profile"]

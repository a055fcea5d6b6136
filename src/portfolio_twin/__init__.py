"""portfolio-twin - chat backend for a personal portfolio site.

Answers visitor questions in the portfolio owner's voice. Offered quick
questions get canned answers, questions about the owner get a fixed profile
card, and everything else is forwarded to an OpenAI-compatible model.

Key modules:

- :mod:`portfolio_twin.chat` - Session store, response dispatcher and turn orchestrator
- :mod:`portfolio_twin.persona` - Quick-question resolver and personal-query detector
- :mod:`portfolio_twin.llm` - Chat-completion client abstraction
- :mod:`portfolio_twin.server` - FastAPI application and routes
- :mod:`portfolio_twin.config` - YAML configuration schema and loader
"""

__version__ = "0.2.0"

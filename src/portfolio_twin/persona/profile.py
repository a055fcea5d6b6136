"""Portfolio profile payload served to the presentation layer."""

from typing import Any

from portfolio_twin.config.schema import PersonaConfig


def build_portfolio_profile(persona: PersonaConfig) -> dict[str, Any]:
    """Assemble the profile document from the persona configuration."""
    return {
        "name": persona.name,
        "title": persona.title,
        "availability": persona.availability,
        "imageUrl": persona.image_url,
        "sections": {
            "me": {"bio": persona.bio},
            "skills": [dict(group) for group in persona.skills],
            "projects": [dict(project) for project in persona.projects],
            "contact": dict(persona.contact),
        },
    }

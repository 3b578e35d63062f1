"""Route handlers for the API."""

from portfolio_cms.api.routes import (
    awards,
    certifications,
    education,
    experiences,
    health,
    projects,
    resumes,
    site,
    skills,
    social_links,
)

__all__ = [
    "awards",
    "certifications",
    "education",
    "experiences",
    "health",
    "projects",
    "resumes",
    "site",
    "skills",
    "social_links",
]

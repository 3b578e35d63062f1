"""ORM models package for database tables.

This package provides SQLAlchemy ORM models representing database tables:
- Overview, About, SiteSettings: singleton profile/site records
- Skill, SocialLink, Project, Education, Award, Certification: ordered content
- Experience / ExperiencePosition: employers and the roles held at each
- Resume / ResumeSection: resumes and their typed, ordered sections

All models inherit from the shared Base declarative class defined in data.db.
"""

from portfolio_cms.data.db import Base
from portfolio_cms.data.models.about import About
from portfolio_cms.data.models.award import Award
from portfolio_cms.data.models.certification import Certification
from portfolio_cms.data.models.education import Education
from portfolio_cms.data.models.experience import Experience, ExperiencePosition
from portfolio_cms.data.models.overview import SINGLETON_ID, Overview
from portfolio_cms.data.models.project import Project
from portfolio_cms.data.models.resume import Resume, ResumeSection
from portfolio_cms.data.models.site_settings import SiteSettings
from portfolio_cms.data.models.skill import Skill
from portfolio_cms.data.models.social_link import SocialLink

__all__ = [
    "SINGLETON_ID",
    "About",
    "Award",
    "Base",
    "Certification",
    "Education",
    "Experience",
    "ExperiencePosition",
    "Overview",
    "Project",
    "Resume",
    "ResumeSection",
    "SiteSettings",
    "Skill",
    "SocialLink",
]

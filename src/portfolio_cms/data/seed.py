"""Seed the store with sample portfolio content and one sample resume.

Run ``portfolio-cms-seed`` against an empty database, or pass ``--force`` to
clear every table first.
"""

from __future__ import annotations

import argparse
import logging
from datetime import date

from portfolio_cms.data.db import get_session, init_db
from portfolio_cms.data.models import (
    About,
    Award,
    Certification,
    Education,
    Experience,
    Overview,
    Project,
    Resume,
    SiteSettings,
    Skill,
    SocialLink,
)
from portfolio_cms.services import experience as experience_service
from portfolio_cms.services import records, singletons
from portfolio_cms.services.resume import create_resume

logger = logging.getLogger(__name__)

# Children are removed through ORM cascades on their parents.
_SEEDED_MODELS = (
    Resume,
    Certification,
    Award,
    Education,
    Experience,
    SocialLink,
    Skill,
    Project,
    About,
    SiteSettings,
    Overview,
)

OVERVIEW = {
    "first_name": "Manny",
    "last_name": "Singh",
    "display_name": "Manny Singh",
    "username": "manny",
    "gender": "male",
    "bio": "Creating with code, driven by passion.",
    "flip_sentences": ["Front End Developer", "React Developer", "Software Developer"],
    "address": "Dallas, Texas (USA)",
    "phone_number": "309 204 7800",
    "email": "er.manvirsingh98@gmail.com",
    "website": "https://amazingDeveloper.com",
    "job_title": "Software Developer",
    "avatar": "/images/avatar.jpeg",
    "og_image": "/images/og-image.png",
    "date_created": "2023-10-20",
}

SETTINGS = {
    "site_title": "My Creative Portfolio",
    "site_description": "A showcase of my work, skills, and experience in software development",
    "theme": "system",
}

ABOUT = {
    "title": "About Me",
    "description": "Passionate software developer with expertise in modern web technologies",
    "content": (
        "I'm a dedicated software developer with a passion for creating innovative "
        "solutions. I specialize in building scalable web applications using React, "
        "Node.js, and cloud platforms."
    ),
    "image_url": "/images/avatar.jpg",
}

SKILLS = [
    ("React", "Frontend", "react.svg", 5),
    ("TypeScript", "Frontend", "typescript.svg", 5),
    ("Next.js", "Frontend", "nextjs.svg", 5),
    ("Tailwind CSS", "Frontend", "tailwindcss.svg", 5),
    ("JavaScript", "Frontend", "js.svg", 5),
    ("Node.js", "Backend", "nodejs.svg", 4),
    ("Supabase", "Backend", "supabase.svg", 4),
    ("Prisma", "Database", "prisma.svg", 4),
    ("PostgreSQL", "Database", "postgresql.svg", 4),
    ("Docker", "DevOps", "docker.svg", 3),
    ("AWS", "Cloud", "aws.svg", 3),
    ("Git", "Tools", "git.svg", 5),
]

SOCIAL_LINKS = [
    ("github", "https://github.com/yourusername", "/images/link-icons/github.webp"),
    ("linkedin", "https://linkedin.com/in/yourusername", "/images/link-icons/linkedin.webp"),
]

PROJECTS = [
    {
        "title": "Questify - Task Management App",
        "description": (
            "A comprehensive task management application with real-time collaboration features."
        ),
        "content": "## Project Overview\nFull-stack task tracking for teams and individuals.",
        "image_url": "/images/projects/questify.webp",
        "github_url": "https://github.com/yourusername/questify",
        "live_url": "https://questify-portal.netlify.app/",
        "technologies": ["Next.js 15", "TypeScript", "Tailwind CSS", "Prisma", "Docker"],
        "featured": True,
    },
    {
        "title": "E-commerce Platform",
        "description": "A full-stack e-commerce solution with React and Node.js",
        "content": "## Project Overview\nCatalog, cart, Stripe payments and an admin dashboard.",
        "image_url": "/images/projects/ecommerce.webp",
        "github_url": "https://github.com/yourusername/ecommerce",
        "live_url": "https://ecommerce-demo.com",
        "technologies": ["React", "TypeScript", "Node.js", "PostgreSQL", "Stripe"],
        "featured": False,
    },
    {
        "title": "Portfolio Website",
        "description": "A modern, responsive portfolio website with admin dashboard",
        "content": "## Project Overview\nPortfolio CMS with a built-in resume builder.",
        "image_url": "/images/projects/portfolio.webp",
        "github_url": "https://github.com/yourusername/portfolio",
        "live_url": "https://myportfolio.com",
        "technologies": ["Next.js 15", "TypeScript", "Tailwind CSS", "Prisma"],
        "featured": True,
    },
]

EXPERIENCES = [
    {
        "company": "Vacation Express by Sunwing",
        "location": "Toronto, ON",
        "description": (
            "Leading development of scalable web applications and mentoring junior developers."
        ),
        "logo_url": "/images/companies/vc.jpg",
        "positions": [
            {
                "title": "Senior Frontend Developer",
                "start_date": date(2021, 10, 1),
                "is_current": True,
                "year": "10.2021 - present",
                "employment_type": "Full-time",
                "icon": "code",
                "description": (
                    "Led frontend development across multiple e-commerce platforms.\n"
                    "Built a dashboard synchronizing content between two CMS spaces."
                ),
                "skills": ["React.js", "TypeScript", "Next.js", "GraphQL"],
            }
        ],
    },
    {
        "company": "Public Health And Safety Association",
        "location": "Toronto, ON",
        "description": "Designed and developed new features for pshsa.ca.",
        "logo_url": "/images/companies/pshsa.jpg",
        "positions": [
            {
                "title": "Full Stack Web Developer",
                "start_date": date(2018, 11, 1),
                "end_date": date(2021, 9, 30),
                "is_current": False,
                "year": "11.2018 - 09.2021",
                "employment_type": "Full-time",
                "icon": "code",
                "description": "Integrated a learning management system serving 10,000+ users.",
                "skills": ["React.js", "Node.js", "MongoDB", "AWS"],
            }
        ],
    },
]

EDUCATION = {
    "institution": "University of Technology",
    "degree": "Bachelor of Science",
    "field_of_study": "Computer Science",
    "location": "San Francisco, CA",
    "start_date": date(2018, 9, 1),
    "end_date": date(2022, 5, 1),
    "is_current": False,
    "description": "Graduated with honors. Focused on software engineering and web development.",
    "logo_url": "/images/companies/education.webp",
}

AWARD = {
    "title": "Most Valuable Player Award",
    "issuer": "Tech Conference 2023",
    "date": date(2023, 9, 15),
    "description": "Recognized for outstanding performance and contributions to key projects.",
}

CERTIFICATIONS = [
    {
        "title": "Mobile Application Design & Development",
        "issuer": "Lambton College Toronto",
        "issue_date": date(2017, 12, 17),
        "credential_id": "LAMBTON-MAD-2017",
    },
    {
        "title": "AWS Certified Developer",
        "issuer": "Amazon Web Services",
        "issue_date": date(2023, 3, 1),
        "expiry_date": date(2026, 3, 1),
        "credential_id": "AWS-DEV-123456",
    },
]

SAMPLE_RESUME = {
    "title": "Software Developer Resume",
    "template": "modern",
    "sections": [
        {
            "kind": "personal",
            "title": "Personal Information",
            "content": {
                "name": "Manny Singh",
                "title": "Software Developer & UI/UX Designer",
                "email": "er.manvirsingh98@gmail.com",
                "phone": "309 204 7800",
                "website": "https://amazingDeveloper.com",
                "location": "Dallas, Texas (USA)",
                "bio": "Creating with code, driven by passion.",
            },
        },
        {
            "kind": "experience",
            "title": "Work Experience",
            "content": [
                {
                    "company": "Tech Company",
                    "position": "Senior Software Developer",
                    "location": "Dallas, TX",
                    "start_date": "2023-01-01",
                    "end_date": None,
                    "is_current": True,
                    "description": "Led development of multiple web applications.",
                },
                {
                    "company": "Startup Inc",
                    "position": "Full Stack Developer",
                    "location": "Remote",
                    "start_date": "2022-01-01",
                    "end_date": "2022-12-31",
                    "is_current": False,
                    "description": "Built and maintained web applications.",
                },
            ],
        },
        {
            "kind": "education",
            "title": "Education",
            "content": [
                {
                    "institution": "University of Technology",
                    "degree": "Bachelor of Science",
                    "field": "Computer Science",
                    "location": "Dallas, TX",
                    "start_date": "2018-09-01",
                    "end_date": "2022-05-01",
                    "is_current": False,
                },
            ],
        },
        {
            "kind": "skills",
            "title": "Technical Skills",
            "content": [
                {"category": "Frontend", "skills": "React, TypeScript, Next.js"},
                {"category": "Backend", "skills": "Node.js"},
                {"category": "Database", "skills": "PostgreSQL"},
                {"category": "DevOps", "skills": "Docker"},
            ],
        },
    ],
}


def clear_all() -> None:
    """Delete every seeded record."""
    with get_session() as session:
        for model in _SEEDED_MODELS:
            for record in session.query(model).all():
                session.delete(record)


def seed(*, force: bool = False) -> bool:
    """Insert the sample data.

    Args:
        force: Clear existing data first.

    Returns:
        True if data was inserted, False if the store already had content
        and *force* was not given.
    """
    init_db()
    if singletons.overview.count() and not force:
        logger.info("Store already contains portfolio data; use --force to reseed")
        return False
    if force:
        clear_all()

    singletons.overview.save(OVERVIEW)
    singletons.site_settings.save(SETTINGS)
    singletons.about.save(ABOUT)

    for name, category, icon, level in SKILLS:
        records.skills.create(
            {
                "name": name,
                "category": category,
                "icon_url": f"/images/tech-stack-icons/{icon}",
                "level": level,
            }
        )
    for platform, url, icon_url in SOCIAL_LINKS:
        records.social_links.create({"platform": platform, "url": url, "icon_url": icon_url})
    for project in PROJECTS:
        records.projects.create(project)
    for experience in EXPERIENCES:
        experience_service.create_experience(experience)
    records.education.create(EDUCATION)
    records.awards.create(AWARD)
    for certification in CERTIFICATIONS:
        records.certifications.create(certification)

    resume = create_resume(SAMPLE_RESUME)
    logger.info("Sample resume created: %d", resume["id"])
    return True


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``portfolio-cms-seed``."""
    parser = argparse.ArgumentParser(description="Seed the portfolio store with sample data.")
    parser.add_argument("--force", action="store_true", help="clear existing data first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if seed(force=args.force):
        logger.info("Database seeded successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
FastAPI application for the team-building concierge.

Start with: uvicorn teambuilder.api.app:app --reload --port 8000
(run from backend/, or install the package). Settings come from
TEAMBUILDER_* environment variables or a .env file in the working directory.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from teambuilder.adapters.factory import create_provider
from teambuilder.builder import ConciergeBuilder
from teambuilder.core.errors import ConfigError
from teambuilder.core.models import Availability, UserRecord
from teambuilder.infra.completion_client import CompletionClient
from teambuilder.infra.config import TeamBuilderConfig
from teambuilder.infra.directory import InMemoryUserDirectory

from .routes import health_router, router

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize all dependencies on startup, clean up on shutdown."""
    config = TeamBuilderConfig()
    configure_logging(config.log_level)
    app.state.config = config

    # Completion provider: missing credentials leave the client unconfigured
    try:
        provider = create_provider(config)
    except ConfigError as e:
        provider = None
        logger.warning("No completion provider: %s; AI replies will be degraded", e)

    client = CompletionClient(provider, timeout_s=config.completion_timeout_seconds)
    app.state.completion_client = client

    # User directory
    if config.directory_path:
        directory = InMemoryUserDirectory.from_json_file(config.directory_path)
    else:
        directory = InMemoryUserDirectory()
        _seed_demo_directory(directory)
    app.state.directory = directory

    app.state.engine = (
        ConciergeBuilder.from_config(config, directory)
        .with_completion_client(client)
        .build()
    )

    logger.info("Concierge API started (provider=%s, users=%d)",
                provider.name if provider else "none", len(directory))
    yield

    if provider is not None:
        await provider.aclose()
    logger.info("Concierge API shutdown")


DEMO_USERS = [
    ("u_priya", "Priya Sharma", 3, ["React", "TypeScript", "Tailwind CSS", "Figma"], "available"),
    ("u_rohit", "Rohit Kumar", 4, ["Node.js", "Express", "MongoDB", "PostgreSQL"], "available"),
    ("u_sneha", "Sneha Mehta", 3, ["Business Strategy", "Figma", "UI/UX", "Pitch Decks"], "available"),
    ("u_aditya", "Aditya Singh", 2, ["Python", "Machine Learning", "TensorFlow", "Data Science"], "available"),
    ("u_neha", "Neha Gupta", 3, ["React Native", "Flutter", "JavaScript", "Firebase"], "busy"),
    ("u_vikram", "Vikram Joshi", 4, ["Java", "Spring Boot", "Docker", "AWS"], "available"),
    ("u_ananya", "Ananya Reddy", 2, ["Python", "Django", "REST APIs", "PostgreSQL"], "available"),
    ("u_karan", "Karan Patel", 3, ["React", "Next.js", "Node.js", "GraphQL"], "available"),
    ("u_ishita", "Ishita Das", 3, ["UI/UX Design", "Figma", "Adobe XD", "User Research"], "in-team"),
    ("u_arjun", "Arjun Verma", 4, ["Go", "Rust", "Kubernetes", "Systems Programming"], "available"),
    ("u_divya", "Divya Nair", 3, ["React", "Redux", "Node.js", "MongoDB"], "available"),
    ("u_pooja", "Pooja Saxena", 2, ["Content Writing", "Marketing", "SEO", "Canva"], "available"),
]


def _seed_demo_directory(directory: InMemoryUserDirectory) -> None:
    """Pre-seed demo users so the concierge has someone to recommend."""
    if len(directory):
        return  # Idempotent

    for user_id, name, year, skills, availability in DEMO_USERS:
        directory.add_user(UserRecord(
            id=user_id,
            name=name,
            email=f"{user_id[2:]}@demo.com",
            skills=list(skills),
            availability=Availability(availability),
            college="BIT Mesra",
            year=year,
        ))
    logger.info("Demo directory seeded with %d users", len(DEMO_USERS))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    load_dotenv()
    config = TeamBuilderConfig()

    app = FastAPI(
        title="Team Builder Concierge API",
        description="Hackathon team-building assistant: plan, search, draft",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.include_router(health_router)

    return app


app = create_app()

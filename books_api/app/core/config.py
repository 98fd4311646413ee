"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all: it listens on port 3000,
serves the interactive documentation under ``/api-docs`` and seeds the
store with a single book.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Express API with Swagger")
    api_version: str = os.getenv("API_VERSION", "0.1.0")
    description: str = os.getenv(
        "API_DESCRIPTION",
        "This is a simple CRUD API application documented with OpenAPI",
    )
    contact_name: str = os.getenv("CONTACT_NAME", "Aswangga Bhanu Rizqullah")
    contact_url: str = os.getenv("CONTACT_URL", "https://github.com/bhanurzh")
    contact_email: str = os.getenv("CONTACT_EMAIL", "aswanggab@gmail.com")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path to a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    # Seed the store with one example book when the application starts.
    seed_books: bool = _env_flag("BOOKS_SEED", "true")

    # How new book ids are chosen.  ``length`` assigns ``len(books) + 1``
    # and may hand out an id that is still in use after a deletion;
    # ``counter`` never reuses an id.
    id_strategy: str = os.getenv("BOOKS_ID_STRATEGY", "length")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()

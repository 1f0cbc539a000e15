"""Application configuration using Pydantic Settings with YAML support.

This module provides centralized configuration management with:
- YAML-based configuration files organized by domain
- Environment-specific overrides (development, test, production)
- Environment variable loading for secrets
- Type validation and coercion
- Caching for performance

Recipe source policy (prefer API, fallback to AI, cache TTL, ...) is not
part of these settings; it lives in ``recipe_sources.ConfigManager`` with
environment-independent defaults.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


class LLMProvider(StrEnum):
    """Supported AI meal generation providers."""

    OPENAI = "openai"
    GEMINI = "gemini"


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Meal Planner Service"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Server configuration settings."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """API configuration settings."""

    v1_prefix: str = "/api/v1/meal-planner"
    cors_origins: list[str] = []


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class MetricsSettings(BaseModel):
    """Metrics configuration settings."""

    enabled: bool = True


class ObservabilitySettings(BaseModel):
    """Observability configuration settings."""

    metrics: MetricsSettings = MetricsSettings()


class CacheSettings(BaseModel):
    """In-memory recipe cache settings.

    The entry TTL is part of the recipe source policy, not of these settings.
    """

    max_size: int = 100
    coalesce_requests: bool = True


class SpoonacularSettings(BaseModel):
    """Spoonacular (via RapidAPI) client settings."""

    host: str = "spoonacular-recipe-food-nutrition-v1.p.rapidapi.com"
    timeout: float = 15.0


class TastySettings(BaseModel):
    """Tasty (via RapidAPI) client settings; shares the RapidAPI key."""

    host: str = "tasty.p.rapidapi.com"
    timeout: float = 15.0


class TheMealDBSettings(BaseModel):
    """TheMealDB client settings; the API key is part of the URL."""

    base_url: str = "https://www.themealdb.com/api/json/v1/1"
    timeout: float = 15.0


class RecipeSourcesSettings(BaseModel):
    """External recipe API settings."""

    spoonacular: SpoonacularSettings = SpoonacularSettings()
    tasty: TastySettings = TastySettings()
    themealdb: TheMealDBSettings = TheMealDBSettings()


class JobSettings(BaseModel):
    """Recipe extraction job tracking."""

    # Seconds a completed or failed job stays queryable.
    finished_ttl: float = 3600.0


class OpenAISettings(BaseModel):
    """OpenAI chat completions configuration."""

    url: str = "https://api.openai.com/v1"
    model: str = "gpt-4o"
    timeout: float = 60.0
    max_retries: int = 2
    temperature: float = 0.7
    max_tokens: int = 1400
    requests_per_minute: float = 60.0


class GeminiSettings(BaseModel):
    """Google Gemini generateContent configuration."""

    url: str = "https://generativelanguage.googleapis.com/v1beta"
    model: str = "gemini-1.5-flash"
    timeout: float = 60.0
    max_retries: int = 2
    temperature: float = 0.7
    max_tokens: int = 1400
    requests_per_minute: float = 15.0


class LLMFallbackSettings(BaseModel):
    """Secondary provider used when the primary one is unreachable."""

    enabled: bool = False
    secondary_provider: LLMProvider = LLMProvider.GEMINI


class LLMSettings(BaseModel):
    """AI meal generation configuration."""

    enabled: bool = True
    provider: LLMProvider = LLMProvider.OPENAI
    openai: OpenAISettings = OpenAISettings()
    gemini: GeminiSettings = GeminiSettings()
    fallback: LLMFallbackSettings = LLMFallbackSettings()


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support.

    Configuration is loaded from multiple sources with the following priority
    (highest to lowest):
    1. Values passed to ``Settings()``
    2. Environment variables
    3. .env file (secrets only)
    4. Environment-specific YAML files (config/environments/{APP_ENV}/)
    5. Base YAML files (config/base/)
    6. Default values in code

    Nested values can be overridden with the ``__`` delimiter, e.g.
    ``LLM__PROVIDER=gemini`` overrides ``llm.provider``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    logging: LoggingSettings = LoggingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
    cache: CacheSettings = CacheSettings()
    recipe_sources: RecipeSourcesSettings = RecipeSourcesSettings()
    jobs: JobSettings = JobSettings()
    llm: LLMSettings = LLMSettings()

    # =========================================================================
    # Secrets (from environment / .env only - never in YAML)
    # =========================================================================
    RAPIDAPI_KEY: str = ""
    OPENAI_API_KEY: str = ""
    GEMINI_API_KEY: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source below environment variables and .env."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    def api_key_for(self, provider: LLMProvider) -> str:
        """Return the credential configured for an LLM provider."""
        if provider == LLMProvider.GEMINI:
            return self.GEMINI_API_KEY
        return self.OPENAI_API_KEY

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

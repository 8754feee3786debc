"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BLOG_CONVERTER_", extra="ignore")

    app_name: str = Field(default="Blog Markdown Converter API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    words_per_minute: int = Field(
        default=200,
        ge=1,
        description="Reading speed used to estimate post reading time.",
    )
    seo_description_max_length: int = Field(
        default=160,
        ge=10,
        description="Maximum length of a generated meta description.",
    )
    seo_sample_length: int = Field(
        default=500,
        ge=1,
        description="Number of plain-text characters of the post sent to the model.",
    )
    editor_version: str = Field(
        default="2.28.0",
        description="Block editor version reported in converted documents.",
    )
    ollama_base_url: str = Field(
        default="http://ollama:11434",
        description="Base URL for the Ollama service.",
    )
    seo_model: str = Field(
        default="llama3",
        description="Model used to write SEO meta descriptions.",
    )
    seo_enable_fallback: bool = Field(
        default=True,
        description="Fall back to a truncated plain-text excerpt when the model fails.",
    )
    seo_prompt_template: str = Field(
        default=(
            "You are an SEO expert specializing in meta descriptions. Create a compelling meta"
            " description for a blog post based on the provided content.\n\n"
            "Requirements:\n"
            "- Length: 50-160 characters (strict requirement)\n"
            "- Include primary keywords naturally\n"
            "- Make it engaging and click-worthy\n"
            "- Summarize the main value/benefit of the post\n"
            "- No quotation marks or special characters\n"
            "- Write in active voice\n\n"
            "Respond with ONLY the meta description text, nothing else.\n\n"
            "Blog Title: {title}\n\nContent Preview:\n{content}"
        ),
        description="Prompt template used when asking the LLM for a meta description.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()

"""
Configuration management using Pydantic BaseSettings.

Loads settings from environment variables and .env files with type validation
and sensible defaults.
"""

from typing import List, Literal
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings.

    Loads from environment variables and .env file. All settings are typed
    and validated with sensible defaults.
    """

    # ============================================================================
    # LLM Configuration
    # ============================================================================

    llm_provider: Literal["huggingface", "openrouter", "claude", "ollama", "none"] = Field(
        default="huggingface",
        description="LLM provider used for remediation suggestions"
    )

    hf_api_key: str = Field(
        default="",
        description="Hugging Face Inference API token"
    )

    hf_model: str = Field(
        default="mistralai/Mistral-7B-Instruct-v0.2",
        description="Model served by the Hugging Face Inference API"
    )

    hf_base_url: str = Field(
        default="https://router.huggingface.co/v1",
        description="OpenAI-compatible base URL of the Hugging Face router"
    )

    openrouter_api_key: str = Field(
        default="",
        description="OpenRouter API key"
    )

    openrouter_model: str = Field(
        default="mistralai/mistral-7b-instruct",
        description="OpenRouter model identifier"
    )

    claude_api_key: str = Field(
        default="",
        description="Anthropic Claude API key"
    )

    claude_model: str = Field(
        default="claude-3-5-haiku-latest",
        description="Claude model used for suggestions"
    )

    ollama_base_url: str = Field(
        default="http://localhost:11434",
        description="Base URL for local Ollama instance"
    )

    ollama_model: str = Field(
        default="mistral",
        description="Model name installed in Ollama"
    )

    llm_max_tokens: int = Field(
        default=100,
        description="Maximum tokens generated per suggestion"
    )

    llm_temperature: float = Field(
        default=0.3,
        description="Sampling temperature (low for concise, repeatable fixes)"
    )

    llm_timeout: float = Field(
        default=20.0,
        description="Per-request inference timeout in seconds"
    )

    # ============================================================================
    # Audit & Browser Configuration
    # ============================================================================

    audit_timeout_ms: int = Field(
        default=20000,
        description="Timeout for loading and auditing a page, in milliseconds"
    )

    include_warnings: bool = Field(
        default=True,
        description="Report warning-level findings in addition to errors"
    )

    include_notices: bool = Field(
        default=True,
        description="Report advisory notices (needs manual review)"
    )

    axe_script_url: str = Field(
        default="https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.9.1/axe.min.js",
        description="Location of the axe-core script injected into audited pages"
    )

    browser_headless: bool = Field(
        default=True,
        description="Run Chromium headless"
    )

    browser_args: List[str] = Field(
        default=["--no-sandbox", "--disable-setuid-sandbox"],
        description="Extra Chromium flags (sandbox disabled for container hosts)"
    )

    # ============================================================================
    # Server Configuration
    # ============================================================================

    host: str = Field(
        default="0.0.0.0",
        description="Server host to bind to"
    )

    port: int = Field(
        default=5000,
        description="Server port to listen on"
    )

    # ============================================================================
    # Logging Configuration
    # ============================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # ============================================================================
    # Validation Methods
    # ============================================================================

    @field_validator("llm_provider", mode="before")
    @classmethod
    def validate_llm_provider(cls, v: str) -> str:
        """Normalize provider name and reject unknown providers."""
        v = str(v).lower()
        if v not in ["huggingface", "openrouter", "claude", "ollama", "none"]:
            raise ValueError(
                "llm_provider must be 'huggingface', 'openrouter', 'claude', 'ollama' or 'none'"
            )
        return v

    @field_validator("llm_max_tokens")
    @classmethod
    def validate_llm_max_tokens(cls, v: int) -> int:
        """Validate that at least one token may be generated."""
        if v < 1:
            raise ValueError("llm_max_tokens must be at least 1")
        return v

    @field_validator("llm_temperature")
    @classmethod
    def validate_llm_temperature(cls, v: float) -> float:
        """Validate temperature range."""
        if not (0.0 <= v <= 2.0):
            raise ValueError("llm_temperature must be between 0.0 and 2.0")
        return v

    @field_validator("llm_timeout")
    @classmethod
    def validate_llm_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("llm_timeout must be positive")
        return v

    @field_validator("audit_timeout_ms")
    @classmethod
    def validate_audit_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("audit_timeout_ms must be positive")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate that port is within valid range."""
        if not (1 <= v <= 65535):
            raise ValueError("port must be between 1 and 65535")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the standard levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    # ============================================================================
    # Pydantic Settings Configuration
    # ============================================================================

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )


# Global settings instance
settings = Settings()

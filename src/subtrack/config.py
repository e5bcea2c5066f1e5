"""
Configuration management for the Subtrack mock endpoint
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SUBTRACK_",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:5173"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True  # Serve the GraphiQL IDE on GET /graphql

    # Store
    seed_fixtures: bool = True  # Start with the Netflix/Spotify fixture records

    # Client
    client_endpoint: str = "http://localhost:4000/graphql"
    client_timeout: float = 10.0

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()

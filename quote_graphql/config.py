from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Settings for the resolver package, read from the environment or a .env file.

    The catalog fields select and locate the product catalog backend.
    """
    # Logging
    log_level: str = "DEBUG"

    # Catalog backend
    default_catalog: str = "csv"
    data_dir: str = "sample_data"
    products_file: str = "products.csv"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Settings shared by the whole process, built on first use."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """Replace the shared settings; tests use this to point at temporary catalogs."""
    global _config
    _config = AppConfig(**kwargs)

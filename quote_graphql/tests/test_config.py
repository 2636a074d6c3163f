from quote_graphql.config import AppConfig, get_config, set_config_for_test
from quote_graphql.logging import get_logger


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DATA_DIR", "/srv/catalog")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    config = AppConfig()
    assert config.data_dir == "/srv/catalog"
    assert config.log_level == "INFO"
    assert config.products_file == "products.csv"


def test_set_config_for_test():
    set_config_for_test(default_catalog="csv", data_dir="elsewhere")
    assert get_config().data_dir == "elsewhere"


def test_logger_is_bound_to_name():
    set_config_for_test(log_level="ERROR")
    logger = get_logger("quote_graphql.tests")
    logger.error("bound")


def test_only_catalog_and_logging_settings():
    assert set(AppConfig.model_fields) == {"log_level", "default_catalog", "data_dir", "products_file"}

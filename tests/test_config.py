import os

from subtrack.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.api_port == 4000
    assert settings.graphql_path == "/graphql"
    assert settings.seed_fixtures is True
    assert settings.client_endpoint == "http://localhost:4000/graphql"


def test_environment_overrides():
    os.environ["SUBTRACK_API_PORT"] = "4100"
    os.environ["SUBTRACK_SEED_FIXTURES"] = "false"
    os.environ["SUBTRACK_CLIENT_ENDPOINT"] = "http://mock:9000/graphql"

    settings = Settings(_env_file=None)

    assert settings.api_port == 4100
    assert settings.seed_fixtures is False
    assert settings.client_endpoint == "http://mock:9000/graphql"

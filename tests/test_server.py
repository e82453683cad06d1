import pytest

from servicekit.config import AppConfig, load_config
from servicekit.server import HEALTH, PUSH_GROUP, ROOT, TEST_CONTROLLER, create_app


@pytest.fixture
def conf_dir(tmp_path):
    (tmp_path / "app.yaml").write_text(
        "app:\n"
        "  name: demo-service\n"
        "  type: sat-a\n"
        "  httpPort: \"8080\"\n"
        "  mode: test\n"
        "log:\n"
        "  enable2file: false\n",
        encoding="utf-8",
    )
    return str(tmp_path)


@pytest.fixture
def client(conf_dir):
    config = load_config(conf_dir)
    app = create_app(config, config.mode)
    return app.test_client()


def test_server_root(client):
    response = client.get(ROOT)
    assert response.status_code == 200
    assert response.get_json() == {"code": 10000, "msg": "", "data": "demo-service"}


def test_health(client):
    response = client.get(PUSH_GROUP + HEALTH)
    assert response.status_code == 200
    assert response.get_json() == {"code": 10000, "msg": "", "data": {"satellite": "sat-a"}}


def test_get_name(client):
    response = client.get(PUSH_GROUP + TEST_CONTROLLER)
    assert response.get_json()["data"] == "hello"


def test_content_type_is_json(client):
    response = client.get(ROOT)
    assert response.headers["content-type"] == "application/json"


def test_unknown_route_is_404(client):
    assert client.get("/missing").status_code == 404


def test_route_outside_group_is_404(client):
    assert client.get(HEALTH).status_code == 404


@pytest.mark.parametrize("mode,expected", [("release", "release"), ("test", "test"), ("other", "debug")])
def test_modes(mode, expected):
    app = create_app(AppConfig(), mode)
    assert app.config["MODE"] == expected
    assert app.testing == (expected == "test")


def test_mode_defaults_to_config():
    app = create_app(AppConfig(mode="release"))
    assert app.config["MODE"] == "release"
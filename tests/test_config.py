# tests/test_config.py
from product_api.config import Settings
from product_api.errors import NotFoundError, UnclassifiedError, ValidationError


def test_defaults(monkeypatch):
    for name in ("PORT", "API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.port == 3000
    assert s.api_key == "mysecurekey"
    assert s.default_page == 1
    assert s.default_limit == 5


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8085")
    monkeypatch.setenv("api_key", "from-env")
    s = Settings(_env_file=None)
    assert s.port == 8085
    assert s.api_key == "from-env"


def test_error_kinds_carry_status_codes():
    assert NotFoundError("x").status_code == 404
    assert ValidationError("x").status_code == 400
    assert UnclassifiedError().status_code == 500
    assert NotFoundError("Route not found").to_dict() == {"error": "NotFoundError", "message": "Route not found"}

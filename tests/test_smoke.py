"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify face_gate package can be imported."""
    from face_gate.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "rabbitmq_url")


def test_app_exposes_compare_route():
    from face_gate.main import app

    paths = {route.path for route in app.routes}
    assert "/compare" in paths
    assert "/health" in paths

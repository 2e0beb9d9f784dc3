from django.conf import settings


def test_whitenoise_is_wired_once_after_security():
    mw = settings.MIDDLEWARE
    assert mw.count("whitenoise.middleware.WhiteNoiseMiddleware") == 1
    security = mw.index("django.middleware.security.SecurityMiddleware")
    assert mw[security + 1] == "whitenoise.middleware.WhiteNoiseMiddleware"


def test_gateway_context_middleware_runs_last():
    assert settings.MIDDLEWARE[-1] == "apps.gateway.middleware.GatewayContextMiddleware"

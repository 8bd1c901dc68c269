import pygame
import pytest
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def clean_magicgram_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin env-driven defaults so tests do not depend on the caller's shell."""

    for name in (
        "MAGICGRAM_PIXEL_READBACK_STRATEGY",
        "MAGICGRAM_DEFAULT_PADDING_FRACTION",
        "MAGICGRAM_DEFAULT_FONT",
        "MAGICGRAM_PNG_EXPORT_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


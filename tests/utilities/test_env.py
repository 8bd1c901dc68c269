"""Tests for :mod:`magicgram.utilities.env`."""

from __future__ import annotations

import pytest

from magicgram.utilities.env import Configuration, PixelReadbackStrategy


class TestUtilitiesEnv:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, PixelReadbackStrategy.BUFFER),
            ("array", PixelReadbackStrategy.ARRAY),
            ("  BUFFER ", PixelReadbackStrategy.BUFFER),
        ],
    )
    def test_pixel_readback_strategy(
        self,
        monkeypatch: pytest.MonkeyPatch,
        value: str | None,
        expected: PixelReadbackStrategy,
    ) -> None:
        if value is None:
            monkeypatch.delenv("MAGICGRAM_PIXEL_READBACK_STRATEGY", raising=False)
        else:
            monkeypatch.setenv("MAGICGRAM_PIXEL_READBACK_STRATEGY", value)

        assert Configuration.pixel_readback_strategy() is expected

    def test_pixel_readback_strategy_rejects_unknown(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MAGICGRAM_PIXEL_READBACK_STRATEGY", "gpu")

        with pytest.raises(ValueError, match="MAGICGRAM_PIXEL_READBACK_STRATEGY"):
            Configuration.pixel_readback_strategy()

    def test_default_padding_fraction(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MAGICGRAM_DEFAULT_PADDING_FRACTION", raising=False)
        assert Configuration.default_padding_fraction() == 0.1

        monkeypatch.setenv("MAGICGRAM_DEFAULT_PADDING_FRACTION", "0.75")
        with pytest.raises(ValueError, match="at most 0.5"):
            Configuration.default_padding_fraction()

    def test_png_export_max_workers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MAGICGRAM_PNG_EXPORT_MAX_WORKERS", raising=False)
        assert Configuration.png_export_max_workers() == 1

        monkeypatch.setenv("MAGICGRAM_PNG_EXPORT_MAX_WORKERS", "3")
        assert Configuration.png_export_max_workers() == 3

        monkeypatch.setenv("MAGICGRAM_PNG_EXPORT_MAX_WORKERS", "0")
        with pytest.raises(ValueError):
            Configuration.png_export_max_workers()

    def test_png_export_enabled_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MAGICGRAM_PNG_EXPORT_ENABLED", raising=False)

        assert Configuration.png_export_enabled() is True

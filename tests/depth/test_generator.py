from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from magicgram.depth.generator import (DepthMapGenerator, DepthMapSource,
                                       PlaceholderDepthMapSource,
                                       StaticDepthMapSource)
from magicgram.depth.image import ImageDepthMapSource
from magicgram.depth.map import as_depth_map


class _RecordingSource:
    def __init__(self, depth_map: np.ndarray) -> None:
        self.depth_map = depth_map
        self.calls: list[tuple[int, int]] = []

    def make(self, width: int, height: int) -> np.ndarray:
        self.calls.append((width, height))
        return self.depth_map


class TestDepthMapGenerator:
    """The generator owns sizing so every source can work at its native resolution."""

    def test_default_source_is_placeholder(self) -> None:
        generator = DepthMapGenerator(auto_resize=False)

        depth_map = generator.generate(8, 6)

        assert isinstance(generator.source, PlaceholderDepthMapSource)
        np.testing.assert_array_equal(depth_map, np.zeros((1, 1), dtype=np.float32))

    def test_placeholder_is_resized_when_enabled(self) -> None:
        depth_map = DepthMapGenerator().generate(8, 6)

        assert depth_map.shape == (6, 8)
        assert not depth_map.any()

    def test_passes_requested_size_to_source(self) -> None:
        source = _RecordingSource(as_depth_map([[0.5]]))

        DepthMapGenerator(source).generate(30, 20)

        assert source.calls == [(30, 20)]

    def test_auto_resize_matches_requested_size(self) -> None:
        source = StaticDepthMapSource(np.full((10, 10), 0.75, dtype=np.float32))

        depth_map = DepthMapGenerator(source).generate(50, 50)

        assert depth_map.shape == (50, 50)
        assert np.all(depth_map == np.float32(0.75))

    def test_disabled_auto_resize_returns_raw_map(self) -> None:
        raw = as_depth_map(np.linspace(0, 1, 100, dtype=np.float32).reshape(10, 10))
        generator = DepthMapGenerator(StaticDepthMapSource(raw))
        generator.auto_resize = False

        depth_map = generator.generate(50, 50)

        assert depth_map.shape == (10, 10)
        np.testing.assert_array_equal(depth_map, raw)

    def test_auto_resize_can_be_toggled_between_calls(self) -> None:
        generator = DepthMapGenerator(StaticDepthMapSource(np.zeros((10, 10))))

        generator.auto_resize = False
        assert generator.generate(5, 5).shape == (10, 10)

        generator.auto_resize = True
        assert generator.generate(5, 5).shape == (5, 5)

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0)])
    def test_rejects_empty_request(self, width: int, height: int) -> None:
        with pytest.raises(ValueError):
            DepthMapGenerator().generate(width, height)

    def test_sources_satisfy_protocol(self) -> None:
        assert isinstance(PlaceholderDepthMapSource(), DepthMapSource)
        assert isinstance(StaticDepthMapSource([[0.0]]), DepthMapSource)


class TestImageDepthMapSource:
    def test_luminance_becomes_depth(self) -> None:
        image = Image.new("L", (4, 2), 0)
        image.putpixel((3, 1), 255)
        image.putpixel((0, 0), 51)

        depth_map = ImageDepthMapSource(image).make(100, 100)

        assert depth_map.shape == (2, 4)
        assert depth_map[1, 3] == pytest.approx(1.0)
        assert depth_map[0, 0] == pytest.approx(0.2)
        assert depth_map[0, 1] == 0.0

    def test_loads_image_from_path(self, tmp_path) -> None:
        path = tmp_path / "depth.png"
        Image.new("RGB", (3, 3), (255, 255, 255)).save(path)

        depth_map = ImageDepthMapSource(path).make(3, 3)

        assert np.all(depth_map == 1.0)

    def test_generator_resamples_native_resolution(self) -> None:
        image = Image.new("L", (2, 1), 0)
        image.putpixel((1, 0), 255)
        generator = DepthMapGenerator(ImageDepthMapSource(image))

        depth_map = generator.generate(4, 2)

        np.testing.assert_array_equal(
            depth_map,
            np.array([[0, 0, 1, 1], [0, 0, 1, 1]], dtype=np.float32),
        )

"""
Pytest fixtures for tiersize tests.
"""

import pytest


@pytest.fixture
def make_image(tmp_path):
    """Fixture returning a factory that writes a test image and returns its path."""
    from PIL import Image

    def _make_image(name='photo.jpg', size=(200, 100), mode='RGB', color='red', fmt=None):
        if mode == 'RGBA' and isinstance(color, str):
            color = (255, 0, 0, 128)
        img = Image.new(mode, size, color=color)
        path = tmp_path / name
        img.save(path, format=fmt)
        return str(path)

    return _make_image


@pytest.fixture
def landscape_image(make_image):
    """Fixture providing a 2000x1000 JPEG."""
    return make_image('landscape.jpg', size=(2000, 1000))


@pytest.fixture
def square_image(make_image):
    """Fixture providing a 100x100 JPEG."""
    return make_image('square.jpg', size=(100, 100), color='blue')


@pytest.fixture
def output_dir(tmp_path):
    """Fixture providing an output directory path that does not exist yet."""
    return str(tmp_path / 'out' / 'nested')


@pytest.fixture
def resize_config(tmp_path, make_image):
    """Fixture providing a config with two source images on disk."""
    from tiersize.resize_config import ResizeConfig

    make_image('kitchen.jpg', size=(1600, 1200))
    make_image('bathroom.jpg', size=(480, 640), color='green')

    return ResizeConfig(
        input_dir=str(tmp_path),
        base_filenames=['kitchen', 'bathroom'],
    )


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')

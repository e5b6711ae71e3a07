import io

import pytest
from PIL import Image


@pytest.fixture
def png_data():
    """A real PNG file, as written by Pillow."""
    buffer = io.BytesIO()
    Image.new('RGB', (4, 4), color='red').save(buffer, format='PNG')

    return buffer.getvalue()


@pytest.fixture
def png_path(tmp_path, png_data):
    path = tmp_path / 'red.png'
    path.write_bytes(png_data)

    return path

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def gradient_png(tmp_path):
    """40x20 horizontal black-to-white gradient saved as PNG."""
    row = np.linspace(0, 255, 40).astype(np.uint8)
    pixels = np.tile(row, (20, 1))
    rgb = np.stack([pixels] * 3, axis=-1)
    path = tmp_path / "gradient.png"
    Image.fromarray(rgb).save(path)
    return path

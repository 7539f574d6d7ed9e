import io

import falcon.testing
import PIL.Image
import pytest

from imgdrop.app import create_app
from imgdrop.config import Config


@pytest.fixture()
def config(tmp_path, monkeypatch):
    monkeypatch.setenv('IMGDROP_STORAGE_PATH', str(tmp_path / 'i'))
    monkeypatch.delenv('IMGDROP_SERVER_NAME', raising=False)

    config = Config()
    config.max_upload_size = 64 * 1024
    config.clock = lambda: 1600000000.25
    return config


@pytest.fixture
def client(config):
    app = create_app(config)
    return falcon.testing.TestClient(app)


@pytest.fixture(scope='session')
def png_image():
    image = PIL.Image.new('RGB', (32, 24), color=(200, 40, 40))
    data = io.BytesIO()
    image.save(data, 'PNG')
    return data.getvalue()

import re

import falcon.asgi

from .config import Config
from .errors import serialize_error
from .images import Images
from .router import MethodFilter
from .store import Store

# Anything outside the static image prefix is answered by the images resource
CATCH_ALL = re.compile(r'/(?!i/)')


def create_app(config=None):
    config = config or Config()
    store = Store(config)
    images = Images(config, store)

    app = falcon.asgi.App(middleware=[MethodFilter()])
    app.add_route('/', images)
    app.add_sink(images.sink, CATCH_ALL)
    app.set_error_serializer(serialize_error)

    if config.serve_images:
        app.add_static_route('/i', config.storage_path)

    return app

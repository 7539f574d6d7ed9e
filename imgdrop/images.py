import logging

import falcon

from .errors import ErrorResponse
from .pages import render_listing
from .store import derive_filename

logger = logging.getLogger(__name__)


class Images:

    def __init__(self, config, store):
        self.config = config
        self.store = store

    def _url(self, req, filename):
        host = self.config.server_name or req.host
        return f'{req.scheme}://{host}/i/{filename}'

    def _reject(self, code, message):
        logger.warning('upload rejected with %d: %s', code, message)
        return ErrorResponse(code, message)

    async def on_get(self, req, resp):
        try:
            images = await self.store.list_images()
        except (FileNotFoundError, NotADirectoryError) as ex:
            logger.error('image directory is missing: %s', ex)
            raise ErrorResponse(500, 'Cannot find image directory')
        except OSError as ex:
            logger.error('could not list images: %s', ex)
            raise ErrorResponse(500, str(ex))

        resp.content_type = falcon.MEDIA_HTML
        resp.text = render_listing(images, self.config.date_format)

    async def on_post(self, req, resp):
        name = req.get_param('name')
        if name is None:
            name = str(int(self.config.clock()))

        filename = derive_filename(name, req.remote_addr)
        url = self._url(req, filename)

        try:
            size = await self.store.save(filename, req.stream)
        except (OSError, ValueError) as ex:
            logger.error('could not store %s: %s', filename, ex)
            raise ErrorResponse(500, str(ex))

        if size == 0:
            await self.store.delete(filename)
            raise self._reject(400, 'Input file was empty')

        limit = self.config.max_upload_size
        if size >= limit:
            # Only a truncated prefix was stored
            await self.store.delete(filename)
            raise self._reject(
                413,
                f'Input file too large. Must be smaller than {limit} bytes')

        resp.status = falcon.HTTP_201
        resp.content_type = falcon.MEDIA_TEXT
        resp.content_length = len(url.encode())
        resp.location = f'/i/{filename}'
        resp.text = url

    async def sink(self, req, resp):
        if req.method == 'POST':
            await self.on_post(req, resp)
        else:
            await self.on_get(req, resp)

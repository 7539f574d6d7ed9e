import asyncio
import hashlib
import logging
import os

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)

NAME_LENGTH = 15

_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def _base36(number):
    if number == 0:
        return '0'

    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_DIGITS[remainder])
    return ''.join(reversed(digits))


def extension(name):
    """Return the text after the last dot of the basename, or ''."""
    basename = name.replace('\\', '/').rsplit('/', 1)[-1]
    if '.' not in basename:
        return ''
    return basename.rsplit('.', 1)[1]


def derive_filename(name, remote_addr):
    """Hash a client supplied name and address into a stored filename.

    The same (name, remote_addr) pair always yields the same filename, so a
    repeated upload overwrites the earlier file.
    """
    digest = hashlib.md5(f'{name} {remote_addr}'.encode()).hexdigest()
    prefix = _base36(int(digest, 16))[:NAME_LENGTH]
    return f'{prefix}.{extension(name)}'


class Store:

    def __init__(self, config):
        self.config = config

    def image_path(self, filename):
        return os.path.join(self.config.storage_path, filename)

    def _scan(self):
        images = []

        with os.scandir(self.config.storage_path) as entries:
            for entry in entries:
                if (extension(entry.name).lower()
                        not in self.config.image_extensions):
                    continue

                images.append({
                    'filename': entry.name,
                    'path': entry.path,
                    'modified': entry.stat().st_mtime,
                })

        images.sort(key=lambda item: item['modified'], reverse=True)
        return images

    async def list_images(self):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._scan)

    async def save(self, filename, stream):
        """Copy at most ``max_upload_size`` bytes of stream to filename.

        Returns the number of bytes written. The body is copied chunk by
        chunk; reading stops once the limit has been reached.
        """
        limit = self.config.max_upload_size
        size = 0

        async with aiofiles.open(self.image_path(filename), 'wb') as output:
            async for chunk in stream:
                chunk = chunk[:limit - size]
                if chunk:
                    await output.write(chunk)
                    size += len(chunk)
                if size >= limit:
                    break

        logger.info('stored %s (%d bytes)', filename, size)
        return size

    async def delete(self, filename):
        try:
            await aiofiles.os.remove(self.image_path(filename))
        except OSError as ex:
            logger.warning('could not remove %s: %s', filename, ex)

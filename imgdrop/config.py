import os
import time

MAX_UPLOAD_SIZE = 10240000  # 10MB

IMAGE_EXTENSIONS = frozenset({'jpg', 'jpeg', 'gif', 'png', 'bmp'})


class Config:

    def __init__(self):
        self.storage_path = os.path.abspath(
            os.environ.get('IMGDROP_STORAGE_PATH') or '/tmp/imgdrop')
        self.server_name = os.environ.get('IMGDROP_SERVER_NAME') or None

        self.max_upload_size = MAX_UPLOAD_SIZE
        self.image_extensions = IMAGE_EXTENSIONS
        self.date_format = '%x %X'
        self.serve_images = True
        self.clock = time.time

        if not os.path.exists(self.storage_path):
            os.makedirs(self.storage_path)

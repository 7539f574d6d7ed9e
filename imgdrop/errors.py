import falcon

from .pages import render_error

# Error statuses the uploader knows how to report
STATUSES = {
    400: falcon.HTTP_400,
    401: falcon.HTTP_401,
    403: falcon.HTTP_403,
    413: falcon.HTTP_413,
    500: falcon.HTTP_500,
    501: falcon.HTTP_501,
}


class ErrorResponse(falcon.HTTPError):
    """Terminate the request with an error status and an HTML message.

    Raising an instance ends request processing; the app's error serializer
    turns it into the response body.

    Args:
        code (int): HTTP status code, must be an error status (400-599) that
            is listed in ``STATUSES``.
        message (str): Human readable explanation shown in the error page.

    Raises:
        ValueError: ``code`` is not an error status, or is not supported.
    """

    def __init__(self, code, message=''):
        if code < 400 or code > 599:
            raise ValueError(f'{code} is not an error status')
        if code not in STATUSES:
            raise ValueError(f'HTTP status {code} not implemented')

        super().__init__(STATUSES[code], description=message)
        self.code = code
        self.message = message


def serialize_error(req, resp, exception):
    code, _, reason = str(exception.status).partition(' ')

    resp.content_type = falcon.MEDIA_HTML
    resp.text = render_error(code, reason, exception.description or '')

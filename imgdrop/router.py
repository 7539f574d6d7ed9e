import logging

from .errors import ErrorResponse

logger = logging.getLogger(__name__)


class MethodFilter:
    ROUTED = frozenset({'GET', 'POST'})
    MESSAGE = "I don't know what you're trying to do..."

    async def process_request(self, req, resp):
        if req.method not in self.ROUTED:
            logger.info('rejecting %s %s', req.method, req.path)
            raise ErrorResponse(501, self.MESSAGE)

"""
Custom throttling classes and OpenAPI schema hooks for the robots_generator API.

Includes:
- Anonymous user rate throttle with a human-readable wait time in its error message.
- OpenAPI postprocessing hook to add 'Retry-After' header to 429 responses.
"""

import logging

from rest_framework.throttling import AnonRateThrottle
from rest_framework.exceptions import Throttled

logger = logging.getLogger(__name__)

def format_wait(wait):
    """
    Format a wait time in seconds as minutes and seconds.

    >>> format_wait(125)
    '2 minute(s) and 5 second(s)'
    """
    minutes, seconds = divmod(int(wait), 60)
    if minutes:
        return f"{minutes} minute(s) and {seconds} second(s)"
    return f"{seconds} second(s)"

class ApiAnonRateThrottle(AnonRateThrottle):
    """
    Throttle class for anonymous API users.

    Raises Throttled with the remaining wait time when the rate limit is exceeded.
    """
    def throttle_failure(self):
        wait = self.wait()
        logger.warning("API rate limit reached for %s", getattr(self, 'key', 'anonymous'))
        if wait is not None:
            detail = (
                f"Generator API rate limit reached. "
                f"Please try again in {format_wait(wait)}."
            )
        else:
            detail = "Generator API rate limit reached. Please try again later."
        raise Throttled(detail=detail, wait=wait)

def add_retry_after_header_to_429_responses(result, generator, request, public):
    # pylint: disable=unused-argument
    """
    Add 'Retry-After' header to all 429 responses in the OpenAPI schema.
    """
    for path_item in result.get('paths', {}).values():
        for operation in path_item.values():
            responses = operation.get('responses', {})
            if '429' in responses:
                headers = responses['429'].setdefault('headers', {})
                headers['Retry-After'] = {
                    'description': 'Seconds to wait before retrying the request.',
                    'schema': {'type': 'integer'}
                }
    return result

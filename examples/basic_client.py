"""
Basic client example using relay_http.

This example demonstrates how to send requests with the Client
and how to hook into the request lifecycle events.
"""

import logging

from relay_http import Client, Event, TransportError

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


def log_request(request):
    logger.info(f"Sending {request.verb.value} {request.url}")


def log_response(response):
    logger.info(f"Response status: {response.status} ({response.transaction_time:.3f}s)")


def log_error(error):
    logger.error(f"Request failed with code {error.code}: {error.reason}")


def main():
    client = Client("http://httpbin.org")
    client.register(Event.REQUEST_BUILT, log_request)
    client.register(Event.RESPONSE_BUILT, log_response)
    client.register(Event.ERROR, log_error)

    try:
        response = client.get("/get", {"Accept": "application/json"}).send()
        logger.info(f"Response body length: {len(response.body)} bytes")

        response = client.post("/post").set_body('{"name": "widget"}').send()
        logger.info(f"Echoed JSON: {response.json().get('json')}")

        response = client.head("/get").send()
        logger.info(f"Content-Type: {response.get_header('Content-Type')}")
    except TransportError:
        logger.exception("Example aborted")


if __name__ == "__main__":
    main()

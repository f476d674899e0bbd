import uuid

import structlog

logger = structlog.get_logger()


# Tag every log line of a request with the same request_id
class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        logger.info("request_received", method=request.method, path=request.path)
        try:
            response = self.get_response(request)
            response["X-Request-ID"] = request_id
            logger.info("request_finished", status=response.status_code)
            return response
        finally:
            structlog.contextvars.clear_contextvars()

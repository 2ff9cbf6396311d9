"""
Error kinds surfaced by the HTTP layer.
Every error is rendered as {"error": "<message>"}; the message is the only
thing a caller ever sees.
"""


class AppError(Exception):
    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None, *, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidRequest(AppError):
    status_code = 400
    message = "Invalid request"


class Unconfigured(AppError):
    status_code = 400
    message = "Missing description or API Key"


class UpstreamFailure(AppError):
    # message is fixed; upstream detail goes to the log only
    status_code = 500
    message = "Internal Server Error"

    def __init__(self):
        super().__init__()

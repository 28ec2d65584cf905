"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``swplanets.core.app`` turns them into ``{"error": message}``
responses using ``status_code``.
"""


class SWPlanetsError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(SWPlanetsError):
    status_code = 400


class ConflictError(SWPlanetsError):
    status_code = 409


class NotFoundError(SWPlanetsError):
    status_code = 404


class UpstreamUnavailableError(SWPlanetsError):
    """The remote catalog could not be reached, or refused the count query."""

    status_code = 502


class UpstreamError(SWPlanetsError):
    """The remote catalog answered, but not with something we can use."""

    status_code = 502


class InternalError(SWPlanetsError):
    status_code = 500

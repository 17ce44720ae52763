## Error kinds raised along the roadmap pipeline


class RoadmapError(Exception):
    """Base for every failure the request handler turns into an error envelope."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(RoadmapError):
    status_code = 401


class InvalidRequest(RoadmapError):
    status_code = 400


class GatewayUnavailable(RoadmapError):
    status_code = 502


class MalformedGeneration(RoadmapError):
    status_code = 502


class PersistenceError(RoadmapError):
    status_code = 500


class ConfigurationError(RoadmapError):
    status_code = 500
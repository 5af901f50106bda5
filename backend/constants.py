"""
Application-wide constants.

This module centralizes magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""


class HTTPStatus:
    """HTTP status codes used throughout the application"""

    # Success
    OK = 200
    CREATED = 201
    NO_CONTENT = 204

    # Client Errors
    BAD_REQUEST = 400
    NOT_FOUND = 404

    # Server Errors
    INTERNAL_SERVER_ERROR = 500


class CompanyLimits:
    """Bounds enforced on incoming company payloads"""

    NAME_MAX_LENGTH = 200
    CERT_ID_MAX_LENGTH = 100
    MIN_EMPLOYEE_AGE = 0
    MAX_EMPLOYEE_AGE = 150
    # Stored as a double: every value up to 2**53 reads back exactly
    MAX_REGISTERED_CAPITAL = 10 ** 15


class Routes:
    """URL paths exposed by the HTTP layer"""

    COMPANIES = "/companies"
    HEALTH = "/health"

    @classmethod
    def company(cls, company_id: int) -> str:
        """Location of a single company resource"""
        return f"{cls.COMPANIES}/{company_id}"


# Header carrying the per-request correlation id
REQUEST_ID_HEADER = "X-Request-ID"

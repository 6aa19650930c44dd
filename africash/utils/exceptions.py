class ServiceError(Exception):
    status = 500

    def __init__(self, message="Service error", field=None):
        self.message = message
        self.field = field
        super().__init__(message)


class ValidationError(ServiceError):
    """Malformed or missing input; ``field`` names the first offending key."""
    status = 400


class ConflictError(ServiceError):
    status = 400


class AuthenticationError(ServiceError):
    status = 401


class NotFoundError(ServiceError):
    status = 404


class InsufficientFundsError(ServiceError):
    status = 400

    def __init__(self, message="Insufficient funds", field="amount"):
        super().__init__(message, field)


class InternalError(ServiceError):
    status = 500

#  SPDX-License-Identifier: Apache-2.0
"""Exceptions used for the Carwings API."""


class CarwingsExceptionError(Exception):
    """Class of Carwings API exceptions."""

    def __init__(self, code=None, *args, **kwargs) -> None:
        """Initialize exceptions for the Carwings API."""
        self.message = ""
        self.code = code
        super().__init__(*args, **kwargs)
        if code is not None:
            if isinstance(code, str):
                self.message = code
                return
            if code == 400:
                self.message = "BAD_REQUEST"
            elif code == 401:
                self.message = "UNAUTHORIZED"
            elif code == 404:
                self.message = "NOT_FOUND"
            elif code == 408:
                self.message = "VEHICLE_UNAVAILABLE"
            elif code == 429:
                self.message = "TOO_MANY_REQUESTS"
            elif code == 500:
                self.message = "SERVER_ERROR"
            elif code == 503:
                self.message = "SERVICE_MAINTENANCE"
            elif code == 504:
                self.message = "UPSTREAM_TIMEOUT"
            else:
                self.message = f"UNKNOWN_ERROR_{code}"

    def __str__(self) -> str:
        """Return the symbolic message when there is one."""
        return self.message or super().__str__()


class CarwingsKeyError(CarwingsExceptionError):
    """Encryption key has an invalid length for the cipher."""


class CarwingsTransportError(CarwingsExceptionError):
    """Network, HTTP or body decoding failure talking to the service."""


class CarwingsProtocolStatusError(CarwingsExceptionError):
    """The response body carried a status other than 200."""


class CarwingsHandshakeError(CarwingsProtocolStatusError):
    """The initial handshake was rejected."""


class CarwingsLoginError(CarwingsProtocolStatusError):
    """The login request was rejected."""


class CarwingsNoVehicleError(CarwingsLoginError):
    """Login succeeded but no vehicle is bound to the account."""

    def __init__(self, code="no vehicle bound to account", *args, **kwargs) -> None:
        """Initialise with a default message."""
        super().__init__(code, *args, **kwargs)


class CarwingsNotAuthenticatedError(CarwingsExceptionError):
    """Operation attempted on a session without a session id."""

    def __init__(self, code="not logged in", *args, **kwargs) -> None:
        """Initialise with a default message."""
        super().__init__(code, *args, **kwargs)


class CarwingsUpdateFailedError(CarwingsExceptionError):
    """The service could not reach the vehicle while updating its data."""

    def __init__(
        self,
        code="failed to retrieve updated info from vehicle",
        *args,
        **kwargs,
    ) -> None:
        """Initialise with a default message."""
        super().__init__(code, *args, **kwargs)


class CarwingsUpdateTimeoutError(CarwingsExceptionError):
    """The vehicle did not report a completed update within the polling policy."""


class CarwingsDecodeError(CarwingsExceptionError):
    """A field in a response could not be decoded."""

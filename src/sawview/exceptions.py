# src/sawview/exceptions.py

class ViewerError(Exception):
    """Base exception class for ledger viewer errors"""
    pass

class DecodeError(ViewerError):
    """Base exception class for payload decoding errors"""
    pass

class InvalidBase64Error(DecodeError):
    """Raised when a payload is not valid base64"""
    pass

class DeserializationFailedError(DecodeError):
    """Raised when payload bytes cannot be deserialized with the chosen scheme"""

    def __init__(self, scheme: str, reason: str = ""):
        self.scheme = scheme
        message = f"Error in trying to deserialize payload with {scheme.upper()}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

class NotAnObjectError(DecodeError):
    """Raised when a deserialized payload is not a key/value map"""
    pass

class SchemeNotImplementedError(DecodeError):
    """Raised when a registered scheme has no concrete decoder yet"""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"No decoder has been supplied for the '{scheme}' scheme")

class RangeError(ViewerError, ValueError):
    """Raised when a shortening window exceeds the string length"""
    pass

class InvalidAddressLengthError(ViewerError, ValueError):
    """Raised when a state address is not exactly 70 characters"""

    def __init__(self, address: str, expected: int):
        self.address = address
        super().__init__(
            f"Invalid address: expected {expected} characters, got {len(address)}"
        )

class UnsupportedSchemeError(ViewerError):
    """Raised when an unknown payload scheme is requested"""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"Unsupported deserialization method: {scheme}")

class DataSourceError(ViewerError):
    """Raised when a ledger data file cannot be read"""
    pass

class DataFormatError(ViewerError):
    """Raised when ledger JSON does not match the expected schema"""
    pass

class FetchError(ViewerError):
    """Raised when an HTTP request to the node fails"""

    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)

class ConfigError(ViewerError):
    """Raised when the settings file is invalid"""
    pass

# careerbridge/errors.py


class CareerBridgeError(Exception):
    """Base class for errors raised by careerbridge."""


class ExplanationError(CareerBridgeError):
    """A remote text generator could not produce an explanation."""

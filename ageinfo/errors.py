"""Exception types raised by the ageinfo package.

Input problems are reported as ``ValueError`` subclasses so that Strands
tools surface a readable message to the model and the CLI can print it
unchanged.  Each class maps to exactly one validation rule.
"""


class AgeInfoError(ValueError):
    """Base class for every validation error raised by ageinfo."""


class InvalidDateInput(AgeInfoError):
    """The birth date string is not a valid ISO calendar date."""


class InvalidTimeInput(AgeInfoError):
    """The optional birth time string is not a valid ``HH:MM[:SS]`` time."""


class InvalidNameInput(AgeInfoError):
    """The optional name is too short."""


class FutureBirthDate(AgeInfoError):
    """The birth instant lies after the evaluation instant."""


class UnsupportedLocale(AgeInfoError):
    """The requested locale tag has no formatting table."""


class AgentConfigurationError(RuntimeError):
    """The agent cannot be built because required settings are missing."""

"""Exceptions raised by the summary pipeline."""

from __future__ import annotations


class MinutegenError(Exception):
    """Base class for errors that end a run."""


class UnrecognizedFormatError(MinutegenError, ValueError):
    """The transcript payload does not have a supported shape."""


class MissingCredentialError(MinutegenError):
    """The completion service has no API key configured."""


class CompletionServiceError(MinutegenError):
    """The completion service call failed or returned nothing usable."""


class TemplateReadError(MinutegenError):
    """A summary template could not be listed or read."""

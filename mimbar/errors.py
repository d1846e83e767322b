"""
Error taxonomy for the script studio.

Only the two external boundaries (producer and exporter) can fail.
Normalization, pagination and rendering are total functions and never
raise these.
"""


class ScriptError(RuntimeError):
    """Base class for all boundary failures reported to the user."""


class ProducerUnavailable(ScriptError):
    """No producer endpoint or credential is configured."""


class ProducerRequestFailed(ScriptError):
    """The producer call was rejected or its text did not parse as JSON."""


class EmptyDocument(ProducerRequestFailed):
    """The producer answered with a script containing zero blocks."""


class ExportFailed(ScriptError):
    """The document exporter rejected the rendered document."""

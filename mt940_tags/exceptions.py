"""
Custom exception hierarchy for mt940-tags.

Callers can catch the specific failure of a single tag (unknown id,
grammar mismatch, bad field value) or everything raised by the package
through ``Mt940TagsError``. None of these are retried or defaulted here;
the caller decides whether to skip the tag or abort the whole message.
"""


class Mt940TagsError(Exception):
    """Base exception for all mt940-tags errors."""


class UnknownTagError(Mt940TagsError):
    """Raised when a (tag id, sub-id) pair resolves to no grammar rule."""


class GrammarMismatchError(Mt940TagsError):
    """Raised when tag data does not match the grammar of its rule.

    The message includes the tag id and the raw data to aid debugging.
    """


class FieldValueError(Mt940TagsError, ValueError):
    """Raised when a matched value is semantically invalid.

    This can happen if:
    - The debit/credit or reversal/expected mark is not recognised.
    - The amount is not a number or carries its own sign.
    - A date, time or zone offset is out of range (or not numeric).
    """


class ConfigValidationError(Mt940TagsError):
    """Raised when a grammar file or parser config fails validation.

    For example, an empty YAML file, a duplicate tag id or a rule
    naming a projection that does not exist.
    """

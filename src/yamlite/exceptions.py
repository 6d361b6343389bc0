"""Custom exceptions for yamlite."""


class YamliteError(Exception):
    """Base exception for yamlite operations."""


class DocumentIOError(YamliteError):
    """Error while reading or writing a document."""


class DocumentNotFoundError(DocumentIOError):
    """Document does not exist at the requested location."""

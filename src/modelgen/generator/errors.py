"""Errors raised while parsing generator arguments and attributes."""

from typing import Optional


class GeneratorError(Exception):
    """Base class for errors that abort a generator run."""


class InvalidArguments(GeneratorError):
    """Singular and plural resource names are missing or malformed."""

    def __init__(self, command: str = "modelgen model"):
        self.command = command
        super().__init__(
            f"{command} expects both singular and plural names\n"
            f"of the generated resource followed by any number of attributes:\n\n"
            f"    {command} User users name:string\n"
        )


class InvalidAttributeSyntax(GeneratorError):
    """A token is not of the form `key[:kind[:modifier]]`."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid attribute `{token}`: {reason}")


class MissingReferenceTarget(GeneratorError):
    """A `references` kind was given without the referenced table."""

    def __init__(self, key: str, command: str = "modelgen model"):
        self.key = key
        super().__init__(
            f"Generators expect the table to be given to {key}:references.\n"
            f"For example:\n\n"
            f"    {command} Comment comments body:text post_id:references:posts\n"
        )


class UnknownType(GeneratorError):
    """A type token outside the supported vocabulary."""

    def __init__(self, token: str, key: Optional[str] = None):
        self.token = token
        self.key = key
        super().__init__(f"Unknown type `{token}` given to generator")


class DuplicateModuleName(GeneratorError):
    """The model module to generate already exists."""

    def __init__(self, module: str):
        self.module = module
        super().__init__(f"Module name {module} is already taken, please choose another name")

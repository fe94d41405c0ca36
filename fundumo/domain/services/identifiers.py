"""Identifier generation for records and anonymous feedback codes."""

import secrets
import string
import uuid

from domain.value_objects.enums import ANONYMOUS_CODE_LENGTH, ANONYMOUS_CODE_PREFIX

_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_id() -> str:
    """Opaque unique id for a record."""
    return uuid.uuid4().hex


def generate_short_id(length: int = 8) -> str:
    """Short id for nested items such as event highlights."""
    return uuid.uuid4().hex[:length]


def generate_anonymous_code() -> str:
    """
    Generate a feedback tracking handle, e.g. ``FUN-7QK2M0ZC4A``.

    The characters come from the `secrets` CSPRNG so codes cannot be guessed
    from one another.
    """
    atoms = "".join(secrets.choice(_CODE_ALPHABET) for _ in range(ANONYMOUS_CODE_LENGTH))
    return f"{ANONYMOUS_CODE_PREFIX}{atoms}"

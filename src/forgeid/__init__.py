# SPDX-License-Identifier: MIT
"""Short, self-verifying identifiers sealed with a keyed signature."""

from .codec import encode_base62, to_base36
from .fingerprint import machine_signature, rolling_hash
from .formatting import format_id
from .generator import ForgeIdGenerator
from .models import GeneratorConfig
from .payload import compose_payload
from .scheduler import scheduled_length
from .signing import SIGNATURE_LENGTH, sign, verify

__all__ = [
    "ForgeIdGenerator",
    "GeneratorConfig",
    "SIGNATURE_LENGTH",
    "compose_payload",
    "encode_base62",
    "format_id",
    "machine_signature",
    "rolling_hash",
    "scheduled_length",
    "sign",
    "to_base36",
    "verify",
]

"""Composable codecs — leaf checks, intersection/union composition, reports.

Usage::

    from formcodec.codecs import intersection, max_length, type_string, non_empty_string

    Title = intersection([type_string, non_empty_string, max_length(200)])
    decoded = Title.decode(raw)
    if not decoded:
        print(decoded.failures[0].message)
"""

from formcodec.codecs.core import (
    Codec,
    IntersectionCodec,
    RecordCodec,
    Refinement,
    UnionCodec,
    intersection,
    record,
    refine,
    union,
)
from formcodec.codecs.domain import (
    email,
    non_empty_trimmed_string,
    password,
    phone,
    sign_up_form,
    string64,
    string512,
    text_input_field,
)
from formcodec.codecs.messages import VALIDATION_ERRORS, message_for
from formcodec.codecs.report import errors_to_form_errors, report
from formcodec.codecs.result import Decoded, Path, PathSegment, ValidationFailure
from formcodec.codecs.rules import (
    boolean,
    email_format,
    is_email,
    is_mobile_phone,
    max_length,
    min_length,
    non_empty_string,
    phone_format,
    trimmed_string,
    type_string,
)

__all__ = [
    "VALIDATION_ERRORS",
    "Codec",
    "Decoded",
    "IntersectionCodec",
    "Path",
    "PathSegment",
    "RecordCodec",
    "Refinement",
    "UnionCodec",
    "ValidationFailure",
    "boolean",
    "email",
    "email_format",
    "errors_to_form_errors",
    "intersection",
    "is_email",
    "is_mobile_phone",
    "max_length",
    "message_for",
    "min_length",
    "non_empty_string",
    "non_empty_trimmed_string",
    "password",
    "phone",
    "phone_format",
    "record",
    "refine",
    "report",
    "sign_up_form",
    "string512",
    "string64",
    "text_input_field",
    "trimmed_string",
    "type_string",
    "union",
]

"""Domain codecs for sign-up style forms.

These are data, not code paths: every codec here is a composition of
leaves from ``formcodec.codecs.rules``. Add new domain types the same way.

The ``NewType`` brands exist only for type checkers. A function that takes
``Email`` cannot be handed a raw ``str`` by mistake; at runtime the
decoded value is the original string.
"""

from typing import NewType

from formcodec.codecs.core import Codec, UnionCodec, intersection, record, union
from formcodec.codecs.rules import (
    boolean,
    email_format,
    max_length,
    min_length,
    non_empty_string,
    phone_format,
    trimmed_string,
    type_string,
)

NonEmptyTrimmedString = NewType("NonEmptyTrimmedString", str)
String64 = NewType("String64", str)
String512 = NewType("String512", str)
Email = NewType("Email", str)
Password = NewType("Password", str)
Phone = NewType("Phone", str)

# The order matters: the type check runs first.
non_empty_trimmed_string: Codec[NonEmptyTrimmedString] = intersection(
    [type_string, non_empty_string, trimmed_string],
    name="NonEmptyTrimmedString",
)

string64: Codec[String64] = intersection(
    [non_empty_trimmed_string, max_length(64)], name="String64"
)

string512: Codec[String512] = intersection(
    [non_empty_trimmed_string, max_length(512)], name="String512"
)

email: Codec[Email] = intersection([string64, email_format], name="Email")

password: Codec[Password] = intersection([string512, min_length(4)], name="Password")

phone: Codec[Phone] = intersection([non_empty_trimmed_string, phone_format], name="Phone")

# Codecs rendered as text inputs.
text_input_field: UnionCodec[str] = union(
    [string64, email, password, phone], name="TextInputField"
)

sign_up_form = record(
    {
        "company": string64,
        "email": email,
        "password": password,
        "phone": phone,
        "sendNewsletter": boolean,
    },
    name="SignUpForm",
)

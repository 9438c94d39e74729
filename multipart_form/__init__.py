from multipart_form.errors import FileReadError, MultipartFormError
from multipart_form.fields import FileField, TextField
from multipart_form.multipart import (
    MultiPartFormDataBuilder,
    boundary_from_header,
    default_boundary,
    encode_file_part,
    encode_text_part,
)

__all__ = [
    "MultiPartFormDataBuilder",
    "TextField",
    "FileField",
    "MultipartFormError",
    "FileReadError",
    "boundary_from_header",
    "default_boundary",
    "encode_file_part",
    "encode_text_part",
]

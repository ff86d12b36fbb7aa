from .builder import ClassBuilder, ClassImport, FILE_EXTENSION, OPEN_TAG
from .comment import CommentKind, DocComment, DocParameter
from .method import MethodBuilder, MethodParameter, Visibility
from .literals import format_literal, format_constant
from .naming import to_pascal_case, to_camel_case, to_snake_case, upper_first
from .writer import WriteResult, write_if_absent
from .loader import dict_to_builder, load_spec

__version__ = "1.0.1"

__all__ = [
    # builders
    "ClassBuilder", "ClassImport", "MethodBuilder", "MethodParameter", "DocComment", "DocParameter",
    "CommentKind", "Visibility", "FILE_EXTENSION", "OPEN_TAG",
    # rendering helpers
    "format_literal", "format_constant",
    "to_pascal_case", "to_camel_case", "to_snake_case", "upper_first",
    # output
    "WriteResult", "write_if_absent",
    # declarative descriptions
    "dict_to_builder", "load_spec",
]

from .option import Option, Some, Nothing, from_nullable
from .state import OptionState, Present, Absent
from .functions import (
    flatten,
    unzip,
    Transformation,
    Predicate,
    Generator,
    GenerateOption,
    ZipTransformation,
    TransformToOption,
    OptionDuo,
)
from .errors import OptionError, UnwrapError
from .logger import ConsoleLogger, get_logger
from .config import Settings, get_settings, configure

__all__ = [
    "Option", "Some", "Nothing", "from_nullable",
    "OptionState", "Present", "Absent",
    "flatten", "unzip",
    "Transformation", "Predicate", "Generator", "GenerateOption",
    "ZipTransformation", "TransformToOption", "OptionDuo",
    "OptionError", "UnwrapError",
    "ConsoleLogger", "get_logger",
    "Settings", "get_settings", "configure",
]

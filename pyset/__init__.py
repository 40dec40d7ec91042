""" imports for pyset """
from .config import SetSettings, DEFAULT_SETTINGS, load_settings
from .either import Either, Left, Right, either
from .errors import ElementNotFound, ElementTypeError
from .functor import Functor, map #pylint: disable=redefined-builtin
from .log import configure_logging
from .maybe import Maybe, Just, Nothing, from_maybe
from .set import Set, copy, union, intersection, difference

from .writer import FancyWriter
from .interpolation import interpolate
from .templates import BlockConfig, TemplateRegistry
from .caller import CallerContext, CallerOperations, expose
from .errors import FancyWriterError, UnresolvedOperation
from .types import Sink, Program, Body, TemplateArgs

__version__ = "1.0.1"

__all__ = [
    # writer
    "FancyWriter", "interpolate",
    # templates
    "BlockConfig", "TemplateRegistry",
    # caller context
    "CallerContext", "CallerOperations", "expose",
    # errors
    "FancyWriterError", "UnresolvedOperation",
    # types
    "Sink", "Program", "Body", "TemplateArgs",
]

from .stack import PolyStack
from .commands import Command, argument_grammars, match_command
from .interpreter import Calculator, RunSummary

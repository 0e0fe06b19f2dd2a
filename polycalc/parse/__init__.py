from .literal import PolyParseError, is_structurally_sound, parse_poly
from .printer import format_poly
from .arguments import ArgumentGrammar, SIGNED_RE, UNSIGNED_RE, parse_command_argument

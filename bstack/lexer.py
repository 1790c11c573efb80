import re

from pygments.lexer import RegexLexer, bygroups
from pygments.token import Keyword, Number, Text, Error

class BStackLexer(RegexLexer):
    """Highlights shell commands: a verb followed by integers."""
    name = 'bstack'
    aliases = ['bstack']
    flags = re.IGNORECASE

    tokens = {
        'root': [
            (r'(\s*)(push|pop|top|show|size|clear|help)\b', bygroups(Text, Keyword)),
            (r'[+-]?[0-9]+\b', Number.Integer),
            (r'\s+', Text),
            (r'\S+', Error),
        ],
    }

#!/usr/bin/python3
# Copyright (C) 2024 Dr. Ralf Schlatterbeck Open Source Consulting.
# Reichergasse 131, A-3411 Weidling.
# Web: http://www.runtux.com Email: office@runtux.com
# All rights reserved
# ****************************************************************************
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
# 
#   The above copyright notice and this permission notice shall be included in
#   all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# ****************************************************************************

from collections import namedtuple
from ply import lex
import logging

log = logging.getLogger (__name__)
log.addHandler (logging.NullHandler ())

class Token (namedtuple ('Token', 'kind text line column')):
    """ One lexical unit of a source line. For strings the text is the
        content without the quotes, for ERROR tokens it is the error
        message. Line is the physical line (starting at 1), column the
        offset of the first character in that line (starting at 0).
    """
    __slots__ = ()

    def __str__ (self):
        return "Token[%s, '%s', %d, %d]" % self
    # end def __str__

# end class Token

class Tokenizer:

    reserved = \
        [ 'end'
        , 'for'
        , 'gosub'
        , 'goto'
        , 'if'
        , 'input'
        , 'let'
        , 'next'
        , 'print'
        , 'return'
        , 'then'
        , 'to'
        ]
    reserved = dict ((k, k.upper ()) for k in reserved)

    tokens = \
        [ 'COLON'
        , 'COMMA'
        , 'DIV'
        , 'EOL'
        , 'EQ'
        , 'ERROR'
        , 'GT'
        , 'IDENTIFIER'
        , 'INTEGER'
        , 'LPAREN'
        , 'LT'
        , 'MINUS'
        , 'PLUS'
        , 'RPAREN'
        , 'SEMICOLON'
        , 'STRING'
        , 'TIMES'
        ] + list (reserved.values ())

    t_COLON     = r':'
    t_COMMA     = r','
    t_DIV       = r'/'
    t_EQ        = r'='
    t_GT        = r'>'
    t_LPAREN    = r'[(]'
    t_LT        = r'<'
    t_MINUS     = r'-'
    t_PLUS      = r'\+'
    t_RPAREN    = r'[)]'
    t_SEMICOLON = r';'
    t_TIMES     = r'\*'

    t_ignore    = ' \t\n\r\f\v'

    def t_IDENTIFIER (self, t):
        r'(?:[^\W\d]|[$])(?:\w|[$])*'
        # Keywords are lower case only, 'LET' is a variable
        t.type = self.reserved.get (t.value, 'IDENTIFIER')
        return t
    # end def t_IDENTIFIER

    def t_INTEGER (self, t):
        r'[0-9]+'
        return t
    # end def t_INTEGER

    def t_STRING (self, t):
        r'["][^"\n]*["]'
        t.value = t.value [1:-1]
        return t
    # end def t_STRING

    def t_unclosed_string (self, t):
        r'["][^"\n]*'
        t.type = 'ERROR'
        if t.lexer.lexpos < len (t.lexer.lexdata):
            t.value = 'line end in string literal'
        else:
            t.value = 'unclosed string literal'
        return t
    # end def t_unclosed_string

    def t_error (self, t):
        t.type  = 'ERROR'
        t.value = "invalid character: '%s'" % t.value [0]
        t.lexer.skip (1)
        return t
    # end def t_error

    # END TOKEN DEFINITION

    def __init__ (self, **kw):
        kw.setdefault ('errorlog', log)
        self.lexer  = lex.lex (module = self, **kw)
        self.lineno = 0
        self.eol    = None
    # end def __init__

    def feed (self, s, lineno):
        self.lexer.input (s)
        self.lexer.lineno = self.lineno = lineno
        self.eol = Token ('EOL', '<eol>', lineno, len (s))
    # end def feed

    def token (self):
        """ Return the next Token of the line given to feed, the last
            one is always EOL, after that None.
        """
        t = self.lexer.token ()
        if t is None:
            t, self.eol = self.eol, None
            return t
        return Token (t.type, t.value, self.lineno, t.lexpos)
    # end def token

    def tokenize (self, s, lineno):
        self.feed (s, lineno)
        return list (iter (self.token, None))
    # end def tokenize

# end class Tokenizer

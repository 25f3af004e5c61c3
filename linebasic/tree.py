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

""" Syntax tree of a parsed program line.
    All nodes are immutable, a line parses into exactly one Command,
    only If nests another Command.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union
from .tokenizer import Token

class Operator (Enum):
    LT    = '<'
    EQ    = '='
    GT    = '>'
    PLUS  = '+'
    MINUS = '-'
    TIMES = '*'
    DIV   = '/'

    def __str__ (self):
        return self.value
    # end def __str__

# end class Operator

class Expression:
    """ Integer valued expression """
# end class Expression

@dataclass (frozen = True)
class Literal (Expression):
    value: int

    def __str__ (self):
        return str (self.value)
    # end def __str__

# end class Literal

@dataclass (frozen = True)
class Identifier (Expression):
    name: str

    def __str__ (self):
        return self.name
    # end def __str__

# end class Identifier

@dataclass (frozen = True)
class Binary (Expression):
    left:     Expression
    operator: Operator
    right:    Expression

    def __str__ (self):
        return '(%s) %s (%s)' % (self.left, self.operator, self.right)
    # end def __str__

# end class Binary

@dataclass (frozen = True)
class Boolean_Expression:
    """ Comparison, only used as the condition of IF """
    left:     Expression
    operator: Operator
    right:    Expression

    def __str__ (self):
        return '(%s) %s (%s)' % (self.left, self.operator, self.right)
    # end def __str__

# end class Boolean_Expression

@dataclass (frozen = True)
class Command:
    """ Base of all statements, lineno is the declared line number.
        The kind selects the cmd_<kind> method of the interpreter.
    """
    lineno: int

    kind = None

    def __str__ (self):
        return '%d %s' % (self.lineno, self.kind.upper ())
    # end def __str__

# end class Command

@dataclass (frozen = True)
class Let (Command):
    lhs: str
    rhs: Expression

    kind = 'let'

    def __str__ (self):
        return '%d LET[lhs=%s, rhs=%s]' % (self.lineno, self.lhs, self.rhs)
    # end def __str__

# end class Let

@dataclass (frozen = True)
class Print (Command):
    """ Items are STRING, COMMA and SEMICOLON tokens or Expressions """
    items: Tuple[Union[Token, Expression], ...]

    kind = 'print'

    def __str__ (self):
        items = []
        for item in self.items:
            if isinstance (item, Token):
                if item.kind == 'STRING':
                    items.append ('"%s"' % item.text)
                else:
                    items.append (item.text)
            else:
                items.append (str (item))
        return '%d PRINT[values=%s]' % (self.lineno, ', '.join (items))
    # end def __str__

# end class Print

@dataclass (frozen = True)
class Input (Command):
    prompt: Optional[str]
    names:  Tuple[str, ...]

    kind = 'input'

    def __str__ (self):
        return \
            ( '%d INPUT[prompt=%s, variableNames=%s]'
            % (self.lineno, self.prompt, ', '.join (self.names))
            )
    # end def __str__

# end class Input

@dataclass (frozen = True)
class For (Command):
    var: str
    frm: Expression
    to:  Expression

    kind = 'for'

    def __str__ (self):
        return \
            ( '%d FOR[var=%s, from=%s, to=%s]'
            % (self.lineno, self.var, self.frm, self.to)
            )
    # end def __str__

# end class For

@dataclass (frozen = True)
class Next (Command):
    var: str

    kind = 'next'

    def __str__ (self):
        return '%d NEXT[var=%s]' % (self.lineno, self.var)
    # end def __str__

# end class Next

@dataclass (frozen = True)
class If (Command):
    condition: Boolean_Expression
    command:   Command

    kind = 'if'

    def __str__ (self):
        return \
            ( '%d IF[exp=%s, cmd=%s]'
            % (self.lineno, self.condition, self.command)
            )
    # end def __str__

# end class If

@dataclass (frozen = True)
class Goto (Command):
    target: int

    kind = 'goto'

    def __str__ (self):
        return '%d GOTO[targetLine=%d]' % (self.lineno, self.target)
    # end def __str__

# end class Goto

@dataclass (frozen = True)
class GoSub (Command):
    target: int

    kind = 'gosub'

    def __str__ (self):
        return '%d GOSUB[targetLine=%d]' % (self.lineno, self.target)
    # end def __str__

# end class GoSub

@dataclass (frozen = True)
class Return (Command):
    kind = 'return'
# end class Return

@dataclass (frozen = True)
class End (Command):
    kind = 'end'
# end class End

@dataclass (frozen = True)
class Empty (Command):
    kind = 'empty'
# end class Empty

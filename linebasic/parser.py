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

from ply import lex, yacc
import logging
from .tokenizer import Tokenizer
from .error import Syntax_Error
from . import tree

log = logging.getLogger (__name__)
log.addHandler (logging.NullHandler ())

class Token_Feed:
    """ Lexer interface for yacc over an already tokenized line.
        The value of each yacc token is the Token itself.
    """

    def __init__ (self, tokens):
        self.tokens = iter (tokens)
        self.last   = None
    # end def __init__

    def token (self):
        for tok in self.tokens:
            self.last = tok
            t = lex.LexToken ()
            t.type   = tok.kind
            t.value  = tok
            t.lineno = tok.line
            t.lexpos = tok.column
            return t
        return None
    # end def token

# end class Token_Feed

class Parser:
    """ Parse the tokens of one line into one Command.
        The first syntax error raises Syntax_Error, there is no recovery.
    """

    tokens = Tokenizer.tokens
    start  = 'line'

    precedence = \
        ( ('left',  'PRINTITEM')
        , ('left',  'PLUS',  'MINUS')
        , ('left',  'TIMES', 'DIV')
        , ('right', 'UMINUS')
        )

    binop = dict \
        (( ('+', tree.Operator.PLUS)
         , ('-', tree.Operator.MINUS)
         , ('*', tree.Operator.TIMES)
         , ('/', tree.Operator.DIV)
         , ('<', tree.Operator.LT)
         , ('=', tree.Operator.EQ)
         , ('>', tree.Operator.GT)
        ))

    keywords = 'let, print, ...'

    def __init__ (self, **kw):
        kw.setdefault ('errorlog', log)
        self.lineno = None
        self.feed   = None
        self.parser = yacc.yacc \
            ( module       = self
            , debug        = False
            , write_tables = False
            , tabmodule    = 'linebasic_parsetab'
            , **kw
            )
    # end def __init__

    def parse (self, tokens, debug = None):
        """ Parse an EOL-terminated token list, debug may be a logger
            receiving the yacc parse trace.
        """
        self.lineno = None
        self.feed   = Token_Feed (tokens)
        return self.parser.parse (lexer = self.feed, debug = debug)
    # end def parse

    def expected (self):
        """ Token kinds acceptable in the state where parsing failed """
        state = self.parser.statestack [-1]
        return sorted (k for k in self.parser.action [state] if k != '$end')
    # end def expected

    def p_error (self, p):
        tok = p.value if p is not None else self.feed.last
        if tok.kind == 'ERROR':
            msg = tok.text
        elif len (self.parser.statestack) == 1:
            msg = 'line must start with a line number'
        else:
            expected = self.expected ()
            if 'LET' in expected:
                msg = 'expected a keyword (%s) but saw %s' \
                    % (self.keywords, tok.text)
            else:
                msg = 'expected %s but saw %s' \
                    % (' or '.join (expected), tok.text)
        raise Syntax_Error (msg, tok.line, tok.column)
    # end def p_error

    def p_line (self, p):
        """
            line : lineno command EOL
        """
        p [0] = p [2]
    # end def p_line

    def p_lineno (self, p):
        """
            lineno : INTEGER
        """
        self.lineno = p [0] = int (p [1].text)
    # end def p_lineno

    def p_command (self, p):
        """
            command : let-statement
                    | print-statement
                    | input-statement
                    | for-statement
                    | next-statement
                    | if-statement
                    | goto-statement
                    | gosub-statement
                    | return-statement
                    | end-statement
        """
        p [0] = p [1]
    # end def p_command

    def p_command_empty (self, p):
        """
            command : empty
        """
        p [0] = tree.Empty (self.lineno)
    # end def p_command_empty

    def p_empty (self, p):
        """
            empty :
        """
        pass
    # end def p_empty

    def p_let_statement (self, p):
        """
            let-statement : LET IDENTIFIER EQ expr
        """
        p [0] = tree.Let (self.lineno, p [2].text, p [4])
    # end def p_let_statement

    def p_print_statement (self, p):
        """
            print-statement : PRINT printlist
        """
        p [0] = tree.Print (self.lineno, tuple (p [2]))
    # end def p_print_statement

    def p_printlist (self, p):
        """
            printlist : printlist printitem
                      | empty
        """
        if len (p) == 2:
            p [0] = []
        else:
            p [0] = p [1] + [p [2]]
    # end def p_printlist

    def p_printitem (self, p):
        """
            printitem : STRING
                      | COMMA
                      | SEMICOLON
                      | expr %prec PRINTITEM
        """
        p [0] = p [1]
    # end def p_printitem

    def p_input_statement (self, p):
        """
            input-statement : INPUT varlist
                            | INPUT STRING varlist
        """
        if len (p) == 3:
            p [0] = tree.Input (self.lineno, None, tuple (p [2]))
        else:
            p [0] = tree.Input (self.lineno, p [2].text, tuple (p [3]))
    # end def p_input_statement

    def p_varlist (self, p):
        """
            varlist : varlist COMMA IDENTIFIER
                    | IDENTIFIER
        """
        if len (p) == 2:
            p [0] = [p [1].text]
        else:
            p [0] = p [1] + [p [3].text]
    # end def p_varlist

    def p_for_statement (self, p):
        """
            for-statement : FOR IDENTIFIER EQ expr TO expr
        """
        p [0] = tree.For (self.lineno, p [2].text, p [4], p [6])
    # end def p_for_statement

    def p_next_statement (self, p):
        """
            next-statement : NEXT IDENTIFIER
        """
        p [0] = tree.Next (self.lineno, p [2].text)
    # end def p_next_statement

    def p_if_statement (self, p):
        """
            if-statement : IF condition THEN command
        """
        p [0] = tree.If (self.lineno, p [2], p [4])
    # end def p_if_statement

    def p_goto_statement (self, p):
        """
            goto-statement : GOTO INTEGER
        """
        p [0] = tree.Goto (self.lineno, int (p [2].text))
    # end def p_goto_statement

    def p_gosub_statement (self, p):
        """
            gosub-statement : GOSUB INTEGER
        """
        p [0] = tree.GoSub (self.lineno, int (p [2].text))
    # end def p_gosub_statement

    def p_return_statement (self, p):
        """
            return-statement : RETURN
        """
        p [0] = tree.Return (self.lineno)
    # end def p_return_statement

    def p_end_statement (self, p):
        """
            end-statement : END
        """
        p [0] = tree.End (self.lineno)
    # end def p_end_statement

    def p_condition (self, p):
        """
            condition : expr LT expr
                      | expr EQ expr
                      | expr GT expr
        """
        op = self.binop [p [2].text]
        p [0] = tree.Boolean_Expression (p [1], op, p [3])
    # end def p_condition

    def p_expression_binop (self, p):
        """
            expr : expr PLUS expr
                 | expr MINUS expr
                 | expr TIMES expr
                 | expr DIV expr
        """
        p [0] = tree.Binary (p [1], self.binop [p [2].text], p [3])
    # end def p_expression_binop

    def p_expression_uminus (self, p):
        """
            expr : MINUS expr %prec UMINUS
        """
        p [0] = tree.Binary (tree.Literal (0), tree.Operator.MINUS, p [2])
    # end def p_expression_uminus

    def p_expression_paren (self, p):
        """
            expr : LPAREN expr RPAREN
        """
        p [0] = p [2]
    # end def p_expression_paren

    def p_expression_identifier (self, p):
        """
            expr : IDENTIFIER
        """
        p [0] = tree.Identifier (p [1].text)
    # end def p_expression_identifier

    def p_expression_integer (self, p):
        """
            expr : INTEGER
        """
        p [0] = tree.Literal (int (p [1].text))
    # end def p_expression_integer

# end class Parser

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

import pytest
from linebasic.tokenizer import Tokenizer, Token

@pytest.fixture (scope = 'module')
def tokenizer ():
    return Tokenizer ()
# end def tokenizer

def kinds (tokens):
    return [t.kind for t in tokens]
# end def kinds

def test_let (tokenizer):
    tokens = tokenizer.tokenize ('10 let x = 5', 1)
    assert kinds (tokens) == ['INTEGER', 'LET', 'IDENTIFIER', 'EQ', 'INTEGER', 'EOL']
    assert [t.column for t in tokens] == [0, 3, 7, 9, 11, 12]
    assert tokens [2] == Token ('IDENTIFIER', 'x', 1, 7)
    assert tokens [-1] == Token ('EOL', '<eol>', 1, 12)
# end def test_let

def test_empty_line (tokenizer):
    assert tokenizer.tokenize ('', 3) == [Token ('EOL', '<eol>', 3, 0)]
    assert kinds (tokenizer.tokenize ('   \t ', 3)) == ['EOL']
# end def test_empty_line

def test_keywords_case_sensitive (tokenizer):
    tokens = tokenizer.tokenize ('let LET Let print goto gosub', 1)
    assert kinds (tokens) == \
        ['LET', 'IDENTIFIER', 'IDENTIFIER', 'PRINT', 'GOTO', 'GOSUB', 'EOL']
# end def test_keywords_case_sensitive

def test_all_keywords (tokenizer):
    words = 'let print input for to next if then goto gosub return end'
    tokens = tokenizer.tokenize (words, 1)
    assert kinds (tokens) [:-1] == [w.upper () for w in words.split ()]
# end def test_all_keywords

def test_identifiers (tokenizer):
    tokens = tokenizer.tokenize ('$a _b1 x$y lettuce', 1)
    assert kinds (tokens) == ['IDENTIFIER'] * 4 + ['EOL']
    assert [t.text for t in tokens [:-1]] == ['$a', '_b1', 'x$y', 'lettuce']
# end def test_identifiers

def test_integers (tokenizer):
    tokens = tokenizer.tokenize ('0 007 123', 1)
    assert [(t.kind, t.text) for t in tokens [:-1]] == \
        [('INTEGER', '0'), ('INTEGER', '007'), ('INTEGER', '123')]
# end def test_integers

def test_integer_then_identifier (tokenizer):
    tokens = tokenizer.tokenize ('12ab', 1)
    assert [(t.kind, t.text) for t in tokens [:-1]] == \
        [('INTEGER', '12'), ('IDENTIFIER', 'ab')]
# end def test_integer_then_identifier

def test_symbols (tokenizer):
    tokens = tokenizer.tokenize ('=,;:+-*/<>()', 1)
    assert kinds (tokens) == \
        [ 'EQ', 'COMMA', 'SEMICOLON', 'COLON', 'PLUS', 'MINUS', 'TIMES'
        , 'DIV', 'LT', 'GT', 'LPAREN', 'RPAREN', 'EOL'
        ]
    assert [t.column for t in tokens [:-1]] == list (range (12))
# end def test_symbols

def test_string (tokenizer):
    tokens = tokenizer.tokenize ('10 print "hi there"', 2)
    assert tokens [2] == Token ('STRING', 'hi there', 2, 9)
    assert tokens [3].kind == 'EOL'
# end def test_string

def test_empty_string (tokenizer):
    tokens = tokenizer.tokenize ('""', 1)
    assert tokens [0] == Token ('STRING', '', 1, 0)
# end def test_empty_string

def test_unclosed_string (tokenizer):
    tokens = tokenizer.tokenize ('10 print "abc', 4)
    assert tokens [2] == Token ('ERROR', 'unclosed string literal', 4, 9)
    assert tokens [-1].kind == 'EOL'
# end def test_unclosed_string

def test_line_end_in_string (tokenizer):
    tokens = tokenizer.tokenize ('10 print "ab\ncd"', 1)
    assert tokens [2] == Token ('ERROR', 'line end in string literal', 1, 9)
# end def test_line_end_in_string

def test_invalid_character (tokenizer):
    tokens = tokenizer.tokenize ('10 let x = 5 % 2', 1)
    assert tokens [5] == Token ('ERROR', "invalid character: '%'", 1, 13)
    # Lexing continues after the bad character
    assert kinds (tokens) [6:] == ['INTEGER', 'EOL']
# end def test_invalid_character

def test_token_str ():
    assert str (Token ('INTEGER', '10', 1, 0)) == "Token[INTEGER, '10', 1, 0]"
# end def test_token_str

def test_feed_token (tokenizer):
    tokenizer.feed ('goto 10', 7)
    assert tokenizer.token () == Token ('GOTO', 'goto', 7, 0)
    assert tokenizer.token () == Token ('INTEGER', '10', 7, 5)
    assert tokenizer.token () == Token ('EOL', '<eol>', 7, 7)
    assert tokenizer.token () is None
# end def test_feed_token

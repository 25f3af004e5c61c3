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

from argparse import ArgumentParser
from io import StringIO
import operator
import logging
import re
import sys
from . import tokenizer
from . import parser
from . import tree
from .error import Basic_Error, Syntax_Error, Runtime_Error

log = logging.getLogger (__name__)

def int_div (a, b):
    """ Integer division truncating toward zero
    >>> int_div (7, 2)
    3
    >>> int_div (-7, 2)
    -3
    >>> int_div (7, -2)
    -3
    >>> int_div (-7, -2)
    3
    """
    q = abs (a) // abs (b)
    if (a < 0) != (b < 0):
        return -q
    return q
# end def int_div

class Program:
    """ Commands indexed by their declared line number.
        Built once by compiling the source, read-only when running.
    """

    def __init__ (self):
        self.lines    = {}
        self.nextline = {}
        self.first    = None
    # end def __init__

    def __bool__ (self):
        return bool (self.lines)
    # end def __bool__

    def __contains__ (self, lineno):
        return lineno in self.lines
    # end def __contains__

    def __getitem__ (self, lineno):
        return self.lines [lineno]
    # end def __getitem__

    def __iter__ (self):
        for l in sorted (self.lines):
            yield self.lines [l]
    # end def __iter__

    def __len__ (self):
        return len (self.lines)
    # end def __len__

    def insert (self, cmd):
        """ A later line with the same number replaces the earlier one """
        self.lines [cmd.lineno] = cmd
    # end def insert

    def link (self):
        self.nextline = {}
        self.first    = None
        prev = None
        for l in sorted (self.lines):
            if self.first is None:
                self.first = l
            if prev is not None:
                self.nextline [prev] = l
            prev = l
    # end def link

# end class Program

class Int_Reader:
    """ Integers separated by whitespace or newlines, read on demand """

    integer = re.compile (r'[-+]?[0-9]+')

    def __init__ (self, f):
        self.f     = f
        self.words = []
    # end def __init__

    def read (self):
        while not self.words:
            line = self.f.readline ()
            if not line:
                raise EOFError ('end of input')
            self.words = list (reversed (line.split ()))
        word = self.words.pop ()
        if not self.integer.fullmatch (word):
            raise ValueError ('not an integer: %r' % word)
        return int (word)
    # end def read

# end class Int_Reader

class Stack_Entry_For:

    def __init__ (self, parent, var, lineno, to):
        self.parent = parent
        self.var    = var
        self.lineno = lineno
        self.to     = to
    # end def __init__

    def handle_next (self):
        """ Returns the line to continue with: after the FOR line while
            counting, after the current NEXT when done.
        """
        assert self.parent.fstack [-1] is self
        count = self.parent.var [self.var]
        if count >= self.to:
            self.parent.fstack.pop ()
            return self.parent.successor (self.parent.lineno)
        self.parent.var [self.var] = count + 1
        return self.parent.successor (self.lineno)
    # end def handle_next

# end class Stack_Entry_For

class Interpreter_Test:
    """ This is used for testing: redirecting output, optionally
        redirecting input and passing the program as an iterable.
    """

    def __init__ (self, program, hook = None, input = None):
        self.program = program
        self.hook    = hook
        self.input   = input
        self.output  = StringIO ()
    # end def __init__

# end class Interpreter_Test

class Interpreter:
    print_special = dict (COMMA = '\t', SEMICOLON = '')

    arithmetic = \
        { tree.Operator.PLUS  : operator.add
        , tree.Operator.MINUS : operator.sub
        , tree.Operator.TIMES : operator.mul
        , tree.Operator.DIV   : int_div
        }
    relational = \
        { tree.Operator.LT : operator.lt
        , tree.Operator.EQ : operator.eq
        , tree.Operator.GT : operator.gt
        }

    def __init__ (self, args, test = None):
        self.args    = args
        self.test    = test
        self.var     = {}
        self.fstack  = [] # for
        self.gstack  = [] # gosub
        self.lineno  = None
        self.next    = None
        self.running = False
        self.program = Program ()
        self.log     = None
        if args.debug:
            self.log = log
        self.tokenizer = tokenizer.Tokenizer ()
        self.parser    = parser.Parser ()
        # Load before opening input and output, a syntax error must not
        # truncate the output file
        if test is not None:
            self.compile (test.program)
        else:
            with open (args.program, 'r', encoding = 'utf-8') as f:
                self.load_source (f.read ())
        if test is not None and test.input is not None:
            self.input = test.input
        elif args.input_file:
            self.input = open (args.input_file, 'r')
        else:
            self.input = sys.stdin
        self.reader = Int_Reader (self.input)
        if test is not None:
            self.ofile = test.output
        elif args.output_file:
            self.ofile = open (args.output_file, 'w')
        else:
            self.ofile = sys.stdout
    # end def __init__

    def close_output (self):
        if not self.test:
            if self.ofile is not sys.stdout:
                self.ofile.close ()
            if self.input is not sys.stdin:
                self.input.close ()
    # end def close_output

    def compile (self, lines):
        """ Lex and parse every physical line, the first syntax error
            aborts loading.
        """
        for fline, l in enumerate (lines, 1):
            tokens = self.tokenizer.tokenize (l.rstrip ('\n'), fline)
            cmd    = self.parser.parse (tokens, debug = self.log)
            if self.log:
                self.log.debug ('compiled: %s', cmd)
            self.program.insert (cmd)
        if not self.program:
            raise Syntax_Error ('line must start with a line number', 1, 0)
        self.program.link ()
    # end def compile

    def load_source (self, text):
        lines = text.split ('\n')
        # Trailing empty lines do not count
        while lines and not lines [-1]:
            lines.pop ()
        self.compile (lines)
    # end def load_source

    def list_program (self):
        for cmd in self.program:
            print (cmd, file = self.ofile)
        self.close_output ()
    # end def list_program

    def raise_error (self, errmsg):
        raise Runtime_Error (errmsg, self.lineno)
    # end def raise_error

    def successor (self, lineno):
        try:
            return self.program.nextline [lineno]
        except KeyError:
            self.raise_error ('no line after %d' % lineno)
    # end def successor

    def advance (self):
        self.next = self.successor (self.lineno)
    # end def advance

    def run (self):
        self.running = True
        self.next    = self.program.first
        try:
            while self.running:
                if self.next not in self.program:
                    self.raise_error ('line %d does not exist' % self.next)
                self.lineno = self.next
                cmd = self.program [self.lineno]
                if isinstance (cmd, tree.End):
                    break
                if self.log:
                    self.log.debug ('exec %s', cmd)
                try:
                    self.execute (cmd)
                except RecursionError as err:
                    raise Runtime_Error \
                        ('expression too deeply nested', self.lineno) from err
                if self.test and self.test.hook:
                    self.test.hook (self)
        finally:
            self.running = False
            self.close_output ()
    # end def run

    def execute (self, cmd):
        method = getattr (self, 'cmd_' + cmd.kind, None)
        if method is None:
            self.raise_error ('unsupported command: %s' % cmd)
        method (cmd)
    # end def execute

    # EXPRESSIONS

    def evaluate (self, expr):
        if isinstance (expr, tree.Literal):
            return expr.value
        if isinstance (expr, tree.Identifier):
            if expr.name not in self.var:
                self.raise_error ("variable '%s' is not defined" % expr.name)
            return self.var [expr.name]
        if isinstance (expr, tree.Binary):
            left  = self.evaluate (expr.left)
            right = self.evaluate (expr.right)
            fun   = self.arithmetic.get (expr.operator)
            if fun is None:
                self.raise_error \
                    ('unsupported arithmetic operator: %s' % expr.operator)
            try:
                return fun (left, right)
            except ZeroDivisionError:
                self.raise_error ('division by zero')
        self.raise_error ('internal error: not an expression: %r' % (expr,))
    # end def evaluate

    def condition (self, expr):
        left  = self.evaluate (expr.left)
        right = self.evaluate (expr.right)
        fun   = self.relational.get (expr.operator)
        if fun is None:
            self.raise_error \
                ('unsupported relational operator: %s' % expr.operator)
        return fun (left, right)
    # end def condition

    # COMMANDS

    def cmd_empty (self, cmd):
        self.advance ()
    # end def cmd_empty

    def cmd_end (self, cmd):
        """ Only reached as the command of an IF, a top-level END stops
            the run loop before dispatching.
        """
        self.running = False
    # end def cmd_end

    def cmd_for (self, cmd):
        frm = self.evaluate (cmd.frm)
        to  = self.evaluate (cmd.to)
        self.var [cmd.var] = frm
        self.fstack.append (Stack_Entry_For (self, cmd.var, self.lineno, to))
        self.advance ()
    # end def cmd_for

    def cmd_gosub (self, cmd):
        self.gstack.append (self.lineno)
        self.next = cmd.target
    # end def cmd_gosub

    def cmd_goto (self, cmd):
        self.next = cmd.target
    # end def cmd_goto

    def cmd_if (self, cmd):
        if self.condition (cmd.condition):
            self.execute (cmd.command)
        else:
            self.advance ()
    # end def cmd_if

    def cmd_input (self, cmd):
        if cmd.prompt is not None:
            print (cmd.prompt, end = '', file = self.ofile, flush = True)
        for name in cmd.names:
            try:
                self.var [name] = self.reader.read ()
            except EOFError:
                self.raise_error ('no input left for %s' % name)
            except ValueError as err:
                self.raise_error ('expected integer input: %s' % err)
        self.advance ()
    # end def cmd_input

    def cmd_let (self, cmd):
        self.var [cmd.lhs] = self.evaluate (cmd.rhs)
        self.advance ()
    # end def cmd_let

    def cmd_next (self, cmd):
        if not self.fstack or self.fstack [-1].var != cmd.var:
            self.raise_error ('incorrect nesting of FORs')
        self.next = self.fstack [-1].handle_next ()
    # end def cmd_next

    def cmd_print (self, cmd):
        l = []
        for item in cmd.items:
            if not isinstance (item, tokenizer.Token):
                l.append (str (self.evaluate (item)))
            elif item.kind == 'STRING':
                l.append (item.text)
            elif item.kind in self.print_special:
                l.append (self.print_special [item.kind])
            else:
                self.raise_error ('internal error: cannot print %s' % item)
        print (''.join (l), file = self.ofile)
        self.advance ()
    # end def cmd_print

    def cmd_return (self, cmd):
        if not self.gstack:
            self.raise_error ('RETURN without GOSUB')
        self.next = self.successor (self.gstack.pop ())
    # end def cmd_return

# end class Interpreter

def options (argv):
    cmd = ArgumentParser ()
    cmd.add_argument \
        ( 'program'
        , help = 'Basic program to run'
        )
    cmd.add_argument \
        ( '-D', '--debug'
        , help   = 'Log parsing and execution to the log file'
        , action = 'store_true'
        )
    cmd.add_argument \
        ( '-i', '--input-file'
        , help = 'Read input from file instead of stdin'
        )
    cmd.add_argument \
        ( '-l', '--list'
        , help   = 'List the parsed program instead of running it'
        , action = 'store_true'
        )
    cmd.add_argument \
        ( '--log-file'
        , help    = 'Log file for --debug, default: %(default)s'
        , default = 'parselog.txt'
        )
    cmd.add_argument \
        ( '-o', '--output-file'
        , help = 'Write output to given file'
        )
    args = cmd.parse_args (argv)
    return args
# end def options

def main (argv = sys.argv [1:]):
    args = options (argv)
    if args.debug:
        logging.basicConfig \
            ( level    = logging.DEBUG
            , filename = args.log_file
            , filemode = 'w'
            , format   = '%(filename)10s: %(lineno)5d: %(message)s'
            )
    try:
        interpreter = Interpreter (args)
        if args.list:
            interpreter.list_program ()
        else:
            interpreter.run ()
    except Basic_Error as err:
        print (err, file = sys.stderr)
        return 1
    return 0
# end def main

if __name__ == '__main__':
    sys.exit (main ())

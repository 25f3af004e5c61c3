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

class Basic_Error (Exception):
    """ Fault that terminates loading or running a program """
# end class Basic_Error

class Syntax_Error (Basic_Error):
    """ Raised while loading: carries the physical line and the column
        of the offending token.
    """

    def __init__ (self, msg, line, column):
        super ().__init__ (msg)
        self.msg    = msg
        self.line   = line
        self.column = column
    # end def __init__

    def __str__ (self):
        return '[%d:%d] syntax error: %s' % (self.line, self.column, self.msg)
    # end def __str__

# end class Syntax_Error

class Runtime_Error (Basic_Error):
    """ Raised while running, lineno is the declared line number of the
        command being executed.
    """

    def __init__ (self, msg, lineno):
        super ().__init__ (msg)
        self.msg    = msg
        self.lineno = lineno
    # end def __init__

    def __str__ (self):
        return 'error on line %s: %s' % (self.lineno, self.msg)
    # end def __str__

# end class Runtime_Error

# -*- coding: UTF-8 -*-
"""
module error.py
-----------------------------------------------------------------------------

 Thumbscache : a decoder for Windows thumbcache_*.db files
 Copyright (C) 2019-2025 by Keven L. Ates

This file is part of Thumbscache.

 Thumbscache is free software; you can redistribute it and/or
 modify it under the terms of the GNU General Public License as published
 by the Free Software Foundation; either version 2 of the License, or (at
 your option) any later version.

 Thumbscache is distributed in the hope that it will be
 useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
 MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
 General Public License for more details.

 You should have received a copy of the GNU General Public License along
 with the thumbscache package; if not, write to the Free Software
 Foundation, Inc., 59 Temple Place, Suite 330, Boston, MA 02111-1307 USA

-----------------------------------------------------------------------------
"""


file_major = "0"
file_minor = "1"
file_micro = "0"

"""
Thumbscache Errors.  Every error is terminal for the operation raising it.

The command line only distinguishes success from failure, so every error
carries the same exit code.
"""

import sys


ERROR = " Error"

class ThumbsError(Exception):
    """
    Base class for exceptions in this module.
    """
    def __init__(self, *args):
        self.iExitCode = 1
        self.strErrHead = ERROR + ": "
        Exception.__init__(self, *args)

    def printError(self):
        sys.stderr.write(self.strErrHead + str(self) + "\n")


class InvalidFile(ThumbsError):
    """
    Exception raised when the input path cannot be opened for reading.
    """
    def __init__(self, *args):
        if (len(args) == 0):
            args = ("Invalid file, check the path again",)
        ThumbsError.__init__(self, *args)
        self.strErrHead = ERROR + " (Input): "


class UnexpectedString(ThumbsError):
    """
    Exception raised when the file signature is readable text other than "CMMM".
    """
    def __init__(self, strText):
        ThumbsError.__init__(self, "Expected CMMM, got %s. Are you sure you opened the right file?" % strText)
        self.strErrHead = ERROR + " (Signature): "
        self.text = strText


class InvalidCheckString(ThumbsError):
    """
    Exception raised when the file signature is not readable text.
    """
    def __init__(self, *args):
        if (len(args) == 0):
            args = ("Invalid string. Are you sure you opened the right file?",)
        ThumbsError.__init__(self, *args)
        self.strErrHead = ERROR + " (Signature): "


class IoError(ThumbsError):
    """
    Exception raised for read and write failures: short reads while parsing
    a cache entry or a failure writing a cache entry to a file.
    """
    def __init__(self, *args):
        ThumbsError.__init__(self, *args)
        self.strErrHead = ERROR + " (IO): "

# -*- coding: UTF-8 -*-
"""
module utils.py
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


import sys

import thumbscache.config as config


def cleanFileName(strFileName):
    strInChars = "\\/:*?\"<>|"
    strOutChars = "_________"
    dictTransTab = str.maketrans(strInChars, strOutChars)
    return strFileName.translate(dictTransTab)


def decodeBytes(byteString):
    # Convert bytes encoded as utf-16-le to standard unicode...
    #   Invalid code units are replaced and a dangling odd byte is dropped
    iEven = len(byteString) - (len(byteString) % 2)
    return str(byteString[:iEven], "utf-16-le", "replace")


def printWarning(strMsg):
    if (config.VERBOSE >= 0):
        sys.stderr.write(" Warning: " + strMsg + "\n")


def printInfo(strMsg):
    if (config.VERBOSE > 0):
        sys.stderr.write(" Info: " + strMsg + "\n")

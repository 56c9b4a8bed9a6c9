# -*- coding: UTF-8 -*-
"""
module tdb_streams.py
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


from collections.abc import MutableMapping

import thumbscache.config as config


###############################################################################
# Thumbscache Streams Class
#   Tracks the file names given to extracted cache entries so that entries
#   sharing an identifier are written to distinct files.
# Input: strKey, strFileName
# Store: {strKey, [strFileName, ...]}
###############################################################################
class TDB_Streams(MutableMapping):
    def __init__(self, data=()):
        # Initialize a new TDB_Streams instance...
        self.__tdbStreams = {}
        self.__dictCount = 0
        self.update(data)


    def __getitem__(self, key):
        return self.__tdbStreams[key]


    def __delitem__(self, key):
        self.__dictCount -= len(self.__tdbStreams[key])
        del self.__tdbStreams[key]


    def __setitem__(self, key, value):
        # Add or append a Stream file name...
        if (not isinstance(key, str)):
            raise TypeError("Invalid: Stream key must be a string representing a cache entry identifier!")
        if (not isinstance(value, str)):
            raise TypeError("Not string: Stream value must be a file name string!")

        if (key in self.__tdbStreams):
            self.__tdbStreams[key].append(value)
        else:
            self.__tdbStreams[key] = [ value ]
        self.__dictCount += 1


    def __iter__(self):
        return iter(self.__tdbStreams)


    def __len__(self):
        return len(self.__tdbStreams)


    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self.__tdbStreams)


    def getCount(self):
        # Return number of file names over all identifiers...
        return self.__dictCount


    def getFileName(self, key, strExt = config.TC_DEFAULT_EXT):
        # FORMAT: XXX_# where XXX is the identifier and # is an increment
        #   value for an identifier already given a file name
        strComputedFileName = key
        if (key in self.__tdbStreams):
            strComputedFileName = key + "_" + str(len(self.__tdbStreams[key]))

        self[key] = strComputedFileName
        return strComputedFileName + "." + strExt


    def extractStats(self, strOutDir = None):
        if (self.__dictCount == 0):
            return None

        strExtSuffix = ""
        if (strOutDir != None):
            strExtSuffix = " to " + strOutDir

        astrStats = []
        astrStats.append("  Extracted: %4d thumbnails" % self.__dictCount + strExtSuffix)
        iDuplicates = self.__dictCount - len(self.__tdbStreams)
        if (iDuplicates > 0):
            astrStats.append(" Duplicates: %4d identifiers renamed" % iDuplicates)
        return astrStats

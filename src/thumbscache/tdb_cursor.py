# -*- coding: UTF-8 -*-
"""
module tdb_cursor.py
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


from struct import unpack_from

import thumbscache.error as verror
import thumbscache.utils as utils


###############################################################################
# Thumbscache Byte Cursor Class
#   A read position over an immutable in-memory buffer.  Every read is
#   checked against the end of the buffer and raises IoError instead of
#   returning a short result.  All integers are little endian.
###############################################################################
class TDB_Cursor():
    def __init__(self, bytesData, iPosition = 0):
        # Initialize a new TDB_Cursor instance...
        self.__bytesData = bytes(bytesData)
        self.__iPosition = iPosition


    def __len__(self):
        return len(self.__bytesData)


    def getBuffer(self):
        return self.__bytesData


    def tell(self):
        return self.__iPosition


    def seek(self, iPosition):
        # A position past the end is allowed, nothing remains to be read there...
        if (iPosition < 0):
            raise ValueError("Cursor position must not be negative: %d" % iPosition)
        self.__iPosition = iPosition


    def remaining(self):
        return max(0, len(self.__bytesData) - self.__iPosition)


    def __check(self, iOffset, iSize, strWhat):
        if (iSize < 0 or iOffset < 0 or iOffset + iSize > len(self.__bytesData)):
            raise verror.IoError("Short read: %s needs %d bytes at offset %d, buffer holds %d bytes" %
                                 (strWhat, iSize, iOffset, len(self.__bytesData)))


    def peekBytes(self, iSize, strWhat = "bytes"):
        # Return bytes at the current position without advancing...
        self.__check(self.__iPosition, iSize, strWhat)
        return self.__bytesData[self.__iPosition : self.__iPosition + iSize]


    def readBytes(self, iSize, strWhat = "bytes"):
        bytesRead = self.peekBytes(iSize, strWhat)
        self.__iPosition += iSize
        return bytesRead


    def skip(self, iSize, strWhat = "skip"):
        self.__check(self.__iPosition, iSize, strWhat)
        self.__iPosition += iSize


    def readUInt32(self, strWhat = "u32"):
        self.__check(self.__iPosition, 4, strWhat)
        iValue = unpack_from("<L", self.__bytesData, self.__iPosition)[0]
        self.__iPosition += 4
        return iValue


    def readUTF16(self, iSize, strWhat = "utf-16 text"):
        # Read iSize bytes as UTF-16LE code units, decoded lossily...
        return utils.decodeBytes(self.readBytes(iSize, strWhat))


    # Absolute reads, used on fixed size blocks...

    def getUInt32(self, iOffset):
        self.__check(iOffset, 4, "u32")
        return unpack_from("<L", self.__bytesData, iOffset)[0]


    def getUInt64(self, iOffset):
        self.__check(iOffset, 8, "u64")
        return unpack_from("<Q", self.__bytesData, iOffset)[0]


    def getBytes(self, iOffset, iSize):
        self.__check(iOffset, iSize, "bytes")
        return self.__bytesData[iOffset : iOffset + iSize]

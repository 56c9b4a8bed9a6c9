# -*- coding: UTF-8 -*-
"""
module database.py
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


import thumbscache.cmmm_entry as cmmm_entry
import thumbscache.cmmm_header as cmmm_header
import thumbscache.error as verror
import thumbscache.utils as utils
from thumbscache.tdb_cursor import TDB_Cursor


###############################################################################
# Thumbscache Database Class
#   The decoded contents of one thumbcache_*.db file.  The Windows version
#   and cache type stay None until the database is parsed with read().
###############################################################################
class Thumbscache():
    def __init__(self, bytesData, strFilePath = None):
        # Initialize a new Thumbscache instance...
        self.__tdbCursor = TDB_Cursor(bytesData)
        self.file_path = strFilePath
        self.header = None
        self.windows_version = None
        self.cache_type = None
        self.entries = []
        self.state = None


    def __len__(self):
        return len(self.entries)


    def __str__(self):
        return ("Thumbscache(Windows version=%s, Number of cache entries=%d, Cache type=%s)" %
                ((self.windows_version.value if self.windows_version else None),
                 len(self.entries),
                 (self.cache_type.value if self.cache_type else None)))


    def getBuffer(self):
        return self.__tdbCursor.getBuffer()


    def readHeader(self):
        # Parse the header: sets the Windows version and cache type...
        self.header = cmmm_header.resolveHeader(self.__tdbCursor)
        self.windows_version = self.header["WindowsVersion"]
        self.cache_type = self.header["CacheKind"]
        return self.header


    def iterEntries(self):
        """
        Parse the header, unless already parsed, then decode and yield cache entries in file order.

        Each entry is appended to self.entries before it is yielded, so the
        entries decoded so far stay available when the caller stops early or
        an IoError interrupts the scan.  The scan ends at the end of the
        buffer or at the first entry with a bad signature or size.
        """
        self.entries = []
        self.state = None
        if (self.header is None):
            self.readHeader()
        else:  # ...header already parsed, restart at the first entry
            self.__tdbCursor.seek(self.header["EntryStart"])

        tcLayout = cmmm_entry.getLayout(self.windows_version)
        if (tcLayout is None):
            utils.printWarning("Unknown format revision %d, cache entries not decoded" % self.header["FormatType"])
            self.state = cmmm_entry.STATE_CORRUPT
            return

        while (True):
            strState, tcEntry = cmmm_entry.decodeEntry(self.__tdbCursor, tcLayout)
            if (tcEntry is not None):
                self.entries.append(tcEntry)
                yield tcEntry
            if (strState != cmmm_entry.STATE_ENTRY):
                self.state = strState
                break

        utils.printInfo("Entry scan ended (%s) after %d cache entries" % (self.state, len(self.entries)))


    def read(self):
        """
        Determine the Windows version and cache type, then read all the cache
        entries into self.entries.  Returns the number of entries read.

        Reading again restarts at the first entry.
        """
        for tcEntry in self.iterEntries():
            pass
        return len(self.entries)


    def summary(self):
        return (self.windows_version, len(self.entries), self.cache_type)


def openThumbscache(strFilePath):
    """
    Read the thumbcache file at strFilePath fully into memory.  Further
    parsing is done with read().

    Raises InvalidFile when the path cannot be opened.
    """
    try:
        fileThumbsDB = open(strFilePath, "rb")
    except OSError:
        raise verror.InvalidFile("Invalid file, check the path again: %s" % strFilePath)

    with fileThumbsDB:
        try:
            bytesData = fileThumbsDB.read()
        except OSError as e:
            raise verror.IoError("Cannot read file %s: %s" % (strFilePath, e))

    return Thumbscache(bytesData, strFilePath)


def decodeBuffer(bytesData):
    # Parse an in-memory thumbcache buffer in one call...
    tcDB = Thumbscache(bytesData)
    tcDB.read()
    return tcDB

# -*- coding: UTF-8 -*-
"""
module processor.py
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


import os
from hashlib import md5

import thumbscache.config as config
import thumbscache.database as database
import thumbscache.utils as utils
from thumbscache.tdb_streams import TDB_Streams


def printHead(dictCMMMMeta):
    winVersion = dictCMMMMeta["WindowsVersion"]
    tcKind = dictCMMMMeta["CacheKind"]
    print("     Signature: %s" % config.THUMBS_FILE_TYPE_CMMM)
    print("        Format: %d (%s)" % (dictCMMMMeta["FormatType"], winVersion.value if winVersion else "Unknown Format"))
    print("          Type: %d (%s)" % (dictCMMMMeta["CacheType"], tcKind.getFileName() if tcKind else "Unknown Type"))
    if (config.VERBOSE > 0):
        print("    Cache Info:")
        print("          Offset: %d" % dictCMMMMeta["CacheOff1st"])
        print("   1st Available: %d" % dictCMMMMeta["CacheOff1stAvail"])
        print("     Entry Start: %d" % dictCMMMMeta["EntryStart"])
    return


def printCache(tcEntry):
    print("     Signature: %s" % config.THUMBS_SIG_CMMM.decode())
    if (config.VERBOSE > 0):
        print("        Offset: %d" % tcEntry.offset)
        print("          Size: %d" % tcEntry.total_size)
        print("          Hash: %s" % format(tcEntry.entry_hash, "x"))
        print("     Extension: %s" % str(tcEntry.file_extension))
        print("       ID Size: %d" % tcEntry.identifier_len)
        print("      Pad Size: %d" % tcEntry.padding_len)
        print("     Data Size: %d" % tcEntry.data_len)
        print(" Data Checksum: %s" % format(tcEntry.data_checksum, "x"))
        print(" Head Checksum: %s" % format(tcEntry.header_checksum, "x"))
    print("            ID: %s" % tcEntry.identifier)
    return


###############################################################################
# Thumbscache Processor Class
###############################################################################
class Processor():
    def __init__(self, strOutDir = None):
        # Initialize a new Processor instance...
        self.strOutDir = strOutDir
        self.tdbStreams = TDB_Streams()

    def processThumbFile(self, strInFile):
        """
        Decode a thumbcache file, report its header and entries, and extract
        the entry data when an output directory was given.  Returns the
        decoded Thumbscache.
        """
        tcDB = database.openThumbscache(strInFile)

        if (config.VERBOSE >= 0):
            print(config.STR_SEP)
            print(" File: %s" % strInFile)
            print("  MD5: %s" % md5(tcDB.getBuffer()).hexdigest())
            print(config.STR_SEP)

        tcDB.readHeader()
        if (config.VERBOSE >= 0):
            self.reportHeader(tcDB)

        iCacheCounter = 0
        for tcEntry in tcDB.iterEntries():
            iCacheCounter += 1

            if (config.VERBOSE >= 0):
                print(" Cache Entry %d\n --------------------" % iCacheCounter)
                printCache(tcEntry)

            if (self.strOutDir != None and tcEntry.data_len > 0):
                strFileName = self.tdbStreams.getFileName(utils.cleanFileName(tcEntry.identifier))
                tcEntry.writeToFile(os.path.join(self.strOutDir, strFileName))
                if (config.VERBOSE > 0):
                    print("       Written: %s" % strFileName)

            if (config.VERBOSE >= 0):
                print(config.STR_SEP)

        self.reportSummary(tcDB)
        return tcDB

    def reportHeader(self, tcDB):
        print(" Header\n --------------------")
        printHead(tcDB.header)
        print(config.STR_SEP)

    def reportSummary(self, tcDB):
        if (config.VERBOSE < 0):
            return
        winVersion, iCount, tcKind = tcDB.summary()
        print(" Summary:")
        print("   Entries: %d" % iCount)
        print("   Version: %s" % (winVersion.value if winVersion else "Unknown"))
        print("      Type: %s" % (tcKind.value if tcKind else "Unknown"))
        astrStats = self.tdbStreams.extractStats(self.strOutDir)
        if (astrStats != None):
            for strStat in astrStats:
                print("   " + strStat)
        print(str(tcDB))

# -*- coding: UTF-8 -*-
"""
module cmmm_entry.py
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
from collections import namedtuple

import thumbscache.config as config
import thumbscache.error as verror
import thumbscache.utils as utils
from thumbscache.tc_types import WindowsVersion
from thumbscache.tdb_cursor import TDB_Cursor


# Entry scan states...
STATE_ENTRY   = "Entry"        # ...an entry was decoded, continue
STATE_END     = "EndOfBuffer"  # ...buffer exhausted, done
STATE_CORRUPT = "Corrupt"      # ...bad signature or size, done

# Cache Entry Header Layouts
# --------------------
# Byte offsets of each field within the 56 byte entry header.  Only Vista
# stores the file extension (4 wchar_t characters).  Windows 7 and later
# share one layout; their versions differ only in the cache type table.
EntryLayout = namedtuple("EntryLayout", ["name", "size", "hash", "extension",
                                         "id_size", "pad_size", "data_size",
                                         "chksum_data", "chksum_head"])

LAYOUT_VISTA  = EntryLayout("Vista",  4, 8, 16,   24, 28, 32, 40, 48)
LAYOUT_MODERN = EntryLayout("Modern", 4, 8, None, 16, 20, 24, 32, 40)

TC_EXT_SIZE = 8


def getLayout(winVersion):
    if (winVersion is None):
        return None
    if (winVersion == WindowsVersion.WinVista):
        return LAYOUT_VISTA
    return LAYOUT_MODERN


###############################################################################
# Thumbscache Cache Entry
#   One cached thumbnail: the decoded entry header values, the identifier
#   (a hash-like cache key, not a file name), and the raw image data.
###############################################################################
class CacheEntry(namedtuple("CacheEntry", ["total_size", "file_extension", "identifier_len",
                                           "padding_len", "data_len", "data_checksum",
                                           "header_checksum", "identifier", "data",
                                           "entry_hash", "offset"])):
    __slots__ = ()

    def getFileName(self):
        return self.identifier + "." + config.TC_DEFAULT_EXT


    def writeToFile(self, strFilePath = None):
        """
        Write the entry data, unchanged, to strFilePath.  Without a path the
        data is written to "<identifier>.bmp" in the current directory.  The
        data is not inspected, so ".bmp" is only a naming convention.

        Returns the path written.  Raises IoError when the file cannot be
        opened or written.
        """
        if (strFilePath is None):
            strFilePath = os.path.join(".", self.getFileName())
        try:
            with open(strFilePath, "wb") as fileImg:
                fileImg.write(self.data)
        except OSError as e:
            raise verror.IoError("Cannot write cache entry %s to %s: %s" % (self.identifier, strFilePath, e))
        return strFilePath


def decodeEntry(tdbCursor, tcLayout):
    """
    Decode one cache entry at the cursor using tcLayout.

    Returns (state, entry):
      (STATE_ENTRY,   CacheEntry) - decoded, cursor at the next entry
      (STATE_END,     None)       - fewer than 56 bytes remain
      (STATE_END,     CacheEntry) - decoded, but its declared size runs past
                                    the end of the buffer
      (STATE_CORRUPT, None)       - bad entry signature or a declared size
                                    smaller than its own sections

    A short read inside the identifier, padding, or data raises IoError.
    """
    iOffset = tdbCursor.tell()
    if (tdbCursor.remaining() < config.TC_ENTRY_HEADER_SIZE):
        return (STATE_END, None)

    tdbHead = TDB_Cursor(tdbCursor.readBytes(config.TC_ENTRY_HEADER_SIZE, "cache entry header"))
    if (tdbHead.getBytes(0, 4) != config.THUMBS_SIG_CMMM):
        utils.printInfo("No cache entry signature at offset %d" % iOffset)
        return (STATE_CORRUPT, None)

    iSize     = tdbHead.getUInt32(tcLayout.size)
    iHash     = tdbHead.getUInt64(tcLayout.hash)
    iIdSize   = tdbHead.getUInt32(tcLayout.id_size)
    iPadSize  = tdbHead.getUInt32(tcLayout.pad_size)
    iDataSize = tdbHead.getUInt32(tcLayout.data_size)
    iChkSumD  = tdbHead.getUInt64(tcLayout.chksum_data)
    iChkSumH  = tdbHead.getUInt64(tcLayout.chksum_head)

    strExt = None  # File Extension not available above Windows Vista
    if (tcLayout.extension is not None):
        strExt = utils.decodeBytes(tdbHead.getBytes(tcLayout.extension, TC_EXT_SIZE)).rstrip("\x00")

    # Identifier, padding, and data follow the entry header in that order...
    strId = tdbCursor.readUTF16(iIdSize, "cache entry identifier")
    tdbCursor.skip(iPadSize, "cache entry padding")
    bytesData = tdbCursor.readBytes(iDataSize, "cache entry data")

    iTrailing = iSize - (config.TC_ENTRY_HEADER_SIZE + iDataSize + iIdSize + iPadSize)
    if (iTrailing < 0):
        utils.printInfo("Cache entry at offset %d declares size %d, too small for its contents" % (iOffset, iSize))
        return (STATE_CORRUPT, None)

    tcEntry = CacheEntry(iSize, strExt, iIdSize, iPadSize, iDataSize, iChkSumD, iChkSumH,
                         strId, bytesData, iHash, iOffset)

    if (iTrailing > tdbCursor.remaining()):
        utils.printInfo("Cache entry at offset %d extends past the end of the buffer" % iOffset)
        tdbCursor.seek(len(tdbCursor))
        return (STATE_END, tcEntry)

    tdbCursor.skip(iTrailing, "cache entry trailer")
    return (STATE_ENTRY, tcEntry)

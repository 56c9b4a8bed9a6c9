# -*- coding: UTF-8 -*-
"""
module cmmm_header.py
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


import thumbscache.config as config
import thumbscache.error as verror
import thumbscache.tc_types as tc_types


def checkSignature(bytesSig):
    # The signature must be readable text equal to "CMMM"...
    try:
        strSig = bytesSig.decode("utf-8")
    except UnicodeDecodeError:
        raise verror.InvalidCheckString()
    if (strSig != config.THUMBS_SIG_CMMM.decode("utf-8")):
        raise verror.UnexpectedString(strSig)
    return strSig


def resolveHeader(tdbCursor):
    """
    Read the 32 byte thumbcache header at the start of the buffer.

    Returns a dictionary with the raw header values and their resolved
    meanings:
      FormatType       - raw format revision
      WindowsVersion   - WindowsVersion or None when the revision is unknown
      CacheType        - raw cache type code
      CacheKind        - CacheType or None when the code is unknown
      CacheOff1st      - offset of the first cache entry
      CacheOff1stAvail - offset of the first available cache entry
      EntryStart       - absolute offset where the entry list begins

    Raises InvalidCheckString or UnexpectedString for a bad signature and
    IoError for a buffer too short to hold the header.  The cursor is left
    at EntryStart.
    """
    tdbCursor.seek(0)
    checkSignature(tdbCursor.readBytes(len(config.THUMBS_SIG_CMMM), "header signature"))

    # Signature is valid, the rest of the header must be present...
    tdbCursor.peekBytes(config.TC_HEADER_SIZE - len(config.THUMBS_SIG_CMMM), "header")

    dictCMMMMeta = {}
    dictCMMMMeta["FormatType"]       = tdbCursor.readUInt32()
    dictCMMMMeta["CacheType"]        = tdbCursor.readUInt32()
    dictCMMMMeta["CacheOff1st"]      = tdbCursor.readUInt32()
    dictCMMMMeta["CacheOff1stAvail"] = tdbCursor.readUInt32()

    dictCMMMMeta["WindowsVersion"] = tc_types.resolveVersion(dictCMMMMeta["FormatType"])
    dictCMMMMeta["CacheKind"]      = tc_types.resolveCacheType(dictCMMMMeta["WindowsVersion"], dictCMMMMeta["CacheType"])

    dictCMMMMeta["EntryStart"] = config.TC_ENTRY_BASE + dictCMMMMeta["CacheOff1st"]
    tdbCursor.seek(dictCMMMMeta["EntryStart"])

    return dictCMMMMeta

# -*- coding: UTF-8 -*-
"""
module tc_types.py
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


from enum import Enum

import thumbscache.config as config


###############################################################################
# Windows Version
#   Note: Windows 10 also covers Windows 11
###############################################################################
class WindowsVersion(Enum):
    WinVista = "Windows Vista"
    Win7     = "Windows 7"
    Win8     = "Windows 8"
    Win81    = "Windows 8.1"
    Win10    = "Windows 10"

    def getCacheTypes(self):
        # Cache types in type code order...
        return tuple(CacheType(strType) for strType in config.TC_CACHE_TYPE[self.value])


###############################################################################
# Cache Type: the resolution or category a thumbcache file stores
###############################################################################
class CacheType(Enum):
    Res16         = "16"
    Res32         = "32"
    Res48         = "48"
    Res96         = "96"
    Res256        = "256"
    Res768        = "768"
    Res1024       = "1024"
    Res1280       = "1280"
    Res1600       = "1600"
    Res1920       = "1920"
    Res2560       = "2560"
    SR            = "sr"
    Wide          = "wide"
    EXIF          = "exif"
    WideAlternate = "wide_alternate"
    CustomStream  = "custom_stream"

    def getFileName(self):
        return "thumbcache_" + self.value + ".db"


def resolveVersion(iFormatRevision):
    # Return the WindowsVersion for a header format revision or None...
    for strName, iRevision in config.TC_FORMAT_TYPE.items():
        if (iRevision == iFormatRevision):
            return WindowsVersion(strName)
    return None


def resolveCacheType(winVersion, iCacheType):
    # Return the CacheType for a version's type code or None...
    if (winVersion is None):
        return None
    tupleTypes = winVersion.getCacheTypes()
    if (iCacheType < 0 or iCacheType >= len(tupleTypes)):
        return None
    return tupleTypes[iCacheType]

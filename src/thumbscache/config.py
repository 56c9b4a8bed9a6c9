# -*- coding: UTF-8 -*-
"""
module config.py
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


THUMBS_SIG_CMMM = b"CMMM"  # Standard Sig for Thumbcache_*.db files and each cache entry

THUMBS_FILE_TYPE_CMMM = "CMMM (Thumbcache_*.db)"

# Header
# --------------------
#  0 -  3  Signature "CMMM"
#  4 -  7  Format Revision
#  8 - 11  Cache Type
# 12 - 15  Offset of the first cache entry (relative to TC_ENTRY_BASE)
# 16 - 19  Offset of the first available cache entry
# 20 - 31  Unused by this decoder
TC_HEADER_SIZE = 32
TC_ENTRY_BASE  = 24

# Cache Entry Header
# --------------------
# A fixed 56 byte block followed by the identifier, padding, and data
# sections.  Any bytes the record declares beyond these are skipped.
TC_ENTRY_HEADER_SIZE = 56

TC_FORMAT_TYPE = { "Windows Vista" : 0x14,
                   "Windows 7"     : 0x15,
                   "Windows 8"     : 0x1E,
                   "Windows 8.1"   : 0x1F,
                   "Windows 10"    : 0x20,
                 }

# Cache Types that the file "thumbcache_XXX.db" may represent
#            Index: .> 00      01      02      03      04      05      06      07      08      09      0A      0B      0C                0D
#                    v
TC_CACHE_TYPE = {
                  # Windows Vista & 7 -----------------------
                  "Windows Vista" : (   "32",   "96",  "256", "1024",   "sr" ),
                  "Windows 7"     : (   "32",   "96",  "256", "1024",   "sr" ),
                  # Windows 8 -------------------------------
                  "Windows 8"     : (   "16",   "32",   "48",   "96",  "256", "1024",   "sr", "wide", "exif" ),
                  # Windows 8.1 -----------------------------
                  "Windows 8.1"   : (   "16",   "32",   "48",   "96",  "256", "1024", "1600",   "sr", "wide", "exif", "wide_alternate" ),
                  # Windows 10 ------------------------------
                  "Windows 10"    : (   "16",   "32",   "48",   "96",  "256",  "768", "1280", "1920", "2560",   "sr", "wide", "exif", "wide_alternate", "custom_stream" ),
                }

# Extracted thumbnails are written with this extension regardless of content
TC_DEFAULT_EXT = "bmp"

STR_SEP = " ------------------------------------------------------"

# Verbosity: -1 Quiet, 0 Standard, 1 Verbose, 2 Enhanced
VERBOSE = 0

ARGS = None

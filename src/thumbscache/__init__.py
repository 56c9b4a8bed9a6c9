# -*- coding: UTF-8 -*-
"""
module __init__.py
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

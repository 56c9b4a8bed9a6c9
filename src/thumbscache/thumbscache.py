# -*- coding: UTF-8 -*-
"""
module thumbscache.py
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
import os
import argparse

import thumbscache.version as version
import thumbscache.config as config
import thumbscache.error as verror
import thumbscache.processor as processor


def getArgs(listArgs = None):
    # Return arguments passed to thumbscache on the command line...

    strProg = "Thumbscache"
    strDesc = strProg + " - The Windows Thumbnail Cache Decoder"
    strEpilog = (
        "--- " + strProg + " " + version.STR_VERSION + " ---\n" +
        "Author: " + version.author[0] + "\n" +
        strProg + " is open source software"
        )

    parser = argparse.ArgumentParser(formatter_class=argparse.RawTextHelpFormatter, description=strDesc,
                                     epilog=strEpilog)
    parser.add_argument("-o", "--outdir", dest="outdir", metavar="DIR",
                        help=("write each cache entry's data to DIR as <identifier>.bmp"))
    parser.add_argument("-q", "--quiet", action="store_true", dest="quiet",
                        help=("quiet output: Errors only\n" +
                              "NOTE: -v overrides -q"))
    parser.add_argument("-v", '--verbose', action='count', default=0,
                        help=("verbose output, each use increments output level: 0 (Standard)\n" +
                              "1 (Verbose), 2 (Enhanced)"))
    parser.add_argument("--version", action="version", version=strEpilog)
    parser.add_argument("infile", nargs="?",
                        help=("location of a thumbcache_*.db file\n" +
                              "NOTE: prompted for on standard input when not given"))
    pargs = parser.parse_args(listArgs)

    # Unify QUIET and VERBOSE modes...
    if (pargs.quiet):
        if (pargs.verbose > 0):
            pargs.quiet = False  # ..turn off quiet
        else:
            pargs.verbose = -1  # ...store quiet as a verbose setting

    return (pargs)


def promptInput():
    sys.stdout.write("Thumbscache path : ")
    sys.stdout.flush()
    try:
        strInput = input()
    except EOFError:
        strInput = ""
    return strInput.strip()


def testOutput():
    strError = "Cannot use output directory "

    # Test Output Directory parameter...
    if (config.ARGS.outdir != None):
        if not os.path.exists(config.ARGS.outdir):  # ...NOT exists?
            try:
                os.mkdir(config.ARGS.outdir)  # ...make it
                if (config.VERBOSE > 0):
                    sys.stderr.write(" Info: %s was created\n" % (config.ARGS.outdir))
            except OSError:
                raise verror.IoError(strError + config.ARGS.outdir + ", cannot create it")
        elif not os.path.isdir(config.ARGS.outdir):  # ...NOT a directory?
            raise verror.IoError(strError + config.ARGS.outdir + ", not a directory")
        elif not os.access(config.ARGS.outdir, os.W_OK):  # ...NOT writable?
            raise verror.IoError(strError + config.ARGS.outdir + ", not writable")
    return


# ================================================================================
#
# MAIN
#
# ================================================================================

def main(listArgs = None):
    config.ARGS = getArgs(listArgs)
    config.VERBOSE = config.ARGS.verbose

    if (config.VERBOSE >= 0):
        sys.stdout.write("Thumbscache: Version {}\n".format(version.STR_VERSION))

    try:
        if (config.ARGS.infile == None):
            config.ARGS.infile = promptInput()

        testOutput()

        vProcessor = processor.Processor(config.ARGS.outdir)
        vProcessor.processThumbFile(config.ARGS.infile)
    except verror.ThumbsError as te:
        te.printError()
        sys.exit(te.iExitCode)


if __name__ == "__main__":
    main()

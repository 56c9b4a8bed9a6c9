from struct import pack


def makeHeader(iFormat=0x20, iType=0, iFirst=0, iAvail=0, bytesSig=b"CMMM"):
    # 24 byte header, entries begin at 24 + iFirst
    return bytesSig + pack("<LLLLL", iFormat, iType, iFirst, iAvail, 0)


def encodeId(strId):
    return strId.encode("utf-16-le")


def makeModernEntry(strId, bytesData, iPad=0, iTrailing=0, iSize=None, iHash=0,
                    iChkSumD=0, iChkSumH=0, bytesSig=b"CMMM"):
    bytesId = encodeId(strId)
    if iSize is None:
        iSize = 56 + len(bytesId) + iPad + len(bytesData) + iTrailing
    bytesHead = pack("<4sLQLLLLQQ", bytesSig, iSize, iHash, len(bytesId), iPad,
                     len(bytesData), 0, iChkSumD, iChkSumH) + b"\x00" * 8
    assert len(bytesHead) == 56
    return bytesHead + bytesId + b"\xaa" * iPad + bytesData + b"\xbb" * iTrailing


def makeVistaEntry(strId, bytesData, strExt="jpg", iPad=0, iTrailing=0, iSize=None, iHash=0,
                   iChkSumD=0, iChkSumH=0):
    bytesId = encodeId(strId)
    if iSize is None:
        iSize = 56 + len(bytesId) + iPad + len(bytesData) + iTrailing
    bytesExt = strExt.encode("utf-16-le").ljust(8, b"\x00")
    bytesHead = pack("<4sLQ8sLLLLQQ", b"CMMM", iSize, iHash, bytesExt, len(bytesId), iPad,
                     len(bytesData), 0, iChkSumD, iChkSumH)
    assert len(bytesHead) == 56
    return bytesHead + bytesId + b"\xaa" * iPad + bytesData + b"\xbb" * iTrailing

#!/usr/bin/python3
from io import StringIO

# Column bookkeeping for the byte list, a tab counts as 8 columns
START_COL  = 8
BYTE_WIDTH = 6
MAX_COL    = 78

def writeHeader(out, pkgName):
	out.write(f"package {pkgName}\n\n")

def writeData(out, varName, data):
	out.write(f"var {varName} = [...]byte{{\n\t")

	lastByte = len(data) - 1
	colCt = START_COL
	for i, val in enumerate(data):
		out.write(f"0x{val:02x},")
		colCt += BYTE_WIDTH

		if i == lastByte:
			break
		# Be readable, break the line at 78 columns
		if colCt >= MAX_COL:
			out.write("\n\t")
			colCt = START_COL
		else:
			out.write(" ")

	out.write("\n}\n")

def formatSource(pkgName, varName, data) -> str:
	out = StringIO()
	writeHeader(out, pkgName)
	writeData(out, varName, data)
	return out.getvalue()

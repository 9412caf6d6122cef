#!/usr/bin/python3
import os

from bin2go.errors import WrongArgsError

def isNameChar(ch) -> bool:
	return ch.isalpha() or ch.isnumeric()

def splitPieces(text):
	''' Split text into maximal runs of letters and digits '''
	pieces = []
	piece  = ""
	for ch in text:
		if isNameChar(ch):
			piece += ch
		elif piece:
			pieces.append(piece)
			piece = ""
	if piece:
		pieces.append(piece)
	return pieces

def upperFirst(piece) -> str:
	# One character in, one character out ("ß" stays as is)
	first = piece[0].upper()
	if len(first) != 1:
		first = piece[0]
	return first + piece[1:]

def deriveVarName(filename) -> str:
	"""
	Build a variable name from the base name of filename.

	Every run of letters and digits becomes one piece, the first
	character of each piece is upper-cased and the pieces are joined,
	so "my-file.bin" gives "MyFileBin".
	"""
	baseName = os.path.basename(filename)

	varName = ""
	for piece in splitPieces(baseName):
		varName += upperFirst(piece)

	if not varName:
		raise WrongArgsError(f"Cannot derive a variable name from '{filename}', use -name")
	return varName

def derivePkgName(outPath) -> str:
	# Name of the directory holding the output file
	absPath = os.path.abspath(outPath)
	return os.path.basename(os.path.dirname(absPath))

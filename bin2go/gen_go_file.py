#!/usr/bin/python3
import sys
import argparse

from bin2go.errors import Bin2GoError, WrongArgsError, InputError, OutputError, errReason, NO_ERROR
from bin2go.naming import deriveVarName, derivePkgName
from bin2go.formatter import writeHeader, writeData
from bin2go.config import loadConfig
from bin2go.genlogger import genLogger

OUT_SUFFIX = ".go"

USAGE = "%(prog)s [-name=<name>] [-out=<path>] [-pkg=<name>] <inputfile>\n" \
        "       %(prog)s [-pkg=<name>] <inputfile>..."

class argParser(argparse.ArgumentParser):
	# Usage errors exit with WRONG_ARGS, not argparse's 2
	def error(self, message):
		raise WrongArgsError(message)

def mkParser():
	parser = argParser(prog="bin2go", usage=USAGE, allow_abbrev=False,
		description="Embed binary files in Go source as byte array variables")
	parser.add_argument("-name", "--name", type=str, default=None,
		help="use this name for the variable instead of one generated based on the input")
	parser.add_argument("-out", "--out", type=str, default=None,
		help="use this filename for output instead of inputfile.go")
	parser.add_argument("-pkg", "--pkg", type=str, default=None,
		help="use this package name instead of the parent directory of the output")
	parser.add_argument("-config", "--config", type=str, default=None,
		help="read default package name and log directory from this INI file")
	parser.add_argument("-q", "--quiet", action="store_true",
		help="do not report each generated file")
	parser.add_argument("inputs", nargs="*", metavar="inputfile",
		help="binary file to embed")
	return parser

def parseArgs(parser, argv):
	args = parser.parse_args(argv)

	if len(args.inputs) == 0:
		raise WrongArgsError("No input file given")
	if len(args.inputs) > 1 and (args.out or args.name):
		raise WrongArgsError("-name and -out need exactly one input file")
	return args

def mkJob(args, cfg, filename) -> dict:
	''' Per-file settings, nothing is shared between jobs '''
	outPath = args.out or filename + OUT_SUFFIX

	pkgName = args.pkg or cfg['pkg']
	if not pkgName:
		pkgName = derivePkgName(outPath)

	return {
		"input"  : filename,
		"output" : outPath,
		"name"   : args.name or deriveVarName(filename),
		"pkg"    : pkgName,
	}

def readInput(filename) -> bytes:
	try:
		with open(filename, "rb") as inp:
			return inp.read()
	except OSError as e:
		raise InputError(filename, errReason(e)) from e

def writeOutput(job, data):
	try:
		with open(job['output'], "w", encoding="utf-8", newline="\n") as outp:
			writeHeader(outp, job['pkg'])
			writeData(outp, job['name'], data)
	except OSError as e:
		raise OutputError(job['output'], errReason(e)) from e

def genFile(args, cfg, filename, logger=None) -> dict:
	job = mkJob(args, cfg, filename)
	data = readInput(filename)
	writeOutput(job, data)

	if logger is not None:
		logger.store(job, len(data))
	if not args.quiet:
		print(f"{len(data)} bytes from '{job['input']}' written to '{job['output']}' as '{job['pkg']}.{job['name']}'")
	return job

def main(argv=None) -> int:
	parser = mkParser()

	try:
		args = parseArgs(parser, argv)
		cfg = loadConfig(args.config)

		logger = None
		if cfg['logDir']:
			logger = genLogger(cfg['logDir'])

		for filename in args.inputs:
			genFile(args, cfg, filename, logger)
	except WrongArgsError as e:
		parser.print_usage()
		print(e, file=sys.stderr)
		return e.exitCode
	except Bin2GoError as e:
		print(e, file=sys.stderr)
		return e.exitCode

	return NO_ERROR

if __name__ == "__main__":
	ret = main()
	sys.exit(ret)

#!/usr/bin/python3

# Exit error codes
NO_ERROR    = 0
WRONG_ARGS  = 1
INPUT_FAIL  = 2
OUTPUT_FAIL = 3

class Bin2GoError(Exception):
	''' Base of the fatal errors, subclasses set exitCode '''

class WrongArgsError(Bin2GoError):
	exitCode = WRONG_ARGS

class InputError(Bin2GoError):
	exitCode = INPUT_FAIL

	def __init__(self, filename, reason):
		super().__init__(f"Failed to read input: {filename}: {reason}")
		self.filename = filename

class OutputError(Bin2GoError):
	exitCode = OUTPUT_FAIL

	def __init__(self, filename, reason):
		super().__init__(f"Failed to write output: {filename}: {reason}")
		self.filename = filename

def errReason(err) -> str:
	''' Short reason for an OSError, without the repeated filename '''
	if isinstance(err, OSError) and err.strerror:
		return err.strerror
	return str(err)

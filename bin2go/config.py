#!/usr/bin/python3
import os
import configparser

from bin2go.errors import WrongArgsError

def loadConfig(cfgPath=None) -> dict:
	"""
	Read tool defaults from an INI file.

	  [output]
	  pkg = assets

	  [log]
	  log_dir = ./gen_logs

	Returns a dict with "pkg" and "logDir", either may be None.
	"""
	cfg = {"pkg": None, "logDir": None}
	if cfgPath is None:
		return cfg

	if not os.path.isfile(cfgPath):
		raise WrongArgsError(f"Config file '{cfgPath}' not found")

	parser = configparser.ConfigParser(interpolation=None)
	try:
		found = parser.read(cfgPath, encoding="utf-8")
	except (configparser.Error, UnicodeDecodeError) as e:
		raise WrongArgsError(f"Config file '{cfgPath}' is not valid: {e}") from e

	# read() skips files it cannot open
	if not found:
		raise WrongArgsError(f"Config file '{cfgPath}' cannot be read")

	if parser.has_section("output"):
		cfg["pkg"] = parser["output"].get("pkg") or None
	if parser.has_section("log"):
		cfg["logDir"] = parser["log"].get("log_dir") or None

	return cfg

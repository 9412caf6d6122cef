#!/usr/bin/python3
import os
import csv
import time

from bin2go.errors import OutputError, errReason

class genLogger():
	''' Append one CSV row per generated file to a daily log '''
	itemNames = ["date", "time", "input", "output", "pkg", "name", "bytes"]

	def __init__(self, logDir, rootName="bin2go"):
		self.logDir = logDir
		self.rootName = rootName

	def logPath(self, tm) -> str:
		dateStamp = f"{tm.tm_year}{tm.tm_mon:02}{tm.tm_mday:02}"
		return os.path.join(self.logDir, f"{self.rootName}_{dateStamp}.csv")

	def store(self, job, byteCt):
		tm = time.localtime()
		fPath = self.logPath(tm)

		row = [
			time.strftime("%Y-%m-%d", tm),
			time.strftime("%H:%M:%S", tm),
			job['input'],
			job['output'],
			job['pkg'],
			job['name'],
			str(byteCt),
		]

		try:
			os.makedirs(self.logDir, exist_ok=True)
			newFile = not os.path.exists(fPath)
			with open(fPath, "a", newline="", encoding="utf-8") as fh:
				writer = csv.writer(fh)
				# Header line goes in first
				if newFile:
					writer.writerow(self.itemNames)
				writer.writerow(row)
		except OSError as e:
			raise OutputError(fPath, errReason(e)) from e

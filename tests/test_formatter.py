import re

from bin2go.formatter import formatSource

def arrayBody(text):
	start = text.index("{\n") + 2
	end = text.rindex("\n}\n")
	return text[start:end]

def test_three_bytes():
	text = formatSource("assets", "A", bytes([0x00, 0xff, 0x10]))
	assert text == "package assets\n\nvar A = [...]byte{\n\t0x00, 0xff, 0x10,\n}\n"

def test_empty_input():
	text = formatSource("assets", "Empty", b"")
	assert text == "package assets\n\nvar Empty = [...]byte{\n\t\n}\n"

def test_single_byte_has_no_trailing_space():
	text = formatSource("p", "X", b"\x1a")
	assert "\t0x1a,\n}" in text

def test_twelve_bytes_per_line():
	data = bytes(range(30))
	lines = arrayBody(formatSource("p", "X", data)).split("\n")

	assert len(lines) == 3
	for line in lines:
		assert line.startswith("\t")
		assert not line.endswith(" ")
	assert len(lines[0].split()) == 12
	assert len(lines[1].split()) == 12
	assert len(lines[2].split()) == 6

def test_exact_line_fill_has_no_empty_line():
	lines = arrayBody(formatSource("p", "X", bytes(24))).split("\n")
	assert len(lines) == 2
	assert all(len(line.split()) == 12 for line in lines)

def test_lines_stay_narrow():
	lines = arrayBody(formatSource("p", "X", bytes(1000))).split("\n")
	# tab counted as 8 columns
	assert max(len(line.expandtabs(8)) for line in lines) <= 79

def test_literals_decode_to_input():
	data = bytes(range(256)) * 3 + b"\x7f\x80"
	tokens = re.split(r"[\s,]+", arrayBody(formatSource("p", "X", data)).strip(", \t\n"))

	assert len(tokens) == len(data)
	assert all(re.fullmatch(r"0x[0-9a-f]{2}", t) for t in tokens)
	assert bytes(int(t, 16) for t in tokens) == data

from xyzmonitor.io import convert_gaussian_clipboard
from xyzmonitor.parser import Atom, ClipboardStatus, read_gaussian_clipboard


def test_single_oxygen():
	data = read_gaussian_clipboard("#hdr\n1\n8 0.100000 0.200000 0.300000 O1\n")
	assert data.ok
	assert data.atoms == [Atom("O", 0.1, 0.2, 0.3)]
	xyz = convert_gaussian_clipboard("#hdr\n1\n8 0.100000 0.200000 0.300000 O1\n")
	assert xyz.startswith("1\n")
	assert xyz == "1\nConverted from Gaussian clipboard\nO     0.100000    0.200000    0.300000\n"


def test_label_is_optional():
	data = read_gaussian_clipboard("header\n2\n6 0.0 0.0 0.0\n1 1.09 0.0 0.0\n")
	assert [atom.symbol for atom in data.atoms] == ["C", "H"]
	assert data.status is ClipboardStatus.OK


def test_missing_count_line():
	data = read_gaussian_clipboard("#hdr\n")
	assert data.atoms == []
	assert data.status is ClipboardStatus.HEADER_ERROR
	assert convert_gaussian_clipboard("#hdr\n") is None


def test_non_numeric_count():
	data = read_gaussian_clipboard("#hdr\nmany\n8 0.0 0.0 0.0\n")
	assert data.atoms == []
	assert data.status is ClipboardStatus.HEADER_ERROR
	assert not data.ok


def test_fewer_records_than_count(caplog):
	text = "#hdr\n5\n6 0.0 0.0 0.0\n1 1.0 0.0 0.0\n1 0.0 1.0 0.0\n"
	with caplog.at_level("WARNING", logger="xyzmonitor"):
		data = read_gaussian_clipboard(text)
	assert len(data.atoms) == 3
	assert data.status is ClipboardStatus.TRUNCATED
	assert "Expected 5 atoms" in caplog.text


def test_bad_records_are_skipped():
	text = "#hdr\n4\n6 0.0 0.0 0.0\n6 0.0 zero\n99 1.0 1.0 1.0\n1 0.0 1.0 0.0 H4\n"
	data = read_gaussian_clipboard(text)
	assert [atom.symbol for atom in data.atoms] == ["C", "H"]
	assert data.skipped == 2
	assert data.status is ClipboardStatus.OK


def test_zero_atoms():
	data = read_gaussian_clipboard("#hdr\n0\n")
	assert data.ok
	assert data.atoms == []
	assert convert_gaussian_clipboard("#hdr\n0\n") is None


def test_negative_coordinates_layout():
	xyz = convert_gaussian_clipboard("hdr\n1\n17 -1.25 10.5 -100.125\n")
	assert xyz.splitlines()[2] == "Cl   -1.250000   10.500000 -100.125000"


def test_negative_count():
	data = read_gaussian_clipboard("#hdr\n-2\n8 0.0 0.0 0.0\n")
	assert data.atoms == []
	assert data.status is ClipboardStatus.HEADER_ERROR

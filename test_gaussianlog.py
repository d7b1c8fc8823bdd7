import io

import pytest

from xyzmonitor.io import generate_gaussian_log, write_gaussian_log
from xyzmonitor.parser import Atom, Frame, Trajectory, read_multi_xyz


EXPECTED_SINGLE_CARBON = (
	" ! This file was generated by XYZ Monitor\n"
	" \n"
	" 0 basis functions\n"
	" 0 alpha electrons\n"
	" 0 beta electrons\n"
	"GradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGrad\n"
	"GradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGrad\n"
	" \n"
	"                         Standard orientation:\n"
	" ---------------------------------------------------------------------\n"
	" Center     Atomic      Atomic             Coordinates (Angstroms)\n"
	" Number     Number       Type             X           Y           Z\n"
	" ---------------------------------------------------------------------\n"
	"      1          6           0          1.000000      2.000000      3.000000\n"
	" ---------------------------------------------------------------------\n"
	" \n"
	" SCF Done:      -100.000000000\n"
	" \n"
	"GradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGrad\n"
	" Step number   1\n"
	"         Item               Value     Threshold  Converged?\n"
	" Maximum Force            1.000000     1.000000     NO\n"
	" RMS     Force            1.000000     1.000000     NO\n"
	" Maximum Displacement     1.000000     1.000000     NO\n"
	" RMS     Displacement     1.000000     1.000000     NO\n"
	"GradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGradGrad\n"
	" Normal termination of Gaussian\n"
)


def carbon():
	return Frame([Atom("C", 1.0, 2.0, 3.0)], "carbon")


def test_single_atom_exact_layout():
	assert generate_gaussian_log([carbon()]) == EXPECTED_SINGLE_CARBON


def test_single_atom_step_and_atomic_number():
	output = generate_gaussian_log(Trajectory([carbon()]))
	assert "      1          6           0        " in output
	assert output.count("Step number") == 1
	assert " Step number   1\n" in output


def test_one_step_per_frame_in_order():
	frames = [Frame([Atom("H", float(i), 0.0, 0.0)], f"frame {i}") for i in range(1, 5)]
	output = generate_gaussian_log(frames)
	assert output.count("Step number") == 4
	assert output.count("Standard orientation:") == 4
	positions = [output.index(f"{float(i):10.6f}    ") for i in range(1, 5)]
	assert positions == sorted(positions)
	steps = [output.index(f" Step number   {i}\n") for i in range(1, 5)]
	assert steps == sorted(steps)


def test_rows_use_normalized_symbols_and_zero_for_unknown():
	frame = Frame([Atom("cl", -1.5, 0.0, 0.25), Atom("Xx", 0.0, 0.0, 0.0)])
	output = generate_gaussian_log([frame])
	assert "      1          17           0         -1.500000      0.000000      0.250000\n" in output
	assert "      2          0           0          0.000000      0.000000      0.000000\n" in output


def test_deterministic():
	trajectory = read_multi_xyz("2\nwater\nO 0.0 0.0 0.0\nH 0.0 0.0 1.0\n" * 3)
	assert generate_gaussian_log(trajectory) == generate_gaussian_log(trajectory)


def test_empty_trajectory(caplog):
	with caplog.at_level("ERROR", logger="xyzmonitor"):
		assert generate_gaussian_log([]) is None
		assert write_gaussian_log(Trajectory()) is None
	assert "No frames to convert" in caplog.text


def test_write_to_stream_and_file(tmp_path):
	stream = io.StringIO()
	assert write_gaussian_log([carbon()], stream) is None
	assert stream.getvalue() == EXPECTED_SINGLE_CARBON

	path = tmp_path / "carbon.log"
	write_gaussian_log([carbon()], str(path))
	assert path.read_text() == EXPECTED_SINGLE_CARBON


def test_write_to_unsupported_destination():
	with pytest.raises(ValueError):
		write_gaussian_log([carbon()], 42)
